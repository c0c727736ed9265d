from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # App Info
    app_name: str = "Loja API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Database
    database_url: str
    auto_create_tables: bool = Field(
        default=True,
        description="Cria as tabelas ao iniciar (sem migrações)"
    )
    
    # Security
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60  # 1 hora
    
    # HTTP
    allowed_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    force_https: bool = Field(
        default=False,
        description="Redireciona HTTP -> HTTPS (ativar em produção)"
    )
    
    # Server
    host: str = "0.0.0.0"
    port: int = 5292
    
    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
