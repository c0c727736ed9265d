# app/modules/sales/__init__.py
"""
Módulo de Vendas

- Registro de vendas com verificação de produto e cliente
- Consultas detalhadas e sumarizadas por produto e por cliente

Arquitetura:
- router.py: Endpoints FastAPI
- service.py: Regras de negócio (SaleRecorder, SalesReporter)
- ports.py: Capacidades injetadas nos serviços
- repository.py: Acesso a dados
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as sales_router
from .service import SaleRecorder, SalesReporter
from .repository import SalesRepository

__all__ = [
    "sales_router",
    "SaleRecorder",
    "SalesReporter",
    "SalesRepository"
]
