# app/api/router.py
from fastapi import APIRouter

from app.config.settings import settings
from app.modules.sales import sales_router

# Router principal da API
api_router = APIRouter()

api_router.include_router(sales_router)


@api_router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "modules": {
            "sales": {
                "status": "active",
                "endpoints": [
                    "POST /vendas",
                    "GET /vendas/produto/{produtoId}",
                    "GET /vendas/produto/{produtoId}/sumarizada",
                    "GET /vendas/cliente/{clienteId}",
                    "GET /vendas/cliente/{clienteId}/sumarizada"
                ]
            }
        }
    }
