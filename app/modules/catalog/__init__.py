# app/modules/catalog/__init__.py
"""
Módulo de Catálogo - consulta de produtos

O CRUD de produtos e fornecedores vive fora deste serviço; aqui fica apenas
a consulta por id usada pelo registro de vendas.
"""

from .repository import CatalogRepository

__all__ = ["CatalogRepository"]
