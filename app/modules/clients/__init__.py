# app/modules/clients/__init__.py
"""
Módulo de Clientes - consulta de clientes por id
"""

from .repository import ClientRepository

__all__ = ["ClientRepository"]
