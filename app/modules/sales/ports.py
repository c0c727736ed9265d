# app/modules/sales/ports.py
"""
Capacidades que o registro e os relatórios de vendas consomem.

Os serviços recebem essas dependências no construtor e nunca acessam o banco
diretamente; em testes, qualquer objeto com os mesmos métodos serve.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Protocol, Sequence

from app.shared.database.models import Client, Product, Sale


class CatalogLookup(Protocol):
    def find_by_id(self, product_id: int) -> Optional[Product]: ...


class ClientLookup(Protocol):
    def find_by_id(self, client_id: int) -> Optional[Client]: ...


class SalesLedger(Protocol):
    def append(
        self,
        product_id: int,
        client_id: int,
        quantity: int,
        unit_price: Decimal,
        sold_at: datetime,
    ) -> Sale: ...

    def detailed_by_product(self, product_id: int) -> Sequence[Any]: ...

    def detailed_by_client(self, client_id: int) -> Sequence[Any]: ...

    def summarized_by_product(self, product_id: int) -> Sequence[Any]: ...

    def summarized_by_client(self, client_id: int) -> Sequence[Any]: ...
