# app/modules/sales/service.py
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, List

from app.core.exceptions import ReferenceKind, ReferenceNotFound
from .ports import CatalogLookup, ClientLookup, SalesLedger
from .schemas import (
    SaleCreateRequest, SaleResponse,
    DetailedSaleByProduct, DetailedSaleByClient,
    SummarizedSaleByProduct, SummarizedSaleByClient
)

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENTS)


class SaleRecorder:
    """
    Registro de vendas: valida as referências e grava a venda no livro.

    Produto e cliente só são verificados no momento da gravação. Impedir a
    exclusão de um produto ou cliente com vendas é responsabilidade dos
    módulos de catálogo e clientes.
    """

    def __init__(
        self,
        catalog: CatalogLookup,
        clients: ClientLookup,
        ledger: SalesLedger,
        clock: Callable[[], datetime] = _utcnow
    ):
        self.catalog = catalog
        self.clients = clients
        self.ledger = ledger
        self.clock = clock

    def record_sale(self, sale_data: SaleCreateRequest) -> SaleResponse:
        """
        Gravar uma venda.

        1. Verifica se o cliente existe
        2. Verifica se o produto existe
        3. Carimba a data com a hora do servidor (a data enviada é descartada)
        4. Grava a venda, que recebe um novo id

        Não é idempotente: duas chamadas iguais geram duas vendas.
        """
        client = self.clients.find_by_id(sale_data.client_id)
        if client is None:
            logger.warning(f"Venda rejeitada: cliente {sale_data.client_id} não encontrado")
            raise ReferenceNotFound(ReferenceKind.CLIENT, sale_data.client_id)

        product = self.catalog.find_by_id(sale_data.product_id)
        if product is None:
            logger.warning(f"Venda rejeitada: produto {sale_data.product_id} não encontrado")
            raise ReferenceNotFound(ReferenceKind.PRODUCT, sale_data.product_id)

        # Sem preço informado vale o preço do catálogo neste momento
        unit_price = sale_data.unit_price
        if unit_price is None:
            unit_price = product.price

        sale = self.ledger.append(
            product_id=sale_data.product_id,
            client_id=sale_data.client_id,
            quantity=sale_data.quantity,
            unit_price=unit_price,
            sold_at=self.clock()
        )
        logger.info(
            f"Venda {sale.id} registrada: produto {sale.product_id}, "
            f"cliente {sale.client_id}, quantidade {sale.quantity}"
        )

        return SaleResponse(
            id=sale.id,
            product_id=sale.product_id,
            client_id=sale.client_id,
            quantity=sale.quantity,
            unit_price=sale.unit_price,
            sale_date=sale.sale_date
        )


class SalesReporter:
    """
    Relatórios de vendas por produto e por cliente (somente leitura)
    """

    def __init__(self, ledger: SalesLedger):
        self.ledger = ledger

    def detailed_by_product(self, product_id: int) -> List[DetailedSaleByProduct]:
        return [
            DetailedSaleByProduct(
                product_name=row.product_name,
                sale_date=row.sale_date,
                sale_id=row.sale_id,
                client_name=row.client_name,
                quantity=row.quantity,
                unit_price=row.unit_price
            )
            for row in self.ledger.detailed_by_product(product_id)
        ]

    def detailed_by_client(self, client_id: int) -> List[DetailedSaleByClient]:
        return [
            DetailedSaleByClient(
                product_name=row.product_name,
                sale_date=row.sale_date,
                sale_id=row.sale_id,
                quantity=row.quantity,
                unit_price=row.unit_price
            )
            for row in self.ledger.detailed_by_client(client_id)
        ]

    def summarized_by_product(self, product_id: int) -> List[SummarizedSaleByProduct]:
        """Nenhuma venda -> lista vazia; nunca uma linha zerada"""
        return [
            SummarizedSaleByProduct(
                product_name=row.product_name,
                total_quantity=row.total_quantity,
                total_amount=_money(row.total_amount)
            )
            for row in self.ledger.summarized_by_product(product_id)
        ]

    def summarized_by_client(self, client_id: int) -> List[SummarizedSaleByClient]:
        return [
            SummarizedSaleByClient(
                product_name=row.product_name,
                total_quantity=row.total_quantity,
                total_amount=_money(row.total_amount)
            )
            for row in self.ledger.summarized_by_client(client_id)
        ]
