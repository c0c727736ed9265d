# app/modules/sales/repository.py
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.core.exceptions import StoreUnavailable
from app.shared.database.models import Client, Product, Sale

logger = logging.getLogger(__name__)


class SalesRepository:
    """
    Livro de vendas: inserção de vendas e consultas de relatório.

    Cada consulta é um único SELECT, então enxerga um snapshot consistente
    da tabela de vendas.
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== GRAVAÇÃO ====================

    def append(
        self,
        product_id: int,
        client_id: int,
        quantity: int,
        unit_price: Decimal,
        sold_at: datetime
    ) -> Sale:
        """
        Gravar uma venda. O commit é o único ponto de escrita: se falhar,
        nada fica visível. Depois do commit nada mais toca o banco, então
        uma venda gravada nunca é reportada como falha.
        """
        sale = Sale(
            product_id=product_id,
            client_id=client_id,
            quantity=quantity,
            unit_price=unit_price,
            sale_date=sold_at
        )
        try:
            self.db.add(sale)
            self.db.flush()
            sale_id = sale.id
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Erro gravando venda (produto {product_id}, cliente {client_id}): {e}")
            raise StoreUnavailable(f"Erro gravando venda: {e}") from e

        # O commit expira a instância; devolve uma cópia fora da sessão
        return Sale(
            id=sale_id,
            product_id=product_id,
            client_id=client_id,
            quantity=quantity,
            unit_price=unit_price,
            sale_date=sold_at
        )

    def count(self) -> int:
        return self._fetch(self.db.query(func.count(Sale.id)))[0][0]

    # ==================== CONSULTAS DETALHADAS ====================

    def detailed_by_product(self, product_id: int) -> List[Any]:
        query = self.db.query(
            Product.name.label("product_name"),
            Sale.sale_date,
            Sale.id.label("sale_id"),
            Client.name.label("client_name"),
            Sale.quantity,
            Sale.unit_price
        ).select_from(Sale).join(
            Product, Sale.product_id == Product.id
        ).join(
            Client, Sale.client_id == Client.id
        ).filter(
            Sale.product_id == product_id
        ).order_by(Sale.id)

        return self._fetch(query)

    def detailed_by_client(self, client_id: int) -> List[Any]:
        query = self.db.query(
            Product.name.label("product_name"),
            Sale.sale_date,
            Sale.id.label("sale_id"),
            Sale.quantity,
            Sale.unit_price
        ).select_from(Sale).join(
            Product, Sale.product_id == Product.id
        ).filter(
            Sale.client_id == client_id
        ).order_by(Sale.id)

        return self._fetch(query)

    # ==================== CONSULTAS SUMARIZADAS ====================

    def summarized_by_product(self, product_id: int) -> List[Any]:
        query = self._summary_query().filter(
            Sale.product_id == product_id
        ).group_by(
            Sale.product_id, Product.name
        ).order_by(Sale.product_id)

        return self._fetch(query)

    def summarized_by_client(self, client_id: int) -> List[Any]:
        query = self._summary_query().filter(
            Sale.client_id == client_id
        ).group_by(
            Sale.product_id, Product.name
        ).order_by(Sale.product_id)

        return self._fetch(query)

    def _summary_query(self) -> Query:
        # O total é a soma de quantidade * preço de cada venda, não
        # quantidade total * um preço único
        return self.db.query(
            Product.name.label("product_name"),
            func.sum(Sale.quantity).label("total_quantity"),
            func.sum(Sale.quantity * Sale.unit_price).label("total_amount")
        ).select_from(Sale).join(
            Product, Sale.product_id == Product.id
        )

    def _fetch(self, query: Query) -> List[Any]:
        try:
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Erro consultando vendas: {e}")
            raise StoreUnavailable(f"Erro consultando vendas: {e}") from e
