# app/modules/catalog/repository.py
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreUnavailable
from app.shared.database.models import Product

logger = logging.getLogger(__name__)


class CatalogRepository:
    """
    Acesso de leitura ao catálogo de produtos
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, product_id: int) -> Optional[Product]:
        try:
            return self.db.get(Product, product_id)
        except SQLAlchemyError as e:
            logger.error(f"Erro consultando produto {product_id}: {e}")
            raise StoreUnavailable(f"Erro consultando produto: {e}") from e
