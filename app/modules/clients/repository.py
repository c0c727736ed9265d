# app/modules/clients/repository.py
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreUnavailable
from app.shared.database.models import Client

logger = logging.getLogger(__name__)


class ClientRepository:
    """
    Acesso de leitura aos clientes
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, client_id: int) -> Optional[Client]:
        try:
            return self.db.get(Client, client_id)
        except SQLAlchemyError as e:
            logger.error(f"Erro consultando cliente {client_id}: {e}")
            raise StoreUnavailable(f"Erro consultando cliente: {e}") from e
