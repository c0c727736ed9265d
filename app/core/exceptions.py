# app/core/exceptions.py
from enum import Enum


class ReferenceKind(str, Enum):
    CLIENT = "Cliente"
    PRODUCT = "Produto"


class ReferenceNotFound(Exception):
    """
    A venda referencia um produto ou cliente que não existe.

    A mensagem nomeia a entidade ausente e é devolvida ao chamador como está.
    """

    def __init__(self, kind: ReferenceKind, reference_id: int):
        self.kind = kind
        self.reference_id = reference_id
        super().__init__(f"{kind.value} não encontrado.")


class StoreUnavailable(Exception):
    """Falha de transporte/I-O no banco; fatal para a requisição atual"""
