# app/modules/sales/router.py
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user
from app.core.exceptions import ReferenceNotFound, StoreUnavailable
from app.modules.catalog import CatalogRepository
from app.modules.clients import ClientRepository
from .repository import SalesRepository
from .service import SaleRecorder, SalesReporter
from .schemas import (
    SaleCreateRequest, SaleResponse,
    DetailedSaleByProduct, DetailedSaleByClient,
    SummarizedSaleByProduct, SummarizedSaleByClient
)

router = APIRouter(prefix="/vendas", tags=["Vendas"])


def get_sale_recorder(db: Session = Depends(get_db)) -> SaleRecorder:
    return SaleRecorder(
        catalog=CatalogRepository(db),
        clients=ClientRepository(db),
        ledger=SalesRepository(db)
    )


def get_sales_reporter(db: Session = Depends(get_db)) -> SalesReporter:
    return SalesReporter(ledger=SalesRepository(db))


def _store_unavailable(e: StoreUnavailable) -> HTTPException:
    # O erro do driver já foi logado no repositório; não expor SQL ao cliente
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Banco de dados indisponível"
    )

# ==================== GRAVAÇÃO ====================

@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
def record_sale(
    sale_data: SaleCreateRequest,
    response: Response,
    current_user: Dict[str, Any] = Depends(get_current_user),
    recorder: SaleRecorder = Depends(get_sale_recorder)
):
    """
    Gravar uma venda

    - Produto e cliente precisam existir (senão 400 com a entidade ausente)
    - A data da venda é a hora do servidor; `dataVenda` enviada é ignorada
    - Sem `precoUnitario`, vale o preço atual do produto
    """
    try:
        sale = recorder.record_sale(sale_data)
    except ReferenceNotFound as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreUnavailable as e:
        raise _store_unavailable(e)

    response.headers["Location"] = f"/vendas/{sale.id}"
    return sale

# ==================== CONSULTAS POR PRODUTO ====================

@router.get("/produto/{produto_id}", response_model=List[DetailedSaleByProduct])
def get_sales_by_product(
    produto_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    reporter: SalesReporter = Depends(get_sales_reporter)
):
    """
    Vendas do produto, uma linha por venda (com nome do cliente)
    """
    try:
        return reporter.detailed_by_product(produto_id)
    except StoreUnavailable as e:
        raise _store_unavailable(e)

@router.get("/produto/{produto_id}/sumarizada", response_model=List[SummarizedSaleByProduct])
def get_sales_by_product_summary(
    produto_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    reporter: SalesReporter = Depends(get_sales_reporter)
):
    """
    Totais de quantidade e valor cobrado do produto
    """
    try:
        return reporter.summarized_by_product(produto_id)
    except StoreUnavailable as e:
        raise _store_unavailable(e)

# ==================== CONSULTAS POR CLIENTE ====================

@router.get("/cliente/{cliente_id}", response_model=List[DetailedSaleByClient])
def get_sales_by_client(
    cliente_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    reporter: SalesReporter = Depends(get_sales_reporter)
):
    """
    Vendas do cliente, uma linha por venda
    """
    try:
        return reporter.detailed_by_client(cliente_id)
    except StoreUnavailable as e:
        raise _store_unavailable(e)

@router.get("/cliente/{cliente_id}/sumarizada", response_model=List[SummarizedSaleByClient])
def get_sales_by_client_summary(
    cliente_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    reporter: SalesReporter = Depends(get_sales_reporter)
):
    """
    Totais do cliente agrupados por produto
    """
    try:
        return reporter.summarized_by_client(cliente_id)
    except StoreUnavailable as e:
        raise _store_unavailable(e)
