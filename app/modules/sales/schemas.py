from pydantic import BaseModel, Field, ConfigDict, PlainSerializer
from typing import Annotated, Optional
from datetime import datetime
from decimal import Decimal

# Valores monetários: Decimal internamente, número no JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# ==================== CLASSE BASE ====================

class SalesBaseModel(BaseModel):
    """
    Base dos esquemas de vendas: atributos em snake_case, JSON com os nomes
    em camelCase usados pelos clientes da API.
    """
    model_config = ConfigDict(populate_by_name=True)

# ==================== REQUEST SCHEMAS ====================

class SaleCreateRequest(SalesBaseModel):
    product_id: int = Field(..., alias="produtoId", description="Id do produto vendido")
    client_id: int = Field(..., alias="clienteId", description="Id do cliente")
    quantity: int = Field(..., alias="quantidadeVendida", description="Quantidade vendida")
    unit_price: Optional[Decimal] = Field(
        None,
        alias="precoUnitario",
        description="Preço unitário cobrado; se omitido, usa o preço atual do catálogo"
    )
    sale_date: Optional[datetime] = Field(
        None,
        alias="dataVenda",
        description="Ignorada: a data da venda é sempre a hora do servidor"
    )

# ==================== RESPONSE SCHEMAS ====================

class SaleResponse(SalesBaseModel):
    id: int
    product_id: int = Field(..., alias="produtoId")
    client_id: int = Field(..., alias="clienteId")
    quantity: int = Field(..., alias="quantidadeVendida")
    unit_price: Money = Field(..., alias="precoUnitario")
    sale_date: datetime = Field(..., alias="dataVenda")

class DetailedSaleByProduct(SalesBaseModel):
    product_name: str = Field(..., alias="produtoNome")
    sale_date: datetime = Field(..., alias="dataVenda")
    sale_id: int = Field(..., alias="vendaId")
    client_name: str = Field(..., alias="clienteNome")
    quantity: int = Field(..., alias="quantidadeVendida")
    unit_price: Money = Field(..., alias="precoVendaUnitario")

class DetailedSaleByClient(SalesBaseModel):
    product_name: str = Field(..., alias="produtoNome")
    sale_date: datetime = Field(..., alias="dataVenda")
    sale_id: int = Field(..., alias="vendaId")
    quantity: int = Field(..., alias="quantidadeVendida")
    unit_price: Money = Field(..., alias="precoVendaUnitario")

class SummarizedSaleByProduct(SalesBaseModel):
    product_name: str = Field(..., alias="produtoNome")
    total_quantity: int = Field(..., alias="totalQuantidadeVendida")
    total_amount: Money = Field(..., alias="totalPrecoCobrado")

class SummarizedSaleByClient(SalesBaseModel):
    """Uma linha por produto distinto comprado pelo cliente"""
    product_name: str = Field(..., alias="produtoNome")
    total_quantity: int = Field(..., alias="totalQuantidadeVendida")
    total_amount: Money = Field(..., alias="totalPrecoCobrado")
