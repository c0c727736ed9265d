from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Numeric
from sqlalchemy.orm import relationship
from app.config.database import Base

# ===== CATÁLOGO =====

class Product(Base):
    """Modelo de Produto"""
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    supplier = Column(String(255))
    
    # Relationships
    sales = relationship("Sale", back_populates="product")

# ===== CLIENTES =====

class Client(Base):
    """Modelo de Cliente"""
    __tablename__ = "clients"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    cpf = Column(String(20))
    email = Column(String(255))
    phone = Column(String(50))
    address = Column(String(255))
    
    # Relationships
    sales = relationship("Sale", back_populates="client")

# ===== VENDAS =====

class Sale(Base):
    """
    Modelo de Venda.
    
    Imutável depois de gravada. As FKs só são verificadas no momento da
    gravação: excluir depois o produto ou o cliente referenciado fica a cargo
    dos módulos de catálogo/clientes, não do registro de vendas.
    """
    __tablename__ = "sales"
    
    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    sale_date = Column(DateTime(timezone=True), nullable=False)
    
    # Relationships
    product = relationship("Product", back_populates="sales")
    client = relationship("Client", back_populates="sales")
