"""
Pytest fixtures: SQLite em memória, cliente HTTP e token de acesso.
"""
import os

# Antes de importar app: Settings exige essas variáveis
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import Base, get_db
from app.core.auth.dependencies import create_access_token
from app.main import app
from app.shared.database.models import Client, Product


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    token = create_access_token("admin@loja.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def widget(db_session):
    product = Product(id=1, name="Widget", price=Decimal("9.99"), supplier="Fornecedor A")
    db_session.add(product)
    db_session.commit()
    return product


@pytest.fixture
def gadget(db_session):
    product = Product(id=2, name="Gadget", price=Decimal("4.50"), supplier="Fornecedor B")
    db_session.add(product)
    db_session.commit()
    return product


@pytest.fixture
def acme(db_session):
    customer = Client(id=1, name="Acme", email="compras@acme.com")
    db_session.add(customer)
    db_session.commit()
    return customer


@pytest.fixture
def globex(db_session):
    customer = Client(id=2, name="Globex", email="compras@globex.com")
    db_session.add(customer)
    db_session.commit()
    return customer
