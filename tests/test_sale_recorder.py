"""
Tests for SaleRecorder using in-memory catalog, client and ledger fakes.
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.core.exceptions import ReferenceKind, ReferenceNotFound, StoreUnavailable
from app.modules.sales.schemas import SaleCreateRequest
from app.modules.sales.service import SaleRecorder
from app.shared.database.models import Client, Product, Sale

FIXED_NOW = datetime(2026, 10, 19, 12, 30, tzinfo=timezone.utc)


class FakeLookup:
    def __init__(self, *records):
        self.records = {record.id: record for record in records}

    def find_by_id(self, record_id):
        return self.records.get(record_id)


class FakeLedger:
    def __init__(self):
        self.sales = []

    def append(self, product_id, client_id, quantity, unit_price, sold_at):
        sale = Sale(
            id=len(self.sales) + 1,
            product_id=product_id,
            client_id=client_id,
            quantity=quantity,
            unit_price=unit_price,
            sale_date=sold_at,
        )
        self.sales.append(sale)
        return sale


class BrokenLedger:
    def append(self, **kwargs):
        raise StoreUnavailable("connection refused")


@pytest.fixture
def catalog():
    return FakeLookup(Product(id=1, name="Widget", price=Decimal("9.99"), supplier="Fornecedor A"))


@pytest.fixture
def clients():
    return FakeLookup(Client(id=1, name="Acme"))


@pytest.fixture
def ledger():
    return FakeLedger()


@pytest.fixture
def recorder(catalog, clients, ledger):
    return SaleRecorder(catalog, clients, ledger, clock=lambda: FIXED_NOW)


def test_record_sale_returns_committed_sale(recorder, ledger):
    sale = recorder.record_sale(
        SaleCreateRequest(product_id=1, client_id=1, quantity=3, unit_price=Decimal("9.99"))
    )

    assert sale.id == 1
    assert sale.product_id == 1
    assert sale.client_id == 1
    assert sale.quantity == 3
    assert sale.unit_price == Decimal("9.99")
    assert sale.sale_date == FIXED_NOW
    assert len(ledger.sales) == 1


def test_record_sale_discards_caller_timestamp(recorder):
    backdated = datetime(2020, 1, 1, tzinfo=timezone.utc)

    sale = recorder.record_sale(
        SaleCreateRequest(product_id=1, client_id=1, quantity=1, unit_price=Decimal("5"), sale_date=backdated)
    )

    assert sale.sale_date == FIXED_NOW


def test_default_clock_uses_current_utc_time(catalog, clients, ledger):
    recorder = SaleRecorder(catalog, clients, ledger)
    before = datetime.now(timezone.utc)

    sale = recorder.record_sale(SaleCreateRequest(product_id=1, client_id=1, quantity=1))

    after = datetime.now(timezone.utc)
    assert before <= sale.sale_date <= after
    assert sale.sale_date.utcoffset() == timedelta(0)


def test_unknown_product_is_rejected_without_writing(recorder, ledger):
    with pytest.raises(ReferenceNotFound) as exc_info:
        recorder.record_sale(
            SaleCreateRequest(product_id=99, client_id=1, quantity=1, unit_price=Decimal("5"))
        )

    assert exc_info.value.kind is ReferenceKind.PRODUCT
    assert exc_info.value.reference_id == 99
    assert str(exc_info.value) == "Produto não encontrado."
    assert ledger.sales == []


def test_unknown_client_is_rejected_without_writing(recorder, ledger):
    with pytest.raises(ReferenceNotFound) as exc_info:
        recorder.record_sale(
            SaleCreateRequest(product_id=1, client_id=42, quantity=1, unit_price=Decimal("5"))
        )

    assert exc_info.value.kind is ReferenceKind.CLIENT
    assert str(exc_info.value) == "Cliente não encontrado."
    assert ledger.sales == []


def test_client_is_checked_before_product(recorder):
    with pytest.raises(ReferenceNotFound) as exc_info:
        recorder.record_sale(SaleCreateRequest(product_id=99, client_id=42, quantity=1))

    assert exc_info.value.kind is ReferenceKind.CLIENT


def test_identical_input_records_two_sales(recorder, ledger):
    request = SaleCreateRequest(product_id=1, client_id=1, quantity=2, unit_price=Decimal("9.99"))

    first = recorder.record_sale(request)
    second = recorder.record_sale(request)

    assert first.id != second.id
    assert len(ledger.sales) == 2


def test_supplied_unit_price_is_kept_even_when_catalog_differs(recorder, catalog, ledger):
    sale = recorder.record_sale(
        SaleCreateRequest(product_id=1, client_id=1, quantity=1, unit_price=Decimal("7.50"))
    )
    catalog.records[1].price = Decimal("12.00")

    assert sale.unit_price == Decimal("7.50")
    assert ledger.sales[0].unit_price == Decimal("7.50")


def test_missing_unit_price_uses_catalog_price(recorder):
    sale = recorder.record_sale(SaleCreateRequest(product_id=1, client_id=1, quantity=4))

    assert sale.unit_price == Decimal("9.99")


def test_store_failure_propagates(catalog, clients):
    recorder = SaleRecorder(catalog, clients, BrokenLedger(), clock=lambda: FIXED_NOW)

    with pytest.raises(StoreUnavailable):
        recorder.record_sale(SaleCreateRequest(product_id=1, client_id=1, quantity=1))
