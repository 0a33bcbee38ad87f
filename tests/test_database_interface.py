"""Tests for Database interface returning domain models."""

import pytest
from datetime import datetime, timedelta, timezone

from sqlalchemy import text

from supplyledger.database.models import Base
from supplyledger.domain import entities
from supplyledger.domain.errors import StoreError


def _create_transaction(db, value_nok=100.0, invoice_date=None, due_date=None):
    return db.create_transaction(
        invoice_number="INV-1",
        supplier="Acme",
        invoice_date=invoice_date,
        due_date=due_date,
        value_nok=value_nok,
        spend_category_l1="Indirect",
        spend_category_l2="IT",
        spend_category_l3="Hardware",
        spend_category_l4="Laptops",
    )


def _create_supplier(db, name="Acme"):
    return db.create_supplier(
        name=name, name_original=f"{name} AS", country="NO", vat_id="NO123", nace="4611"
    )


class TestSupplierStorage:
    """Tests for supplier persistence."""

    def test_get_supplier_returns_domain_model(self, temp_db):
        supplier_id = _create_supplier(temp_db)

        supplier = temp_db.get_supplier(supplier_id)

        assert isinstance(supplier, entities.Supplier)
        assert supplier.id == supplier_id
        assert supplier.name == "Acme"
        assert supplier.name_original == "Acme AS"

    def test_get_unknown_supplier_returns_none(self, temp_db):
        assert temp_db.get_supplier(999) is None

    def test_ids_strictly_increase(self, temp_db):
        ids = [_create_supplier(temp_db, name=f"S{i}") for i in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_list_suppliers_is_stable(self, temp_db):
        for name in ["Charlie", "Alpha", "Bravo"]:
            _create_supplier(temp_db, name=name)

        first = temp_db.list_suppliers()
        second = temp_db.list_suppliers()

        assert first == second
        assert [s.name for s in first] == ["Charlie", "Alpha", "Bravo"]

    def test_count_suppliers(self, temp_db):
        assert temp_db.count_suppliers() == 0
        _create_supplier(temp_db)
        _create_supplier(temp_db)
        assert temp_db.count_suppliers() == 2

    def test_ids_not_reused_after_delete(self, temp_db):
        first_id = _create_supplier(temp_db)
        with temp_db.engine.begin() as conn:
            conn.execute(text("DELETE FROM suppliers"))
        second_id = _create_supplier(temp_db)
        assert second_id > first_id

    def test_columns_use_wire_names(self, temp_db):
        _create_supplier(temp_db)
        with temp_db.engine.connect() as conn:
            row = conn.execute(text("SELECT Supplier, VatID, NACE FROM suppliers")).one()
        assert tuple(row) == ("Acme", "NO123", "4611")


class TestTransactionStorage:
    """Tests for transaction persistence."""

    def test_get_transaction_returns_domain_model(self, temp_db):
        invoice_date = datetime(2024, 1, 15, 10, 30, tzinfo=timezone(timedelta(hours=1)))
        txn_id = _create_transaction(temp_db, invoice_date=invoice_date)

        transaction = temp_db.get_transaction(txn_id)

        assert isinstance(transaction, entities.Transaction)
        assert transaction.id == txn_id
        assert transaction.invoice_date == invoice_date
        assert transaction.invoice_date.utcoffset() == timedelta(hours=1)
        assert transaction.due_date is None

    def test_dates_stored_as_canonical_text(self, temp_db):
        invoice_date = datetime(2024, 1, 15, 10, 30, tzinfo=timezone(timedelta(hours=1)))
        _create_transaction(temp_db, invoice_date=invoice_date)

        with temp_db.engine.connect() as conn:
            row = conn.execute(text("SELECT InvoiceDate, DueDate FROM transactions")).one()

        assert row[0] == "2024-01-15T10:30:00+01:00"
        assert row[1] is None

    def test_get_unknown_transaction_returns_none(self, temp_db):
        assert temp_db.get_transaction(42) is None

    def test_list_transactions_in_creation_order(self, temp_db):
        ids = [_create_transaction(temp_db, value_nok=v) for v in (3.0, 1.0, 2.0)]

        transactions = temp_db.list_transactions()

        assert [t.id for t in transactions] == ids
        assert [t.value_nok for t in transactions] == [3.0, 1.0, 2.0]

    def test_sum_empty_is_zero(self, temp_db):
        total = temp_db.sum_transaction_values()
        assert total == 0.0
        assert isinstance(total, float)

    def test_sum_transaction_values(self, temp_db):
        _create_transaction(temp_db, value_nok=100.0)
        _create_transaction(temp_db, value_nok=250.5)
        assert temp_db.sum_transaction_values() == pytest.approx(350.5)


class TestStoreFailures:
    """Storage faults surface as StoreError, never as a missing record."""

    def test_missing_table_raises_store_error(self, temp_db):
        Base.metadata.drop_all(temp_db.engine)

        with pytest.raises(StoreError):
            temp_db.get_supplier(1)
        with pytest.raises(StoreError):
            temp_db.list_transactions()
        with pytest.raises(StoreError):
            temp_db.sum_transaction_values()

    def test_constraint_violation_raises_store_error(self, temp_db):
        with pytest.raises(StoreError):
            temp_db.create_supplier(
                name=None, name_original="x", country="NO", vat_id="NO1", nace="1"
            )

    def test_store_error_is_not_domain_error(self):
        assert not issubclass(StoreError, ValueError)


class TestIdRange:
    """IDs outside SQLite's INTEGER range cannot exist and are simply missing."""

    @pytest.mark.parametrize("row_id", [2**63, 10**30, 0, -5])
    def test_out_of_range_id_returns_none(self, temp_db, row_id):
        _create_supplier(temp_db)
        _create_transaction(temp_db)

        assert temp_db.get_supplier(row_id) is None
        assert temp_db.get_transaction(row_id) is None
