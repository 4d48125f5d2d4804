import sqlite3
import uuid
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from buildingstore.supplier.models import Supplier
from buildingstore.supplier.supplier_repository import (
    RowNotFoundError,
    SqlSupplierRepository,
    SupplierRepository,
    init_schema,
)


@pytest.fixture
def db():
    conn = sqlite3.connect(":memory:")
    init_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def repository():
    return SqlSupplierRepository()


def _now():
    return datetime.now(timezone.utc).isoformat()


def _supplier(name="PT. Ayam", jenis="ayam", jumlah=1000, resi="2306206282"):
    return Supplier(
        id=f"SUP-{uuid.uuid4()}",
        name=name,
        jenis_barang=jenis,
        jumlah_barang=jumlah,
        resi=resi,
        updated_at=_now(),
    )


def test_save_supplier(repository, db):
    supplier = _supplier()
    saved = repository.save(supplier, db)
    assert saved.id == supplier.id
    assert saved.name == "PT. Ayam"


def test_find_supplier_by_id(repository, db):
    supplier = _supplier()
    repository.save(supplier, db)
    found = repository.find_by_id(supplier.id, db)
    assert found.id == supplier.id
    assert found == supplier


def test_find_nonexistent_supplier(repository, db):
    with pytest.raises(RowNotFoundError):
        repository.find_by_id("non-existent-id", db)


def test_update_supplier(repository, db):
    supplier = _supplier()
    repository.save(supplier, db)
    updated = replace(supplier, jumlah_barang=1, updated_at=_now())
    repository.update(updated, db)
    found = repository.find_by_id(supplier.id, db)
    assert found.jumlah_barang == 1
    assert found.name == supplier.name


def test_delete_supplier(repository, db):
    supplier = _supplier()
    repository.save(supplier, db)
    repository.delete(supplier.id, db)
    with pytest.raises(RowNotFoundError):
        repository.find_by_id(supplier.id, db)


def test_find_all_suppliers_empty(repository, db):
    assert repository.find_all(db) == []


def test_find_all_suppliers_multiple(repository, db):
    supplier1 = _supplier()
    supplier2 = _supplier(name="PT. Sapi", jenis="sapi", jumlah=500, resi="2306206283")
    repository.save(supplier1, db)
    repository.save(supplier2, db)
    suppliers = repository.find_all(db)
    assert len(suppliers) == 2
    ids = [s.id for s in suppliers]
    assert supplier1.id in ids
    assert supplier2.id in ids


def test_update_nonexistent_supplier(repository, db):
    missing = _supplier(name="Non-existent", jenis="none", jumlah=0, resi="000")
    with pytest.raises(RowNotFoundError):
        repository.update(missing, db)


def test_delete_nonexistent_supplier(repository, db):
    with pytest.raises(RowNotFoundError):
        repository.delete("non-existent-id", db)


def test_save_duplicate_id_fails(repository, db):
    supplier = _supplier()
    repository.save(supplier, db)
    with pytest.raises(sqlite3.IntegrityError):
        repository.save(supplier, db)
    assert len(repository.find_all(db)) == 1


def test_abstract_repository_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SupplierRepository()