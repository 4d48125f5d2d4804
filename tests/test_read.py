import pytest

from buildingstore.produk.model import Produk
from buildingstore.produk.store.create import tambah_produk
from buildingstore.produk.store.database import init_database
from buildingstore.produk.store.read import ambil_produk_by_id, ambil_semua_produk


@pytest.fixture
def db():
    database = init_database(":memory:")
    yield database
    database.close()


def create_test_products():
    return [
        Produk("Laptop Gaming", "Elektronik", 15_000_000.0, 10, "Laptop dengan RTX 4060"),
        Produk("Cat Tembok", "Material", 150_000.0, 50, "Cat tembok anti air"),
        Produk("Smartphone", "Elektronik", 8_000_000.0, 20, "Smartphone dengan kamera 108MP"),
    ]


def test_ambil_semua_produk(db):
    test_products = create_test_products()
    inserted_ids = [tambah_produk(db, p) for p in test_products]

    all_products = ambil_semua_produk(db)
    assert len(all_products) == len(test_products)
    for product, new_id, original in zip(all_products, inserted_ids, test_products):
        assert product.id == new_id
        assert product.nama == original.nama
        assert product.kategori == original.kategori
        assert product.harga == original.harga
        assert product.stok == original.stok
        assert product.deskripsi == original.deskripsi


def test_ambil_produk_by_id(db):
    produk = create_test_products()[0]
    new_id = tambah_produk(db, produk)

    retrieved = ambil_produk_by_id(db, new_id)
    assert retrieved is not None
    assert retrieved.id == new_id
    assert retrieved.nama == produk.nama
    assert retrieved.kategori == produk.kategori
    assert retrieved.harga == produk.harga
    assert retrieved.stok == produk.stok
    assert retrieved.deskripsi == produk.deskripsi


@pytest.mark.parametrize("missing_id", [9999, 0, -1])
def test_ambil_produk_by_id_tidak_ada(db, missing_id):
    assert ambil_produk_by_id(db, missing_id) is None


def test_ambil_semua_produk_kosong(db):
    assert ambil_semua_produk(db) == []


def test_retrieve_multiple_categories(db):
    elektronik = [
        Produk("Laptop", "Elektronik", 10_000_000.0, 5, None),
        Produk("HP", "Elektronik", 5_000_000.0, 15, None),
    ]
    material = [
        Produk("Semen", "Material", 50_000.0, 100, None),
        Produk("Batu Bata", "Material", 1_000.0, 500, None),
    ]
    all_ids = [tambah_produk(db, p) for p in elektronik + material]

    all_products = ambil_semua_produk(db)
    assert len(all_products) == 4
    assert [p.id for p in all_products] == all_ids

    for new_id in all_ids:
        assert ambil_produk_by_id(db, new_id) is not None

    assert sum(p.kategori == "Elektronik" for p in all_products) == 2
    assert sum(p.kategori == "Material" for p in all_products) == 2


def test_data_integrity_after_operations(db):
    original = Produk(
        "Test Product",
        "Test Category",
        1_234_567.89,
        42,
        "Test description with special chars: éñ@#$%",
    )
    new_id = tambah_produk(db, original)
    retrieved = ambil_produk_by_id(db, new_id)

    assert retrieved.nama == original.nama
    assert retrieved.kategori == original.kategori
    assert abs(retrieved.harga - original.harga) < 0.01
    assert retrieved.stok == original.stok
    assert retrieved.deskripsi == original.deskripsi