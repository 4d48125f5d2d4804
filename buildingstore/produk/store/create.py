"""Adding products to the store."""

from __future__ import annotations

from buildingstore.produk.model import Produk
from buildingstore.produk.store.database import ProdukDatabase, validate_produk


def tambah_produk(db: ProdukDatabase, produk: Produk) -> int:
    """Validate and insert a product, returning its new id."""
    validate_produk(produk)
    cursor = db.execute(
        """
        INSERT INTO produk (nama, kategori, harga, stok, deskripsi)
        VALUES (?, ?, ?, ?, ?)
        """,
        (produk.nama, produk.kategori, produk.harga, produk.stok, produk.deskripsi),
    )
    return int(cursor.lastrowid)