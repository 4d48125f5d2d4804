"""Changing products that are already in the store."""

from __future__ import annotations

from buildingstore.produk.model import Produk
from buildingstore.produk.store.database import (
    NotFoundError,
    ProdukDatabase,
    ValidationError,
    validate_produk,
)


def _require_match(rowcount: int) -> bool:
    if rowcount == 0:
        raise NotFoundError()
    return True


def update_produk(db: ProdukDatabase, produk_id: int, produk: Produk) -> bool:
    """Replace every field of a stored product.

    Raises ValidationError for invalid data and NotFoundError if no product
    has the given id.
    """
    validate_produk(produk)
    cursor = db.execute(
        """
        UPDATE produk
        SET nama = ?, kategori = ?, harga = ?, stok = ?, deskripsi = ?
        WHERE id = ?
        """,
        (
            produk.nama,
            produk.kategori,
            produk.harga,
            produk.stok,
            produk.deskripsi,
            produk_id,
        ),
    )
    return _require_match(cursor.rowcount)


def update_stok(db: ProdukDatabase, produk_id: int, new_stok: int) -> bool:
    """Set the stock count of a stored product.

    Raises ValidationError for a negative count and NotFoundError if no
    product has the given id.
    """
    if new_stok < 0:
        raise ValidationError("Stok tidak boleh negatif")
    cursor = db.execute(
        "UPDATE produk SET stok = ? WHERE id = ?", (new_stok, produk_id)
    )
    return _require_match(cursor.rowcount)


def update_harga(db: ProdukDatabase, produk_id: int, new_harga: float) -> bool:
    """Set the price of a stored product.

    Raises ValidationError for a negative price and NotFoundError if no
    product has the given id.
    """
    if new_harga < 0.0:
        raise ValidationError("Harga tidak boleh negatif")
    cursor = db.execute(
        "UPDATE produk SET harga = ? WHERE id = ?", (new_harga, produk_id)
    )
    return _require_match(cursor.rowcount)