"""Reading products from the store."""

from __future__ import annotations

from buildingstore.produk.model import Produk
from buildingstore.produk.store.database import ProdukDatabase, row_to_produk


def ambil_semua_produk(db: ProdukDatabase) -> list[Produk]:
    """Return every product, ordered by id."""
    rows = db.execute("SELECT * FROM produk ORDER BY id").fetchall()
    return [row_to_produk(row) for row in rows]


def ambil_produk_by_id(db: ProdukDatabase, produk_id: int) -> Produk | None:
    """Return the product with the given id, or None if there is none."""
    row = db.execute("SELECT * FROM produk WHERE id = ?", (produk_id,)).fetchone()
    return None if row is None else row_to_produk(row)