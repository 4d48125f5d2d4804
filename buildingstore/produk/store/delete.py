"""Removing products from the store."""

from __future__ import annotations

from buildingstore.produk.store.database import ProdukDatabase


def hapus_produk(db: ProdukDatabase, produk_id: int) -> bool:
    """Delete a product; return whether one with that id existed."""
    cursor = db.execute("DELETE FROM produk WHERE id = ?", (produk_id,))
    return cursor.rowcount > 0


def clear_all(db: ProdukDatabase) -> None:
    """Delete every product and restart id numbering at 1."""
    with db.transaction() as conn:
        conn.execute("DELETE FROM produk")
        conn.execute("DELETE FROM sqlite_sequence WHERE name = 'produk'")