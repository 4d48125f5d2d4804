"""Storage of supplier records."""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod

from buildingstore.supplier.models import Supplier

_SCHEMA = """
CREATE TABLE IF NOT EXISTS suppliers (
    id TEXT PRIMARY KEY NOT NULL,
    name TEXT NOT NULL,
    jenis_barang TEXT NOT NULL,
    jumlah_barang INTEGER NOT NULL,
    resi TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS supplier_transactions (
    id TEXT PRIMARY KEY NOT NULL,
    supplier_id TEXT NOT NULL,
    supplier_name TEXT NOT NULL,
    jenis_barang TEXT NOT NULL,
    jumlah_barang INTEGER NOT NULL,
    pengiriman_info TEXT NOT NULL,
    tanggal_transaksi TEXT NOT NULL
);
"""

_COLUMNS = "id, name, jenis_barang, jumlah_barang, resi, updated_at"


class RowNotFoundError(LookupError):
    """A query that needed a row found none."""

    def __init__(self) -> None:
        super().__init__(
            "no rows returned by a query that expected to return at least one row"
        )


def init_schema(db: sqlite3.Connection) -> None:
    """Create the supplier and supplier transaction tables if missing."""
    db.executescript(_SCHEMA)


class SupplierRepository(ABC):
    """Persistence operations for suppliers."""

    @abstractmethod
    def save(self, supplier: Supplier, db: sqlite3.Connection) -> Supplier:
        """Insert the supplier and return it."""

    @abstractmethod
    def find_by_id(self, supplier_id: str, db: sqlite3.Connection) -> Supplier:
        """Return the supplier, raising RowNotFoundError if absent."""

    @abstractmethod
    def update(self, supplier: Supplier, db: sqlite3.Connection) -> None:
        """Overwrite the stored supplier, raising RowNotFoundError if absent."""

    @abstractmethod
    def delete(self, supplier_id: str, db: sqlite3.Connection) -> None:
        """Remove the supplier, raising RowNotFoundError if absent."""

    @abstractmethod
    def find_all(self, db: sqlite3.Connection) -> list[Supplier]:
        """Return every stored supplier."""


def _row_to_supplier(row: tuple) -> Supplier:
    supplier_id, name, jenis_barang, jumlah_barang, resi, updated_at = row
    return Supplier(
        id=supplier_id,
        name=name,
        jenis_barang=jenis_barang,
        jumlah_barang=int(jumlah_barang),
        resi=resi,
        updated_at=updated_at,
    )


class SqlSupplierRepository(SupplierRepository):
    """Supplier repository over a SQLite connection."""

    def save(self, supplier: Supplier, db: sqlite3.Connection) -> Supplier:
        with db:
            db.execute(
                f"INSERT INTO suppliers ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
                (
                    supplier.id,
                    supplier.name,
                    supplier.jenis_barang,
                    supplier.jumlah_barang,
                    supplier.resi,
                    supplier.updated_at,
                ),
            )
        return supplier

    def find_by_id(self, supplier_id: str, db: sqlite3.Connection) -> Supplier:
        row = db.execute(
            f"SELECT {_COLUMNS} FROM suppliers WHERE id = ?", (supplier_id,)
        ).fetchone()
        if row is None:
            raise RowNotFoundError()
        return _row_to_supplier(tuple(row))

    def update(self, supplier: Supplier, db: sqlite3.Connection) -> None:
        with db:
            cursor = db.execute(
                """
                UPDATE suppliers
                SET name = ?, jenis_barang = ?, jumlah_barang = ?, resi = ?, updated_at = ?
                WHERE id = ?
                """,
                (
                    supplier.name,
                    supplier.jenis_barang,
                    supplier.jumlah_barang,
                    supplier.resi,
                    supplier.updated_at,
                    supplier.id,
                ),
            )
        if cursor.rowcount == 0:
            raise RowNotFoundError()

    def delete(self, supplier_id: str, db: sqlite3.Connection) -> None:
        with db:
            cursor = db.execute("DELETE FROM suppliers WHERE id = ?", (supplier_id,))
        if cursor.rowcount == 0:
            raise RowNotFoundError()

    def find_all(self, db: sqlite3.Connection) -> list[Supplier]:
        rows = db.execute(f"SELECT {_COLUMNS} FROM suppliers").fetchall()
        return [_row_to_supplier(tuple(row)) for row in rows]