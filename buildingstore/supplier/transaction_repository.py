"""Storage of supplier transactions."""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod

from buildingstore.supplier.models import SupplierTransaction
from buildingstore.supplier.supplier_repository import RowNotFoundError

_COLUMNS = (
    "id, supplier_id, supplier_name, jenis_barang, jumlah_barang, "
    "pengiriman_info, tanggal_transaksi"
)


class SupplierTransactionRepository(ABC):
    """Persistence operations for supplier transactions."""

    @abstractmethod
    def save(
        self, transaction: SupplierTransaction, db: sqlite3.Connection
    ) -> SupplierTransaction:
        """Insert the transaction and return it."""

    @abstractmethod
    def find_by_id(
        self, transaction_id: str, db: sqlite3.Connection
    ) -> SupplierTransaction:
        """Return the transaction, raising RowNotFoundError if absent."""

    @abstractmethod
    def find_by_supplier_id(
        self, supplier_id: str, db: sqlite3.Connection
    ) -> list[SupplierTransaction]:
        """Return every transaction logged for the supplier."""

    @abstractmethod
    def find_all(self, db: sqlite3.Connection) -> list[SupplierTransaction]:
        """Return every stored transaction."""


def _row_to_transaction(row: tuple) -> SupplierTransaction:
    (
        transaction_id,
        supplier_id,
        supplier_name,
        jenis_barang,
        jumlah_barang,
        pengiriman_info,
        tanggal_transaksi,
    ) = row
    return SupplierTransaction(
        id=transaction_id,
        supplier_id=supplier_id,
        supplier_name=supplier_name,
        jenis_barang=jenis_barang,
        jumlah_barang=int(jumlah_barang),
        pengiriman_info=pengiriman_info,
        tanggal_transaksi=tanggal_transaksi,
    )


class SqlSupplierTransactionRepository(SupplierTransactionRepository):
    """Supplier transaction repository over a SQLite connection."""

    def save(
        self, transaction: SupplierTransaction, db: sqlite3.Connection
    ) -> SupplierTransaction:
        with db:
            db.execute(
                f"INSERT INTO supplier_transactions ({_COLUMNS}) "
                "VALUES (?, ?, ?, ?, ?, ?, ?)",
                (
                    transaction.id,
                    transaction.supplier_id,
                    transaction.supplier_name,
                    transaction.jenis_barang,
                    transaction.jumlah_barang,
                    transaction.pengiriman_info,
                    transaction.tanggal_transaksi,
                ),
            )
        return transaction

    def find_by_id(
        self, transaction_id: str, db: sqlite3.Connection
    ) -> SupplierTransaction:
        row = db.execute(
            f"SELECT {_COLUMNS} FROM supplier_transactions WHERE id = ?",
            (transaction_id,),
        ).fetchone()
        if row is None:
            raise RowNotFoundError()
        return _row_to_transaction(tuple(row))

    def find_by_supplier_id(
        self, supplier_id: str, db: sqlite3.Connection
    ) -> list[SupplierTransaction]:
        rows = db.execute(
            f"SELECT {_COLUMNS} FROM supplier_transactions WHERE supplier_id = ?",
            (supplier_id,),
        ).fetchall()
        return [_row_to_transaction(tuple(row)) for row in rows]

    def find_all(self, db: sqlite3.Connection) -> list[SupplierTransaction]:
        rows = db.execute(f"SELECT {_COLUMNS} FROM supplier_transactions").fetchall()
        return [_row_to_transaction(tuple(row)) for row in rows]