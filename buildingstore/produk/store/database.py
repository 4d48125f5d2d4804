"""Storage for products: connection handling, errors and row helpers."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Sequence

from buildingstore.produk.model import Produk

_SCHEMA = """
CREATE TABLE IF NOT EXISTS produk (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nama TEXT NOT NULL,
    kategori TEXT NOT NULL,
    harga REAL NOT NULL,
    stok INTEGER NOT NULL,
    deskripsi TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

DROP TRIGGER IF EXISTS update_produk_updated_at;
CREATE TRIGGER update_produk_updated_at
    AFTER UPDATE ON produk
    FOR EACH ROW
BEGIN
    UPDATE produk SET updated_at = CURRENT_TIMESTAMP WHERE id = NEW.id;
END;
"""


class RepositoryError(Exception):
    """Base class for every failure of the product store."""


class NotFoundError(RepositoryError):
    """The requested record does not exist."""

    def __init__(self) -> None:
        super().__init__("Record not found")


class ValidationError(RepositoryError):
    """A product was rejected before it reached the database."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Validation error: {message}")


class DatabaseError(RepositoryError):
    """The database itself reported an error."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__(f"Database error: {error}")


class ProdukDatabase:
    """A SQLite-backed store holding the ``produk`` table."""

    def __init__(self, path: str = ":memory:") -> None:
        self.path = path
        try:
            self._conn: sqlite3.Connection | None = sqlite3.connect(path)
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc
        self._conn.row_factory = sqlite3.Row

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RepositoryError("Database not initialized")
        return self._conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run a block in a transaction, committing on success."""
        conn = self.connection
        try:
            with conn:
                yield conn
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc

    def execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        """Execute one statement in its own transaction."""
        with self.transaction() as conn:
            return conn.execute(sql, params)

    def create_schema(self) -> None:
        with self.transaction() as conn:
            conn.executescript(_SCHEMA)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> ProdukDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def init_database(path: str = ":memory:") -> ProdukDatabase:
    """Open the store at ``path`` and make sure its table exists."""
    db = ProdukDatabase(path)
    try:
        db.create_schema()
    except RepositoryError:
        db.close()
        raise
    return db


def validate_produk(produk: Produk) -> None:
    """Raise ValidationError for the first rule the product breaks."""
    if not produk.nama.strip():
        raise ValidationError("Nama produk tidak boleh kosong")
    if not produk.kategori.strip():
        raise ValidationError("Kategori tidak boleh kosong")
    if produk.harga < 0.0:
        raise ValidationError("Harga tidak boleh negatif")
    if produk.stok < 0:
        raise ValidationError("Stok tidak boleh negatif")


def row_to_produk(row: Mapping[str, Any]) -> Produk:
    """Turn a stored row into a Produk."""
    return Produk.with_id(
        int(row["id"]),
        row["nama"],
        row["kategori"],
        float(row["harga"]),
        int(row["stok"]),
        row["deskripsi"],
    )


def get_store_stats(db: ProdukDatabase) -> tuple[int, int]:
    """Return the number of products and the highest id in use (0 if none)."""
    row = db.execute(
        "SELECT COUNT(*) AS count, COALESCE(MAX(id), 0) AS max_id FROM produk"
    ).fetchone()
    return int(row["count"]), int(row["max_id"])