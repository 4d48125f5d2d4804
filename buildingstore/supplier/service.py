"""Supplier use cases: saving, updating, deleting and listing suppliers."""

from __future__ import annotations

import logging
import sqlite3
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from buildingstore.supplier.events import SupplierNotifier
from buildingstore.supplier.models import Supplier, SupplierTransaction
from buildingstore.supplier.supplier_repository import (
    RowNotFoundError,
    SupplierRepository,
)
from buildingstore.supplier.transaction_repository import (
    SupplierTransactionRepository,
)

log = logging.getLogger(__name__)

_REPOSITORY_ERRORS = (sqlite3.Error, RowNotFoundError)


class SupplierServiceError(Exception):
    """A supplier operation failed; the message describes why."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SupplierNotFoundError(SupplierServiceError):
    """The supplier an operation needed does not exist."""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SupplierService(ABC):
    """Operations on suppliers and their logged transactions."""

    @abstractmethod
    def save_supplier(
        self,
        db: sqlite3.Connection,
        name: str,
        jenis_barang: str,
        jumlah_barang: int,
        resi: str,
    ) -> Supplier:
        """Create and store a new supplier, then announce it."""

    @abstractmethod
    def update_supplier(
        self,
        db: sqlite3.Connection,
        supplier_id: str,
        name: str,
        jenis_barang: str,
        jumlah_barang: int,
        resi: str,
    ) -> None:
        """Overwrite an existing supplier."""

    @abstractmethod
    def delete_supplier(self, db: sqlite3.Connection, supplier_id: str) -> None:
        """Remove an existing supplier."""

    @abstractmethod
    def get_supplier(
        self, db: sqlite3.Connection, supplier_id: str
    ) -> Supplier | None:
        """Return the supplier, or None if there is none with that id."""

    @abstractmethod
    def get_all_suppliers(self, db: sqlite3.Connection) -> list[Supplier]:
        """Return every stored supplier."""

    @abstractmethod
    def get_all_supplier_transactions(
        self, db: sqlite3.Connection
    ) -> list[SupplierTransaction]:
        """Return every logged supplier transaction."""


class DefaultSupplierService(SupplierService):
    """Supplier service backed by repositories and a notifier."""

    def __init__(
        self,
        supplier_repo: SupplierRepository,
        transaction_repo: SupplierTransactionRepository,
        notifier: SupplierNotifier,
    ) -> None:
        self.supplier_repo = supplier_repo
        self.transaction_repo = transaction_repo
        self.notifier = notifier

    def save_supplier(
        self,
        db: sqlite3.Connection,
        name: str,
        jenis_barang: str,
        jumlah_barang: int,
        resi: str,
    ) -> Supplier:
        supplier = Supplier(
            id=str(uuid.uuid4()),
            name=name,
            jenis_barang=jenis_barang,
            jumlah_barang=jumlah_barang,
            resi=resi,
            updated_at=_now(),
        )
        try:
            saved = self.supplier_repo.save(supplier, db)
        except _REPOSITORY_ERRORS as exc:
            raise SupplierServiceError(
                f"Service: Repository save error: {exc}"
            ) from exc
        self.notifier.notify_supplier_saved(saved)
        return saved

    def update_supplier(
        self,
        db: sqlite3.Connection,
        supplier_id: str,
        name: str,
        jenis_barang: str,
        jumlah_barang: int,
        resi: str,
    ) -> None:
        supplier = Supplier(
            id=supplier_id,
            name=name,
            jenis_barang=jenis_barang,
            jumlah_barang=jumlah_barang,
            resi=resi,
            updated_at=_now(),
        )
        try:
            self.supplier_repo.update(supplier, db)
        except RowNotFoundError as exc:
            raise SupplierNotFoundError(
                "Service: Supplier not found for update."
            ) from exc
        except sqlite3.Error as exc:
            raise SupplierServiceError(
                f"Service: Repository update error: {exc}"
            ) from exc

    def delete_supplier(self, db: sqlite3.Connection, supplier_id: str) -> None:
        try:
            self.supplier_repo.delete(supplier_id, db)
        except RowNotFoundError as exc:
            raise SupplierNotFoundError(
                "Service: Supplier not found for delete."
            ) from exc
        except sqlite3.Error as exc:
            raise SupplierServiceError(
                f"Service: Repository delete error: {exc}"
            ) from exc

    def get_supplier(
        self, db: sqlite3.Connection, supplier_id: str
    ) -> Supplier | None:
        try:
            return self.supplier_repo.find_by_id(supplier_id, db)
        except RowNotFoundError:
            return None
        except sqlite3.Error as exc:
            log.error(
                "Repository error fetching supplier by ID %r: %s", supplier_id, exc
            )
            raise SupplierServiceError(f"Service: Repository error: {exc}") from exc

    def get_all_suppliers(self, db: sqlite3.Connection) -> list[Supplier]:
        try:
            return self.supplier_repo.find_all(db)
        except _REPOSITORY_ERRORS as exc:
            log.error("Repository error fetching all suppliers: %s", exc)
            raise SupplierServiceError(f"Service: Repository error: {exc}") from exc

    def get_all_supplier_transactions(
        self, db: sqlite3.Connection
    ) -> list[SupplierTransaction]:
        try:
            return self.transaction_repo.find_all(db)
        except _REPOSITORY_ERRORS as exc:
            log.error("Repository error fetching all supplier transactions: %s", exc)
            raise SupplierServiceError(f"Service: Repository error: {exc}") from exc