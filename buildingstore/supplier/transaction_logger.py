"""Observer that records a transaction whenever a supplier is saved."""

from __future__ import annotations

import logging
import sqlite3

from buildingstore.supplier.events import SupplierObserver
from buildingstore.supplier.factory import create_from_supplier
from buildingstore.supplier.models import Supplier
from buildingstore.supplier.supplier_repository import RowNotFoundError
from buildingstore.supplier.transaction_repository import (
    SupplierTransactionRepository,
)

log = logging.getLogger(__name__)


class SupplierTransactionLogger(SupplierObserver):
    """Stores a new transaction for each saved supplier; failures are logged."""

    def __init__(
        self, trx_repo: SupplierTransactionRepository, db: sqlite3.Connection
    ) -> None:
        self.trx_repo = trx_repo
        self.db = db

    def on_supplier_saved(self, supplier: Supplier) -> None:
        transaction = create_from_supplier(supplier)
        try:
            self.trx_repo.save(transaction, self.db)
        except (sqlite3.Error, RowNotFoundError) as exc:
            log.error(
                "Failed to log supplier transaction for supplier ID %s: %s",
                supplier.id,
                exc,
            )
        else:
            log.info("Successfully logged transaction for supplier ID %s", supplier.id)