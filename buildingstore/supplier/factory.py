"""Creation of supplier transactions from supplier records."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from buildingstore.supplier.models import Supplier, SupplierTransaction


def create_from_supplier(supplier: Supplier) -> SupplierTransaction:
    """Return a new transaction for the supplier, with a fresh id and timestamp."""
    return SupplierTransaction(
        id=f"TRX-{uuid.uuid4()}",
        supplier_id=supplier.id,
        supplier_name=supplier.name,
        jenis_barang=supplier.jenis_barang,
        jumlah_barang=supplier.jumlah_barang,
        pengiriman_info=supplier.resi,
        tanggal_transaksi=datetime.now(timezone.utc).isoformat(),
    )