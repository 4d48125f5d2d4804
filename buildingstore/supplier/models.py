"""Supplier records and the transactions logged for them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Supplier:
    """A supplier delivery record; ``updated_at`` is an RFC 3339 timestamp."""

    id: str
    name: str
    jenis_barang: str
    jumlah_barang: int
    resi: str
    updated_at: str


@dataclass
class SupplierTransaction:
    """A logged delivery taken from a supplier record."""

    id: str
    supplier_id: str
    supplier_name: str
    jenis_barang: str
    jumlah_barang: int
    pengiriman_info: str
    tanggal_transaksi: str

    @classmethod
    def from_supplier(cls, transaction_id: str, supplier: Supplier) -> SupplierTransaction:
        """Build a transaction copying the supplier's data and timestamp."""
        return cls(
            id=transaction_id,
            supplier_id=supplier.id,
            supplier_name=supplier.name,
            jenis_barang=supplier.jenis_barang,
            jumlah_barang=supplier.jumlah_barang,
            pengiriman_info=supplier.resi,
            tanggal_transaksi=supplier.updated_at,
        )