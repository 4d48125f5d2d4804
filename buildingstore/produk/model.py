"""The product entity and a builder that validates what it builds."""

from __future__ import annotations

from dataclasses import dataclass

from buildingstore.produk.validation import ProdukValidator


@dataclass
class Produk:
    """A product; ``id`` is None until the product is stored."""

    nama: str
    kategori: str
    harga: float
    stok: int
    deskripsi: str | None = None
    id: int | None = None

    @classmethod
    def with_id(
        cls,
        produk_id: int,
        nama: str,
        kategori: str,
        harga: float,
        stok: int,
        deskripsi: str | None,
    ) -> Produk:
        """Create a product that already has a stored identifier."""
        return cls(nama, kategori, harga, stok, deskripsi, id=produk_id)

    def validate(self) -> None:
        """Raise ProdukValidationError if the product breaks any default rule."""
        ProdukValidator().validate(self)


class ProdukBuilder:
    """Builds a Produk step by step; name and category are required."""

    def __init__(self, nama: str, kategori: str) -> None:
        self._id: int | None = None
        self._nama = nama
        self._kategori = kategori
        self._harga = 0.0
        self._stok = 0
        self._deskripsi: str | None = None

    def id(self, produk_id: int) -> ProdukBuilder:
        self._id = produk_id
        return self

    def harga(self, harga: float) -> ProdukBuilder:
        self._harga = harga
        return self

    def stok(self, stok: int) -> ProdukBuilder:
        self._stok = stok
        return self

    def deskripsi(self, deskripsi: str) -> ProdukBuilder:
        self._deskripsi = deskripsi
        return self

    def build(self) -> Produk:
        """Return the product, raising ProdukValidationError if it is invalid."""
        produk = Produk(
            nama=self._nama,
            kategori=self._kategori,
            harga=self._harga,
            stok=self._stok,
            deskripsi=self._deskripsi,
            id=self._id,
        )
        produk.validate()
        return produk