"""Request and response shapes for the product API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

from buildingstore.produk.model import Produk

T = TypeVar("T")

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _require(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


def _as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field `{key}` must be a number")
    return float(value)


def _as_i32(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{key}` must be an integer")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"field `{key}` is out of range")
    return value


@dataclass
class ProdukRequest:
    """Body of a create or update request."""

    nama: str
    kategori: str
    harga: float
    stok: int
    deskripsi: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProdukRequest:
        """Parse a decoded JSON object, raising ValueError on bad input."""
        if not isinstance(data, Mapping):
            raise ValueError("request body must be an object")
        deskripsi = data.get("deskripsi")
        if deskripsi is not None:
            deskripsi = _as_str(deskripsi, "deskripsi")
        return cls(
            nama=_as_str(_require(data, "nama"), "nama"),
            kategori=_as_str(_require(data, "kategori"), "kategori"),
            harga=_as_float(_require(data, "harga"), "harga"),
            stok=_as_i32(_require(data, "stok"), "stok"),
            deskripsi=deskripsi,
        )


@dataclass
class ProdukResponse:
    """A product as returned to clients."""

    id: int | None
    nama: str
    kategori: str
    harga: float
    stok: int
    deskripsi: str | None

    @classmethod
    def from_produk(cls, produk: Produk) -> ProdukResponse:
        return cls(
            id=produk.id,
            nama=produk.nama,
            kategori=produk.kategori,
            harga=produk.harga,
            stok=produk.stok,
            deskripsi=produk.deskripsi,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "nama": self.nama,
            "kategori": self.kategori,
            "harga": self.harga,
            "stok": self.stok,
            "deskripsi": self.deskripsi,
        }


def _serialise(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_serialise(item) for item in value]
    return value


@dataclass
class ApiResponse(Generic[T]):
    """Envelope around every API reply."""

    success: bool
    message: str | None = None
    data: T | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": _serialise(self.data),
        }