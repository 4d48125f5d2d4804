"""Validation rules for products and a validator that applies them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from buildingstore.produk.model import Produk

DESKRIPSI_MAX_LENGTH = 500


class ProdukValidationError(ValueError):
    """Raised when a product breaks one or more validation rules."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors: list[str] = list(errors)
        super().__init__("; ".join(self.errors))


class ValidationRule:
    """A single check on a product; raises ProdukValidationError on failure."""

    message: str = ""

    def validate(self, produk: Produk) -> None:
        raise NotImplementedError

    def _fail(self) -> None:
        raise ProdukValidationError([self.message])


class NamaNotEmpty(ValidationRule):
    """The name must contain something other than whitespace."""

    message = "Nama produk tidak boleh kosong"

    def validate(self, produk: Produk) -> None:
        if not produk.nama.strip():
            self._fail()


class HargaNonNegatif(ValidationRule):
    """The price must not be below zero."""

    message = "Harga tidak boleh negatif"

    def validate(self, produk: Produk) -> None:
        if produk.harga < 0.0:
            self._fail()


class KategoriNotEmpty(ValidationRule):
    """The category must contain something other than whitespace."""

    message = "Kategori produk tidak boleh kosong"

    def validate(self, produk: Produk) -> None:
        if not produk.kategori.strip():
            self._fail()


class StokNonNegatif(ValidationRule):
    """The stock count must not be below zero."""

    message = "Stok tidak boleh negatif"

    def validate(self, produk: Produk) -> None:
        if produk.stok < 0:
            self._fail()


class DeskripsiMaxLength(ValidationRule):
    """An optional description may be at most 500 bytes of UTF-8."""

    message = "Deskripsi terlalu panjang (maksimal 500 karakter)"

    def validate(self, produk: Produk) -> None:
        if produk.deskripsi is not None:
            if len(produk.deskripsi.encode("utf-8")) > DESKRIPSI_MAX_LENGTH:
                self._fail()


def _default_rules() -> list[ValidationRule]:
    return [
        NamaNotEmpty(),
        KategoriNotEmpty(),
        HargaNonNegatif(),
        StokNonNegatif(),
        DeskripsiMaxLength(),
    ]


class ProdukValidator:
    """Applies a list of rules to a product and gathers every failure."""

    def __init__(self, rules: Iterable[ValidationRule] | None = None) -> None:
        self.rules: list[ValidationRule] = (
            _default_rules() if rules is None else list(rules)
        )

    def errors(self, produk: Produk) -> list[str]:
        """Return the messages of all rules the product breaks, in rule order."""
        found: list[str] = []
        for rule in self.rules:
            try:
                rule.validate(produk)
            except ProdukValidationError as exc:
                found.extend(exc.errors)
        return found

    def validate(self, produk: Produk) -> None:
        """Raise ProdukValidationError listing every broken rule, if any."""
        found = self.errors(produk)
        if found:
            raise ProdukValidationError(found)