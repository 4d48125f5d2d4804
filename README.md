# buildingstore

This library manages products and suppliers for a building-materials store.
It keeps its data in SQLite through the standard `sqlite3` module and needs no
other dependencies.

Product names, messages and validation errors are in Indonesian, as the store
uses them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Products

### Model and validation

`buildingstore.produk.model.Produk` is a dataclass with the fields `nama`,
`kategori`, `harga`, `stok`, an optional `deskripsi` and an `id`. The `id` is
`None` until the product is stored. `Produk.with_id(...)` creates a product
that already has an id. `produk.validate()` checks the product against the
default rules.

`ProdukBuilder` builds a product step by step. `build()` validates the result
before returning it:

```python
from buildingstore.produk.model import ProdukBuilder

laptop = (
    ProdukBuilder("Laptop Gaming", "Elektronik")
    .harga(15_000_000.0)
    .stok(10)
    .deskripsi("Laptop dengan RTX 4060")
    .build()
)
```

The rules live in `buildingstore.produk.validation`:

- `NamaNotEmpty`: the name must not be empty or whitespace only.
- `KategoriNotEmpty`: the category must not be empty or whitespace only.
- `HargaNonNegatif`: the price must not be negative.
- `StokNonNegatif`: the stock must not be negative.
- `DeskripsiMaxLength`: the description may be at most 500 bytes of UTF-8.

`ProdukValidator` applies a list of rules. With no list it uses all five.
`errors(produk)` returns the message of every failed rule, in rule order.
`validate(produk)` raises `ProdukValidationError` when any rule fails. The
exception's `errors` attribute holds those same messages.

### Storage

`buildingstore.produk.store.database.init_database(path)` opens a
`ProdukDatabase` and creates the `produk` table if it is missing. The default
path is `":memory:"`. The table has `created_at` and `updated_at` timestamp
columns, and a trigger refreshes `updated_at` on every update.
`ProdukDatabase` is a context manager: leaving the `with` block closes the
connection.

```python
from buildingstore.produk.store.database import init_database, get_store_stats
from buildingstore.produk.store.create import tambah_produk
from buildingstore.produk.store.read import ambil_semua_produk, ambil_produk_by_id
from buildingstore.produk.store.update import update_produk, update_stok, update_harga
from buildingstore.produk.store.delete import hapus_produk, clear_all

with init_database("store.db") as db:
    produk_id = tambah_produk(db, laptop)       # returns the new id
    update_stok(db, produk_id, 25)
    update_harga(db, produk_id, 14_500_000.0)
    print(ambil_produk_by_id(db, produk_id))    # None if there is no such id
    print(ambil_semua_produk(db))               # ordered by id
    print(get_store_stats(db))                  # (count, highest id or 0)
    hapus_produk(db, produk_id)                 # True if a row was deleted
    clear_all(db)                               # empties the table; ids restart at 1
```

`tambah_produk` and `update_produk` check the product with `validate_produk`.
That function raises on the first problem it finds: an empty name, an empty
category, a negative price or a negative stock.

Store errors derive from `RepositoryError`:

- `ValidationError` is raised for an invalid product, a negative price or a
  negative stock.
- `NotFoundError` is raised by `update_produk`, `update_stok` and
  `update_harga` when no product has the given id.
- `DatabaseError` is raised for failures reported by SQLite.

### Request and response shapes

`buildingstore.produk.schemas` holds plain dataclasses for JSON bodies:

- `ProdukRequest.from_dict(data)` parses a decoded JSON object. It raises
  `ValueError` on missing or mistyped fields. `stok` must be an integer in the
  32-bit signed range.
- `ProdukResponse.from_produk(produk)` and `to_dict()` give a product's
  outward form.
- `ApiResponse(success, message, data).to_dict()` wraps a reply. It serialises
  nested objects that have `to_dict`, and lists of them.

## Suppliers

`buildingstore.supplier.models` defines `Supplier` and `SupplierTransaction`.
`SupplierTransaction.from_supplier(transaction_id, supplier)` copies the
supplier's data and timestamp into a new transaction.
`buildingstore.supplier.factory.create_from_supplier(supplier)` does the same,
but gives the transaction a fresh `TRX-<uuid>` id and the current UTC time.

The repositories work on a `sqlite3.Connection`. `init_schema(db)` creates the
`suppliers` and `supplier_transactions` tables. `SqlSupplierRepository` and
`SqlSupplierTransactionRepository` raise `RowNotFoundError` when a lookup,
update or delete finds no row. `find_by_supplier_id` returns an empty list
when a supplier has no transactions.

`DefaultSupplierService` saves, updates, deletes and lists suppliers. Every
saved supplier gets a UUID id and an RFC 3339 `updated_at`. After each save
the service calls its notifier. `SupplierDispatcher` is a notifier that passes
each saved supplier to its registered observers in registration order.
`SupplierTransactionLogger` is such an observer: it stores a transaction for
every saved supplier, and it logs failures instead of raising them.

```python
import sqlite3

from buildingstore.supplier.supplier_repository import SqlSupplierRepository, init_schema
from buildingstore.supplier.transaction_repository import SqlSupplierTransactionRepository
from buildingstore.supplier.events import SupplierDispatcher
from buildingstore.supplier.service import DefaultSupplierService
from buildingstore.supplier.transaction_logger import SupplierTransactionLogger

db = sqlite3.connect(":memory:")
init_schema(db)

transactions = SqlSupplierTransactionRepository()
dispatcher = SupplierDispatcher()
dispatcher.register(SupplierTransactionLogger(transactions, db))

service = DefaultSupplierService(SqlSupplierRepository(), transactions, dispatcher)
supplier = service.save_supplier(db, "PT. Ayam", "ayam", 1000, "RESI-0001")
print(service.get_supplier(db, supplier.id))      # None if there is no such id
print(service.get_all_supplier_transactions(db))
```

Service failures raise `SupplierServiceError`, and its `message` says what
went wrong. Updating or deleting a supplier that does not exist raises
`SupplierNotFoundError`.

## What this package does not do

It is a library only. It has no web server, no HTTP routes and no
command-line program. The schema classes describe JSON bodies, but nothing in
the package receives requests or sends replies. Storage is SQLite only.