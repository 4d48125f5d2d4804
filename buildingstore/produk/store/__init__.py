"""SQLite storage for products: create, read, update and delete."""