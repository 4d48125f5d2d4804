"""Suppliers: models, SQLite repositories, event dispatch, transaction logging and service."""