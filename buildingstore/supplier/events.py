"""Notification of supplier events to registered observers."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from buildingstore.supplier.models import Supplier


class SupplierObserver(ABC):
    """Something that reacts when a supplier has been saved."""

    @abstractmethod
    def on_supplier_saved(self, supplier: Supplier) -> None:
        """Handle a freshly saved supplier."""


class SupplierNotifier(ABC):
    """Something that announces saved suppliers."""

    @abstractmethod
    def notify_supplier_saved(self, supplier: Supplier) -> None:
        """Announce that the supplier has been saved."""


class SupplierDispatcher(SupplierNotifier):
    """Forwards supplier events to every registered observer."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._observers: list[SupplierObserver] = []

    def register(self, observer: SupplierObserver) -> None:
        """Add an observer to be told of every saved supplier."""
        with self._lock:
            self._observers.append(observer)

    def notify_supplier_saved(self, supplier: Supplier) -> None:
        """Tell each registered observer, in registration order."""
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            observer.on_supplier_saved(supplier)