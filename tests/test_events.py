from datetime import datetime, timezone

import pytest

from buildingstore.supplier.events import (
    SupplierDispatcher,
    SupplierNotifier,
    SupplierObserver,
)
from buildingstore.supplier.models import Supplier


class RecordingObserver(SupplierObserver):
    def __init__(self):
        self.calls = 0
        self.last_supplier_name = None

    def on_supplier_saved(self, supplier):
        self.calls += 1
        self.last_supplier_name = supplier.name


class SequenceObserver(SupplierObserver):
    """Appends its label and the received supplier to a shared log."""

    def __init__(self, label, log):
        self.label = label
        self.log = log

    def on_supplier_saved(self, supplier):
        self.log.append((self.label, supplier))


def sample_supplier() -> Supplier:
    return Supplier(
        id="DISP-SUP-001",
        name="Dispatcher Test Supplier",
        jenis_barang="Elektronik",
        jumlah_barang=100,
        resi="DISPRESI123",
        updated_at=datetime.now(timezone.utc).isoformat(),
    )


def test_register_and_notify_single_observer():
    dispatcher = SupplierDispatcher()
    observer = RecordingObserver()
    dispatcher.register(observer)

    dispatcher.notify_supplier_saved(sample_supplier())

    assert observer.calls == 1
    assert observer.last_supplier_name == "Dispatcher Test Supplier"


def test_notify_multiple_observers():
    dispatcher = SupplierDispatcher()
    observer1 = RecordingObserver()
    observer2 = RecordingObserver()
    dispatcher.register(observer1)
    dispatcher.register(observer2)

    dispatcher.notify_supplier_saved(sample_supplier())

    assert observer1.calls == 1
    assert observer1.last_supplier_name == "Dispatcher Test Supplier"
    assert observer2.calls == 1
    assert observer2.last_supplier_name == "Dispatcher Test Supplier"


def test_notify_no_observers_then_register():
    dispatcher = SupplierDispatcher()
    supplier = sample_supplier()
    dispatcher.notify_supplier_saved(supplier)

    observer = RecordingObserver()
    dispatcher.register(observer)
    dispatcher.notify_supplier_saved(supplier)

    assert observer.calls == 1


def test_supplier_notifier_interface_works_via_dispatcher():
    dispatcher = SupplierDispatcher()
    notifier: SupplierNotifier = dispatcher
    observer = RecordingObserver()
    dispatcher.register(observer)

    notifier.notify_supplier_saved(sample_supplier())

    assert observer.calls == 1
    assert observer.last_supplier_name == "Dispatcher Test Supplier"


def test_observers_are_notified_in_registration_order():
    shared_log = []
    first = SequenceObserver("first", shared_log)
    second = SequenceObserver("second", shared_log)

    dispatcher = SupplierDispatcher()
    dispatcher.register(first)
    dispatcher.register(second)

    supplier = sample_supplier()
    dispatcher.notify_supplier_saved(supplier)

    assert [label for label, _ in first.log] == ["first", "second"]
    assert all(received is supplier for _, received in second.log)
    assert [received.id for _, received in second.log] == [
        "DISP-SUP-001",
        "DISP-SUP-001",
    ]


def test_abstract_observer_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SupplierObserver()