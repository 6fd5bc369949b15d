import random
from datetime import datetime, timedelta

import pytest

from dispatch import Dispatcher, DispatchPolicy
from drivers.models import City, Driver
from orders.models import Customer, Delivery, Restaurant
from storage import InMemoryDeliveryLedger, InMemoryDriverDirectory


@pytest.fixture
def tel_aviv():
    return City("TelAviv")


@pytest.fixture
def jerusalem():
    return City("Jerusalem")


@pytest.fixture
def customer(tel_aviv):
    return Customer("David", tel_aviv, "Borochov", id=1)


@pytest.fixture
def restaurant(tel_aviv):
    return Restaurant("Japan-Japan", tel_aviv, "Hahagana 21", id=1)


@pytest.fixture
def now():
    return datetime(2026, 10, 16, 12, 0)


@pytest.fixture
def tomorrow(now):
    return now + timedelta(days=1)


@pytest.fixture
def directory():
    return InMemoryDriverDirectory()


@pytest.fixture
def ledger():
    return InMemoryDeliveryLedger()


@pytest.fixture
def dispatcher(directory, ledger):
    return Dispatcher(directory, ledger, policy=DispatchPolicy(), rng=random.Random(1234))


@pytest.fixture
def book(ledger, restaurant, customer):
    """
    Records an existing delivery for a driver directly in the ledger.
    """
    def _book(driver: Driver, delivery_time: datetime, distance: float = 0.0) -> Delivery:
        return ledger.save(Delivery(driver, restaurant, customer, delivery_time, distance))
    return _book
