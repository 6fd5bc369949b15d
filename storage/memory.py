"""
Purpose: In-memory Driver Directory and Delivery Ledger.
What it does:
Backs the storage contracts with plain lists. Used by the tests and by the
dispatch simulation script.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from drivers.models import City, Driver
from orders.models import Delivery


@dataclass
class InMemoryDriverDirectory:
    """
    Drivers are kept in insertion order, which is the order every finder returns.
    """
    _drivers: List[Driver] = field(default_factory=list)

    @classmethod
    def of(cls, drivers: Iterable[Driver]) -> InMemoryDriverDirectory:
        directory = cls()
        for driver in drivers:
            directory.add(driver)
        return directory

    def add(self, driver: Driver) -> Driver:
        self._drivers.append(driver)
        return driver

    def find_by_city(self, city: City) -> List[Driver]:
        return [driver for driver in self._drivers if driver.city == city]

    def find_all(self) -> List[Driver]:
        return list(self._drivers)

    def find_by_name(self, name: str) -> Optional[Driver]:
        for driver in self._drivers:
            if driver.name == name:
                return driver
        return None


@dataclass
class InMemoryDeliveryLedger:
    """
    Append-only list of deliveries. Ids are sequential integers starting at 1.
    """
    _deliveries: List[Delivery] = field(default_factory=list)
    _next_id: int = 1

    def find_by_driver(self, driver: Driver) -> List[Delivery]:
        return [delivery for delivery in self._deliveries if delivery.driver == driver]

    def save(self, delivery: Delivery) -> Delivery:
        saved = delivery.with_id(self._next_id)
        self._next_id += 1
        self._deliveries.append(saved)
        return saved

    def all(self) -> List[Delivery]:
        return list(self._deliveries)
