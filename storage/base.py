"""
Purpose: Query contracts the dispatch and reporting layers depend on.
What it does:
Declares the Driver Directory and the Delivery Ledger as Protocols so that any
concrete store (in-memory lists, the Django ORM, ...) can back them.

Rule: No business logic here, only the contracts.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from drivers.models import City, Driver
from orders.models import Delivery


class DriverDirectory(Protocol):
    """
    Lookup of drivers. Every finder returns drivers in a stable order
    (insertion order or primary key order) because dispatch tie-breaking relies on it.
    """

    def find_by_city(self, city: City) -> List[Driver]:
        """Drivers whose city equals `city`."""
        ...

    def find_all(self) -> List[Driver]:
        """Every known driver."""
        ...

    def find_by_name(self, name: str) -> Optional[Driver]:
        """The driver with this name, or None."""
        ...


class DeliveryLedger(Protocol):
    """
    Lookup and storage of delivery records.
    """

    def find_by_driver(self, driver: Driver) -> List[Delivery]:
        """All deliveries assigned to `driver`, empty when none."""
        ...

    def save(self, delivery: Delivery) -> Delivery:
        """Persist `delivery` and return it carrying its persistent id."""
        ...
