"""
Purpose: Domain models for the Orders capability.
What it does:
- Defines core data structures:
- Customer (name, city, address)
- Restaurant (name, city, address)
- Delivery (driver, restaurant, customer, delivery_time, distance)

Rule: No storage calls, no matching logic. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from drivers.models import City, Driver


@dataclass(frozen=True)
class Customer:
    name: str
    city: City
    address: str
    id: Optional[int] = None


@dataclass(frozen=True)
class Restaurant:
    name: str
    city: City
    address: str
    id: Optional[int] = None


@dataclass(frozen=True)
class Delivery:
    """
    A driver carrying an order from a restaurant to a customer at a given time.
    Created by the dispatcher and never modified afterwards.
    """

    driver: Driver
    restaurant: Restaurant
    customer: Customer
    delivery_time: datetime

    distance: float = 0.0

    # Assigned by the ledger on save
    id: Optional[int] = None

    def with_id(self, delivery_id: int) -> Delivery:
        # Because Delivery is a frozen dataclass, we return a new instance via replace
        return replace(self, id=delivery_id)
