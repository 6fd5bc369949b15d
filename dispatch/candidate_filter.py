"""
Purpose: Hard eligibility filtering (rule gates).
What it does:
Builds the base candidate set before scoring. A driver is a candidate only when
none of their existing deliveries is scheduled at exactly the requested time.

Output: "rule-qualified drivers" together with their deliveries (still not ranked).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Sequence

from drivers.models import Driver
from orders.models import Delivery
from storage.base import DeliveryLedger


@dataclass(frozen=True)
class Candidate:
    """
    A driver that passed the filter, with the deliveries fetched while checking them.
    Scoring reuses the deliveries so the ledger is queried once per driver.
    """
    driver: Driver
    deliveries: List[Delivery]


def delivery_at(delivery_time: datetime) -> Callable[[Delivery], bool]:
    return lambda delivery: delivery.delivery_time == delivery_time


def is_available_at(deliveries: Sequence[Delivery], delivery_time: datetime) -> bool:
    """
    Busy means an existing delivery at exactly the same time, not an overlapping interval.
    """
    return not any(map(delivery_at(delivery_time), deliveries))


def build_available_candidates(
    drivers: Sequence[Driver],
    ledger: DeliveryLedger,
    delivery_time: datetime,
) -> List[Candidate]:
    """
    Returns the drivers that are free at `delivery_time`, in the order they were given.
    """
    candidates = []

    for driver in drivers:
        deliveries = ledger.find_by_driver(driver)

        if not is_available_at(deliveries, delivery_time):
            continue

        candidates.append(Candidate(driver=driver, deliveries=deliveries))

    return candidates
