"""
Purpose: Rank report of drivers by total distance driven.
What it does:
Sums the distance of every delivery per driver and orders the drivers from the
longest to the shortest total, either across all drivers or inside one city.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from orders.models import Delivery
from storage.base import DeliveryLedger, DriverDirectory
from .models import City, Driver, DriverDistance

logger = logging.getLogger(__name__)


def total_distance(deliveries: Iterable[Delivery]) -> float:
    return float(sum(delivery.distance for delivery in deliveries))


def rank_drivers(drivers: Sequence[Driver], ledger: DeliveryLedger) -> List[DriverDistance]:
    """
    Returns one row per driver, sorted by total distance descending.
    sorted() is stable with reverse=True, so drivers with equal totals keep their input order.
    """
    rows = [
        DriverDistance(driver=driver, total_distance=total_distance(ledger.find_by_driver(driver)))
        for driver in drivers
    ]
    return sorted(rows, key=lambda row: row.total_distance, reverse=True)


class RankReporter:
    def __init__(self, directory: DriverDirectory, ledger: DeliveryLedger):
        self.directory = directory
        self.ledger = ledger

    def rank_all(self) -> List[DriverDistance]:
        report = rank_drivers(self.directory.find_all(), self.ledger)
        logger.info("Built rank report for %d drivers", len(report))
        return report

    def rank_by_city(self, city: City) -> List[DriverDistance]:
        report = rank_drivers(self.directory.find_by_city(city), self.ledger)
        logger.info("Built rank report for %d drivers in %s", len(report), city.name)
        return report
