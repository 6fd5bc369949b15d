"""
Purpose: Orchestrator / decision pipeline (the "glue").
What it does:
Accepts a delivery request (customer, restaurant, time), looks up the drivers of the
restaurant's city, keeps the ones that are free at that time, picks the least busy
and records the new Delivery in the ledger.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Optional

from drivers.models import Driver
from orders.models import Customer, Delivery, Restaurant
from storage.base import DeliveryLedger, DriverDirectory
from .candidate_filter import build_available_candidates
from .policy import DispatchPolicy, default_dispatch_policy
from .scoring import select_least_busy

logger = logging.getLogger(__name__)


class NoDriverAvailable(Exception):
    """Raised when no driver in the restaurant's city is free at the requested time."""

    DEFAULT_MESSAGE = "There are no available drivers"

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)


class Dispatcher:
    """
    Assigns the least busy available driver to a delivery request.

    There is no locking between the availability check and the save:
    two concurrent requests for the same time can book the same driver.
    """
    def __init__(
        self,
        directory: DriverDirectory,
        ledger: DeliveryLedger,
        policy: Optional[DispatchPolicy] = None,
        rng: Optional[random.Random] = None,
    ):
        self.directory = directory
        self.ledger = ledger
        self.policy = policy or default_dispatch_policy()
        self.rng = rng or random.Random()

    def assign(self, customer: Customer, restaurant: Restaurant, delivery_time: datetime) -> Delivery:
        """
        Matches a driver and persists the delivery.
        Raises NoDriverAvailable when every driver in the city is busy at `delivery_time`
        (or the city has no drivers). Storage errors propagate unchanged.
        """
        driver = self.find_match_driver(restaurant, delivery_time)

        delivery = Delivery(
            driver=driver,
            restaurant=restaurant,
            customer=customer,
            delivery_time=delivery_time,
            distance=self.random_delivery_distance(),
        )
        saved = self.ledger.save(delivery)

        logger.info(
            "Assigned delivery %s to driver %s (%s) at %s, distance %s",
            saved.id, driver.name, restaurant.city.name, delivery_time.isoformat(), saved.distance,
        )
        return saved

    def find_match_driver(self, restaurant: Restaurant, delivery_time: datetime) -> Driver:
        city = restaurant.city
        drivers = self.directory.find_by_city(city)

        candidates = build_available_candidates(drivers, self.ledger, delivery_time)
        logger.debug(
            "%d of %d drivers in %s are free at %s",
            len(candidates), len(drivers), city.name, delivery_time.isoformat(),
        )

        driver = select_least_busy(candidates)
        if driver is None:
            logger.warning("No available driver in %s at %s", city.name, delivery_time.isoformat())
            raise NoDriverAvailable()

        return driver

    def random_delivery_distance(self) -> float:
        return float(self.rng.randint(self.policy.min_delivery_distance, self.policy.max_delivery_distance))
