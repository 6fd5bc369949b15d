"""
Purpose: Core data models for the drivers domain.
What it does:
Defines City, Driver and the DriverDistance report row without relying on Django ORM constraints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class City:
    """
    A city is identified by its name alone.
    """
    name: str


@dataclass(frozen=True)
class Driver:
    """
    A purely stateless representation of a Driver.
    A driver operates within exactly one city.
    """
    name: str
    city: City

    # Assigned by the persistence layer, None for drivers that were never stored.
    id: Optional[int] = None

    @classmethod
    def new(cls, name: str, city: str | City, driver_id: Optional[int] = None) -> Driver:
        if isinstance(city, str):
            city = City(city)

        return cls(name=name, city=city, id=driver_id)


@dataclass(frozen=True)
class DriverDistance:
    """
    One row of the rank report: a driver and the sum of all their delivery distances.
    """
    driver: Driver
    total_distance: float
