"""
Purpose: Central configuration for the Dispatch Engine.
What it does:

Stores the tunable range for the randomly generated delivery distance:

MIN_DELIVERY_DISTANCE = 0
MAX_DELIVERY_DISTANCE = 20

Values can be overridden from the environment (or a .env file):
DISPATCH_MIN_DELIVERY_DISTANCE / DISPATCH_MAX_DELIVERY_DISTANCE

Rule: No logic here—just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

MIN_DELIVERY_DISTANCE = 0
MAX_DELIVERY_DISTANCE = 20


@dataclass(frozen=True)
class DispatchPolicy:
    """
    Central configuration for dispatch thresholds.
    """

    # --- Delivery distance ---
    # Distance is drawn uniformly from the integers in [min, max], both inclusive.
    min_delivery_distance: int = MIN_DELIVERY_DISTANCE
    max_delivery_distance: int = MAX_DELIVERY_DISTANCE

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.min_delivery_distance < 0:
            raise ValueError("min_delivery_distance must be >= 0")

        if self.max_delivery_distance < self.min_delivery_distance:
            raise ValueError("max_delivery_distance must be >= min_delivery_distance")


def default_dispatch_policy() -> DispatchPolicy:
    """
    Convenience factory for the default policy, honouring environment overrides.
    """
    p = DispatchPolicy(
        min_delivery_distance=int(os.getenv("DISPATCH_MIN_DELIVERY_DISTANCE", MIN_DELIVERY_DISTANCE)),
        max_delivery_distance=int(os.getenv("DISPATCH_MAX_DELIVERY_DISTANCE", MAX_DELIVERY_DISTANCE)),
    )
    p.validate()
    return p
