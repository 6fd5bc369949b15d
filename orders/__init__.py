"""
Orders domain package.

Public API:
- Domain models: Customer, Restaurant, Delivery
"""
from .models import Customer, Restaurant, Delivery

__all__ = ["Customer",
           "Restaurant",
             "Delivery",
               ]
