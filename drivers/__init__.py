"""
Drivers domain package.

Public API:
- Domain models: City, Driver, DriverDistance

The rank report lives in drivers.ranking and is imported from there,
since it depends on the orders and storage packages.
"""
from .models import City, Driver, DriverDistance

__all__ = ["City",
           "Driver",
             "DriverDistance",
               ]
