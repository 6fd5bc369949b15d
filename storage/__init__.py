#Marks storage as a package.
#Re-exports the storage contracts and the in-memory implementation so other modules
#import from storage without knowing internal file names.
#No business logic.

from .base import DriverDirectory, DeliveryLedger
from .memory import InMemoryDriverDirectory, InMemoryDeliveryLedger

__all__ = [
           "DriverDirectory",
             "DeliveryLedger",
             "InMemoryDriverDirectory",
             "InMemoryDeliveryLedger",
             ]
