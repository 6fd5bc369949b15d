"""
Django ORM implementations of the storage contracts (storage.base).
Finders order by primary key so dispatch tie-breaking is deterministic.
"""
from typing import List, Optional

import drivers.models as driver_domain
import orders.models as order_domain

from .models import Delivery, Driver


class DjangoDriverDirectory:
    def _drivers(self):
        return Driver.objects.select_related('city').order_by('id')

    def find_by_city(self, city: driver_domain.City) -> List[driver_domain.Driver]:
        return [row.to_domain() for row in self._drivers().filter(city__name=city.name)]

    def find_all(self) -> List[driver_domain.Driver]:
        return [row.to_domain() for row in self._drivers()]

    def find_by_name(self, name: str) -> Optional[driver_domain.Driver]:
        row = self._drivers().filter(name=name).first()
        return row.to_domain() if row else None


class DjangoDeliveryLedger:
    def find_by_driver(self, driver: driver_domain.Driver) -> List[order_domain.Delivery]:
        rows = (
            Delivery.objects
            .select_related('driver__city', 'restaurant__city', 'customer__city')
            .filter(driver_id=driver.id)
            .order_by('id')
        )
        return [row.to_domain() for row in rows]

    def save(self, delivery: order_domain.Delivery) -> order_domain.Delivery:
        row = Delivery.objects.create(
            driver_id=delivery.driver.id,
            restaurant_id=delivery.restaurant.id,
            customer_id=delivery.customer.id,
            delivery_time=delivery.delivery_time,
            distance=delivery.distance,
        )
        return delivery.with_id(row.id)
