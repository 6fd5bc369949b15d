from django.db import models

import drivers.models as driver_domain
import orders.models as order_domain


class City(models.Model):
    """
    A city is identified by its name; drivers, customers and restaurants all belong to one.
    """
    name = models.CharField(max_length=255, unique=True)

    def __str__(self):
        return self.name

    def to_domain(self) -> driver_domain.City:
        return driver_domain.City(self.name)


class Driver(models.Model):
    name = models.CharField(max_length=255, unique=True)
    # A driver only takes deliveries from restaurants in this city
    city = models.ForeignKey(City, on_delete=models.PROTECT, related_name='drivers')

    def __str__(self):
        return f"{self.name} ({self.city})"

    def to_domain(self) -> driver_domain.Driver:
        return driver_domain.Driver(name=self.name, city=self.city.to_domain(), id=self.id)


class Customer(models.Model):
    name = models.CharField(max_length=255)
    city = models.ForeignKey(City, on_delete=models.PROTECT, related_name='customers')
    address = models.TextField()

    def __str__(self):
        return self.name

    def to_domain(self) -> order_domain.Customer:
        return order_domain.Customer(name=self.name, city=self.city.to_domain(), address=self.address, id=self.id)


class Restaurant(models.Model):
    name = models.CharField(max_length=255)
    city = models.ForeignKey(City, on_delete=models.PROTECT, related_name='restaurants')
    address = models.TextField()

    def __str__(self):
        return self.name

    def to_domain(self) -> order_domain.Restaurant:
        return order_domain.Restaurant(name=self.name, city=self.city.to_domain(), address=self.address, id=self.id)


class Delivery(models.Model):
    """
    A dispatched delivery. Rows are written once by the dispatcher and never updated.
    """
    driver = models.ForeignKey(Driver, on_delete=models.PROTECT, related_name='deliveries')
    restaurant = models.ForeignKey(Restaurant, on_delete=models.PROTECT, related_name='deliveries')
    customer = models.ForeignKey(Customer, on_delete=models.PROTECT, related_name='deliveries')

    # Busy means another delivery at exactly this timestamp
    delivery_time = models.DateTimeField(db_index=True)
    distance = models.FloatField()

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = "deliveries"

    def __str__(self):
        return f"Delivery #{self.id} - {self.driver.name} @ {self.delivery_time.isoformat()}"

    def to_domain(self) -> order_domain.Delivery:
        return order_domain.Delivery(
            driver=self.driver.to_domain(),
            restaurant=self.restaurant.to_domain(),
            customer=self.customer.to_domain(),
            delivery_time=self.delivery_time,
            distance=self.distance,
            id=self.id,
        )
