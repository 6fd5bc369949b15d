from drivers.models import Driver
from orders.models import Delivery
from storage import InMemoryDeliveryLedger, InMemoryDriverDirectory


def test_directory_finders(tel_aviv, jerusalem):
    moshe = Driver("Moshe", tel_aviv, id=1)
    eli = Driver("Eli", jerusalem, id=2)
    david = Driver.new("David", "TelAviv", driver_id=3)
    directory = InMemoryDriverDirectory.of([moshe, eli, david])

    assert directory.find_by_city(tel_aviv) == [moshe, david]
    assert directory.find_all() == [moshe, eli, david]
    assert directory.find_by_name("Eli") == eli
    assert directory.find_by_name("Nobody") is None


def test_ledger_assigns_sequential_ids(tel_aviv, restaurant, customer, now, tomorrow):
    ledger = InMemoryDeliveryLedger()
    moshe = Driver("Moshe", tel_aviv, id=1)
    eli = Driver("Eli", tel_aviv, id=2)

    first = ledger.save(Delivery(moshe, restaurant, customer, now, 5))
    second = ledger.save(Delivery(eli, restaurant, customer, now, 7))
    third = ledger.save(Delivery(moshe, restaurant, customer, tomorrow, 1))

    assert [first.id, second.id, third.id] == [1, 2, 3]
    assert ledger.find_by_driver(moshe) == [first, third]
    assert ledger.find_by_driver(Driver("Nobody", tel_aviv, id=9)) == []
    assert ledger.all() == [first, second, third]


def test_save_does_not_mutate_the_given_delivery(tel_aviv, restaurant, customer, now):
    ledger = InMemoryDeliveryLedger()
    delivery = Delivery(Driver("Moshe", tel_aviv, id=1), restaurant, customer, now, 5)

    saved = ledger.save(delivery)

    assert delivery.id is None
    assert saved.id == 1
    assert saved.distance == delivery.distance
