from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from logistics.models import City, Customer, Delivery, Driver, Restaurant
from logistics.repositories import DjangoDeliveryLedger, DjangoDriverDirectory

pytestmark = pytest.mark.django_db

SLOT = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def city():
    return City.objects.create(name="TelAviv")


@pytest.fixture
def other_city():
    return City.objects.create(name="Jerusalem")


@pytest.fixture
def customer(city):
    return Customer.objects.create(name="David", city=city, address="Borochov")


@pytest.fixture
def restaurant(city):
    return Restaurant.objects.create(name="Japan-Japan", city=city, address="Hahagana 21")


def record(driver, restaurant, customer, delivery_time, distance=0.0):
    return Delivery.objects.create(
        driver=driver, restaurant=restaurant, customer=customer,
        delivery_time=delivery_time, distance=distance,
    )


def request_delivery(api_client, customer, restaurant, delivery_time):
    return api_client.post(
        "/api/v1/deliveries/",
        {"customer": customer.id, "restaurant": restaurant.id, "delivery_time": delivery_time.isoformat()},
        format="json",
    )


def test_directory_and_ledger_round_trip(city, other_city, customer, restaurant):
    moshe = Driver.objects.create(name="Moshe", city=city)
    Driver.objects.create(name="Eli", city=other_city)
    record(moshe, restaurant, customer, SLOT, 7)

    directory = DjangoDriverDirectory()
    ledger = DjangoDeliveryLedger()
    moshe_entity = directory.find_by_name("Moshe")

    assert [d.name for d in directory.find_by_city(city.to_domain())] == ["Moshe"]
    assert [d.name for d in directory.find_all()] == ["Moshe", "Eli"]
    assert directory.find_by_name("Nobody") is None
    assert [(d.delivery_time, d.distance) for d in ledger.find_by_driver(moshe_entity)] == [(SLOT, 7.0)]


def test_create_delivery_assigns_least_busy_driver(api_client, city, customer, restaurant):
    busy = Driver.objects.create(name="Moshe", city=city)
    least_busy = Driver.objects.create(name="David", city=city)
    record(busy, restaurant, customer, SLOT)
    record(busy, restaurant, customer, SLOT + timedelta(days=1))
    record(least_busy, restaurant, customer, SLOT)

    response = request_delivery(api_client, customer, restaurant, SLOT + timedelta(days=2))

    assert response.status_code == 201
    body = response.json()
    assert body["driver"] == least_busy.id
    assert body["customer"] == customer.id
    assert body["restaurant"] == restaurant.id
    assert 0 <= body["distance"] <= 20
    assert Delivery.objects.filter(driver=least_busy).count() == 2


def test_create_delivery_conflict_when_all_busy(api_client, city, customer, restaurant):
    moshe = Driver.objects.create(name="Moshe", city=city)
    record(moshe, restaurant, customer, SLOT)

    response = request_delivery(api_client, customer, restaurant, SLOT)

    assert response.status_code == 409
    assert response.json() == {"error": "There are no available drivers"}
    assert Delivery.objects.count() == 1


def test_create_delivery_conflict_when_city_has_no_drivers(api_client, other_city, customer, restaurant):
    Driver.objects.create(name="Eli", city=other_city)

    response = request_delivery(api_client, customer, restaurant, SLOT)

    assert response.status_code == 409
    assert Delivery.objects.count() == 0


def test_busy_check_compares_instants_across_timezones(api_client, city, customer, restaurant):
    moshe = Driver.objects.create(name="Moshe", city=city)
    record(moshe, restaurant, customer, SLOT)
    same_instant = SLOT.astimezone(timezone(timedelta(hours=3)))

    response = request_delivery(api_client, customer, restaurant, same_instant)

    assert response.status_code == 409


def test_create_delivery_rejects_unknown_customer(api_client, customer, restaurant):
    response = api_client.post(
        "/api/v1/deliveries/",
        {"customer": customer.id + 100, "restaurant": restaurant.id, "delivery_time": SLOT.isoformat()},
        format="json",
    )

    assert response.status_code == 400
    assert "customer" in response.json()


def test_rank_report_all_and_by_city(api_client, city, other_city, customer, restaurant):
    eli = Driver.objects.create(name="Eli", city=city)
    dafna = Driver.objects.create(name="Dafna", city=city)
    yossi = Driver.objects.create(name="Yossi", city=other_city)
    record(eli, restaurant, customer, SLOT, 4)
    record(dafna, restaurant, customer, SLOT, 10)
    record(dafna, restaurant, customer, SLOT + timedelta(hours=1), 10)
    record(yossi, restaurant, customer, SLOT, 15)

    everyone = api_client.get("/api/v1/drivers/rank/").json()
    tel_aviv = api_client.get("/api/v1/drivers/rank/", {"city": "TelAviv"}).json()

    assert [(row["driver"], row["total_distance"]) for row in everyone] == [
        ("Dafna", 20.0), ("Yossi", 15.0), ("Eli", 4.0),
    ]
    assert [row["driver"] for row in tel_aviv] == ["Dafna", "Eli"]
    assert tel_aviv[0] == {"driver_id": dafna.id, "driver": "Dafna", "city": "TelAviv", "total_distance": 20.0}


def test_rank_report_unknown_city_is_empty(api_client, city):
    Driver.objects.create(name="Eli", city=city)

    response = api_client.get("/api/v1/drivers/rank/", {"city": "Haifa"})

    assert response.status_code == 200
    assert response.json() == []


def test_driver_listing(api_client, city):
    Driver.objects.create(name="Eli", city=city)

    response = api_client.get("/api/v1/drivers/")

    assert response.status_code == 200
    assert response.json()[0]["name"] == "Eli"
    assert response.json()[0]["city"] == "TelAviv"
