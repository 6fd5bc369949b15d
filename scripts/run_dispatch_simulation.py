import csv
import logging
import os
import random
from collections import Counter
from datetime import datetime
from typing import Dict, List, Tuple

from dispatch import Dispatcher, NoDriverAvailable, default_dispatch_policy
from drivers.models import City, Driver
from drivers.ranking import RankReporter
from orders.models import Customer, Restaurant
from storage import InMemoryDeliveryLedger, InMemoryDriverDirectory

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def read_rows(filename: str, data_dir: str = "sampledata") -> List[Dict[str, str]]:
    with open(os.path.join(BASE_DIR, data_dir, filename), 'r') as file:
        return list(csv.DictReader(file))


def load_drivers() -> InMemoryDriverDirectory:
    directory = InMemoryDriverDirectory()
    for driver_index, row in enumerate(read_rows("drivers.csv")):
        directory.add(Driver.new(row['driver'], row['city'], driver_id=driver_index + 1))
    return directory


def load_customers() -> Dict[str, Customer]:
    return {
        row['name']: Customer(name=row['name'], city=City(row['city']), address=row['address'], id=index + 1)
        for index, row in enumerate(read_rows("customers.csv"))
    }


def load_restaurants() -> Dict[str, Restaurant]:
    return {
        row['name']: Restaurant(name=row['name'], city=City(row['city']), address=row['address'], id=index + 1)
        for index, row in enumerate(read_rows("restaurants.csv"))
    }


def load_requests() -> List[Tuple[str, str, str, datetime]]:
    return [
        (row['request_id'], row['customer'], row['restaurant'], datetime.fromisoformat(row['delivery_time']))
        for row in read_rows("delivery_requests.csv")
    ]


def run_simulation(seed: int = 7):
    print("=== STARTING END-TO-END DISPATCH SIMULATION ===")

    # 1. Load Data
    directory = load_drivers()
    customers = load_customers()
    restaurants = load_restaurants()
    requests = load_requests()
    print(f"Loaded {len(directory.find_all())} Drivers and {len(requests)} Requests.\n")

    # 2. Configure System
    ledger = InMemoryDeliveryLedger()
    dispatcher = Dispatcher(directory, ledger, policy=default_dispatch_policy(), rng=random.Random(seed))

    # 3. Dispatch every request in file order
    output_path = os.path.join(BASE_DIR, "dispatch_results.csv")
    failures = Counter()

    with open(output_path, "w", newline='') as file:
        writer = csv.writer(file)
        writer.writerow(["request_id", "restaurant", "city", "delivery_time", "driver", "distance"])

        for request_id, customer_name, restaurant_name, delivery_time in requests:
            restaurant = restaurants[restaurant_name]
            try:
                delivery = dispatcher.assign(customers[customer_name], restaurant, delivery_time)
            except NoDriverAvailable:
                failures[restaurant.city.name] += 1
                writer.writerow([request_id, restaurant_name, restaurant.city.name, delivery_time.isoformat(), "FAILED", "N/A"])
                continue

            writer.writerow([
                request_id,
                restaurant_name,
                restaurant.city.name,
                delivery_time.isoformat(),
                delivery.driver.name,
                delivery.distance,
            ])

    # 4. Rank reports
    reporter = RankReporter(directory, ledger)

    print("--- Top 10 Drivers (all cities) ---")
    for row in reporter.rank_all()[:10]:
        print(f"  {row.driver.name:<10} {row.driver.city.name:<10} {row.total_distance:>8.1f}")

    for city in sorted({driver.city for driver in directory.find_all()}, key=lambda c: c.name):
        leader = reporter.rank_by_city(city)[0]
        print(f"Top driver in {city.name}: {leader.driver.name} ({leader.total_distance:.1f})")

    print("\n=== SIMULATION COMPLETE ===")
    print(f"Deliveries Dispatched: {len(ledger.all())} / {len(requests)}")
    for city_name, count in failures.most_common():
        print(f"  No driver available in {city_name}: {count} requests")
    print(f"Results written to '{output_path}'.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    run_simulation()
