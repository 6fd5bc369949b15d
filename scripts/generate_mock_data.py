import os
from datetime import datetime, timedelta, timezone

import numpy as np
import pandas as pd

CITIES = ["Harare", "Bulawayo", "Mutare", "Gweru"]
STREETS = ["Samora Machel Ave", "Julius Nyerere Way", "Borrowdale Rd", "Fife St", "Main St", "Herbert Chitepo St"]


def generate_mock_data(
    num_drivers=40,
    num_customers=200,
    num_restaurants=30,
    num_requests=300,
    num_slots=12,
    seed=42,
    output_dir="sampledata",
):
    """
    Generates cities, drivers, customers, restaurants and delivery requests as CSV files.
    Requests are spread over a small number of hourly slots so several of them land
    on the same timestamp in the same city, which exercises the "busy at time" rule.
    """
    rng = np.random.default_rng(seed)

    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    output_path = os.path.join(base_dir, output_dir)
    os.makedirs(output_path, exist_ok=True)

    # 1. Cities
    cities = pd.DataFrame({"city": CITIES})

    # 2. Drivers, each bound to a single city
    drivers = pd.DataFrame({
        "driver": [f"DRV-{str(i + 1).zfill(3)}" for i in range(num_drivers)],
        "city": rng.choice(CITIES, size=num_drivers),
    })

    # 3. Customers and restaurants with street addresses
    def people(prefix, count):
        return pd.DataFrame({
            "name": [f"{prefix} {i + 1}" for i in range(count)],
            "city": rng.choice(CITIES, size=count),
            "address": [f"{rng.integers(1, 200)} {rng.choice(STREETS)}" for _ in range(count)],
        })

    customers = people("Customer", num_customers)
    restaurants = people("Restaurant", num_restaurants)

    # 4. Requests: a customer orders from a restaurant in the same city at an hourly slot
    start = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0) + timedelta(hours=1)
    requests = []
    for request_index in range(num_requests):
        restaurant = restaurants.iloc[rng.integers(0, len(restaurants))]
        same_city = customers[customers["city"] == restaurant["city"]]
        if same_city.empty:
            continue

        customer = same_city.iloc[rng.integers(0, len(same_city))]
        slot = int(rng.integers(0, num_slots))
        requests.append({
            "request_id": f"r_{str(request_index + 1).zfill(5)}",
            "customer": customer["name"],
            "restaurant": restaurant["name"],
            "delivery_time": (start + timedelta(hours=slot)).isoformat(),
        })

    requests = pd.DataFrame(requests)

    # 5. Save to CSV
    cities.to_csv(os.path.join(output_path, "cities.csv"), index=False)
    drivers.to_csv(os.path.join(output_path, "drivers.csv"), index=False)
    customers.to_csv(os.path.join(output_path, "customers.csv"), index=False)
    restaurants.to_csv(os.path.join(output_path, "restaurants.csv"), index=False)
    requests.to_csv(os.path.join(output_path, "delivery_requests.csv"), index=False)

    print(f"Generated {len(drivers)} drivers, {len(customers)} customers, "
          f"{len(restaurants)} restaurants and {len(requests)} requests into '{output_path}'")

    # Print a quick preview of driver supply vs demand
    print("\nDrivers / requests per city:")
    demand = requests.merge(restaurants, left_on="restaurant", right_on="name")["city"].value_counts()
    supply = drivers["city"].value_counts()
    for city in CITIES:
        print(f"  {city}: {supply.get(city, 0)} drivers, {demand.get(city, 0)} requests")


if __name__ == "__main__":
    generate_mock_data()
