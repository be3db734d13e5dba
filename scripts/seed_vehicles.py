#!/usr/bin/env python3
"""
Seed a demo dealer and the vehicles table with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears the demo dealer's stock first)
- Realism-lite: prices follow make band and age, mileage follows age

Usage:
    python scripts/seed_vehicles.py
"""

from __future__ import annotations

import logging
import random
import sys
from datetime import date
from decimal import Decimal

from sqlalchemy import delete, select

from boxcars.domain.vehicle import Badge, BodyType, Condition, FuelType, Transmission
from boxcars.infra.db.models import UserRow, VehicleRow
from boxcars.infra.db.session import get_session
from boxcars.infra.logging_config import configure_logging

logger = logging.getLogger(__name__)


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_VEHICLES = 50
DEALER_EMAIL = "dealer@boxcars.example"


# ==============================================================================
# Market data
# ==============================================================================

# Base price bands in USD
MAKES = {
    "economy": {
        "makes": ["Nissan", "Chevrolet", "Kia", "Hyundai"],
        "base_price_min": 18000,
        "base_price_max": 28000,
    },
    "mid_range": {
        "makes": ["Toyota", "Honda", "Mazda", "Volkswagen", "Ford"],
        "base_price_min": 25000,
        "base_price_max": 42000,
    },
    "premium": {
        "makes": ["BMW", "Mercedes-Benz", "Audi", "Volvo", "Tesla"],
        "base_price_min": 42000,
        "base_price_max": 90000,
    },
}

# (model, body type)
MODELS_BY_MAKE = {
    "Nissan": [("Versa", BodyType.SEDAN), ("Rogue", BodyType.SUV), ("Frontier", BodyType.TRUCK)],
    "Chevrolet": [("Malibu", BodyType.SEDAN), ("Equinox", BodyType.SUV), ("Silverado", BodyType.TRUCK)],
    "Kia": [("Rio", BodyType.HATCHBACK), ("Sportage", BodyType.SUV), ("Carnival", BodyType.VAN)],
    "Hyundai": [("Elantra", BodyType.SEDAN), ("Tucson", BodyType.SUV), ("Kona", BodyType.SUV)],
    "Toyota": [("Corolla", BodyType.SEDAN), ("Camry", BodyType.SEDAN), ("RAV4", BodyType.SUV)],
    "Honda": [("Civic", BodyType.SEDAN), ("Accord", BodyType.SEDAN), ("CR-V", BodyType.SUV)],
    "Mazda": [("Mazda3", BodyType.HATCHBACK), ("CX-5", BodyType.SUV), ("MX-5", BodyType.CONVERTIBLE)],
    "Volkswagen": [("Jetta", BodyType.SEDAN), ("Golf", BodyType.HATCHBACK), ("Tiguan", BodyType.SUV)],
    "Ford": [("Mustang", BodyType.COUPE), ("Explorer", BodyType.SUV), ("F-150", BodyType.TRUCK)],
    "BMW": [("3 Series", BodyType.SEDAN), ("X5", BodyType.SUV), ("4 Series", BodyType.COUPE)],
    "Mercedes-Benz": [("C-Class", BodyType.SEDAN), ("GLC", BodyType.SUV), ("E-Class", BodyType.WAGON)],
    "Audi": [("A4", BodyType.SEDAN), ("Q5", BodyType.SUV), ("A5", BodyType.CONVERTIBLE)],
    "Volvo": [("S60", BodyType.SEDAN), ("XC60", BodyType.SUV), ("V60", BodyType.WAGON)],
    "Tesla": [("Model 3", BodyType.SEDAN), ("Model Y", BodyType.SUV)],
}

ENGINES = ["1.5L I4", "2.0L I4 Turbo", "2.5L I4", "3.0L V6", "3.5L V6", "5.0L V8"]
COLORS = ["White", "Black", "Silver", "Gray", "Blue", "Red"]
FEATURES = ["Bluetooth", "Backup Camera", "Heated Seats", "Sunroof", "Navigation", "Apple CarPlay"]
CITIES = [
    ("Austin", "TX", "78701"),
    ("Denver", "CO", "80202"),
    ("Seattle", "WA", "98101"),
    ("Miami", "FL", "33101"),
    ("Chicago", "IL", "60601"),
]


# ==============================================================================
# Generation
# ==============================================================================


def calculate_price(category: str, year: int, current_year: int) -> Decimal:
    """
    Base price from the make band, ~10% depreciation per year (capped at 70%),
    +/- 10% noise, rounded to the nearest hundred.
    """
    band = MAKES[category]
    base = Decimal(random.randint(band["base_price_min"], band["base_price_max"]))

    years_old = max(0, current_year - year)
    depreciation = min(Decimal("0.10") * years_old, Decimal("0.70"))
    variance = Decimal(str(round(random.uniform(0.90, 1.10), 4)))

    price = base * (Decimal("1") - depreciation) * variance
    return max((price / 100).quantize(Decimal("1")) * 100, Decimal("3000"))


def generate_vehicle(dealer_id, current_year: int) -> VehicleRow:
    """Generate a single random vehicle for the given dealer."""
    category = random.choice(list(MAKES))
    make = random.choice(MAKES[category]["makes"])
    model, body_type = random.choice(MODELS_BY_MAKE[make])

    # Favor newer model years
    year = random.choices(range(current_year - 9, current_year + 1), weights=range(1, 11), k=1)[0]
    years_old = current_year - year

    condition = Condition.NEW if years_old == 0 else random.choice([Condition.USED, Condition.CERTIFIED_PRE_OWNED])
    mileage = 0 if condition == Condition.NEW else random.randint(1000, max(5000, years_old * 15000))

    fuel_type = FuelType.ELECTRIC if make == "Tesla" else random.choices(
        [FuelType.PETROL, FuelType.DIESEL, FuelType.HYBRID], weights=[7, 2, 2], k=1
    )[0]
    engine = "Electric Motor" if fuel_type == FuelType.ELECTRIC else random.choice(ENGINES)

    price = calculate_price(category, year, current_year)
    badge = None
    original_price = None
    if mileage and mileage < 20000:
        badge = Badge.LOW_MILEAGE
    elif random.random() < 0.2:
        badge = Badge.SALE
        original_price = price + Decimal(random.choice([1000, 1500, 2500]))

    city, state, zip_code = random.choice(CITIES)
    slug = f"{make}-{model}".lower().replace(" ", "-")

    return VehicleRow(
        make=make,
        model=model,
        year=year,
        price=price,
        original_price=original_price,
        mileage=mileage,
        fuel_type=fuel_type.value,
        transmission=random.choice(list(Transmission)).value,
        body_type=body_type.value,
        engine=engine,
        color=random.choice(COLORS),
        image=f"https://images.boxcars.example/{slug}-{year}.jpg",
        features=random.sample(FEATURES, k=3),
        condition=condition.value,
        badge=badge.value if badge else None,
        location={"city": city, "state": state, "country": "USA", "zip_code": zip_code},
        dealer_id=dealer_id,
        status="available",
        views=0,
        is_active=True,
    )


def seed_vehicles(num_vehicles: int = NUM_VEHICLES, seed: int = RANDOM_SEED) -> None:
    """
    Seed the demo dealer's inventory.

    Args:
        num_vehicles: Number of vehicles to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)
    current_year = date.today().year

    with get_session() as session:
        dealer = session.execute(select(UserRow).where(UserRow.email == DEALER_EMAIL)).scalar_one_or_none()
        if dealer is None:
            dealer = UserRow(name="BoxCars Demo Motors", email=DEALER_EMAIL, phone="+15125550100", role="dealer")
            session.add(dealer)
            session.flush()
            logger.info("Created demo dealer", extra={"dealer_id": str(dealer.id)})

        deleted = session.execute(delete(VehicleRow).where(VehicleRow.dealer_id == dealer.id)).rowcount
        logger.info("Cleared existing demo vehicles", extra={"deleted": deleted})

        vehicles = [generate_vehicle(dealer.id, current_year) for _ in range(num_vehicles)]
        session.add_all(vehicles)
        session.flush()

        logger.info("Seeded vehicles", extra={"count": len(vehicles), "seed": seed})
        for vehicle in vehicles[:5]:
            logger.info(
                "%s %s %s - $%s (%s, %s)",
                vehicle.year,
                vehicle.make,
                vehicle.model,
                vehicle.price,
                vehicle.transmission,
                vehicle.fuel_type,
            )


if __name__ == "__main__":
    configure_logging()
    try:
        seed_vehicles()
    except Exception:
        logger.exception("Error seeding database")
        sys.exit(1)
