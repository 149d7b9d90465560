# py
import os
from datetime import datetime, timedelta, timezone

import pytest

# main builds its store at import time; keep it off the network
os.environ.setdefault("STORE_BACKEND", "memory")

from app.core.config import Settings
from app.core.errors import StoreError
from app.services.memory_store import InMemoryStore
from main import create_app


def make_product(id, slug, rating, tag, **extra):
    product = {
        "id": id,
        "slug": slug,
        "name": slug.replace("-", " ").title(),
        "description": f"{slug} description",
        "weight_g": 60,
        "price": 99.0,
        "mrp": 120.0,
        "rating": rating,
        "review_count": 10,
        "value_proposition": "High protein",
        "category_tag": tag,
        "image_url": f"/img/{slug}.png",
    }
    product.update(extra)
    return product


PRODUCTS = [
    make_product(1, "berry-nut-energy-bar", 4.3, "maintain"),
    make_product(2, "oat-crunch", 4.9, "maintain"),
    make_product(3, "peanut-power", 4.5, "maintain"),
    make_product(4, "trail-mix", 4.7, "maintain"),
    make_product(5, "date-bites", 4.4, "maintain"),
    make_product(6, "cocoa-clusters", 4.8, "maintain"),
    make_product(7, "seed-bar", 4.6, "maintain"),
    make_product(8, "mass-gainer-shake", 4.2, "gain"),
    make_product(9, "fibre-crisp", 4.1, "loss"),
]


def make_reviews():
    now = datetime.now(timezone.utc)
    return [
        {"id": 1, "product_id": 1, "user_name": "Asha", "review_text": "Great on treks", "rating": 5.0,
         "created_at": now - timedelta(days=3)},
        {"id": 2, "product_id": 1, "user_name": "Ravi", "review_text": "Too sweet", "rating": 3.0,
         "created_at": now - timedelta(hours=2)},
        {"id": 3, "product_id": 8, "user_name": "Meera", "review_text": "Filling", "rating": 4.0,
         "created_at": now - timedelta(days=10)},
    ]


class RecordingStore(InMemoryStore):
    """InMemoryStore that counts calls and can be told to fail."""

    def __init__(self, *args, fail_insert=False, fail_catalog=False, **kwargs):
        super().__init__(*args, **kwargs)
        self.fail_insert = fail_insert
        self.fail_catalog = fail_catalog
        self.calls = []

    def insert_bmi_calculation(self, record):
        self.calls.append("insert_bmi_calculation")
        if self.fail_insert:
            raise StoreError("connection refused")
        return super().insert_bmi_calculation(record)

    def find_products_by_tag(self, tag, limit=6):
        self.calls.append("find_products_by_tag")
        if self.fail_catalog:
            raise StoreError("catalog unavailable")
        return super().find_products_by_tag(tag, limit=limit)


@pytest.fixture
def settings():
    return Settings(STORE_BACKEND="memory")


@pytest.fixture
def store():
    return RecordingStore(products=PRODUCTS, reviews=make_reviews())


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)


@pytest.fixture
def store_factory():
    def factory(**kwargs):
        kwargs.setdefault("products", PRODUCTS)
        kwargs.setdefault("reviews", make_reviews())
        return RecordingStore(**kwargs)
    return factory
