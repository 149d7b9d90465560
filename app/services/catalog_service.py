# py
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import HTTPException, status
from pydantic import TypeAdapter

from app.schemas import ProductPage
from app.services.store import Store


def created_label(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Relative age of a review, floored at one day: "1 day ago", "5 days ago"."""
    now = now or datetime.now(timezone.utc)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    days = max(1, abs(now - created_at).days)
    return "1 day ago" if days == 1 else f"{days} days ago"


_TIMESTAMP = TypeAdapter(datetime)


def _parse_ts(value) -> datetime:
    # PostgREST trims trailing zeros from fractional seconds
    return _TIMESTAMP.validate_python(value)


def resolve_product(store: Store, slug: Optional[str], default_slug: str) -> Dict:
    slug = (slug or "").strip() or default_slug
    product = store.get_product_by_slug(slug) or store.first_product()
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No product data found. Please seed the database first.",
        )
    return product


def build_product_page(
    store: Store,
    slug: Optional[str],
    default_slug: str,
    review_limit: int = 20,
    now: Optional[datetime] = None,
) -> ProductPage:
    product = resolve_product(store, slug, default_slug)

    reviews: List[Dict] = []
    for row in store.latest_reviews(product["id"], limit=review_limit):
        created = _parse_ts(row["created_at"])
        reviews.append({**row, "created_at": created, "created_label": created_label(created, now)})

    return ProductPage(
        product=product,
        similar=store.find_similar_products(product["id"], limit=6),
        reviews=reviews,
        suggestions=store.find_products_by_tag(product["category_tag"], limit=6),
    )
