# py
from typing import List, Dict, Optional, Any, Callable

import httpx
from loguru import logger
from postgrest.exceptions import APIError
from supabase import Client

from app.core.errors import StoreError

SUGGESTION_COLUMNS = "id, slug, name, weight_g, price, mrp, rating, review_count, value_proposition, category_tag, image_url"
PAGE_REVIEW_COLUMNS = "user_name, review_text, rating, created_at"


def _flatten_review(row: Dict) -> Dict:
    row = dict(row)
    product = row.pop("products", None) or {}
    row["product_name"] = product.get("name")
    return row


class SupabaseStore:
    """Store backed by the bmi_calculations, products and reviews tables."""

    def __init__(self, client: Client):
        self.client = client

    def _run(self, op: str, query: Callable[[], Any]) -> List[Dict]:
        try:
            resp = query()
        except (APIError, httpx.HTTPError) as exc:
            message = getattr(exc, "message", None) or str(exc)
            logger.error("Supabase {} error: {}", op, message)
            raise StoreError(message) from exc
        return resp.data or []

    def insert_bmi_calculation(self, record: Dict[str, Any]) -> int:
        rows = self._run("insert_bmi_calculation", lambda: self.client.table("bmi_calculations").insert(record).execute())
        if not rows:
            raise StoreError("BMI calculation insert returned no row")
        return int(rows[0]["id"])

    def find_products_by_tag(self, tag: str, limit: int = 6) -> List[Dict]:
        return self._run(
            "find_products_by_tag",
            lambda: self.client.table("products").select(SUGGESTION_COLUMNS)
            .eq("category_tag", tag).order("rating", desc=True).order("id").limit(limit).execute(),
        )

    def find_similar_products(self, product_id: int, limit: int = 6) -> List[Dict]:
        return self._run(
            "find_similar_products",
            lambda: self.client.table("products").select("*")
            .neq("id", product_id).order("rating", desc=True).order("id").limit(limit).execute(),
        )

    def list_products(self, descending: bool = False) -> List[Dict]:
        return self._run(
            "list_products",
            lambda: self.client.table("products").select("*").order("id", desc=descending).execute(),
        )

    def _one_product(self, op: str, column: str, value: Any) -> Optional[Dict]:
        rows = self._run(op, lambda: self.client.table("products").select("*").eq(column, value).limit(1).execute())
        return rows[0] if rows else None

    def get_product(self, product_id: int) -> Optional[Dict]:
        return self._one_product("get_product", "id", product_id)

    def get_product_by_slug(self, slug: str) -> Optional[Dict]:
        return self._one_product("get_product_by_slug", "slug", slug)

    def first_product(self) -> Optional[Dict]:
        rows = self._run("first_product", lambda: self.client.table("products").select("*").order("id").limit(1).execute())
        return rows[0] if rows else None

    def create_product(self, data: Dict[str, Any]) -> int:
        rows = self._run("create_product", lambda: self.client.table("products").insert(data).execute())
        if not rows:
            raise StoreError("Product insert returned no row")
        return int(rows[0]["id"])

    def update_product(self, product_id: int, fields: Dict[str, Any]) -> None:
        self._run("update_product", lambda: self.client.table("products").update(fields).eq("id", product_id).execute())

    def delete_product(self, product_id: int) -> None:
        self._run("delete_product", lambda: self.client.table("products").delete().eq("id", product_id).execute())

    def list_reviews(self, product_id: Optional[int] = None) -> List[Dict]:
        def query():
            q = self.client.table("reviews").select("*, products(name)")
            if product_id is not None:
                return q.eq("product_id", product_id).order("created_at", desc=True).execute()
            return q.order("id", desc=True).execute()

        return [_flatten_review(r) for r in self._run("list_reviews", query)]

    def get_review(self, review_id: int) -> Optional[Dict]:
        rows = self._run(
            "get_review",
            lambda: self.client.table("reviews").select("*, products(name)").eq("id", review_id).limit(1).execute(),
        )
        return _flatten_review(rows[0]) if rows else None

    def latest_reviews(self, product_id: int, limit: int = 20) -> List[Dict]:
        return self._run(
            "latest_reviews",
            lambda: self.client.table("reviews").select(PAGE_REVIEW_COLUMNS)
            .eq("product_id", product_id).order("created_at", desc=True).limit(limit).execute(),
        )

    def create_review(self, data: Dict[str, Any]) -> int:
        rows = self._run("create_review", lambda: self.client.table("reviews").insert(data).execute())
        if not rows:
            raise StoreError("Review insert returned no row")
        return int(rows[0]["id"])

    def update_review(self, review_id: int, fields: Dict[str, Any]) -> None:
        self._run("update_review", lambda: self.client.table("reviews").update(fields).eq("id", review_id).execute())

    def delete_review(self, review_id: int) -> None:
        self._run("delete_review", lambda: self.client.table("reviews").delete().eq("id", review_id).execute())
