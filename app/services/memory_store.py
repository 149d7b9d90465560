# py
"""In-memory Store for local development and tests. Data is lost on restart."""
from copy import deepcopy
from datetime import datetime, timezone
from typing import List, Dict, Optional, Any, Iterable


def _by_rating(rows: Iterable[Dict]) -> List[Dict]:
    return sorted(rows, key=lambda r: (-float(r.get("rating") or 0), r["id"]))


class InMemoryStore:
    def __init__(self, products: Iterable[Dict] = (), reviews: Iterable[Dict] = ()):
        self.bmi_calculations: Dict[int, Dict] = {}
        self.products: Dict[int, Dict] = {}
        self.reviews: Dict[int, Dict] = {}
        for p in products:
            self.create_product(p)
        for r in reviews:
            self.create_review(r)

    def insert_bmi_calculation(self, record: Dict[str, Any]) -> int:
        new_id = max(self.bmi_calculations, default=0) + 1
        self.bmi_calculations[new_id] = {**deepcopy(record), "id": new_id, "created_at": datetime.now(timezone.utc)}
        return new_id

    def find_products_by_tag(self, tag: str, limit: int = 6) -> List[Dict]:
        matching = (p for p in self.products.values() if p.get("category_tag") == tag)
        return deepcopy(_by_rating(matching)[:limit])

    def find_similar_products(self, product_id: int, limit: int = 6) -> List[Dict]:
        others = (p for p in self.products.values() if p["id"] != product_id)
        return deepcopy(_by_rating(others)[:limit])

    def list_products(self, descending: bool = False) -> List[Dict]:
        return deepcopy(sorted(self.products.values(), key=lambda p: p["id"], reverse=descending))

    def get_product(self, product_id: int) -> Optional[Dict]:
        product = self.products.get(product_id)
        return deepcopy(product) if product else None

    def get_product_by_slug(self, slug: str) -> Optional[Dict]:
        for product in self.products.values():
            if product.get("slug") == slug:
                return deepcopy(product)
        return None

    def first_product(self) -> Optional[Dict]:
        if not self.products:
            return None
        return deepcopy(self.products[min(self.products)])

    def create_product(self, data: Dict[str, Any]) -> int:
        new_id = data.get("id") or max(self.products, default=0) + 1
        self.products[new_id] = {**deepcopy(data), "id": new_id}
        return new_id

    def update_product(self, product_id: int, fields: Dict[str, Any]) -> None:
        if product_id in self.products:
            self.products[product_id].update(deepcopy(fields))

    def delete_product(self, product_id: int) -> None:
        self.products.pop(product_id, None)
        # mirrors ON DELETE CASCADE on reviews.product_id
        for review_id in [rid for rid, r in self.reviews.items() if r["product_id"] == product_id]:
            del self.reviews[review_id]

    def _with_product_name(self, review: Dict) -> Dict:
        product = self.products.get(review["product_id"]) or {}
        return {**deepcopy(review), "product_name": product.get("name")}

    def list_reviews(self, product_id: Optional[int] = None) -> List[Dict]:
        if product_id is not None:
            rows = [r for r in self.reviews.values() if r["product_id"] == product_id]
            rows.sort(key=lambda r: r["created_at"], reverse=True)
        else:
            rows = sorted(self.reviews.values(), key=lambda r: r["id"], reverse=True)
        return [self._with_product_name(r) for r in rows]

    def get_review(self, review_id: int) -> Optional[Dict]:
        review = self.reviews.get(review_id)
        return self._with_product_name(review) if review else None

    def latest_reviews(self, product_id: int, limit: int = 20) -> List[Dict]:
        rows = [r for r in self.reviews.values() if r["product_id"] == product_id]
        rows.sort(key=lambda r: r["created_at"], reverse=True)
        return [
            {k: deepcopy(r[k]) for k in ("user_name", "review_text", "rating", "created_at")}
            for r in rows[:limit]
        ]

    def create_review(self, data: Dict[str, Any]) -> int:
        new_id = data.get("id") or max(self.reviews, default=0) + 1
        row = {**deepcopy(data), "id": new_id}
        row.setdefault("created_at", datetime.now(timezone.utc))
        self.reviews[new_id] = row
        return new_id

    def update_review(self, review_id: int, fields: Dict[str, Any]) -> None:
        if review_id in self.reviews:
            self.reviews[review_id].update(deepcopy(fields))

    def delete_review(self, review_id: int) -> None:
        self.reviews.pop(review_id, None)
