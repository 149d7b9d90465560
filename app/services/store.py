# py
"""
Persistence contract shared by the Supabase and in-memory backends.

Rows travel as plain dicts, the way the Supabase client returns them.
Every backend failure surfaces as StoreError.
"""
from typing import Protocol, List, Dict, Optional, Any

from loguru import logger
from app.core.config import Settings


class Store(Protocol):
    # BMI log
    def insert_bmi_calculation(self, record: Dict[str, Any]) -> int: ...

    # catalog, ordered by rating desc then id asc
    def find_products_by_tag(self, tag: str, limit: int = 6) -> List[Dict]: ...
    def find_similar_products(self, product_id: int, limit: int = 6) -> List[Dict]: ...

    # products
    def list_products(self, descending: bool = False) -> List[Dict]: ...
    def get_product(self, product_id: int) -> Optional[Dict]: ...
    def get_product_by_slug(self, slug: str) -> Optional[Dict]: ...
    def first_product(self) -> Optional[Dict]: ...
    def create_product(self, data: Dict[str, Any]) -> int: ...
    def update_product(self, product_id: int, fields: Dict[str, Any]) -> None: ...
    def delete_product(self, product_id: int) -> None: ...

    # reviews; list/get rows carry product_name
    def list_reviews(self, product_id: Optional[int] = None) -> List[Dict]: ...
    def get_review(self, review_id: int) -> Optional[Dict]: ...
    def latest_reviews(self, product_id: int, limit: int = 20) -> List[Dict]: ...
    def create_review(self, data: Dict[str, Any]) -> int: ...
    def update_review(self, review_id: int, fields: Dict[str, Any]) -> None: ...
    def delete_review(self, review_id: int) -> None: ...


def build_store(settings: Settings) -> Store:
    if settings.STORE_BACKEND == "memory":
        from app.services.memory_store import InMemoryStore
        logger.warning("Using in-memory store; data is lost on restart")
        return InMemoryStore()

    from app.db.client import create_supabase
    from app.services.supabase_service import SupabaseStore
    logger.info("Using Supabase store at {}", settings.SUPABASE_URL)
    return SupabaseStore(create_supabase(settings))
