# py
from typing import Optional
from fastapi import APIRouter, Depends, Query
from app.api.deps import get_store, get_app_settings
from app.core.config import Settings
from app.services.catalog_service import build_product_page
from app.services.store import Store

router = APIRouter()


@router.get("/product")
async def get_product_page(
    slug: Optional[str] = Query(None),
    show_all: Optional[str] = Query(None, alias="all"),
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    if show_all == "1":
        return {"products": store.list_products()}
    page = build_product_page(store, slug, settings.DEFAULT_PRODUCT_SLUG, review_limit=settings.PRODUCT_REVIEW_LIMIT)
    return page
