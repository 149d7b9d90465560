# py
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from app.api.deps import get_store
from app.core.errors import ValidationError
from app.schemas import ReviewCreate, ReviewUpdate, CreatedResponse, MessageResponse
from app.services.store import Store

router = APIRouter()


def _require_product(store: Store, product_id: int):
    if not store.get_product(product_id):
        raise ValidationError("Invalid product_id")


@router.get("/reviews")
async def list_reviews(product_id: Optional[int] = Query(None, gt=0), store: Store = Depends(get_store)):
    return {"reviews": store.list_reviews(product_id=product_id)}


@router.get("/reviews/{review_id}")
async def get_review(review_id: int = Path(..., gt=0), store: Store = Depends(get_store)):
    review = store.get_review(review_id)
    if not review:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")
    return {"review": review}


@router.post("/reviews", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_review(body: ReviewCreate, store: Store = Depends(get_store)):
    _require_product(store, body.product_id)
    new_id = store.create_review(body.model_dump())
    return CreatedResponse(id=new_id, message="Review created")


@router.put("/reviews/{review_id}", response_model=MessageResponse)
async def update_review(body: ReviewUpdate, review_id: int = Path(..., gt=0), store: Store = Depends(get_store)):
    if body.product_id is not None:
        _require_product(store, body.product_id)
    fields = body.model_dump(exclude_none=True)
    if not fields:
        raise ValidationError("No fields to update")
    store.update_review(review_id, fields)
    return MessageResponse(message="Review updated")


@router.delete("/reviews/{review_id}", response_model=MessageResponse)
async def delete_review(review_id: int = Path(..., gt=0), store: Store = Depends(get_store)):
    store.delete_review(review_id)
    return MessageResponse(message="Review deleted")
