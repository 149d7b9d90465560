# py
from fastapi import APIRouter, Depends, HTTPException, Path, status
from app.api.deps import get_store
from app.core.errors import ValidationError
from app.schemas import ProductCreate, ProductUpdate, CreatedResponse, MessageResponse
from app.services.store import Store

router = APIRouter()


@router.get("/products")
async def list_products(store: Store = Depends(get_store)):
    return {"products": store.list_products(descending=True)}


@router.get("/products/{product_id}")
async def get_product(product_id: int = Path(..., gt=0), store: Store = Depends(get_store)):
    product = store.get_product(product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return {"product": product}


@router.post("/products", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_product(body: ProductCreate, store: Store = Depends(get_store)):
    new_id = store.create_product(body.model_dump(mode="json"))
    return CreatedResponse(id=new_id, message="Product created")


@router.put("/products/{product_id}", response_model=MessageResponse)
async def update_product(body: ProductUpdate, product_id: int = Path(..., gt=0), store: Store = Depends(get_store)):
    fields = body.model_dump(mode="json", exclude_none=True)
    if not fields:
        raise ValidationError("No fields to update")
    store.update_product(product_id, fields)
    return MessageResponse(message="Product updated")


@router.delete("/products/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: int = Path(..., gt=0), store: Store = Depends(get_store)):
    store.delete_product(product_id)
    return MessageResponse(message="Product deleted")
