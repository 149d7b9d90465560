# py
from fastapi import APIRouter
from app.api.routes import bmi, products, admin_products, admin_reviews

api_router = APIRouter()
api_router.include_router(bmi.router, prefix="", tags=["bmi"])
api_router.include_router(products.router, prefix="", tags=["products"])
api_router.include_router(admin_products.router, prefix="/admin", tags=["admin"])
api_router.include_router(admin_reviews.router, prefix="/admin", tags=["admin"])
