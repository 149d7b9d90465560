# py
from pydantic import BaseModel, Field, field_validator
from typing import Optional, Any, List
from datetime import datetime

from app.utils.bmi import CategoryTag
from app.utils.validators import coerce_int, coerce_float


class BmiRequest(BaseModel):
    # Numeric fields are coerced leniently; missing or garbage values become 0
    # and are rejected by the evaluator, not by request parsing.
    age: int = 0
    height: float = 0.0
    weight: float = 0.0
    gender: str = "Unknown"
    unit: str = "Metric"
    exerciseIndex: int = 2

    @field_validator("age", mode="before")
    def coerce_age(cls, v: Any) -> int:
        return coerce_int(v)

    @field_validator("height", "weight", mode="before")
    def coerce_measure(cls, v: Any) -> float:
        return coerce_float(v)

    @field_validator("exerciseIndex", mode="before")
    def coerce_exercise(cls, v: Any) -> int:
        return coerce_int(v, default=2)

    @field_validator("gender", mode="before")
    def coerce_gender(cls, v: Any) -> str:
        return "Unknown" if v is None else str(v)

    @field_validator("unit", mode="before")
    def coerce_unit(cls, v: Any) -> str:
        return "Metric" if v is None else str(v)


class BmiCalculation(BaseModel):
    age: int
    height_cm: float
    weight_kg: float
    gender: str
    unit_system: str
    exercise_index: int
    bmi_value: float
    bmi_category: str


class ProductSummary(BaseModel):
    id: int
    slug: str
    name: str
    weight_g: int
    price: float
    mrp: float
    rating: float
    review_count: int
    value_proposition: str
    category_tag: CategoryTag
    image_url: Optional[str] = None


class Product(ProductSummary):
    description: Optional[str] = None


class BmiResponse(BaseModel):
    bmi: float
    category: str
    color: str
    background: str
    description: str
    suggestions: List[ProductSummary] = Field(default_factory=list)
    suggestions_available: bool = True


class ProductCreate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    slug: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str
    weight_g: int
    price: float
    mrp: float
    rating: float
    review_count: int
    value_proposition: str
    category_tag: CategoryTag
    image_url: Optional[str] = None


class ProductUpdate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    slug: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    weight_g: Optional[int] = None
    price: Optional[float] = None
    mrp: Optional[float] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    value_proposition: Optional[str] = None
    category_tag: Optional[CategoryTag] = None
    image_url: Optional[str] = None


class ReviewCreate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    product_id: int
    user_name: str
    review_text: str
    rating: float


class ReviewUpdate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    product_id: Optional[int] = None
    user_name: Optional[str] = None
    review_text: Optional[str] = None
    rating: Optional[float] = None


class ProductReview(BaseModel):
    user_name: str
    review_text: str
    rating: float
    created_at: datetime
    created_label: str


class ProductPage(BaseModel):
    product: Product
    similar: List[Product]
    reviews: List[ProductReview]
    suggestions: List[Product]


class CreatedResponse(BaseModel):
    id: int
    message: str


class MessageResponse(BaseModel):
    message: str
