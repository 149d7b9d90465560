# py
"""
BMI arithmetic and banding.

BMI = weight_kg / (height_m)^2, rounded to one decimal (half away from zero).
Bands are left-closed / right-open, so a boundary value belongs to the upper band.
"""
import math
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Tuple

from pydantic import BaseModel

INCH_TO_CM = 2.54
POUND_TO_KG = 0.45359237


class CategoryTag(str, Enum):
    """Product tag used to pick suggestions for a BMI band."""
    GAIN = "gain"
    MAINTAIN = "maintain"
    LOSS = "loss"


class BmiCategory(BaseModel):
    model_config = {"frozen": True}

    category: str
    tag: CategoryTag
    color: str
    background: str
    description: str


UNDER_WEIGHT = BmiCategory(
    category="Under Weight",
    tag=CategoryTag.GAIN,
    color="#00A6AA",
    background="rgba(0, 166, 170, 0.15)",
    description="Based on your BMI, we recommend nutrient-dense meals with increased calorie intake for healthy weight gain.",
)
NORMAL = BmiCategory(
    category="Normal",
    tag=CategoryTag.MAINTAIN,
    color="#2E7D32",
    background="rgba(46, 125, 50, 0.15)",
    description="Great range. We recommend balanced meals to maintain stamina, strength, and hydration on your treks.",
)
OVER_WEIGHT = BmiCategory(
    category="Over Weight",
    tag=CategoryTag.LOSS,
    color="#F57C00",
    background="rgba(245, 124, 0, 0.15)",
    description="We recommend lower-calorie, high-fiber meals with good protein to support gradual fat loss and endurance.",
)
OBESE = BmiCategory(
    category="Obese",
    tag=CategoryTag.LOSS,
    color="#C62828",
    background="rgba(198, 40, 40, 0.15)",
    description="We recommend portion-controlled, high-protein options and consistent activity. Consider medical guidance as needed.",
)

# (exclusive upper bound, category), ascending. The last bound must be +inf.
CATEGORY_TABLE: Tuple[Tuple[float, BmiCategory], ...] = (
    (18.5, UNDER_WEIGHT),
    (25.0, NORMAL),
    (30.0, OVER_WEIGHT),
    (math.inf, OBESE),
)

_CATEGORIES_BY_LABEL = {cat.category: cat for _, cat in CATEGORY_TABLE}


def normalize_units(height: float, weight: float, unit_system: str) -> Tuple[float, float]:
    """Return (height_cm, weight_kg). Only "us" (any case) means inches and pounds."""
    if (unit_system or "").strip().lower() == "us":
        return height * INCH_TO_CM, weight * POUND_TO_KG
    return height, weight


def round_half_up(value: float, places: int = 1) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    if weight_kg <= 0 or height_cm <= 0:
        raise ValueError("Weight and height must be positive")
    height_m = height_cm / 100
    area = height_m * height_m
    if area == 0 or not math.isfinite(area):
        raise ValueError("Height out of range")
    bmi = weight_kg / area
    if not math.isfinite(bmi):
        raise ValueError("BMI value out of range")
    return round_half_up(bmi, 1)


def bmi_category(bmi: float) -> BmiCategory:
    for upper_bound, category in CATEGORY_TABLE:
        if bmi < upper_bound:
            return category
    # NaN compares false against every bound
    raise ValueError(f"BMI value out of range: {bmi!r}")


def tag_for_category(label: str) -> CategoryTag:
    """Recompute the suggestion tag from a stored category label."""
    try:
        return _CATEGORIES_BY_LABEL[label].tag
    except KeyError:
        raise ValueError(f"Unknown BMI category: {label!r}") from None
