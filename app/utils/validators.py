# py
import math
from typing import Any

from app.core.errors import ValidationError


def coerce_int(value: Any, default: int = 0) -> int:
    """Lenient integer coercion: None or unparsable input gives the default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default


def coerce_float(value: Any, default: float = 0.0) -> float:
    """Lenient float coercion; inf and nan count as unparsable."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return result if math.isfinite(result) else default


def validate_bmi_input(age: int, height: float, weight: float):
    if not (age > 0 and height > 0 and weight > 0):
        raise ValidationError("Invalid BMI input.")
    if not (math.isfinite(height) and math.isfinite(weight)):
        raise ValidationError("Invalid BMI input.")
