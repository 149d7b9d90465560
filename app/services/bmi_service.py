# py
"""
BMI evaluation: validate -> normalize -> calculate -> classify -> persist -> suggest.

The calculation record is always written before suggestions are read. A failed
insert fails the request. A failed suggestion read only fails the request when
`suggestions_required` is set; otherwise the result comes back with no
suggestions and `suggestions_available=False`.
"""
from loguru import logger

from app.core.errors import StoreError, ValidationError
from app.schemas import BmiRequest, BmiCalculation, BmiResponse, ProductSummary
from app.services.store import Store
from app.utils.bmi import normalize_units, calculate_bmi, bmi_category
from app.utils.validators import validate_bmi_input


def evaluate_bmi(
    req: BmiRequest,
    store: Store,
    suggestion_limit: int = 6,
    suggestions_required: bool = False,
) -> BmiResponse:
    validate_bmi_input(req.age, req.height, req.weight)

    height_cm, weight_kg = normalize_units(req.height, req.weight, req.unit)
    try:
        bmi = calculate_bmi(weight_kg, height_cm)
    except ValueError as exc:
        raise ValidationError("Invalid BMI input.") from exc
    meta = bmi_category(bmi)

    record = BmiCalculation(
        age=req.age,
        height_cm=height_cm,
        weight_kg=weight_kg,
        gender=req.gender,
        unit_system=req.unit,
        exercise_index=req.exerciseIndex,
        bmi_value=bmi,
        bmi_category=meta.category,
    )
    calc_id = store.insert_bmi_calculation(record.model_dump())
    logger.info("BMI calculation {} stored: bmi={} category={}", calc_id, bmi, meta.category)

    suggestions = []
    available = True
    try:
        rows = store.find_products_by_tag(meta.tag.value, limit=suggestion_limit)
        suggestions = [ProductSummary.model_validate(r) for r in rows[:suggestion_limit]]
    except StoreError as exc:
        if suggestions_required:
            raise
        logger.warning("Suggestions unavailable for tag {}: {}", meta.tag.value, exc)
        available = False

    return BmiResponse(
        bmi=bmi,
        category=meta.category,
        color=meta.color,
        background=meta.background,
        description=meta.description,
        suggestions=suggestions,
        suggestions_available=available,
    )
