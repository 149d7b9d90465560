# py
from fastapi import APIRouter, Depends
from app.api.deps import get_store, get_app_settings
from app.core.config import Settings
from app.schemas import BmiRequest, BmiResponse
from app.services.bmi_service import evaluate_bmi
from app.services.store import Store

router = APIRouter()


@router.post("/bmi", response_model=BmiResponse)
async def calculate(body: BmiRequest, store: Store = Depends(get_store), settings: Settings = Depends(get_app_settings)):
    return evaluate_bmi(
        body,
        store,
        suggestion_limit=settings.BMI_SUGGESTION_LIMIT,
        suggestions_required=settings.BMI_SUGGESTIONS_REQUIRED,
    )
