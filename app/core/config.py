# app/core/config.py
from typing import Optional
from dotenv import load_dotenv

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, model_validator

load_dotenv()


class Settings(BaseSettings):
    PORT: int = Field(8000)
    LOG_LEVEL: str = Field("INFO")
    LOG_JSON: bool = Field(False)
    STORE_BACKEND: str = Field("supabase")
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_KEY: Optional[str] = None
    BMI_SUGGESTION_LIMIT: int = Field(6, ge=1)
    BMI_SUGGESTIONS_REQUIRED: bool = Field(False)
    DEFAULT_PRODUCT_SLUG: str = Field("berry-nut-energy-bar")
    PRODUCT_REVIEW_LIMIT: int = Field(20, ge=1)

    model_config = {
        "env_file": None,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("STORE_BACKEND")
    def known_backend(cls, v):
        v = v.strip().lower()
        if v not in ("supabase", "memory"):
            raise ValueError("STORE_BACKEND must be 'supabase' or 'memory'")
        return v

    @model_validator(mode="after")
    def supabase_credentials(self):
        if self.STORE_BACKEND == "supabase" and not (self.SUPABASE_URL and self.SUPABASE_SERVICE_KEY):
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_KEY are required for the supabase backend")
        return self


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
