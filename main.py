# py
from typing import Optional
from fastapi import FastAPI
import uvicorn
from app.core.config import Settings, get_settings
from app.core.logging import configure_logging
from app.middleware import register_middleware
from app.api.router import api_router
from app.services.store import Store, build_store
from fastapi.responses import JSONResponse

SERVICE_NAME = "nomad-spoon-api"
VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=SERVICE_NAME, version=VERSION)
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)
    register_middleware(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/health", response_class=JSONResponse)
    async def health_check():
        return {"status": "ok", "service": SERVICE_NAME, "version": VERSION}

    return app


settings = get_settings()
configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=int(settings.PORT), log_level=settings.LOG_LEVEL.lower())
