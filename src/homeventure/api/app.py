from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from homeventure.api.routes.address_search import router as address_search_router
from homeventure.api.routes.display import router as display_router
from homeventure.api.routes.enrich import router as enrich_router
from homeventure.api.routes.properties import router as properties_router
from homeventure.api.routes.status import router as status_router
from homeventure.errors import ConfigurationError, StorageUnavailableError, ValidationError

logger = logging.getLogger("homeventure.api")


def health():
    return {"status": "ok"}


app = FastAPI(title="HomeVenture", description="Door-knocking lead tracker")

app.include_router(status_router, prefix="/api")
app.include_router(properties_router, prefix="/api")
app.include_router(enrich_router, prefix="/api")
app.include_router(address_search_router, prefix="/api")
app.include_router(display_router, prefix="/api")


@app.exception_handler(StorageUnavailableError)
def _storage_unavailable(_request: Request, exc: StorageUnavailableError) -> JSONResponse:
    logger.warning("storage unavailable: %s", exc)
    return JSONResponse(status_code=503, content={"error": "KV not available"})


@app.exception_handler(ConfigurationError)
def _configuration_missing(_request: Request, exc: ConfigurationError) -> JSONResponse:
    return JSONResponse(status_code=503, content={"error": str(exc)})


@app.exception_handler(ValidationError)
def _invalid_input(_request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.get("/health")
def health_route():
    return health()
