"""Punto de entrada de la API usando FastAPI.

`create_app()` construye la aplicación: configura CORS, crea una sola vez los
almacenes de jobs y usuarios (los guarda en `app.state` para inyectarlos en
los handlers), registra los routers y los manejadores de errores.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workshop_queue.api.v1.auth import router as auth_router
from workshop_queue.api.v1.branches import router as branches_router
from workshop_queue.api.v1.jobs import router as jobs_router
from workshop_queue.api.v1.meta import router as meta_router
from workshop_queue.core.config import Settings, get_settings
from workshop_queue.core.enums import StorageBackend
from workshop_queue.services.blob_job_service import BlobJobService
from workshop_queue.services.blob_store import BlobStore
from workshop_queue.services.job_service import JobService
from workshop_queue.services.request_boundary import first_validation_error
from workshop_queue.services.seed import seed_demo_data
from workshop_queue.services.user_service import UserService

logger = logging.getLogger(__name__)


def build_job_service(settings: Settings) -> JobService:
    """Elige el backend de almacenamiento según la configuración."""
    if settings.storage_backend == StorageBackend.BLOB:
        return BlobJobService(
            BlobStore(settings.data_dir),
            all_branches_label=settings.all_branches_label,
            enforce_transitions=settings.enforce_status_transitions,
            seed=settings.seed_demo_data,
        )
    return JobService(
        all_branches_label=settings.all_branches_label,
        enforce_transitions=settings.enforce_status_transitions,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Sólo el primer error, con el nombre del campo
    error = first_validation_error(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": error.message, "field": error.field},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app(
    settings: Optional[Settings] = None,
    job_service: Optional[JobService] = None,
    user_service: Optional[UserService] = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
    )

    # CORS configurable via `settings.allowed_origins` (definido en .env)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(o) for o in settings.allowed_origins],
        allow_credentials=settings.allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.job_service = job_service if job_service is not None else build_job_service(settings)
    app.state.user_service = user_service if user_service is not None else UserService()
    if settings.seed_demo_data:
        seed_demo_data(app.state.job_service, app.state.user_service)

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(jobs_router, prefix="/api/v1")
    app.include_router(branches_router, prefix="/api/v1")
    app.include_router(meta_router, prefix="/api/v1")
    return app


app = create_app()
