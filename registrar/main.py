# registrar/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.exc import IntegrityError

from registrar.api.v1.router import api_router
from registrar.core.config import settings
from registrar.core.errors import (
    DuplicateEnrollmentError,
    InvalidStatusError,
    NotFoundError,
    PermissionDeniedError,
    RegistrarError,
)
from registrar.core.logging import RequestLogMiddleware, setup_logging
from registrar.db.bootstrap import run_migrations_and_seed

setup_logging()
logger = logging.getLogger("registrar")

_STATUS_BY_ERROR = {
    NotFoundError: 404,
    DuplicateEnrollmentError: 400,
    InvalidStatusError: 400,
    PermissionDeniedError: 403,
}

@asynccontextmanager
async def lifespan(app: FastAPI):
    run_migrations_and_seed()
    logger.info("startup complete")
    yield

api = FastAPI(
    title="Campus Registration API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

api.add_middleware(RequestLogMiddleware)
api.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# /metrics (Prometheus)
Instrumentator().instrument(api).expose(api, include_in_schema=False, should_gzip=True)

api.include_router(api_router, prefix="/api")

@api.get("/healthz", tags=["health"])
def healthz():
    return {"status": "ok"}

@api.exception_handler(RegistrarError)
def handle_domain_error(request: Request, exc: RegistrarError):
    return JSONResponse(status_code=_STATUS_BY_ERROR.get(type(exc), 400), content={"detail": exc.message})

@api.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )

@api.exception_handler(IntegrityError)
def handle_integrity_error(request: Request, exc: IntegrityError):
    return JSONResponse(
        status_code=409,
        content={"code": "UNIQUE_VIOLATION", "message": "Duplicate record.", "details": str(getattr(exc, "orig", exc))},
    )

@api.exception_handler(Exception)
def handle_unexpected(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"code": "INTERNAL_ERROR", "message": "Internal server error."},
    )
