from __future__ import annotations

import uuid

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from regret.api.router import api_router
from regret.core.config import settings
from regret.core.errors import AppError
from regret.core.logging import configure_logging, log
from regret.core.response import err
from regret.db.init_db import init_db
from regret.db.schema_check import ensure_schema_up_to_date
from regret.db.session import engine
from regret.middleware.request_context import RequestContextMiddleware

configure_logging()


def validate_security_config() -> None:
    if settings.JWT_SECRET_KEY in settings.INSECURE_DEFAULT_VALUES:
        log.warning(
            "INSECURE_CONFIGURATION",
            field="JWT_SECRET_KEY",
            env=settings.APP_ENV,
            message="Using default JWT secret key in dev environment. This is INSECURE for production!",
        )
    log.info(
        "CORS_CONFIGURATION",
        env=settings.APP_ENV,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
    )


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())


def _format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid input."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


app = FastAPI(
    title="REGRET Backend",
    version="0.1.0",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc",
)
app.state.auth_config = settings.auth_config()

validate_security_config()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-Id"],
)
app.add_middleware(RequestContextMiddleware)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.on_event("startup")
async def on_startup() -> None:
    if settings.APP_ENV == "dev":
        # dev convenience: create tables automatically
        await init_db(engine)
        return
    # stage/prod: alembic must be applied; schema must match head
    await ensure_schema_up_to_date(engine, alembic_ini_path="alembic.ini")


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await engine.dispose()


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/")
async def root():
    return {
        "message": "REGRET Backend API is running successfully!",
        "status": "OK",
        "api_endpoints": [
            f"{settings.API_PREFIX}/auth/signup",
            f"{settings.API_PREFIX}/auth/login",
            f"{settings.API_PREFIX}/goals",
            f"{settings.API_PREFIX}/tasks",
        ],
    }


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    request_id = _request_id(request)
    log.info("request_failed", status_code=exc.status_code, error=type(exc).__name__, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=err(exc.message), headers={"X-Request-Id": request_id})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    request_id = _request_id(request)
    return JSONResponse(
        status_code=400,
        content=err(_format_validation_error(exc), jsonable_encoder(exc.errors())),
        headers={"X-Request-Id": request_id},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    request_id = _request_id(request)
    return JSONResponse(status_code=exc.status_code, content=err(str(exc.detail)), headers={"X-Request-Id": request_id})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    log.exception("unhandled_exception", request_id=request_id, path=str(request.url))
    return JSONResponse(
        status_code=500,
        content=err("Internal server error", str(exc)),
        headers={"X-Request-Id": request_id},
    )
