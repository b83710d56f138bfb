import time
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from prometheus_client import make_asgi_app
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from shiftboard.api.main import api_router
from shiftboard.core.config import settings
from shiftboard.core.db import engine, init_db
from shiftboard.core.observability import (
    REQUEST_COUNT,
    REQUEST_DURATION,
    get_logger,
    set_correlation_id,
    setup_structured_logging,
)
from shiftboard.domain.shared.exceptions import DomainError, ErrorType
from shiftboard.infrastructure.registry import create_registry_client

logger = get_logger(__name__)


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging, correlation ids and metrics."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        set_correlation_id(correlation_id)

        start_time = time.time()
        method = request.method
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            REQUEST_COUNT.labels(method=method, endpoint=path, status="500").inc()
            REQUEST_DURATION.labels(method=method, endpoint=path).observe(duration)
            logger.error(
                "Request failed",
                method=method,
                path=path,
                duration_seconds=duration,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        duration = time.time() - start_time
        REQUEST_COUNT.labels(
            method=method, endpoint=path, status=str(response.status_code)
        ).inc()
        REQUEST_DURATION.labels(method=method, endpoint=path).observe(duration)
        response.headers["X-Correlation-ID"] = correlation_id

        logger.info(
            "Request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_seconds=duration,
        )
        return response


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_structured_logging()
    init_db(engine)
    app.state.registry = create_registry_client()
    logger.info(
        "Application started",
        project_name=settings.PROJECT_NAME,
        environment=settings.ENVIRONMENT,
        registry=settings.REGISTRY_BASE_URL,
    )
    try:
        yield
    finally:
        app.state.registry.close()
        logger.info("Shutting down application")


_ERROR_STATUS = {
    ErrorType.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorType.NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorType.REGISTRY: status.HTTP_502_BAD_GATEWAY,
    ErrorType.REPOSITORY: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = _ERROR_STATUS.get(
        exc.error_type, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    if status_code >= 500:
        logger.error(
            "Unhandled domain error",
            path=request.url.path,
            **exc.to_dict(),
        )
        message = "An internal error occurred"
    else:
        message = exc.message
    return JSONResponse(
        status_code=status_code, content={"status": "failed", "message": message}
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in error['loc'][1:])}: {error['msg']}"
        for error in errors
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"status": "failed", "message": message or "Invalid request"},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="""
    Shiftboard - Weekly Shift Scheduling API

    Register employees, log them in against the employee registry and manage
    their recurring weekly shifts (three fixed daily slots, Monday to Sunday).
    """,
        version="0.1.0",
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    app.add_middleware(ObservabilityMiddleware)

    if settings.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router)

    if settings.ENABLE_METRICS:
        app.mount("/metrics", make_asgi_app())

    return app


app = create_app()
