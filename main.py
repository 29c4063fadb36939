import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

import config
from database import init_db
from routers import all_routers
from schemas.common import ErrorResponse
from services.exceptions import ServiceError, VersionConflictError
from utils.logging_config import logger

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")

# Documented on every route; the handlers below produce these bodies
ERROR_RESPONSES = {
    code: {"model": ErrorResponse, "description": description}
    for code, description in (
        (400, "Invalid request"),
        (401, "No token provided"),
        (403, "Invalid token or role"),
        (404, "Not found"),
        (409, "Conflict"),
    )
}


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
    msg = err.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.JWT_SECRET == config.DEV_JWT_SECRET:
        logger.warning("JWT_SECRET is not set; using the development secret")
    if config.AUTO_CREATE_TABLES:
        init_db()
    logger.info("LandlordOS API ready")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="LandlordOS API",
        version="1.0.0",
        description="Property, tenant and rent-ledger management for landlords",
        lifespan=lifespan,
        responses=ERROR_RESPONSES,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials="*" not in config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request log + last-resort 500
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error at %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"error": "Internal server error"})
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    # Error bodies are always {"error": message}
    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (401, 403, 500):
            logger.warning("HTTP %s at %s - %s", exc.status_code, request.url.path, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _first_validation_message(exc)})

    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError):
        if isinstance(exc, VersionConflictError):
            logger.warning(
                "Version conflict on %s: client had %s, stored %s",
                exc.entity, exc.expected, exc.current,
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    for router in all_routers:
        app.include_router(router)

    # Dashboard SPA; registered last so API routes win
    if os.path.isdir(STATIC_DIR):
        app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="dashboard")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=config.IS_DEV)
