import logging
import os
from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import HTTPException as FastAPIHTTPException
from fastapi.middleware.gzip import GZipMiddleware

from app.core.database import create_tables
from app.core.rate_limiter import limiter, custom_rate_limit_handler, RATE_LIMIT_PUBLIC
from slowapi.errors import RateLimitExceeded
from app.core.exceptions import CustomHTTPException, ServiceError
from app.core.schemas import BaseResponse
from app.routes import cards, recharges, payments

# <========== Logging ==========>
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Benefit Cards API",
    version="1.0.0",
    description="Issue, activate, recharge and spend employee benefit cards",
    responses={
        401: {"model": BaseResponse},
        403: {"model": BaseResponse},
        404: {"model": BaseResponse},
        409: {"model": BaseResponse},
        422: {"model": BaseResponse},
        429: {"model": BaseResponse},
        500: {"model": BaseResponse},
    },
)

# <========== Gzip Middleware ==========>
app.add_middleware(GZipMiddleware, minimum_size=1000)  # Compress responses > 1KB

# <========== CORS Configuration ==========>
allowed_origins = os.getenv("ALLOWED_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# <========== Rate limiting middleware ==========>
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, custom_rate_limit_handler)


# <========== API routes ==========>
app.include_router(
    cards.router,
    prefix="/api/v1/cards",
    tags=["Cards"],
    responses={404: {"description": "Not found"}},
)
app.include_router(
    recharges.router,
    prefix="/api/v1/recharges",
    tags=["Recharges"],
)
app.include_router(
    payments.router,
    prefix="/api/v1/payments",
    tags=["Payments"],
)


# <========== Exception Handlers ==========>
# Typed failures and other custom exceptions
@app.exception_handler(CustomHTTPException)
async def custom_http_exception_handler(request: Request, exc: CustomHTTPException):
    if isinstance(exc, ServiceError):
        logger.info(
            "Rejected %s %s: %s %s", request.method, request.url.path, exc.kind, exc.entity
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": exc.detail.get("success", False),
            "message": exc.detail.get("message", "An error occurred"),
            "data": exc.detail.get("data", {}),
            "status_code": exc.status_code,
        },
    )


# Generic HTTPException handler for rate limiting and other cases
@app.exception_handler(FastAPIHTTPException)
async def http_exception_handler(request: Request, exc: FastAPIHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": (
                exc.detail.get("message")
                if isinstance(exc.detail, dict)
                else str(exc.detail)
            ),
            "data": exc.detail.get("data") if isinstance(exc.detail, dict) else None,
            "status_code": exc.status_code,
        },
        headers=exc.headers,
    )


# Anything not raised as a typed failure is an internal error
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "Internal server error",
            "data": None,
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
        },
    )


# <========== System Endpoints ==========>
@app.get("/health", tags=["System"], response_model=BaseResponse)
@limiter.limit(RATE_LIMIT_PUBLIC)
async def health_check(request: Request):
    return {
        "success": True,
        "message": "System is healthy",
        "status_code": status.HTTP_200_OK,
    }


@app.get("/", response_model=BaseResponse, tags=["System"])
@limiter.limit(RATE_LIMIT_PUBLIC)
async def root(request: Request):
    return {
        "success": True,
        "message": "Welcome to the Benefit Cards API. Access /docs or /redoc for documentation.",
        "data": {
            "version": app.version,
            "documentation": {"swagger": "/docs", "redoc": "/redoc"},
        },
        "status_code": status.HTTP_200_OK,
    }


# <========== Application Startup ==========>
if __name__ == "__main__":
    port = int(os.getenv("PORT", 8000))
    workers = int(os.getenv("WORKERS", 1))  # Default to 1 worker for dev
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=port,
        workers=workers,
        reload=os.getenv("RELOAD", "false").lower() == "true",  # Auto-reload in dev
    )
