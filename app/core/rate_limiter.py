from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse
from app.core.auth import API_KEY_HEADER
import hashlib
import os

RATE_LIMIT_DEFAULT = os.getenv("RATE_LIMIT_DEFAULT", "100/hour")
RATE_LIMIT_COMPANY = os.getenv("RATE_LIMIT_COMPANY", "1000/hour")
RATE_LIMIT_PUBLIC = os.getenv("RATE_LIMIT_PUBLIC", "1000/hour")
RATE_LIMIT_ACTIVATION = os.getenv("RATE_LIMIT_ACTIVATION", "10/minute")


# Custom key function for rate limiting
def get_rate_limit_key(request: Request) -> str:
    api_key = request.headers.get(API_KEY_HEADER)
    if api_key:
        # Keys are secrets, only a digest goes to the limiter storage
        digest = hashlib.sha256(api_key.encode()).hexdigest()[:16]
        return f"company:{digest}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_rate_limit_key,
    storage_uri=os.getenv("RATE_LIMIT_STORAGE_URI", "memory://"),
    default_limits=[RATE_LIMIT_DEFAULT],
    enabled=os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true",
)


async def custom_rate_limit_handler(request: Request, exc: RateLimitExceeded):
    retry_after = 60
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "message": "Too many requests. Please try again later.",
            "data": {"retry_after": retry_after, "limit": str(exc.detail)},
            "status_code": 429,
        },
        headers={"Retry-After": str(retry_after)},
    )
