# product_api/middleware.py
from datetime import datetime, timezone

from fastapi import Request
from loguru import logger

from .config import API_KEY, API_KEY_HEADER, API_PREFIX
from .errors import ApiError, AuthError, render


def _requested_url(request: Request) -> str:
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return path


async def log_requests(request: Request, call_next):
    """Outermost stage: log the request line, and render anything nobody classified."""
    now = datetime.now(timezone.utc).isoformat()
    logger.info(f"[{now}] {request.method} {_requested_url(request)}")

    try:
        return await call_next(request)
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return render(ApiError())


async def require_api_key(request: Request, call_next):
    # Reads are public; every other verb under the API prefix needs the shared secret.
    if request.url.path.startswith(API_PREFIX) and request.method != "GET":
        if request.headers.get(API_KEY_HEADER) != API_KEY:
            return render(AuthError("Invalid or missing API key"))
    return await call_next(request)
