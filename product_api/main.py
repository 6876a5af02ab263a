# product_api/main.py
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .database import ProductStore
from .errors import ApiError, NotFoundError, ValidationError, render
from .logs import configure_logging
from .middleware import log_requests, require_api_key
from .routes import router


async def _validation_error(request: Request, exc: RequestValidationError):
    return render(ValidationError("Invalid product data"))


async def _http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return render(NotFoundError("Route not found"))
    return render(ApiError(str(exc.detail), status=exc.status_code))


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    configure_logging(get_settings().log_level)

    app = FastAPI(title="Product API")
    app.state.store = store if store is not None else ProductStore()

    # Starlette runs the last-added middleware first: logging wraps authentication.
    app.middleware("http")(require_api_key)
    app.middleware("http")(log_requests)

    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)

    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    logger.info(f"Server is running on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
