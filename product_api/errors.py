# product_api/errors.py
from typing import Any, Dict, Optional, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """A failure that maps onto an HTTP status and the JSON error envelope."""

    status: int = 500

    def __init__(self, message: str = "Internal Server Error", status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status

    @property
    def kind(self) -> str:
        # Unclassified failures surface under the generic "Error" kind.
        if type(self) is ApiError:
            return "Error"
        return type(self).__name__

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.kind, "message": self.message}


class NotFoundError(ApiError):
    status = 404


class ValidationError(ApiError):
    status = 400


class AuthError(ApiError):
    status = 401


def render(result: Union[ApiError, Any], status_code: int = 200) -> JSONResponse:
    """Turn a handler outcome (a value or an ApiError) into the HTTP response."""
    if isinstance(result, ApiError):
        return JSONResponse(status_code=result.status, content=result.to_dict())
    return JSONResponse(status_code=status_code, content=jsonable_encoder(result))
