# backend/spotbnb/errors.py
"""
Error types raised by the booking rules and the route handlers, plus the
handlers that turn them into JSON responses.

Every response body carries ``message``; ``errors`` is a field -> message map
when there is one. Outside production the body also carries ``title`` and the
formatted ``stack``.
"""

import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for errors that map straight onto an HTTP response."""

    status = 500
    title = "Server Error"

    def __init__(
        self,
        message: str,
        *,
        errors: Optional[Dict[str, str]] = None,
        status: Optional[int] = None,
        title: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors
        if status is not None:
            self.status = status
        if title is not None:
            self.title = title


class ValidationError(ApiError):
    status = 400
    title = "Bad Request"


class AuthenticationError(ApiError):
    status = 401
    title = "Unauthorized"


class ForbiddenError(ApiError):
    status = 403
    title = "Forbidden"


class NotFoundError(ApiError):
    status = 404
    title = "Not Found"


class ConflictError(ApiError):
    """Booking overlaps and duplicate reviews."""

    status = 403
    title = "Conflict"


# フィールド単位のメッセージ（入力検証）
FIELD_MESSAGES: Dict[str, str] = {
    "address": "Street address is required",
    "city": "City is required",
    "state": "State is required",
    "country": "Country is required",
    "lat": "Latitude is not valid",
    "lng": "Longitude is not valid",
    "name": "Name is required",
    "description": "Description is required",
    "price": "Price per day is required",
    "review": "Review text is required",
    "stars": "Stars must be an integer from 1 to 5",
    "startDate": "Start date is required",
    "endDate": "End date is required",
    "url": "Image url is required",
    "email": "Invalid email",
    "firstName": "First Name is required",
    "lastName": "Last Name is required",
    "password": "Password must be between 6 and 72 characters",
    "credential": "Email is required",
    "page": "Page must be between 1 and 10000",
    "size": "Size must be between 1 and 100",
    "minLat": "Minimum latitude is invalid",
    "maxLat": "Maximum latitude is invalid",
    "minLng": "Minimum longitude is invalid",
    "maxLng": "Maximum longitude is invalid",
    "minPrice": "Minimum price must be greater than or equal to 0",
    "maxPrice": "Maximum price must be greater than or equal to 0",
}

# メッセージをそのまま返すカスタムエラー種別
_VERBATIM_TYPES = {"date_order"}

# 値はあるが日付として読めない
_DATE_PARSE_TYPES = {
    "date_parsing",
    "date_from_datetime_parsing",
    "date_from_datetime_inexact",
    "date_type",
}
INVALID_DATE_MESSAGES: Dict[str, str] = {
    "startDate": "Start date is not a valid date",
    "endDate": "End date is not a valid date",
}


def field_errors(exc: RequestValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for err in exc.errors():
        err_type = err.get("type")
        if err_type == "json_invalid":
            # loc は ("body", <文字位置>) になるので body に寄せる
            errors.setdefault("body", "Request body is not valid JSON")
            continue
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        field = loc[-1] if loc else "body"
        if err_type in _VERBATIM_TYPES:
            message = err.get("msg", "")
        elif err_type in _DATE_PARSE_TYPES and field in INVALID_DATE_MESSAGES:
            message = INVALID_DATE_MESSAGES[field]
        else:
            message = FIELD_MESSAGES.get(field, err.get("msg", "Invalid value"))
        errors.setdefault(field, message)
    return errors


def _body(
    request: Request,
    *,
    title: str,
    message: str,
    errors: Optional[Any] = None,
    exc: Optional[BaseException] = None,
) -> Dict[str, Any]:
    if request.app.state.settings.is_production:
        body: Dict[str, Any] = {"message": message}
        if errors:
            body["errors"] = errors
        return body
    body = {"title": title, "message": message}
    if errors:
        body["errors"] = errors
    if exc is not None:
        body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return body


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        logger.info("%s %s rejected: %s %s", request.method, request.url.path, exc.status, exc.message)
        return JSONResponse(
            status_code=exc.status,
            content=_body(request, title=exc.title, message=exc.message, errors=exc.errors, exc=exc),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = field_errors(exc)
        logger.info("%s %s invalid input: %s", request.method, request.url.path, errors)
        return JSONResponse(
            status_code=400,
            content=_body(request, title="Bad Request", message="Bad Request", errors=errors),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            message = "The requested resource couldn't be found."
            content = _body(
                request,
                title="Resource Not Found",
                message=message,
                errors={"message": message},
            )
        else:
            content = _body(request, title="Error", message=str(exc.detail))
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
        # DB の詳細は本番では返さない
        errors = None if request.app.state.settings.is_production else {"database": str(exc.orig)}
        return JSONResponse(
            status_code=400,
            content=_body(request, title="Validation error", message="Validation error", errors=errors),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_body(request, title="Server Error", message="Internal Server Error", exc=exc),
        )
