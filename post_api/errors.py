"""Translate result values into HTTP responses.

Two failure kinds share the ``{"status": int, "message": str}`` envelope:
not-found answers 404 and a request body with a missing or null field
answers 403.
"""
import logging
from typing import Any, Callable

from fastapi import Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError as PydanticValidationError

from post_api.results import Failure, NotFound, Ok, ValidationFailure
from post_api.schemas import ApiError

logger = logging.getLogger(__name__)

STATUS_BY_FAILURE = {
    NotFound: status.HTTP_404_NOT_FOUND,
    ValidationFailure: status.HTTP_403_FORBIDDEN,
}


def error_response(failure: Failure) -> JSONResponse:
    code = STATUS_BY_FAILURE[type(failure)]
    body = ApiError(status=code, message=failure.message)
    return JSONResponse(status_code=code, content=body.model_dump())


def render(result: Ok[Any] | Failure, on_ok: Callable[[Any], Response]) -> Response:
    if isinstance(result, Ok):
        return on_ok(result.value)
    return error_response(result)


# required field absent or null
FIELD_ERROR_TYPES = {'missing', 'string_type'}


def is_field_error(error: dict) -> bool:
    loc = error.get('loc') or ()
    return len(loc) >= 2 and loc[0] == 'body' and error.get('type') in FIELD_ERROR_TYPES


def validation_failure_from(exc: RequestValidationError) -> ValidationFailure:
    """Rebuild pydantic's own combined error text for the rejected body fields."""
    line_errors = []
    for error in exc.errors():
        line_error = {'type': error['type'], 'loc': tuple(error['loc'][1:]), 'input': error.get('input')}
        if error.get('ctx'):
            line_error['ctx'] = error['ctx']
        line_errors.append(line_error)
    combined = PydanticValidationError.from_exception_data('body', line_errors)
    return ValidationFailure(str(combined))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed bodies and path/query errors keep FastAPI's default 422
    errors = exc.errors()
    if not errors or not all(is_field_error(e) for e in errors):
        return await request_validation_exception_handler(request, exc)
    failure = validation_failure_from(exc)
    logger.warning('Rejected body on %s %s: %s', request.method, request.url.path, failure.message)
    return error_response(failure)
