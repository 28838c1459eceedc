import math
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from ..models.response import FieldError, ValidationErrorResponse
from ..logger import get_logger

logger = get_logger()

_LOCATION_ROOTS = ('body', 'query', 'path', 'header', 'cookie')

class GuessNotFound(Exception):
    def __init__(self, guess_id: str):
        super().__init__(f"No guess found with ID {guess_id}")
        self.guess_id = guess_id

def _field_error(error: dict) -> FieldError:
    loc = list(error.get('loc', ()))
    root = loc[0] if loc else 'body'
    if loc and loc[0] in _LOCATION_ROOTS:
        loc = loc[1:]
    if error['type'] == 'json_invalid':
        loc = []
    path = '.'.join(str(part) for part in loc) or root

    if error['type'] == 'missing':
        return FieldError(
            kind='required',
            message=f"Path `{path}` is required.",
            path=path
        )
    return FieldError(
        kind=error['type'],
        message=error.get('msg', 'Invalid value'),
        path=path,
        value=_json_safe(error.get('input'))
    )

def _json_safe(value):
    # JSON has no NaN or Infinity literal
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value

def validation_errors(exc: RequestValidationError) -> ValidationErrorResponse:
    """Group validation errors by field path, keeping the first error of each field"""
    errors = {}
    for error in exc.errors():
        field_error = _field_error(error)
        errors.setdefault(field_error.path, field_error)
    return ValidationErrorResponse(errors=errors)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = validation_errors(exc)
    logger.info(f"Rejected {request.method} {request.url.path}: invalid {', '.join(body.errors)}")
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder(body)
    )

async def guess_not_found_handler(request: Request, exc: GuessNotFound):
    return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)

def register_exception_handlers(app):
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(GuessNotFound, guess_not_found_handler)
