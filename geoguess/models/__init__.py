from .guess import GeoPoint, Guess, GuessCreate
from .filters import (
    Combined,
    GuessFilter,
    NoFilter,
    ScoreAtLeast,
    UserEquals,
    UserIn,
    build_guess_filter,
    is_valid_id,
    is_valid_reference,
)
from .response import FieldError, HealthResponse, ValidationErrorResponse
