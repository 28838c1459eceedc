from pydantic import BaseModel
from typing import Any, Dict, Literal, Optional

class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    service: str = "guesses"
    version: str
    uptime: float

class FieldError(BaseModel):
    kind: str
    message: str
    path: str
    value: Optional[Any] = None

class ValidationErrorResponse(BaseModel):
    message: str = "Guess validation failed"
    errors: Dict[str, FieldError]
