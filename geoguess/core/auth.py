import jwt
from dataclasses import dataclass, field
from typing import Protocol, Union
from fastapi import HTTPException, Request, status
from ..config import auth
from ..logger import get_logger

logger = get_logger()

@dataclass(frozen=True)
class Allow:
    claims: dict = field(default_factory=dict)

@dataclass(frozen=True)
class Deny:
    status_code: int
    detail: str

AuthDecision = Union[Allow, Deny]

class Authenticator(Protocol):
    def __call__(self, request: Request) -> AuthDecision: ...

class JWTAuthenticator:
    """Accepts requests carrying `Authorization: Bearer <jwt>` signed with the shared secret"""

    def __init__(self, secret_key: str = auth.secret_key, algorithm: str = auth.algorithm):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def __call__(self, request: Request) -> AuthDecision:
        raw = (request.headers.get("Authorization") or "").strip()
        if not raw:
            return Deny(status.HTTP_401_UNAUTHORIZED, "Authorization header is missing")

        parts = raw.split(" ", 1)
        if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
            return Deny(status.HTTP_401_UNAUTHORIZED, "Authorization header is not a bearer token")

        try:
            claims = jwt.decode(parts[1].strip(), self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            return Deny(status.HTTP_401_UNAUTHORIZED, "Your token has expired")
        except jwt.InvalidTokenError:
            return Deny(status.HTTP_401_UNAUTHORIZED, "Your token is invalid")

        return Allow(claims)

def require_authentication(request: Request) -> dict:
    """Run the app's authenticator in front of a handler; a denial becomes the response"""
    authenticator: Authenticator = request.app.state.authenticator
    decision = authenticator(request)
    if isinstance(decision, Deny):
        logger.info(f"Denied {request.method} {request.url.path}: {decision.detail}")
        raise HTTPException(
            status_code=decision.status_code,
            detail=decision.detail,
            headers={"WWW-Authenticate": "Bearer"}
        )
    return decision.claims
