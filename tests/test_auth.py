import time

import jwt
from starlette.requests import Request

from geoguess.core.auth import Allow, Deny, JWTAuthenticator

SECRET = "another-test-secret-that-is-long-enough"


def make_request(authorization=None):
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode("latin-1")))
    return Request({"type": "http", "method": "DELETE", "path": "/guesses/x", "headers": headers})


class TestJWTAuthenticator:
    authenticate = JWTAuthenticator(secret_key=SECRET, algorithm="HS256")

    def test_valid_token_is_allowed(self):
        token = jwt.encode({"sub": "user-1"}, SECRET, algorithm="HS256")

        decision = self.authenticate(make_request(f"Bearer {token}"))

        assert isinstance(decision, Allow)
        assert decision.claims["sub"] == "user-1"

    def test_missing_header_is_denied(self):
        decision = self.authenticate(make_request())

        assert isinstance(decision, Deny)
        assert decision.status_code == 401

    def test_wrong_scheme_is_denied(self):
        decision = self.authenticate(make_request("Basic dXNlcjpwYXNz"))

        assert isinstance(decision, Deny)

    def test_token_signed_with_other_secret_is_denied(self):
        token = jwt.encode({"sub": "user-1"}, "a-completely-different-secret-value", algorithm="HS256")

        decision = self.authenticate(make_request(f"Bearer {token}"))

        assert decision == Deny(401, "Your token is invalid")

    def test_expired_token_is_denied(self):
        token = jwt.encode({"sub": "user-1", "exp": int(time.time()) - 60}, SECRET, algorithm="HS256")

        decision = self.authenticate(make_request(f"Bearer {token}"))

        assert decision == Deny(401, "Your token has expired")
