"""
Pytest fixtures for the guesses service.

The app is built with an in-memory repository and a recording notifier so the
HTTP contract can be exercised without PostgreSQL or Kafka.
"""

import uuid
from datetime import datetime, timezone

import jwt
import pytest
from fastapi.testclient import TestClient

from geoguess.core.auth import JWTAuthenticator
from geoguess.main import create_app
from geoguess.models import (
    Combined,
    Guess,
    NoFilter,
    ScoreAtLeast,
    UserEquals,
    UserIn,
)

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"
BASE_URL = "https://geoguess.example.com"


def matches(guess, guess_filter) -> bool:
    if isinstance(guess_filter, NoFilter):
        return True
    if isinstance(guess_filter, ScoreAtLeast):
        return guess.score >= guess_filter.minimum
    if isinstance(guess_filter, UserEquals):
        return guess.user_id == guess_filter.user_id
    if isinstance(guess_filter, UserIn):
        return guess.user_id in guess_filter.user_ids
    if isinstance(guess_filter, Combined):
        return all(matches(guess, f) for f in guess_filter.filters)
    raise TypeError(guess_filter)


class InMemoryGuessRepository:
    def __init__(self):
        self.guesses = {}
        self.calls = []
        self.failing = False

    async def initialize(self):
        pass

    async def close(self):
        pass

    def _record(self, name):
        self.calls.append(name)
        if self.failing:
            raise ConnectionError("store unavailable")

    async def create(self, data):
        self._record("create")
        guess = Guess(
            id=uuid.uuid4(),
            created_at=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self.guesses[guess.id] = guess
        return guess

    async def find_all(self, guess_filter):
        self._record("find_all")
        return [g for g in self.guesses.values() if matches(g, guess_filter)]

    async def find_by_id(self, guess_id):
        self._record("find_by_id")
        return self.guesses.get(guess_id)

    async def delete(self, guess):
        self._record("delete")
        self.guesses.pop(guess.id, None)


class RecordingNotifier:
    def __init__(self):
        self.events = []

    async def start(self):
        pass

    async def close(self):
        pass

    async def publish(self, event_name, payload):
        self.events.append((event_name, payload))


@pytest.fixture
def repository():
    return InMemoryGuessRepository()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(repository, notifier):
    app = create_app(
        repository=repository,
        notifier=notifier,
        authenticator=JWTAuthenticator(secret_key=TEST_SECRET, algorithm="HS256"),
        base_url=BASE_URL,
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    token = jwt.encode({"sub": "admin"}, TEST_SECRET, algorithm="HS256")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def guess_payload():
    return {
        "location": {"type": "Point", "coordinates": [-25.8, 40.8]},
        "thumbnail_id": "T1",
        "user_id": "U1",
        "score": 50,
    }
