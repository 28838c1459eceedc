from typing import Optional
from fastapi import FastAPI
from .config import app as app_config
from .core.auth import Authenticator, JWTAuthenticator
from .core.errors import register_exception_handlers
from .core.events import lifespan
from .database import GuessRepository, PostgresGuessRepository
from .kafka import KafkaNotifier, Notifier
from .routes import guesses, health

def create_app(
    repository: Optional[GuessRepository] = None,
    notifier: Optional[Notifier] = None,
    authenticator: Optional[Authenticator] = None,
    base_url: Optional[str] = None
) -> FastAPI:
    """Build the application; collaborators default to PostgreSQL, Kafka and JWT"""
    application = FastAPI(
        title="Geoguess Guesses Service",
        description="Guesses on where a photograph was taken, stored in PostgreSQL and announced on Kafka",
        version="1.0.0",
        lifespan=lifespan
    )

    application.state.repository = repository or PostgresGuessRepository()
    application.state.notifier = notifier or KafkaNotifier()
    application.state.authenticator = authenticator or JWTAuthenticator()
    application.state.base_url = base_url or app_config.base_url

    register_exception_handlers(application)
    application.include_router(guesses.router, tags=["guesses"])
    application.include_router(health.router, tags=["health"])
    return application

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "geoguess.main:app",
        host="0.0.0.0",
        port=8000,
        loop="uvloop",
        http="httptools",
        log_level=app_config.log_level.lower()
    )
