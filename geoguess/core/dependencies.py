from uuid import UUID
from fastapi import Depends, HTTPException, Path, Request
from ..database import GuessRepository
from ..kafka import Notifier
from ..models.filters import is_valid_id
from ..models.guess import Guess
from ..logger import get_logger
from .errors import GuessNotFound

logger = get_logger()

def get_repository(request: Request) -> GuessRepository:
    return request.app.state.repository

def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier

def get_base_url(request: Request) -> str:
    return request.app.state.base_url.rstrip('/')

async def load_guess(
    guess_id: str = Path(...),
    repository: GuessRepository = Depends(get_repository)
) -> Guess:
    """Resolve the guess named in the URL path, or answer 404"""
    if not is_valid_id(guess_id):
        raise GuessNotFound(guess_id)

    try:
        guess = await repository.find_by_id(UUID(guess_id))
    except Exception as e:
        logger.error(f"Error loading guess {guess_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    if guess is None:
        raise GuessNotFound(guess_id)
    return guess
