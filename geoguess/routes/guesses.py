from typing import List, Optional
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Response
from ..core.auth import require_authentication
from ..core.dependencies import get_base_url, get_notifier, get_repository, load_guess
from ..database import GuessRepository
from ..kafka import NEW_GUESS_EVENT, Notifier
from ..models.filters import build_guess_filter
from ..models.guess import Guess, GuessCreate
from ..logger import get_logger

logger = get_logger()
router = APIRouter(prefix="/guesses")

@router.get("", response_model=List[Guess])
async def list_guesses(
    scored_at_least: Optional[str] = Query(None, alias="scoredAtLeast"),
    user_ids: List[str] = Query([], alias="userID"),
    repository: GuessRepository = Depends(get_repository)
):
    """
    List guesses.

    - **scoredAtLeast**: only guesses with a score greater than or equal to this value
    - **userID**: only guesses made by this user; repeat it to match any of several users
    """
    guess_filter = build_guess_filter(scored_at_least, user_ids)
    try:
        guesses = await repository.find_all(guess_filter)
        logger.info(f"Listed {len(guesses)} guesses with {guess_filter}")
        return guesses
    except Exception as e:
        logger.error(f"Error listing guesses: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.post("", response_model=Guess, status_code=201)
async def create_guess(
    data: GuessCreate,
    response: Response,
    background_tasks: BackgroundTasks,
    repository: GuessRepository = Depends(get_repository),
    notifier: Notifier = Depends(get_notifier),
    base_url: str = Depends(get_base_url)
):
    """
    Register a new guess.

    - **user_id**: the user who made the guess
    - **thumbnail_id**: the thumbnail the guess was made for
    - **score**: points obtained by the guess
    - **location**: GeoJSON point `{"type": "Point", "coordinates": [longitude, latitude]}`
    """
    try:
        guess = await repository.create(data)
    except Exception as e:
        logger.error(f"Error creating guess: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    logger.info(f"Created guess {guess.id} for user {guess.user_id}")
    response.headers["Location"] = f"{base_url}/guesses/{guess.id}"
    # Runs once the response has been sent
    background_tasks.add_task(notifier.publish, NEW_GUESS_EVENT, guess.model_dump_json())
    return guess

@router.get("/{guess_id}", response_model=Guess)
async def get_guess(guess: Guess = Depends(load_guess)):
    """Retrieve a single guess"""
    return guess

@router.delete("/{guess_id}", status_code=204, response_class=Response)
async def delete_guess(
    guess: Guess = Depends(load_guess),
    _: dict = Depends(require_authentication),
    repository: GuessRepository = Depends(get_repository)
):
    """Permanently delete a guess"""
    try:
        await repository.delete(guess)
    except Exception as e:
        logger.error(f"Error deleting guess {guess.id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    logger.debug(f'Deleted guess "{guess.created_at.isoformat()}"')
    return Response(status_code=204)
