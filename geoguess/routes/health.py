import time
from fastapi import APIRouter
from .. import __version__
from ..models.response import HealthResponse
from ..logger import get_logger

logger = get_logger()
router = APIRouter()

# Process start, reported as uptime
start_time = time.time()

@router.get("/health", response_model=HealthResponse)
@router.head("/health")
async def health_check():
    """Liveness probe for the guesses service"""
    response = HealthResponse(
        version=__version__,
        uptime=round(time.time() - start_time, 3)
    )
    logger.debug(f"Health check: up {response.uptime}s")
    return response
