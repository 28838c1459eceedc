import asyncio
from contextlib import asynccontextmanager
from fastapi import FastAPI
from ..logger import get_logger

logger = get_logger()

async def startup_event(app: FastAPI):
    """Open the store and the notifier injected into the app"""
    try:
        await app.state.repository.initialize()
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    try:
        await app.state.notifier.start()
    except Exception as e:
        # Publishing is best-effort; the producer is retried on the next publish
        logger.error(f"Failed to start notifier, continuing without it: {e}")

async def shutdown_event(app: FastAPI):
    """Close database and notifier connections"""
    try:
        async with asyncio.timeout(5.0):
            await app.state.notifier.close()
            await app.state.repository.close()
            logger.info("Database connections closed")
    except asyncio.TimeoutError:
        logger.warning("Shutdown timed out")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")

@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event(app)
    try:
        yield
    finally:
        await shutdown_event(app)
