from typing import Protocol

NEW_GUESS_EVENT = "newGuess"

class Notifier(Protocol):
    """Broadcast channel for guess events"""

    async def start(self) -> None: ...

    async def close(self) -> None: ...

    async def publish(self, event_name: str, payload: str) -> None: ...
