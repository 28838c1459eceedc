from typing import List, Optional, Protocol
from uuid import UUID
from ..models.filters import GuessFilter
from ..models.guess import Guess, GuessCreate

class GuessRepository(Protocol):
    """Storage operations the guesses routes rely on"""

    async def initialize(self) -> None: ...

    async def close(self) -> None: ...

    async def create(self, data: GuessCreate) -> Guess: ...

    async def find_all(self, guess_filter: GuessFilter) -> List[Guess]: ...

    async def find_by_id(self, guess_id: UUID) -> Optional[Guess]: ...

    async def delete(self, guess: Guess) -> None: ...
