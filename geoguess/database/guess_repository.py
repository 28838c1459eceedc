import uuid
from typing import List, Optional, Tuple
from ..models.filters import (
    Combined,
    GuessFilter,
    NoFilter,
    ScoreAtLeast,
    UserEquals,
    UserIn,
)
from ..models.guess import Guess, GuessCreate
from ..logger import get_logger
from .connection import DatabaseConnection

logger = get_logger()

_COLUMNS = 'id, user_id, thumbnail_id, score, longitude, latitude, created_at'

def compile_filter(guess_filter: GuessFilter, params: Optional[list] = None) -> Tuple[str, list]:
    """Turn a guess filter into a WHERE condition with asyncpg positional parameters"""
    if params is None:
        params = []

    if isinstance(guess_filter, NoFilter):
        return 'TRUE', params
    if isinstance(guess_filter, ScoreAtLeast):
        params.append(guess_filter.minimum)
        return f'score >= ${len(params)}', params
    if isinstance(guess_filter, UserEquals):
        params.append(guess_filter.user_id)
        return f'user_id = ${len(params)}', params
    if isinstance(guess_filter, UserIn):
        # An empty list matches no rows
        params.append(sorted(guess_filter.user_ids))
        return f'user_id = ANY(${len(params)}::text[])', params
    if isinstance(guess_filter, Combined):
        conditions = []
        for sub_filter in guess_filter.filters:
            condition, params = compile_filter(sub_filter, params)
            conditions.append(condition)
        return ' AND '.join(conditions) or 'TRUE', params

    raise TypeError(f"Unsupported guess filter: {guess_filter!r}")

class PostgresGuessRepository:
    def __init__(self, db_connection: Optional[DatabaseConnection] = None):
        self.db = db_connection or DatabaseConnection()

    async def initialize(self):
        await self.db.initialize()

    async def close(self):
        await self.db.close()

    async def create(self, data: GuessCreate) -> Guess:
        """Insert a new guess; the id and creation time are assigned here"""
        pool = await self.db.get_pool()
        row = await pool.fetchrow(f'''
            INSERT INTO guesses (id, user_id, thumbnail_id, score, longitude, latitude)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {_COLUMNS}
        ''', uuid.uuid4(), data.user_id, data.thumbnail_id, data.score,
            data.location.longitude, data.location.latitude)
        return Guess.from_record(row)

    async def find_all(self, guess_filter: GuessFilter) -> List[Guess]:
        pool = await self.db.get_pool()
        condition, params = compile_filter(guess_filter)
        rows = await pool.fetch(f'''
            SELECT {_COLUMNS}
            FROM guesses
            WHERE {condition}
            ORDER BY created_at
        ''', *params)
        return [Guess.from_record(row) for row in rows]

    async def find_by_id(self, guess_id: uuid.UUID) -> Optional[Guess]:
        pool = await self.db.get_pool()
        row = await pool.fetchrow(f'''
            SELECT {_COLUMNS}
            FROM guesses
            WHERE id = $1
        ''', guess_id)
        if not row:
            return None
        return Guess.from_record(row)

    async def delete(self, guess: Guess):
        pool = await self.db.get_pool()
        await pool.execute('DELETE FROM guesses WHERE id = $1', guess.id)
