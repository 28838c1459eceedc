from .base import GuessRepository
from .connection import DatabaseConnection
from .guess_repository import PostgresGuessRepository, compile_filter
