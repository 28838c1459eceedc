import asyncpg
import asyncio
from ..config import database
from ..logger import get_logger

logger = get_logger()

class DatabaseConnection:
    def __init__(self):
        self.pool = None
        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def initialize(self):
        """Initialize the connection pool and the guesses table"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return

            try:
                self.pool = await asyncpg.create_pool(
                    host=database.HOST,
                    port=database.PORT,
                    database=database.DATABASE,
                    user=database.USER,
                    password=database.PASSWORD,
                    min_size=database.MIN_POOL_SIZE,
                    max_size=database.MAX_POOL_SIZE,
                    command_timeout=database.COMMAND_TIMEOUT,
                    max_inactive_connection_lifetime=300.0,
                    setup=self._setup_connection
                )

                async with self.pool.acquire() as conn:
                    await conn.execute('''
                        CREATE TABLE IF NOT EXISTS guesses (
                            id UUID PRIMARY KEY,
                            user_id TEXT NOT NULL,
                            thumbnail_id TEXT NOT NULL,
                            score DOUBLE PRECISION NOT NULL,
                            longitude DOUBLE PRECISION NOT NULL,
                            latitude DOUBLE PRECISION NOT NULL,
                            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
                        )
                    ''')
                    await conn.execute('''
                        CREATE INDEX IF NOT EXISTS idx_guesses_user
                        ON guesses(user_id)
                    ''')
                    await conn.execute('''
                        CREATE INDEX IF NOT EXISTS idx_guesses_score
                        ON guesses(score)
                    ''')

                self._initialized = True
                logger.info("Database connection initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize database connection: {e}")
                await self.close()
                raise

    async def _setup_connection(self, connection):
        """Setup connection with proper settings"""
        await connection.execute('SET statement_timeout = 30000')
        await connection.execute('SET idle_in_transaction_session_timeout = 30000')

    async def close(self):
        """Close database connections"""
        if self.pool:
            await self.pool.close()
            self.pool = None
        self._initialized = False

    async def get_pool(self) -> asyncpg.Pool:
        """Return the pool, initializing it on first use"""
        if not self._initialized:
            await self.initialize()
        return self.pool
