from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import asyncpg

from database.repositories import HoleRepositoryDB, RoundRepositoryDB

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


class DatabaseManager:
    """
    Single entry point to the repositories, shared across the API.

    Notes:
    - Raw SQL via asyncpg (no ORM) to keep behavior explicit.
    - `holes` satisfies the HoleStore protocol the entry recorder expects.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool
        self.rounds = RoundRepositoryDB(pool)
        self.holes = HoleRepositoryDB(pool)

    async def apply_schema(self, schema_path: Optional[Path] = None) -> None:
        """Create the scoring schema and tables if they do not exist."""
        path = Path(schema_path or SCHEMA_PATH).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Schema file not found: {path}")

        sql_text = path.read_text(encoding="utf-8")
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                await conn.execute(sql_text)
        logger.info("Applied schema from %s", path)
