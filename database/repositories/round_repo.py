"""CRUD operations for scoring.rounds and their holes."""

import asyncpg
from typing import List, Optional

from models import Round
from database.converters import round_from_rows, round_to_row, to_uuid
from database.exceptions import DuplicateError, IntegrityError, NotFoundError


class RoundRepositoryDB:
    """Async CRUD for rounds. Holes are written through HoleRepositoryDB."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def _assemble_round(self, conn, round_row) -> Round:
        """Build a full Round (with recorded holes) from a round row."""
        hole_rows = await conn.fetch(
            """SELECT * FROM scoring.hole_stats
               WHERE round_id = $1 ORDER BY hole""",
            round_row["id"],
        )
        return round_from_rows(round_row, hole_rows)

    # ================================================================
    # Read
    # ================================================================

    async def get_round(self, round_id: str) -> Optional[Round]:
        """Get a round with its recorded holes."""
        try:
            key = to_uuid(round_id)
        except NotFoundError:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM scoring.rounds WHERE id = $1", key
            )
            if not row:
                return None
            return await self._assemble_round(conn, row)

    async def list_rounds(self, *, limit: int = 20, offset: int = 0) -> List[Round]:
        """Rounds newest first, each with its holes."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM scoring.rounds
                   ORDER BY created_at DESC
                   LIMIT $1 OFFSET $2""",
                limit, offset,
            )
            return [await self._assemble_round(conn, r) for r in rows]

    # ================================================================
    # Create
    # ================================================================

    async def create_round(self, round_: Round) -> Round:
        """Insert a round. Any holes on the model are ignored; they are recorded
        one at a time through the entry paths."""
        data = round_to_row(round_)
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    """INSERT INTO scoring.rounds (name, players, pars, tee_box)
                       VALUES ($1, $2, $3, $4) RETURNING *""",
                    data["name"], data["players"], data["pars"], data["tee_box"],
                )
                return round_from_rows(row, [])
        except asyncpg.UniqueViolationError as e:
            raise DuplicateError(str(e)) from e
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(str(e)) from e

    # ================================================================
    # Delete
    # ================================================================

    async def delete_round(self, round_id: str) -> bool:
        """Delete a round and its holes (CASCADE). Returns True if deleted."""
        try:
            key = to_uuid(round_id)
        except NotFoundError:
            return False
        async with self._pool.acquire() as conn:
            result = await conn.execute(
                "DELETE FROM scoring.rounds WHERE id = $1", key
            )
            return result == "DELETE 1"
