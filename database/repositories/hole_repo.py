"""Reads and upserts for scoring.hole_stats."""

import asyncpg
from datetime import datetime, timezone
from typing import List, Optional

from models import HoleStats
from database.converters import hole_stats_from_row, hole_stats_to_row, to_uuid
from database.exceptions import IntegrityError, NotFoundError


class HoleRepositoryDB:
    """Async storage for per-hole stats, keyed by (round_id, hole).

    Satisfies the HoleStore protocol used by entry.recorder.
    """

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get_hole(self, round_id: str, hole: int) -> Optional[HoleStats]:
        """Stored stats for one hole, or None if the hole was never touched."""
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                """SELECT * FROM scoring.hole_stats
                   WHERE round_id = $1 AND hole = $2""",
                to_uuid(round_id), hole,
            )
            return hole_stats_from_row(row) if row else None

    async def list_holes(self, round_id: str) -> List[HoleStats]:
        """All recorded holes for a round, in hole order."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM scoring.hole_stats
                   WHERE round_id = $1 ORDER BY hole""",
                to_uuid(round_id),
            )
            return [hole_stats_from_row(r) for r in rows]

    # ================================================================
    # Write
    # ================================================================

    async def put_hole(self, stats: HoleStats) -> HoleStats:
        """Insert or replace the record for (round_id, hole). Last write wins."""
        if stats.updated_at is None:
            stats = stats.model_copy(update={"updated_at": datetime.now(timezone.utc)})
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    """INSERT INTO scoring.hole_stats
                       (round_id, hole, strokes, putts, within_100, fairway,
                        gir, hazard, balls_lost, updated_at)
                       VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
                       ON CONFLICT (round_id, hole)
                       DO UPDATE SET strokes = EXCLUDED.strokes,
                                     putts = EXCLUDED.putts,
                                     within_100 = EXCLUDED.within_100,
                                     fairway = EXCLUDED.fairway,
                                     gir = EXCLUDED.gir,
                                     hazard = EXCLUDED.hazard,
                                     balls_lost = EXCLUDED.balls_lost,
                                     updated_at = EXCLUDED.updated_at
                       RETURNING *""",
                    *hole_stats_to_row(stats),
                )
                return hole_stats_from_row(row)
        except asyncpg.ForeignKeyViolationError as e:
            raise NotFoundError(f"Round {stats.round_id} not found") from e
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(str(e)) from e
