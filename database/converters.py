"""Conversion between asyncpg rows and the scorecard models.

Rows never leave the database package; everything above it sees
Round / HoleStats only.
"""

from typing import Optional
from uuid import UUID

from models import HoleStats, Round
from database.exceptions import NotFoundError


def to_uuid(value: str) -> UUID:
    """Parse a round ID. A malformed ID cannot match any row."""
    try:
        return UUID(str(value))
    except ValueError as e:
        raise NotFoundError(f"Round {value} not found") from e


# ================================================================
# Row -> Model (reads)
# ================================================================

def hole_stats_from_row(row) -> HoleStats:
    """scoring.hole_stats row -> HoleStats model."""
    return HoleStats(
        round_id=str(row["round_id"]),
        hole=row["hole"],
        strokes=row["strokes"],
        putts=row["putts"],
        within_100=row["within_100"],
        fairway=row["fairway"],
        gir=row["gir"],
        hazard=row["hazard"],
        balls_lost=row["balls_lost"],
        updated_at=row["updated_at"],
    )


def round_from_rows(round_row, hole_rows: Optional[list] = None) -> Round:
    """scoring.rounds row + its hole_stats rows -> Round, holes sorted by number."""
    holes = sorted(
        [hole_stats_from_row(r) for r in hole_rows or []],
        key=lambda h: h.hole,
    )
    return Round(
        id=str(round_row["id"]),
        created_at=round_row["created_at"],
        name=round_row["name"],
        players=list(round_row["players"] or []),
        pars=list(round_row["pars"]),
        tee_box=round_row["tee_box"],
        holes=holes,
    )


# ================================================================
# Model -> Row (writes)
# ================================================================

def round_to_row(round_: Round) -> dict:
    """Round -> dict for scoring.rounds INSERT."""
    return {
        "name": round_.name,
        "players": list(round_.players),
        "pars": list(round_.pars),
        "tee_box": round_.tee_box,
    }


def hole_stats_to_row(stats: HoleStats) -> tuple:
    """HoleStats -> positional args for the scoring.hole_stats upsert."""
    return (
        to_uuid(stats.round_id), stats.hole,
        stats.strokes, stats.putts,
        stats.within_100, stats.fairway, stats.gir, stats.hazard,
        stats.balls_lost, stats.updated_at,
    )
