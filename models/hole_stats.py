from datetime import datetime
from pydantic import Field, field_validator
from typing import Optional
from uuid import UUID

from .base import BaseGolfModel


def normalize_round_id(value: str) -> str:
    """Canonical text form of a round ID ("6F9619FF8B86..." -> "6f9619ff-8b86-...").

    IDs that are not UUIDs are returned unchanged.
    """
    try:
        return str(UUID(str(value)))
    except ValueError:
        return value


class HoleStats(BaseGolfModel):
    """Recorded stats for one hole of one round, keyed by (round_id, hole)."""
    round_id: str
    hole: int = Field(..., ge=1, le=18)
    strokes: int = Field(0, ge=0)
    putts: int = Field(0, ge=0)
    within_100: bool = False
    fairway: bool = False
    gir: bool = False
    hazard: bool = False
    balls_lost: int = Field(0, ge=0)
    updated_at: Optional[datetime] = None

    @field_validator("round_id")
    @classmethod
    def canonical_round_id(cls, v: str) -> str:
        return normalize_round_id(v)

    @classmethod
    def blank(cls, round_id: str, hole: int) -> "HoleStats":
        """Zeroed record used the first time a hole is touched."""
        return cls(round_id=round_id, hole=hole)

    @property
    def is_scored(self) -> bool:
        return self.strokes > 0

    def to_par(self, par: Optional[int]) -> Optional[int]:
        """Strokes relative to par (+2, -1, etc.). None until the hole is scored."""
        if not self.is_scored or par is None:
            return None
        return self.strokes - par
