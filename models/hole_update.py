from pydantic import BaseModel, Field
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .hole_stats import HoleStats

HOLE_RANGE = (1, 18)
STROKES_RANGE = (1, 30)
PUTTS_RANGE = (0, 10)


class PartialHoleUpdate(BaseModel):
    """A transient delta for one hole. Unset fields mean "not mentioned".

    balls_lost_increment is added to the stored total rather than replacing it.
    Parsed lines only ever produce a non-negative increment; the full-form
    path may produce a negative one to correct an earlier total.
    """
    hole: int = Field(..., ge=HOLE_RANGE[0], le=HOLE_RANGE[1])
    strokes: Optional[int] = Field(None, ge=STROKES_RANGE[0], le=STROKES_RANGE[1])
    putts: Optional[int] = Field(None, ge=PUTTS_RANGE[0], le=PUTTS_RANGE[1])
    within_100: Optional[bool] = None
    fairway: Optional[bool] = None
    gir: Optional[bool] = None
    hazard: Optional[bool] = None
    balls_lost_increment: Optional[int] = None

    def mentioned_fields(self) -> set:
        """Names of the fields the update actually carries."""
        return set(self.model_dump(exclude_none=True))


class HoleForm(BaseModel):
    """Full-form entry describing the whole hole; balls lost is a total.

    Only strokes is required. Anything left out is recorded as 0 / False.
    """
    strokes: int = Field(..., ge=STROKES_RANGE[0], le=STROKES_RANGE[1])
    putts: int = Field(0, ge=PUTTS_RANGE[0], le=PUTTS_RANGE[1])
    within_100: bool = False
    fairway: bool = False
    gir: bool = False
    hazard: bool = False
    balls_lost: int = Field(0, ge=0)

    def to_update(self, hole: int, existing: Optional["HoleStats"] = None) -> PartialHoleUpdate:
        """Convert to a fully-populated update whose balls-lost value is a delta
        against the currently stored total."""
        stored = existing.balls_lost if existing else 0
        return PartialHoleUpdate(
            hole=hole,
            strokes=self.strokes,
            putts=self.putts,
            within_100=self.within_100,
            fairway=self.fairway,
            gir=self.gir,
            hazard=self.hazard,
            balls_lost_increment=self.balls_lost - stored,
        )
