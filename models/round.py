from datetime import datetime
from pydantic import Field, field_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole_stats import HoleStats

DEFAULT_PARS = [4, 4, 3, 5, 4, 4, 3, 5, 4, 4, 4, 3, 5, 4, 4, 3, 5, 4]
TEE_BOXES = ["Championship", "Back", "Middle", "Forward", "Junior"]


class Round(BaseGolfModel):
    """A round being scored: who played, the pars, and the holes recorded so far."""
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    name: Optional[str] = None
    players: List[str] = Field(default_factory=list)
    pars: List[int] = Field(default_factory=lambda: list(DEFAULT_PARS))
    tee_box: Optional[str] = None
    holes: List[HoleStats] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def blank_name_is_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v

    @field_validator('players')
    @classmethod
    def validate_players(cls, v):
        cleaned = []
        for name in v:
            name = name.strip()
            if name and name not in cleaned:
                cleaned.append(name)
        return cleaned

    @field_validator('pars')
    @classmethod
    def validate_pars(cls, v):
        if len(v) != 18:
            raise ValueError(f"Expected 18 pars, got {len(v)}")
        for i, par in enumerate(v, start=1):
            if not 3 <= par <= 6:
                raise ValueError(f"Par {par} for hole {i} must be 3-6")
        return v

    @field_validator('tee_box')
    @classmethod
    def validate_tee_box(cls, v):
        if v is None:
            return v
        for tee in TEE_BOXES:
            if tee.lower() == v.strip().lower():
                return tee
        raise ValueError(f"Unknown tee box '{v}' (expected one of {', '.join(TEE_BOXES)})")

    def get_hole(self, number: int) -> Optional[HoleStats]:
        """Recorded stats for a hole, if any. Holes are not assumed to be in order."""
        for h in self.holes:
            if h.hole == number:
                return h
        return None

    def par_for(self, number: int) -> Optional[int]:
        if 1 <= number <= len(self.pars):
            return self.pars[number - 1]
        return None

    def total_par(self) -> int:
        return sum(self.pars)

    def front_nine_par(self) -> int:
        return sum(self.pars[:9])

    def back_nine_par(self) -> int:
        return sum(self.pars[9:18])
