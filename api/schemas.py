"""API request and response models."""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional

from models import DEFAULT_PARS, HoleStats


class CreateRoundRequest(BaseModel):
    name: Optional[str] = None
    players: List[str] = Field(default_factory=list)
    pars: List[int] = Field(default_factory=lambda: list(DEFAULT_PARS))
    tee_box: Optional[str] = "Middle"


class LineEntryRequest(BaseModel):
    """Quick entry: a typed line or voice transcript, plus the selected hole if any."""
    line: str
    selected_hole: Optional[int] = Field(None, ge=1, le=18)


class ParseErrorResponse(BaseModel):
    kind: str
    message: str


class HoleRowResponse(BaseModel):
    """One scorecard cell, recorded or not."""
    hole: int
    par: Optional[int] = None
    strokes: Optional[int] = None
    putts: Optional[int] = None
    to_par: Optional[int] = None
    score_type: Optional[str] = None
    within_100: bool = False
    fairway: bool = False
    gir: bool = False
    hazard: bool = False
    balls_lost: int = 0


class ScorecardTotals(BaseModel):
    holes_played: int
    front_nine: Optional[int] = None
    back_nine: Optional[int] = None
    total_strokes: Optional[int] = None
    front_nine_par: int
    back_nine_par: int
    total_par: int
    to_par: Optional[int] = None
    total_putts: int
    putts_per_hole: Optional[float] = None
    fairways_hit: int
    fairway_chances: int
    total_gir: int
    gir_percentage: Optional[float] = None
    within_100: int
    hazards: int
    balls_lost: int


class RoundSummaryResponse(BaseModel):
    """Lightweight round for list views."""
    id: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None
    players: List[str] = Field(default_factory=list)
    tee_box: Optional[str] = None
    holes_played: int = 0
    total_strokes: Optional[int] = None
    to_par: Optional[int] = None


class RoundDetailResponse(RoundSummaryResponse):
    pars: List[int]
    holes: List[HoleStats]
    scorecard: List[HoleRowResponse]
    totals: ScorecardTotals


class DashboardResponse(BaseModel):
    """Aggregated stats across rounds."""
    total_rounds: int
    scoring_average: Optional[float] = None
    best_round: Optional[int] = None
    best_round_id: Optional[str] = None
    average_putts: Optional[float] = None
    total_balls_lost: int = 0
    recent_rounds: List[RoundSummaryResponse]
