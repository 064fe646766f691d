"""Round API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError
from typing import List

from analytics.stats import hole_rows, round_summary
from database.db_manager import DatabaseManager
from api.dependencies import get_db
from api.schemas import (
    CreateRoundRequest,
    HoleRowResponse,
    RoundDetailResponse,
    RoundSummaryResponse,
    ScorecardTotals,
)
from models import Round

router = APIRouter()


def summarize_round(r: Round) -> RoundSummaryResponse:
    """Project a full Round into a lightweight summary."""
    totals = round_summary(r)
    return RoundSummaryResponse(
        id=r.id,
        name=r.name,
        created_at=r.created_at,
        players=r.players,
        tee_box=r.tee_box,
        holes_played=totals["holes_played"],
        total_strokes=totals["total_strokes"],
        to_par=totals["to_par"],
    )


def round_detail(r: Round) -> RoundDetailResponse:
    summary = summarize_round(r)
    return RoundDetailResponse(
        **summary.model_dump(),
        pars=r.pars,
        holes=r.holes,
        scorecard=[HoleRowResponse(**row) for row in hole_rows(r)],
        totals=ScorecardTotals(**round_summary(r)),
    )


@router.post("", response_model=RoundDetailResponse, status_code=201)
async def create_round(req: CreateRoundRequest, db: DatabaseManager = Depends(get_db)):
    try:
        round_ = Round(**req.model_dump())
    except ValidationError as e:
        raise HTTPException(422, e.errors()[0]["msg"])
    created = await db.rounds.create_round(round_)
    return round_detail(created)


@router.get("", response_model=List[RoundSummaryResponse])
async def list_rounds(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: DatabaseManager = Depends(get_db),
):
    rounds = await db.rounds.list_rounds(limit=limit, offset=offset)
    return [summarize_round(r) for r in rounds]


@router.get("/{round_id}", response_model=RoundDetailResponse)
async def get_round(round_id: str, db: DatabaseManager = Depends(get_db)):
    round_ = await db.rounds.get_round(round_id)
    if not round_:
        raise HTTPException(404, "Round not found")
    return round_detail(round_)


@router.delete("/{round_id}", status_code=204)
async def delete_round(round_id: str, db: DatabaseManager = Depends(get_db)):
    deleted = await db.rounds.delete_round(round_id)
    if not deleted:
        raise HTTPException(404, "Round not found")
