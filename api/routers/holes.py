"""Hole entry endpoints: quick text/voice lines and the full form."""

from fastapi import APIRouter, Depends, HTTPException, Path
from typing import List

from database.db_manager import DatabaseManager
from database.exceptions import NotFoundError
from entry import HoleSelection, ParseFailure, record_form, record_line
from api.dependencies import get_db
from api.schemas import LineEntryRequest, ParseErrorResponse
from models import HoleForm, HoleStats

router = APIRouter()


@router.get("/{round_id}/holes", response_model=List[HoleStats])
async def list_holes(round_id: str, db: DatabaseManager = Depends(get_db)):
    if not await db.rounds.get_round(round_id):
        raise HTTPException(404, "Round not found")
    return await db.holes.list_holes(round_id)


@router.post(
    "/{round_id}/entry",
    response_model=HoleStats,
    responses={422: {"model": ParseErrorResponse}},
)
async def enter_line(
    round_id: str,
    req: LineEntryRequest,
    db: DatabaseManager = Depends(get_db),
):
    """Parse a free-text line and merge it into the hole it names (or the selected hole)."""
    selection = HoleSelection(req.selected_hole) if req.selected_hole is not None else None
    try:
        result = await record_line(db.holes, round_id, req.line, selection)
    except NotFoundError:
        raise HTTPException(404, "Round not found")

    if isinstance(result, ParseFailure):
        raise HTTPException(
            422, ParseErrorResponse(kind=result.kind.value, message=result.message).model_dump()
        )
    return result


@router.put("/{round_id}/holes/{hole}", response_model=HoleStats)
async def save_hole_form(
    round_id: str,
    form: HoleForm,
    hole: int = Path(..., ge=1, le=18),
    db: DatabaseManager = Depends(get_db),
):
    """Full-form entry: replaces every field, balls lost given as a total."""
    try:
        return await record_form(db.holes, round_id, hole, form)
    except NotFoundError:
        raise HTTPException(404, "Round not found")
