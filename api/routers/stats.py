"""Stats/dashboard API endpoints."""

from fastapi import APIRouter, Depends

from analytics.stats import round_summary, scoring_average
from database.db_manager import DatabaseManager
from api.dependencies import get_db
from api.schemas import DashboardResponse
from api.routers.rounds import summarize_round

router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(db: DatabaseManager = Depends(get_db)):
    all_rounds = await db.rounds.list_rounds(limit=500, offset=0)
    summaries = [(r, round_summary(r)) for r in all_rounds]

    complete = [(r, s) for r, s in summaries if s["holes_played"] == 18]
    best = min(complete, key=lambda rs: rs[1]["total_strokes"], default=None)
    putts = [s["total_putts"] for _, s in complete]
    average = scoring_average(all_rounds)

    return DashboardResponse(
        total_rounds=len(all_rounds),
        scoring_average=round(average, 1) if average is not None else None,
        best_round=best[1]["total_strokes"] if best else None,
        best_round_id=best[0].id if best else None,
        average_putts=round(sum(putts) / len(putts), 1) if putts else None,
        total_balls_lost=sum(s["balls_lost"] for _, s in summaries),
        recent_rounds=[summarize_round(r) for r in all_rounds[:5]],
    )
