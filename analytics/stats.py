from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from models import HoleStats, Round

SCORE_TYPE_ORDER = [
    "eagle",
    "birdie",
    "par",
    "bogey",
    "double_bogey",
    "triple_bogey",
    "quad_bogey",
]


def _scored_holes(round_obj: Round, start: int = 1, end: int = 18) -> List[HoleStats]:
    return [h for h in round_obj.holes if h.is_scored and start <= h.hole <= end]


def score_type(to_par: Optional[int]) -> Optional[str]:
    """Name for a hole result. Eagle includes anything better; quad_bogey anything worse."""
    if to_par is None:
        return None
    if to_par <= -2:
        return "eagle"
    if to_par == -1:
        return "birdie"
    if to_par == 0:
        return "par"
    if to_par == 1:
        return "bogey"
    if to_par == 2:
        return "double_bogey"
    if to_par == 3:
        return "triple_bogey"
    return "quad_bogey"


def strokes_total(round_obj: Round, start: int = 1, end: int = 18) -> Optional[int]:
    """Strokes over a hole range; None when nothing in the range is scored yet."""
    strokes = [h.strokes for h in _scored_holes(round_obj, start, end)]
    return sum(strokes) if strokes else None


def hole_rows(round_obj: Round) -> List[Dict[str, Any]]:
    """One scorecard row per hole 1-18, recorded or not."""
    rows: List[Dict[str, Any]] = []
    for number in range(1, 19):
        par = round_obj.par_for(number)
        stats = round_obj.get_hole(number)
        to_par = stats.to_par(par) if stats else None
        rows.append(
            {
                "hole": number,
                "par": par,
                "strokes": stats.strokes if stats and stats.is_scored else None,
                "putts": stats.putts if stats else None,
                "to_par": to_par,
                "score_type": score_type(to_par),
                "within_100": stats.within_100 if stats else False,
                "fairway": stats.fairway if stats else False,
                "gir": stats.gir if stats else False,
                "hazard": stats.hazard if stats else False,
                "balls_lost": stats.balls_lost if stats else 0,
            }
        )
    return rows


def round_summary(round_obj: Round) -> Dict[str, Any]:
    """
    Scorecard totals for a round.

    to_par compares strokes against the par of the holes scored so far,
    so a round in progress reads as "+2 through 7" rather than "-30".
    """
    scored = _scored_holes(round_obj)
    holes_played = len(scored)
    par_played = sum(round_obj.par_for(h.hole) or 0 for h in scored)
    total_strokes = strokes_total(round_obj)
    total_putts = sum(h.putts for h in round_obj.holes)
    fairway_chances = [h for h in scored if (round_obj.par_for(h.hole) or 0) >= 4]
    total_gir = sum(1 for h in scored if h.gir)

    gir_percentage: Optional[float] = None
    putts_per_hole: Optional[float] = None
    if holes_played:
        gir_percentage = total_gir / holes_played * 100
        putts_per_hole = total_putts / holes_played

    return {
        "holes_played": holes_played,
        "front_nine": strokes_total(round_obj, 1, 9),
        "back_nine": strokes_total(round_obj, 10, 18),
        "total_strokes": total_strokes,
        "front_nine_par": round_obj.front_nine_par(),
        "back_nine_par": round_obj.back_nine_par(),
        "total_par": round_obj.total_par(),
        "to_par": total_strokes - par_played if total_strokes is not None else None,
        "total_putts": total_putts,
        "putts_per_hole": putts_per_hole,
        "fairways_hit": sum(1 for h in fairway_chances if h.fairway),
        "fairway_chances": len(fairway_chances),
        "total_gir": total_gir,
        "gir_percentage": gir_percentage,
        "within_100": sum(1 for h in scored if h.within_100),
        "hazards": sum(1 for h in round_obj.holes if h.hazard),
        "balls_lost": sum(h.balls_lost for h in round_obj.holes),
    }


def score_type_distribution(round_obj: Round) -> Dict[str, int]:
    """Count of scored holes per score type (eagle or better ... quad bogey or worse)."""
    counts = {name: 0 for name in SCORE_TYPE_ORDER}
    for row in hole_rows(round_obj):
        if row["score_type"]:
            counts[row["score_type"]] += 1
    return counts


def scoring_average(rounds: Iterable[Round], holes: int = 18) -> Optional[float]:
    """Mean strokes over rounds with every hole in range scored."""
    totals = [
        strokes_total(r)
        for r in rounds
        if len(_scored_holes(r)) >= holes
    ]
    totals = [t for t in totals if t is not None]
    return sum(totals) / len(totals) if totals else None
