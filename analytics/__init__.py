from .stats import (
    SCORE_TYPE_ORDER,
    hole_rows,
    round_summary,
    score_type,
    score_type_distribution,
    scoring_average,
    strokes_total,
)

__all__ = [
    "SCORE_TYPE_ORDER",
    "hole_rows",
    "round_summary",
    "score_type",
    "score_type_distribution",
    "scoring_average",
    "strokes_total",
]
