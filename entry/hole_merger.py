"""Combine a partial hole update with the stored record for that hole."""

from datetime import datetime, timezone
from typing import Optional

from models import HoleStats, PartialHoleUpdate, normalize_round_id

# Fields an update replaces when it mentions them.
OVERWRITE_FIELDS = ("strokes", "putts", "within_100", "fairway", "gir", "hazard")


def merge_hole(
    existing: Optional[HoleStats],
    update: PartialHoleUpdate,
    *,
    round_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> HoleStats:
    """Return the full record to persist.

    Mentioned fields overwrite, unmentioned fields keep the stored value
    (or the zero/False default for a new hole). Balls lost is the one
    accumulating field: the update's increment is added to the stored total.

    round_id is only needed when there is no existing record.
    """
    if existing is not None:
        if existing.hole != update.hole:
            raise ValueError(f"Update for hole {update.hole} applied to hole {existing.hole}")
        if round_id is not None and existing.round_id != normalize_round_id(round_id):
            raise ValueError(f"Record belongs to round {existing.round_id}, not {round_id}")
        base = existing
    else:
        if round_id is None:
            raise ValueError("round_id is required when the hole has no stored record")
        base = HoleStats.blank(round_id, update.hole)

    merged = base.model_dump()
    for name in OVERWRITE_FIELDS:
        value = getattr(update, name)
        if value is not None:
            merged[name] = value
    merged["balls_lost"] = base.balls_lost + (update.balls_lost_increment or 0)
    merged["updated_at"] = now or datetime.now(timezone.utc)
    return HoleStats(**merged)
