import pytest
from datetime import datetime, timezone

from entry.hole_merger import merge_hole
from models import HoleForm, HoleStats, PartialHoleUpdate

T0 = datetime(2026, 5, 2, 9, 0, tzinfo=timezone.utc)
T1 = datetime(2026, 5, 2, 9, 20, tzinfo=timezone.utc)


def _existing(**overrides) -> HoleStats:
    fields = dict(
        round_id="r1", hole=4, strokes=5, putts=2,
        within_100=True, fairway=True, gir=False, hazard=False,
        balls_lost=1, updated_at=T0,
    )
    fields.update(overrides)
    return HoleStats(**fields)


def test_first_update_creates_zeroed_record():
    merged = merge_hole(None, PartialHoleUpdate(hole=4, strokes=5), round_id="r1", now=T1)

    assert merged.round_id == "r1"
    assert merged.hole == 4
    assert merged.strokes == 5
    assert merged.putts == 0
    assert not any([merged.within_100, merged.fairway, merged.gir, merged.hazard])
    assert merged.balls_lost == 0
    assert merged.updated_at == T1


def test_first_update_needs_round_id():
    with pytest.raises(ValueError):
        merge_hole(None, PartialHoleUpdate(hole=4))


def test_mentioned_fields_overwrite_others_kept():
    merged = merge_hole(_existing(), PartialHoleUpdate(hole=4, putts=3, gir=True), now=T1)

    assert merged.strokes == 5
    assert merged.putts == 3
    assert merged.gir is True
    assert merged.fairway is True
    assert merged.within_100 is True


def test_explicit_false_overwrites_flag():
    merged = merge_hole(_existing(), PartialHoleUpdate(hole=4, fairway=False), now=T1)
    assert merged.fairway is False
    assert merged.within_100 is True


def test_balls_lost_accumulates():
    hole = merge_hole(None, PartialHoleUpdate(hole=7), round_id="r1", now=T0)
    assert hole.balls_lost == 0

    for _ in range(2):
        hole = merge_hole(hole, PartialHoleUpdate(hole=7, balls_lost_increment=1), now=T1)
    assert hole.balls_lost == 2


def test_missing_increment_leaves_total():
    merged = merge_hole(_existing(balls_lost=3), PartialHoleUpdate(hole=4, strokes=6), now=T1)
    assert merged.balls_lost == 3


def test_hole_only_update_changes_nothing_but_timestamp():
    existing = _existing()
    merged = merge_hole(existing, PartialHoleUpdate(hole=4), now=T1)

    assert merged.model_dump(exclude={"updated_at"}) == existing.model_dump(exclude={"updated_at"})
    assert merged.updated_at == T1


def test_merge_does_not_mutate_existing():
    existing = _existing()
    merge_hole(existing, PartialHoleUpdate(hole=4, strokes=9, balls_lost_increment=2), now=T1)
    assert existing.strokes == 5
    assert existing.balls_lost == 1
    assert existing.updated_at == T0


def test_default_timestamp_is_now_utc():
    before = datetime.now(timezone.utc)
    merged = merge_hole(_existing(), PartialHoleUpdate(hole=4))
    assert merged.updated_at >= before
    assert merged.updated_at.tzinfo is not None


def test_wrong_hole_or_round_rejected():
    with pytest.raises(ValueError):
        merge_hole(_existing(), PartialHoleUpdate(hole=5))
    with pytest.raises(ValueError):
        merge_hole(_existing(), PartialHoleUpdate(hole=4), round_id="other")


def test_round_id_compared_in_canonical_form():
    stored = _existing(round_id="6f9619ff-8b86-d011-b42d-00c04fc964ff")
    merged = merge_hole(
        stored,
        PartialHoleUpdate(hole=4, balls_lost_increment=1),
        round_id="6F9619FF-8B86-D011-B42D-00C04FC964FF",
        now=T1,
    )
    assert merged.round_id == "6f9619ff-8b86-d011-b42d-00c04fc964ff"
    assert merged.balls_lost == 2


# ================================================================
# Full-form entry through the same merge rule
# ================================================================

def test_full_form_sets_absolute_balls_lost():
    existing = _existing(balls_lost=3)
    form = HoleForm(strokes=6, putts=2, fairway=False, gir=True, balls_lost=1)

    update = form.to_update(4, existing)
    assert update.balls_lost_increment == -2

    merged = merge_hole(existing, update, now=T1)
    assert merged.balls_lost == 1
    assert merged.strokes == 6
    assert merged.fairway is False
    assert merged.within_100 is False
    assert merged.gir is True


def test_full_form_on_new_hole():
    form = HoleForm(strokes=4, putts=1, balls_lost=2)
    update = form.to_update(9, None)
    merged = merge_hole(None, update, round_id="r1", now=T1)

    assert update.balls_lost_increment == 2
    assert merged.balls_lost == 2
