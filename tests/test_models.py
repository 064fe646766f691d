import pytest
from pydantic import ValidationError

from models import DEFAULT_PARS, HoleForm, HoleStats, PartialHoleUpdate, Round


# ================================================================
# HoleStats
# ================================================================

def test_hole_stats_defaults_and_validation():
    hs = HoleStats.blank("r1", 3)
    assert (hs.strokes, hs.putts, hs.balls_lost) == (0, 0, 0)
    assert not hs.is_scored

    with pytest.raises(ValidationError):
        HoleStats(round_id="r1", hole=19)

    with pytest.raises(ValidationError):
        HoleStats(round_id="r1", hole=1, balls_lost=-1)


def test_hole_stats_to_par():
    assert HoleStats(round_id="r1", hole=1, strokes=5).to_par(4) == 1
    assert HoleStats(round_id="r1", hole=1, strokes=5).to_par(None) is None
    assert HoleStats(round_id="r1", hole=1).to_par(4) is None   # not scored yet


def test_hole_stats_round_id_canonical():
    upper = "6F9619FF-8B86-D011-B42D-00C04FC964FF"
    assert HoleStats.blank(upper, 1).round_id == "6f9619ff-8b86-d011-b42d-00c04fc964ff"
    assert HoleStats.blank("{6f9619ff8b86d011b42d00c04fc964ff}", 1).round_id == \
        "6f9619ff-8b86-d011-b42d-00c04fc964ff"
    assert HoleStats.blank("r1", 1).round_id == "r1"


def test_hole_stats_assignment_is_validated():
    hs = HoleStats.blank("r1", 3)
    hs.strokes = 4
    assert hs.strokes == 4

    with pytest.raises(ValidationError):
        hs.hole = 25
    assert hs.hole == 3


# ================================================================
# PartialHoleUpdate / HoleForm
# ================================================================

def test_partial_update_ranges():
    PartialHoleUpdate(hole=18, strokes=30, putts=10)
    for bad in (dict(hole=0), dict(hole=4, strokes=31), dict(hole=4, putts=-1)):
        with pytest.raises(ValidationError):
            PartialHoleUpdate(**bad)


def test_hole_form_requires_valid_strokes():
    with pytest.raises(ValidationError):
        HoleForm(strokes=0)
    with pytest.raises(ValidationError):
        HoleForm(strokes=4, balls_lost=-2)
    form = HoleForm(strokes=4)
    assert (form.putts, form.balls_lost) == (0, 0)
    assert not any([form.within_100, form.fairway, form.gir, form.hazard])


# ================================================================
# Round
# ================================================================

def test_round_defaults():
    r = Round()
    assert r.pars == DEFAULT_PARS
    assert r.total_par() == 72
    assert r.front_nine_par() == 36
    assert r.back_nine_par() == 36
    assert r.par_for(3) == 3
    assert r.par_for(19) is None


def test_round_pars_validation():
    with pytest.raises(ValidationError):
        Round(pars=[4] * 17)
    with pytest.raises(ValidationError):
        Round(pars=[4] * 17 + [7])


def test_round_players_cleaned():
    r = Round(players=[" Sam ", "Alex", "Sam", ""])
    assert r.players == ["Sam", "Alex"]


def test_round_name_and_tee_box():
    assert Round(name="   ").name is None
    assert Round(name=" Sunday ").name == "Sunday"
    assert Round(tee_box="middle").tee_box == "Middle"
    with pytest.raises(ValidationError):
        Round(tee_box="Purple")


def test_round_get_hole_unordered():
    r = Round(holes=[HoleStats(round_id="r1", hole=9, strokes=4),
                     HoleStats(round_id="r1", hole=2, strokes=5)])
    assert r.get_hole(2).strokes == 5
    assert r.get_hole(3) is None
