"""Read -> merge -> write for the two entry paths (quick text and full form).

Callers must not run two of these concurrently for the same (round, hole);
each call re-reads the stored record right before merging so balls lost
is always added to the latest total.
"""

import logging
from typing import Optional, Protocol, Union

from models import HoleForm, HoleStats, normalize_round_id
from entry.hole_merger import merge_hole
from entry.line_parser import ParseFailure, parse_line
from entry.selection import HoleSelection

logger = logging.getLogger(__name__)


class HoleStore(Protocol):
    """Storage for per-hole records, keyed by (round_id, hole).

    Any class with matching async methods satisfies this protocol
    (HoleRepositoryDB in production, an in-memory dict in tests).
    """

    async def get_hole(self, round_id: str, hole: int) -> Optional[HoleStats]:
        ...

    async def put_hole(self, stats: HoleStats) -> HoleStats:
        ...


async def record_line(
    store: HoleStore,
    round_id: str,
    line: str,
    selection: Optional[HoleSelection] = None,
) -> Union[HoleStats, ParseFailure]:
    """Quick entry: parse a typed or dictated line and save the merged hole.

    A parse failure is returned as-is; nothing is written and the
    selection is left alone so the golfer can retry.
    """
    round_id = normalize_round_id(round_id)
    selected = selection.selected if selection else None
    result = parse_line(line, selected_hole=selected)
    if isinstance(result, ParseFailure):
        logger.debug("Rejected line %r for round %s: %s", line, round_id, result.message)
        return result

    existing = await store.get_hole(round_id, result.hole)
    saved = await store.put_hole(merge_hole(existing, result, round_id=round_id))
    logger.info(
        "Round %s hole %d saved from text entry (%s)",
        round_id, saved.hole, ", ".join(sorted(result.mentioned_fields())),
    )

    if selection:
        selection.clear()
    return saved


async def record_form(
    store: HoleStore,
    round_id: str,
    hole: int,
    form: HoleForm,
    selection: Optional[HoleSelection] = None,
) -> HoleStats:
    """Full-form entry: every field given, balls lost as an absolute total."""
    round_id = normalize_round_id(round_id)
    existing = await store.get_hole(round_id, hole)
    update = form.to_update(hole, existing)
    saved = await store.put_hole(merge_hole(existing, update, round_id=round_id))
    logger.info("Round %s hole %d saved from full form", round_id, saved.hole)

    if selection:
        selection.clear()
    return saved
