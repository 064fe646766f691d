"""Turn a free-text or dictated score line into a validated partial hole update.

Examples of accepted lines:

    hole 4 strokes 6 putts 2 fairway
    6 strokes 2 putts gir          (hole taken from the selected hole)
    4 6 2 fw                       (positional: hole, strokes, putts)
    hole 7 2 balls lost            (or "lost ball 2"; no number means one ball)
    hole 9 water ball lost

Parsing never raises for bad input. Failures come back as a ParseFailure
whose message is meant to be shown to the golfer as-is.
"""

import logging
import re
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple, Union

from pydantic import BaseModel

from models import PartialHoleUpdate
from models.hole_update import HOLE_RANGE, PUTTS_RANGE, STROKES_RANGE
from entry.keywords import (
    BALLS_LOST_PHRASES,
    FLAG_KEYWORDS,
    NUMBER_FIRST_FIELDS,
    keyword_to_field,
    phrase_pattern,
)

logger = logging.getLogger(__name__)

Span = Tuple[int, int]

MASK_CHAR = "|"


class ParseErrorKind(str, Enum):
    """Why a line could not be turned into an update."""
    EMPTY_INPUT = "empty_input"
    MISSING_HOLE = "missing_hole"
    OUT_OF_RANGE_HOLE = "out_of_range_hole"
    OUT_OF_RANGE_STROKES = "out_of_range_strokes"
    OUT_OF_RANGE_PUTTS = "out_of_range_putts"


ERROR_MESSAGES = {
    ParseErrorKind.EMPTY_INPUT: "Empty input",
    ParseErrorKind.MISSING_HOLE: "Please select a hole or specify one (e.g. 'hole 4')",
    ParseErrorKind.OUT_OF_RANGE_HOLE: "Hole must be 1-18",
    ParseErrorKind.OUT_OF_RANGE_STROKES: "Strokes looks off",
    ParseErrorKind.OUT_OF_RANGE_PUTTS: "Putts looks off",
}


class ParseFailure(BaseModel):
    """Structured parse error."""
    kind: ParseErrorKind
    message: str

    @classmethod
    def of(cls, kind: ParseErrorKind) -> "ParseFailure":
        return cls(kind=kind, message=ERROR_MESSAGES[kind])


ParseResult = Union[PartialHoleUpdate, ParseFailure]


# --- Patterns ---

_KEYWORD_FIELDS = keyword_to_field()
_NUMBER_FIRST_KEYWORDS = keyword_to_field(NUMBER_FIRST_FIELDS)

_SEP = r"[\s:=]*"
_NUMBER_FIRST = phrase_pattern(_NUMBER_FIRST_KEYWORDS)

# One left-to-right scan; each number binds to at most one keyword.
# "N kw" yields to "kw M" when M is not itself followed by a keyword, so in
# "par 4 strokes 5" the 5 is the score while "6 strokes 2 putts" stays 6/2.
_STAT_RE = re.compile(
    r"\b(?P<kw_after>" + phrase_pattern(_KEYWORD_FIELDS) + r")" + _SEP + r"(?P<num_after>\d+)\b"
    r"|\b(?P<num_before>\d+)\s*(?P<kw_before>" + _NUMBER_FIRST + r")\b"
    r"(?!" + _SEP + r"\d+\b(?!\s*(?:" + _NUMBER_FIRST + r")\b))"
)

_BALLS_LOST_RE = re.compile(
    r"(?:\b(?P<before>\d{1,2})\s+)?"
    r"(?P<phrase>" + phrase_pattern(BALLS_LOST_PHRASES) + r")\b"
    r"(?:\s+(?P<after>\d{1,2})\b)?"
)

_BARE_INT_RE = re.compile(r"\b\d{1,2}\b")

_FLAG_PHRASES = sorted(
    {p for phrases in FLAG_KEYWORDS.values() for p in phrases}, key=len, reverse=True
)


# --- Helpers ---

def _mask(text: str, spans: List[Span]) -> str:
    """Blank out spans so later number scans cannot see or cross them."""
    chars = list(text)
    for start, end in spans:
        chars[start:end] = MASK_CHAR * (end - start)
    return "".join(chars)


def _detect_flags(raw: str) -> Dict[str, bool]:
    return {
        field: True
        for field, phrases in FLAG_KEYWORDS.items()
        if any(p in raw for p in phrases)
    }


def _flag_spans(raw: str) -> List[Span]:
    spans = []
    for phrase in _FLAG_PHRASES:
        start = raw.find(phrase)
        while start != -1:
            spans.append((start, start + len(phrase)))
            start = raw.find(phrase, start + 1)
    return spans


def _scan_stat_keywords(text: str) -> Tuple[Dict[str, int], Set[Span]]:
    """Keyword-anchored numbers. First binding per field wins."""
    values: Dict[str, int] = {}
    claimed: Set[Span] = set()
    for m in _STAT_RE.finditer(text):
        if m.group("kw_after"):
            keyword, group = m.group("kw_after"), "num_after"
        else:
            keyword, group = m.group("kw_before"), "num_before"
        claimed.add(m.span(group))
        field = _KEYWORD_FIELDS[keyword]
        values.setdefault(field, int(m.group(group)))
    return values, claimed


def _balls_lost(match: "re.Match", claimed: Set[Span]) -> Tuple[int, Optional[Span]]:
    """Increment for a balls-lost phrase and the span of the number it used, if any."""
    for group in ("before", "after"):
        if match.group(group) is not None and match.span(group) not in claimed:
            return int(match.group(group)), match.span(group)
    return 1, None


def _out_of_range(value: Optional[int], bounds: Tuple[int, int]) -> bool:
    return value is not None and not bounds[0] <= value <= bounds[1]


# --- Public API ---

def parse_line(line: str, selected_hole: Optional[int] = None) -> ParseResult:
    """Parse one score line.

    selected_hole is the hole currently picked in the UI; it is used only
    when the line itself names no hole.
    """
    raw = (line or "").strip().lower()
    if not raw:
        return ParseFailure.of(ParseErrorKind.EMPTY_INPUT)

    flags = _detect_flags(raw)
    text = _mask(raw, _flag_spans(raw))

    balls_match = _BALLS_LOST_RE.search(text)
    if balls_match:
        text = _mask(text, [balls_match.span("phrase")])

    stats, claimed = _scan_stat_keywords(text)

    balls_lost_increment = None
    if balls_match:
        balls_lost_increment, used = _balls_lost(balls_match, claimed)
        if used:
            text = _mask(text, [used])

    hole = stats.get("hole")
    strokes = stats.get("strokes")
    putts = stats.get("putts")

    # Positional "4 6 2" only when no keyword resolved anything.
    if not stats:
        numbers = [int(n) for n in _BARE_INT_RE.findall(text)][:3]
        numbers += [None] * (3 - len(numbers))
        hole, strokes, putts = numbers

    if hole is None:
        hole = selected_hole
    if hole is None:
        logger.debug("No hole in %r and none selected", line)
        return ParseFailure.of(ParseErrorKind.MISSING_HOLE)

    if _out_of_range(hole, HOLE_RANGE):
        return ParseFailure.of(ParseErrorKind.OUT_OF_RANGE_HOLE)
    if _out_of_range(strokes, STROKES_RANGE):
        return ParseFailure.of(ParseErrorKind.OUT_OF_RANGE_STROKES)
    if _out_of_range(putts, PUTTS_RANGE):
        return ParseFailure.of(ParseErrorKind.OUT_OF_RANGE_PUTTS)

    update = PartialHoleUpdate(
        hole=hole,
        strokes=strokes,
        putts=putts,
        balls_lost_increment=balls_lost_increment,
        **flags,
    )
    logger.debug("Parsed %r -> %s", line, update.model_dump(exclude_none=True))
    return update
