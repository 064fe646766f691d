"""Keyword tables for reading score lines.

Adding a synonym means adding a string here; the parser builds its
patterns from these tables.
"""

import re
from typing import Dict, Iterable, Tuple

# Flag field -> phrases that set it. Substring match on the lower-cased line.
FLAG_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "within_100": ("within 100", "within100", "w100"),
    "fairway": ("fairway", "fairways", "fw"),
    "gir": ("gir", "green in reg", "greens in reg"),
    "hazard": ("hazard", "water", "penalty", "haz"),
}

# Numeric field -> keywords that anchor its number.
STAT_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "hole": ("hole",),
    "strokes": ("strokes", "stroke", "score"),
    "putts": ("putts", "putt"),
}

# Fields whose number may also come before the keyword ("6 strokes").
# A hole is only ever "hole N".
NUMBER_FIRST_FIELDS = ("strokes", "putts")

BALLS_LOST_PHRASES: Tuple[str, ...] = ("balls lost", "ball lost", "lost balls", "lost ball")


def phrase_pattern(phrases: Iterable[str]) -> str:
    """Regex alternation for phrases, longest first, any run of whitespace between words."""
    ordered = sorted(set(phrases), key=lambda p: (-len(p), p))
    return "|".join(r"\s+".join(re.escape(word) for word in p.split()) for p in ordered)


def keyword_to_field(fields: Iterable[str] = tuple(STAT_KEYWORDS)) -> Dict[str, str]:
    return {kw: field for field in fields for kw in STAT_KEYWORDS[field]}
