from .hole_merger import merge_hole
from .line_parser import ParseErrorKind, ParseFailure, ParseResult, parse_line
from .recorder import HoleStore, record_form, record_line
from .selection import HoleSelection

__all__ = [
    "HoleSelection",
    "HoleStore",
    "ParseErrorKind",
    "ParseFailure",
    "ParseResult",
    "merge_hole",
    "parse_line",
    "record_form",
    "record_line",
]
