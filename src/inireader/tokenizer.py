"""Line classification, tokenizing and value coercion.

A configuration line is one of:

- a comment, starting with ``//`` or ``#`` after leading whitespace
- a section header, ``[name]``
- an entry, ``name: value`` split at the first colon
- blank, or malformed when none of the above applies

Tokenizing trims at most one space on each side of the delimiter so that
values keep any deliberate padding beyond that single space.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math
import re

DELIMITER = ":"
COMMENT_MARKERS = ("//", "#")

# Plain decimal numerals only; float() alone would also accept inf/nan,
# underscores and surrounding whitespace.
_NUMERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class LineKind(Enum):
    """Classification of a raw configuration line."""

    BLANK = "blank"
    COMMENT = "comment"
    SECTION_HEADER = "section_header"
    ENTRY = "entry"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class LineClass:
    """Result of classifying one line."""

    kind: LineKind
    # Section name for headers.
    name: str | None = None
    # Index of the first delimiter for entries.
    delimiter_index: int | None = None


def strip_line_ending(line: str) -> str:
    return line.rstrip("\r\n")


def is_comment(line: str) -> bool:
    """Return True when the line starts with a comment marker."""

    return line.lstrip().startswith(COMMENT_MARKERS)


def classify_line(line: str) -> LineClass:
    """Classify a raw line of configuration text."""

    line = strip_line_ending(line)
    stripped = line.strip()
    if not stripped:
        return LineClass(LineKind.BLANK)
    if is_comment(stripped):
        return LineClass(LineKind.COMMENT)
    if len(stripped) >= 2 and stripped[0] == "[" and stripped[-1] == "]":
        return LineClass(LineKind.SECTION_HEADER, name=stripped[1:-1].strip())
    index = line.find(DELIMITER)
    if index < 0:
        return LineClass(LineKind.MALFORMED)
    return LineClass(LineKind.ENTRY, delimiter_index=index)


def tokenize_entry(line: str, delimiter_index: int | None = None) -> tuple[str, str]:
    """Split an entry line into its raw name and raw value.

    Exactly one space directly before and one directly after the delimiter
    are dropped. Later delimiters stay inside the value.
    """

    line = strip_line_ending(line)
    if delimiter_index is None:
        delimiter_index = line.find(DELIMITER)
    if delimiter_index < 0 or line[delimiter_index : delimiter_index + 1] != DELIMITER:
        raise ValueError(f"No '{DELIMITER}' delimiter in line {line!r}")

    raw_name = line[:delimiter_index]
    if raw_name.endswith(" "):
        raw_name = raw_name[:-1]
    raw_value = line[delimiter_index + 1 :]
    if raw_value.startswith(" "):
        raw_value = raw_value[1:]
    return raw_name, raw_value


def is_numeral(raw: str) -> bool:
    return _NUMERAL.fullmatch(raw) is not None


def coerce_value(raw: str) -> float | str:
    """Interpret a raw value as a float, falling back to the raw string."""

    if is_numeral(raw):
        value = float(raw)
        # Overflowing numerals such as 1e999 would be written back as "inf".
        if math.isfinite(value):
            return value
    return raw


def format_value(value: float | str) -> str:
    """Render a value the way it is written back to configuration text."""

    if isinstance(value, float):
        # repr is the shortest text that reads back to the same float.
        return repr(value)
    return value
