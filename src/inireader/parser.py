"""Turn configuration text into a ConfigDocument.

The parser is a small state machine over the input lines. Comments and
blank lines are dropped, a header starts a new section, and entry lines are
tokenized, coerced and appended to the current section. Entries that appear
before the first header go into an implicit section named ``""`` so that
flat, header-less files still load.

Malformed lines never abort a parse. They are logged and returned in the
ParseResult so callers can decide whether skipped lines are acceptable.
"""

from __future__ import annotations

import io
import logging
from typing import Iterable

from .document import DEFAULT_SECTION, ConfigDocument, MalformedLine, ParseResult
from .entry import ConfigEntry
from .section import ConfigSection
from .tokenizer import LineKind, classify_line, coerce_value, strip_line_ending, tokenize_entry


def parse(lines: Iterable[str], *, logger: logging.Logger | None = None) -> ParseResult:
    """Parse configuration lines into a document.

    ``lines`` may be any iterable of strings, such as an open text file.
    Trailing line endings are ignored.
    """

    logger = logger or logging.getLogger(__name__)
    document = ConfigDocument()
    malformed: list[MalformedLine] = []
    current: ConfigSection | None = None

    for line_number, raw in enumerate(lines, start=1):
        line = strip_line_ending(raw)
        classified = classify_line(line)
        if classified.kind in (LineKind.BLANK, LineKind.COMMENT):
            continue

        if classified.kind is LineKind.SECTION_HEADER:
            section = _build_section(classified.name or "")
            if section is not None:
                if current is not None:
                    document.add(current)
                current = section
                continue
        elif classified.kind is LineKind.ENTRY:
            entry = _build_entry(line, classified.delimiter_index)
            if entry is not None:
                if current is None:
                    logger.debug("implicit_section", extra={"line_number": line_number})
                    current = ConfigSection(DEFAULT_SECTION)
                current.add_entry(entry)
                continue

        malformed.append(MalformedLine(line_number=line_number, text=line))
        logger.warning("malformed_line", extra={"line_number": line_number, "text": line})

    if current is not None:
        document.add(current)
    return ParseResult(document=document, malformed=tuple(malformed))


def parse_text(text: str, *, logger: logging.Logger | None = None) -> ParseResult:
    """Parse configuration held in a string."""

    # Same newline handling as a file opened in text mode.
    return parse(io.StringIO(text, newline=None), logger=logger)


def _build_section(name: str) -> ConfigSection | None:
    try:
        return ConfigSection(name)
    except ValueError:
        # Stray control characters inside the header.
        return None


def _build_entry(line: str, delimiter_index: int | None) -> ConfigEntry | None:
    raw_name, raw_value = tokenize_entry(line, delimiter_index)
    try:
        return ConfigEntry(raw_name, coerce_value(raw_value))
    except ValueError:
        return None
