"""Exception types raised by the configuration reader."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .document import MalformedLine


class IniReaderError(Exception):
    """Base class for configuration reader errors."""


class FileUnavailableError(IniReaderError, OSError):
    """The configuration file could not be opened or read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Configuration file unavailable {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class MalformedLineError(IniReaderError, ValueError):
    """One or more lines were skipped because they could not be parsed."""

    def __init__(self, lines: Sequence["MalformedLine"]) -> None:
        numbers = ", ".join(str(line.line_number) for line in lines)
        super().__init__(f"Malformed configuration lines: {numbers}")
        self.lines = tuple(lines)


class NotFoundError(IniReaderError, KeyError):
    """A section or entry name does not exist."""

    def __init__(self, name: str, kind: str = "Line") -> None:
        super().__init__(f"{kind} not found {name}.")
        self.name = name
        self.kind = kind

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])
