"""Parsed configuration documents and parse results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .entry import ConfigEntry, ConfigValue
from .errors import MalformedLineError, NotFoundError
from .section import ConfigSection

# Name of the section that collects entries written before any header.
DEFAULT_SECTION = ""


class ConfigDocument:
    """Ordered sections of one configuration file.

    Section names are not required to be unique; lookups return the first
    section with a matching name, in file order.
    """

    def __init__(self, sections: Iterable[ConfigSection] = ()) -> None:
        self._sections: list[ConfigSection] = []
        for section in sections:
            self.add(section)

    def add(self, section: ConfigSection) -> None:
        if not isinstance(section, ConfigSection):
            raise TypeError(f"Expected ConfigSection, got {type(section).__name__}")
        self._sections.append(section)

    def get_section(self, name: str) -> ConfigSection:
        return self._find_section(name).copy()

    def get_sections(self) -> list[ConfigSection]:
        return [section.copy() for section in self._sections]

    def section_names(self) -> list[str]:
        return [section.name for section in self._sections]

    def get_value(self, section: str, name: str) -> ConfigValue:
        return self._find_section(section).get_line(name).value

    def find_line(self, name: str) -> ConfigEntry:
        """Return the first entry called ``name`` in any section."""

        for section in self._sections:
            if name in section:
                return section.get_line(name)
        raise NotFoundError(name)

    def as_dict(self) -> dict[str, dict[str, ConfigValue]]:
        """Plain mapping view; the first section and entry of a name win."""

        result: dict[str, dict[str, ConfigValue]] = {}
        for section in self._sections:
            if section.name in result:
                continue
            values: dict[str, ConfigValue] = {}
            for entry in section:
                values.setdefault(entry.name, entry.value)
            result[section.name] = values
        return result

    def generate_code(self) -> str:
        return "\n".join(section.generate_code() for section in self._sections)

    def _find_section(self, name: str) -> ConfigSection:
        wanted = name.strip()
        for section in self._sections:
            if section.name == wanted:
                return section
        raise NotFoundError(name, kind="Section")

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[ConfigSection]:
        return iter(self.get_sections())

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name.strip() in self.section_names()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigDocument):
            return NotImplemented
        return self._sections == other._sections

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigDocument(sections={self.section_names()!r})"


@dataclass(frozen=True)
class MalformedLine:
    """A line that was skipped because it is not a comment, header or entry."""

    line_number: int
    text: str


@dataclass(frozen=True)
class ParseResult:
    """Document produced by a parse plus the lines it had to skip."""

    document: ConfigDocument
    malformed: tuple[MalformedLine, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.malformed

    def raise_for_malformed(self) -> ConfigDocument:
        """Return the document, or raise MalformedLineError if lines were skipped."""

        if self.malformed:
            raise MalformedLineError(self.malformed)
        return self.document
