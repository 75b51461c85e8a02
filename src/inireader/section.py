"""Named sections of configuration entries."""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

from .entry import ConfigEntry, ConfigValue
from .errors import NotFoundError

T = TypeVar("T")


class ConfigSection:
    """Ordered collection of entries under one section name.

    Entry names need not be unique; lookups return the first match in
    insertion order. Accessors hand out new lists, and entries are
    immutable, so callers cannot change the section through query results.
    """

    def __init__(self, name: str, entries: Iterable[ConfigEntry] = ()) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Section name must be a string, got {type(name).__name__}")
        if "\n" in name or "\r" in name:
            raise ValueError(f"Section name {name!r} contains a line break")
        self._name = name.strip()
        self._entries: list[ConfigEntry] = []
        for entry in entries:
            self.add_entry(entry)

    @property
    def name(self) -> str:
        return self._name

    def add_entry(self, entry: ConfigEntry) -> None:
        if not isinstance(entry, ConfigEntry):
            raise TypeError(f"Expected ConfigEntry, got {type(entry).__name__}")
        self._entries.append(entry)

    def add_value(self, name: str, value: ConfigValue) -> ConfigEntry:
        entry = ConfigEntry(name, value)
        self.add_entry(entry)
        return entry

    def add(self, entry: ConfigEntry | str, value: ConfigValue | None = None) -> None:
        """Append an entry, or build one from ``name`` and ``value``."""

        if isinstance(entry, ConfigEntry):
            if value is not None:
                raise TypeError("add() takes a ConfigEntry or a name and value, not both")
            self.add_entry(entry)
            return
        if value is None:
            raise TypeError("add() requires a value when given a name")
        self.add_value(entry, value)

    def get_line(self, name: str) -> ConfigEntry:
        """Return the first entry called ``name``, comparing trimmed names."""

        wanted = name.strip()
        for entry in self._entries:
            if entry.name.strip() == wanted:
                return entry
        raise NotFoundError(name)

    def get_lines(self) -> list[ConfigEntry]:
        return list(self._entries)

    def get_line_value(self, name: str, expected_type: type[T]) -> T | None:
        """Return the value of ``name`` if it is exactly ``expected_type``.

        A missing name raises NotFoundError; a value of another type gives
        None.
        """

        value = self.get_line(name).value
        if type(value) is expected_type:
            return value  # type: ignore[return-value]
        return None

    def get_string_values(self) -> list[str]:
        return [entry.text_value for entry in self._entries]

    def size(self) -> int:
        return len(self._entries)

    def copy(self) -> "ConfigSection":
        """Return an independent copy of this section."""

        return ConfigSection(self._name, self._entries)

    def generate_code(self) -> str:
        """Return configuration text that parses back to this section."""

        lines = [f"[{self._name}]\n"]
        lines.extend(entry.generate_code() for entry in self._entries)
        return "".join(lines)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ConfigEntry]:
        return iter(list(self._entries))

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        wanted = name.strip()
        return any(entry.name == wanted for entry in self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigSection):
            return NotImplemented
        return self._name == other._name and self._entries == other._entries

    # Sections are mutable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigSection(name={self._name!r}, entries={self._entries!r})"

    def __str__(self) -> str:
        lines = [f"Section: {self._name}\n"]
        lines.extend(f"{entry}\n" for entry in self._entries)
        return "".join(lines)
