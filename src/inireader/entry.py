"""Single name/value configuration entries."""

from __future__ import annotations

from dataclasses import dataclass
import math

from .tokenizer import DELIMITER, LineKind, classify_line, coerce_value, format_value

ConfigValue = float | str


@dataclass(frozen=True)
class ConfigEntry:
    """Immutable name/value pair parsed from one entry line.

    Values are either floats or strings. Integers are widened to float so
    that programmatically built entries compare equal to parsed ones.
    """

    name: str
    value: ConfigValue

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Entry name must be a string, got {type(self.name).__name__}")
        value = self.value
        if isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        if not isinstance(value, (float, str)):
            raise TypeError(f"Entry value must be float or str, got {type(value).__name__}")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"Entry value {value!r} is not a finite number")
        if isinstance(value, str) and isinstance(coerce_value(value), float):
            # Text would read back as a number.
            raise ValueError(f"Entry value {value!r} is a numeral; store it as a float")
        name = self.name.strip()
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "value", value)

        if DELIMITER in name:
            raise ValueError(f"Entry name {name!r} contains '{DELIMITER}'")
        for text in (name, self.text_value):
            if "\n" in text or "\r" in text:
                raise ValueError(f"Entry {name!r} contains a line break")
        if classify_line(str(self)).kind is not LineKind.ENTRY:
            raise ValueError(f"Entry {name!r} would not read back as an entry line")

    @property
    def text_value(self) -> str:
        """Textual form of the value."""

        return format_value(self.value)

    def generate_code(self) -> str:
        """Return the configuration line that produces this entry."""

        return f"{self}\n"

    def __str__(self) -> str:
        return f"{self.name}{DELIMITER} {self.text_value}"
