"""Reader for sectioned ``name: value`` configuration files."""

from .api import load_config, read_config, resolve_path
from .config import LoggingConfig, ReaderSettings
from .document import DEFAULT_SECTION, ConfigDocument, MalformedLine, ParseResult
from .entry import ConfigEntry, ConfigValue
from .errors import FileUnavailableError, IniReaderError, MalformedLineError, NotFoundError
from .logging_utils import JsonFormatter, configure_logging
from .parser import parse, parse_text
from .section import ConfigSection
from .tokenizer import LineClass, LineKind, classify_line, coerce_value, format_value, tokenize_entry

__all__ = [
    "load_config",
    "read_config",
    "resolve_path",
    "LoggingConfig",
    "ReaderSettings",
    "DEFAULT_SECTION",
    "ConfigDocument",
    "MalformedLine",
    "ParseResult",
    "ConfigEntry",
    "ConfigValue",
    "FileUnavailableError",
    "IniReaderError",
    "MalformedLineError",
    "NotFoundError",
    "JsonFormatter",
    "configure_logging",
    "parse",
    "parse_text",
    "ConfigSection",
    "LineClass",
    "LineKind",
    "classify_line",
    "coerce_value",
    "format_value",
    "tokenize_entry",
]
