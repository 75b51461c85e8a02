"""Public entry points for reading configuration files.

Robot code normally calls :func:`read_config` once at startup. It resolves
the file name against the configured base directory, sets up logging, parses
the whole file and hands back the document. :func:`load_config` is the same
without touching logging, and returns the full ParseResult so callers can
inspect skipped lines themselves.
"""

from __future__ import annotations

from pathlib import Path

import logging

from .config import ReaderSettings
from .document import ConfigDocument, ParseResult
from .errors import FileUnavailableError
from .logging_utils import configure_logging
from .parser import parse


def resolve_path(
    filename: str | Path,
    directory: str | Path | None = None,
    settings: ReaderSettings | None = None,
) -> Path:
    """Join a file name with its directory.

    Absolute file names are returned unchanged. Relative ones are joined with
    ``directory`` when given, otherwise with ``settings.base_dir``.
    """

    path = Path(filename)
    if path.is_absolute():
        return path
    if directory is None:
        directory = (settings or ReaderSettings()).base_dir
    return Path(directory) / path


def load_config(
    filename: str | Path,
    directory: str | Path | None = None,
    *,
    settings: ReaderSettings | None = None,
    logger: logging.Logger | None = None,
) -> ParseResult:
    """Read and parse a configuration file.

    Raises FileUnavailableError when the file cannot be opened or decoded,
    and MalformedLineError for skipped lines when ``settings.strict`` is set.
    """

    settings = settings or ReaderSettings()
    logger = logger or logging.getLogger(__name__)
    path = resolve_path(filename, directory, settings)

    try:
        with path.open("r", encoding=settings.encoding) as handle:
            result = parse(handle, logger=logger)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("config_unavailable", extra={"path": str(path), "error": str(exc)})
        raise FileUnavailableError(path, str(exc)) from exc

    logger.info(
        "config_loaded",
        extra={
            "path": str(path),
            "sections": len(result.document),
            "malformed_lines": len(result.malformed),
        },
    )
    if settings.strict:
        result.raise_for_malformed()
    return result


def read_config(
    filename: str | Path,
    directory: str | Path | None = None,
    *,
    settings: ReaderSettings | None = None,
    logger: logging.Logger | None = None,
) -> ConfigDocument:
    """Configure logging, then load a configuration file and return its document."""

    settings = settings or ReaderSettings()
    configure_logging(settings.logging)
    return load_config(filename, directory, settings=settings, logger=logger).document
