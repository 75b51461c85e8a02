from pathlib import Path

import pytest

from inireader.api import load_config, read_config, resolve_path
from inireader.config import ReaderSettings
from inireader.errors import FileUnavailableError, MalformedLineError


def _write(directory: Path, text: str, name: str = "robot.ini") -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_resolve_path_variants(tmp_path: Path) -> None:
    settings = ReaderSettings(base_dir=str(tmp_path))
    assert resolve_path("robot.ini", settings=settings) == tmp_path / "robot.ini"
    assert resolve_path("robot.ini", "/opt/cfg") == Path("/opt/cfg/robot.ini")
    absolute = tmp_path / "abs.ini"
    assert resolve_path(absolute, "/ignored") == absolute


def test_resolve_path_defaults_to_robot_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INIREADER_BASE_DIR", raising=False)
    assert resolve_path("robot.ini") == Path("/home/lvuser/robot.ini")


def test_load_config_reads_file(tmp_path: Path) -> None:
    _write(tmp_path, "[Drive]\nspeed: 0.75\nbogus\n")
    result = load_config("robot.ini", tmp_path)
    assert result.document.get_value("Drive", "speed") == 0.75
    assert [line.text for line in result.malformed] == ["bogus"]


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileUnavailableError) as excinfo:
        load_config("absent.ini", tmp_path)
    assert excinfo.value.path == tmp_path / "absent.ini"
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert isinstance(excinfo.value, OSError)


def test_load_config_undecodable_file(tmp_path: Path) -> None:
    (tmp_path / "robot.ini").write_bytes(b"[A]\nx: \xff\xfe\n")
    with pytest.raises(FileUnavailableError):
        load_config("robot.ini", tmp_path)


def test_load_config_strict(tmp_path: Path) -> None:
    _write(tmp_path, "[A]\nx: 1\nbroken\n")
    with pytest.raises(MalformedLineError) as excinfo:
        load_config("robot.ini", tmp_path, settings=ReaderSettings(strict=True))
    assert excinfo.value.lines[0].line_number == 3


def test_read_config_returns_document(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    configured = []
    monkeypatch.setattr("inireader.api.configure_logging", configured.append)
    _write(tmp_path, "[Auto]\nmode: left\n")
    settings = ReaderSettings(base_dir=str(tmp_path))
    document = read_config("robot.ini", settings=settings)
    assert document.get_section("Auto").get_line_value("mode", str) == "left"
    assert configured == [settings.logging]
