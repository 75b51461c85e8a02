import pytest

from inireader.entry import ConfigEntry


def test_entry_trims_name_and_widens_int() -> None:
    entry = ConfigEntry("  kP ", 2)
    assert entry.name == "kP"
    assert entry.value == 2.0
    assert isinstance(entry.value, float)


def test_entry_text_forms() -> None:
    entry = ConfigEntry("speed", 0.75)
    assert str(entry) == "speed: 0.75"
    assert entry.generate_code() == "speed: 0.75\n"
    assert ConfigEntry("name", "Left Motor").text_value == "Left Motor"


def test_entry_equality_and_hash() -> None:
    assert ConfigEntry("a", 1.0) == ConfigEntry("a", 1)
    assert ConfigEntry("a", 1.0) != ConfigEntry("a", "one")
    assert len({ConfigEntry("a", 1.0), ConfigEntry("a", 1.0)}) == 1


def test_entry_is_immutable() -> None:
    entry = ConfigEntry("a", 1.0)
    with pytest.raises(AttributeError):
        entry.value = 2.0  # type: ignore[misc]


@pytest.mark.parametrize("value", [True, None, [1.0], {"a": 1}])
def test_entry_rejects_other_value_types(value: object) -> None:
    with pytest.raises(TypeError):
        ConfigEntry("a", value)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "name, value",
    [
        ("a:b", 1.0),
        ("a\nb", 1.0),
        ("a", "two\nlines"),
        ("# note", 1.0),
        ("//x", 1.0),
        ("[a", "b]"),
        ("a", "4"),
        ("a", "-2.5e3"),
        ("a", float("inf")),
        ("a", float("-inf")),
        ("a", float("nan")),
    ],
)
def test_entry_rejects_text_that_cannot_be_written_back(name: str, value: object) -> None:
    with pytest.raises(ValueError):
        ConfigEntry(name, value)  # type: ignore[arg-type]


def test_entry_keeps_numeral_like_text_that_reads_back_as_text() -> None:
    assert ConfigEntry("a", "1e999").value == "1e999"
    assert ConfigEntry("a", "4 ").value == "4 "
    assert ConfigEntry("a", "007x").value == "007x"
