from datetime import datetime

import pytest

from stampede.flags import FlagType, coerce_bool, coerce_value


@pytest.mark.parametrize("raw", ["true", "Yes", "1", "on", "T"])
def test_coerce_bool_truthy(raw):
    assert coerce_bool(raw) is True


@pytest.mark.parametrize("raw", ["false", "No", "0", "off", "f"])
def test_coerce_bool_falsy(raw):
    assert coerce_bool(raw) is False


def test_coerce_bool_rejects_other_text():
    with pytest.raises(ValueError):
        coerce_bool("maybe")
    assert coerce_bool(True) is True


def test_coerce_int():
    assert coerce_value("42", FlagType.INT) == 42
    assert coerce_value("-3", FlagType.INT) == -3
    assert coerce_value("0b101", FlagType.INT) == 5
    with pytest.raises(ValueError, match="not a valid integer"):
        coerce_value("4.2", FlagType.INT)


def test_coerce_float():
    assert coerce_value("2.5", FlagType.FLOAT) == 2.5
    assert coerce_value("-1e3", FlagType.FLOAT) == -1000.0
    with pytest.raises(ValueError):
        coerce_value("fast", FlagType.FLOAT)


def test_coerce_datetime():
    assert coerce_value("2025-01-02 03:04", FlagType.DATETIME) == datetime(
        2025, 1, 2, 3, 4
    )
    with pytest.raises(ValueError):
        coerce_value("not a date at all", FlagType.DATETIME)


def test_coerce_string_and_list_unchanged():
    assert coerce_value("mode bullet", FlagType.STRING) == "mode bullet"
    assert coerce_value("mode bullet", FlagType.LIST) == "mode bullet"
