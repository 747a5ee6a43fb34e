from datetime import datetime

import pytest

from stampede.flags import Flag, FlagType


@pytest.mark.parametrize(
    "value,expected",
    [
        ("bool", FlagType.BOOL),
        ("boolean", FlagType.BOOL),
        ("Integer", FlagType.INT),
        ("str", FlagType.STRING),
        ("append", FlagType.LIST),
        ("date", FlagType.DATETIME),
        (float, FlagType.FLOAT),
        (str, FlagType.STRING),
    ],
)
def test_aliases(value, expected):
    assert FlagType(value) is expected


def test_invalid_type():
    with pytest.raises(ValueError, match="Must be one of"):
        FlagType("pony")
    with pytest.raises(ValueError):
        FlagType(dict)


def test_infer():
    assert FlagType.infer(True) is FlagType.BOOL
    assert FlagType.infer(3) is FlagType.INT
    assert FlagType.infer(0.5) is FlagType.FLOAT
    assert FlagType.infer("x") is FlagType.STRING
    assert FlagType.infer(["x"]) is FlagType.LIST
    assert FlagType.infer(datetime(2025, 1, 1)) is FlagType.DATETIME
    assert FlagType.infer(None) is FlagType.STRING
    with pytest.raises(ValueError):
        FlagType.infer({"x": 1})


def test_accepts():
    assert FlagType.INT.accepts(3)
    assert not FlagType.INT.accepts(True)
    assert FlagType.FLOAT.accepts(3)
    assert not FlagType.FLOAT.accepts(False)
    assert FlagType.LIST.accepts(("a", "b"))
    assert not FlagType.LIST.accepts(["a", 1])
    assert not FlagType.BOOL.accepts(1)


def test_flag_help_text():
    flag = Flag(name="tired", aliases=("--tired", "-t"), type=FlagType.BOOL)
    assert flag.get_alias_text() == "-t, --tired"
    assert flag.negated_alias == "--no-tired"
    assert flag.get_value_text() == ""

    tags = Flag(name="tag", aliases=("--tag",), type=FlagType.LIST, default=[])
    assert tags.negated_alias is None
    assert tags.get_value_text() == "TAG [...]"


def test_flag_reset_copies_default():
    tags = Flag(name="tag", aliases=("--tag",), type=FlagType.LIST, default=["a"])
    tags.value.append("b")
    assert tags.default == ["a"]
    tags.reset()
    assert tags.value == ["a"]
