# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagType`, the tagged value kind declared by every Stampede flag.

Each flag stores a single value whose kind is fixed at registration time. The
kind is checked at runtime by the flag store whenever a value is read with an
expected type or written, producing `TypeMismatchError` on disagreement.

Supports alias coercion for shorthand or config-friendly values, as well as
plain Python types:

    FlagType("str")     → FlagType.STRING
    FlagType("integer") → FlagType.INT
    FlagType(bool)      → FlagType.BOOL
    FlagType("append")  → FlagType.LIST
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any


class FlagType(Enum):
    """
    Supported flag value kinds.

    Members:
        BOOL: Presence flag; `--name` sets True, `--no-name` sets False.
        INT: Whole number.
        FLOAT: Real number. Integers are accepted and widened.
        STRING: Free text.
        LIST: Repeatable string flag; every occurrence appends.
        DATETIME: Timestamp parsed with `dateutil`.
    """

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    LIST = "list"
    DATETIME = "datetime"

    @classmethod
    def choices(cls) -> list[FlagType]:
        """Return a list of all flag types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "boolean": "bool",
            "integer": "int",
            "str": "string",
            "text": "string",
            "append": "list",
            "date": "datetime",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> FlagType:
        python_types = {
            bool: "bool",
            int: "int",
            float: "float",
            str: "string",
            list: "list",
            datetime: "datetime",
        }
        if isinstance(value, type) and value in python_types:
            return cls(python_types[value])
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @classmethod
    def infer(cls, default: Any) -> FlagType:
        """Infer the flag type from a default value."""
        if default is None:
            return cls.STRING
        if isinstance(default, (list, tuple)):
            return cls.LIST
        for python_type in (bool, int, float, str, datetime):
            if isinstance(default, python_type):
                return cls(python_type)
        raise ValueError(
            f"Cannot infer a flag type from default {default!r} "
            f"({type(default).__name__})"
        )

    def accepts(self, value: Any) -> bool:
        """Return True if `value` is a valid stored value for this kind."""
        if self is FlagType.BOOL:
            return isinstance(value, bool)
        if self is FlagType.INT:
            return isinstance(value, int) and not isinstance(value, bool)
        if self is FlagType.FLOAT:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if self is FlagType.STRING:
            return isinstance(value, str)
        if self is FlagType.LIST:
            return isinstance(value, (list, tuple)) and all(
                isinstance(item, str) for item in value
            )
        return isinstance(value, datetime)

    def normalize(self, value: Any) -> Any:
        """Convert an accepted value to its canonical stored form."""
        if self is FlagType.FLOAT:
            return float(value)
        if self is FlagType.LIST:
            return list(value)
        return value

    @property
    def takes_value(self) -> bool:
        """Whether a flag of this kind consumes a value token."""
        return self is not FlagType.BOOL

    def __str__(self) -> str:
        """Return the string representation of the flag type."""
        return self.value
