# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion from raw command-line text to typed flag values.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_value: Convert a raw token to the value kind declared by a `FlagType`.
"""
from typing import Any

from dateutil import parser as date_parser

from stampede.flags.flag_type import FlagType

TRUTHY = {"true", "t", "1", "yes", "y", "on"}
FALSY = {"false", "f", "0", "no", "n", "off"}


def coerce_bool(value: str | bool) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off'.

    Raises:
        ValueError: If the text is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUTHY:
        return True
    elif normalized in FALSY:
        return False
    raise ValueError(f"'{value}' is not a boolean value")


def coerce_value(value: str, flag_type: FlagType) -> Any:
    """
    Attempt to convert a raw token to the given flag type.

    `LIST` values are returned unchanged; the flag store appends them.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    if flag_type is FlagType.BOOL:
        return coerce_bool(value)
    if flag_type is FlagType.INT:
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return int(value, 0)
        except ValueError:
            raise ValueError(f"'{value}' is not a valid integer") from None
    if flag_type is FlagType.FLOAT:
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"'{value}' is not a valid number") from None
    if flag_type is FlagType.DATETIME:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"'{value}' could not be parsed as a datetime") from error
    return value
