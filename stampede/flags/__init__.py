"""
Stampede CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .coerce import coerce_bool, coerce_value
from .flag import Flag
from .flag_type import FlagType
from .store import GLOBAL_SCOPE, FlagStore

__all__ = [
    "Flag",
    "FlagStore",
    "FlagType",
    "GLOBAL_SCOPE",
    "coerce_bool",
    "coerce_value",
]
