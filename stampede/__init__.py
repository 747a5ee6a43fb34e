"""
Stampede CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .action import Action
from .execution_registry import ExecutionRegistry
from .flags import FlagType
from .parser import ParseResult
from .stampede import Stampede
from .validation import ValidationResult

logger = logging.getLogger("stampede")


__all__ = [
    "Action",
    "ExecutionRegistry",
    "FlagType",
    "ParseResult",
    "Stampede",
    "ValidationResult",
]
