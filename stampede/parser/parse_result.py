# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Terminal classification of a parse and the outcome object returned by the
context resolver.

Only `ParseResult.OK` allows the chain to be executed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from stampede.chain import Context
from stampede.exceptions import StampedeError


class ParseResult(Enum):
    OK = "ok"
    HELP = "help"
    VERSION = "version"
    ERROR = "error"
    INVALID_FLAG = "invalid_flag"

    def __str__(self) -> str:
        return self.value


@dataclass
class ParseOutcome:
    """
    Everything a single parse produced.

    Attributes:
        result (ParseResult): Terminal classification.
        chain (list[Context]): Resolved contexts, in command-line order.
        help_target (str | None): Action whose help was requested, None for global help.
        error (StampedeError | None): The failure behind ERROR / INVALID_FLAG.
        verbosity (int): Number of `-v` / `--verbose` occurrences.
    """

    result: ParseResult
    chain: list[Context] = field(default_factory=list)
    help_target: str | None = None
    error: StampedeError | None = None
    verbosity: int = 0

    @property
    def ok(self) -> bool:
        return self.result is ParseResult.OK
