# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Stampede CLI framework.

These exceptions form the small, fixed taxonomy callers branch on. Errors
raised by user-supplied validators are wrapped into one of these kinds at the
callback boundary, so arbitrary user exception types never escape `parse()`.

All exceptions inherit from `StampedeError`, the base exception for the framework.

Exception Hierarchy:
- StampedeError
    ├── ConfigurationError
    ├── UndefinedFlagError
    ├── TypeMismatchError
    ├── FlagValidationError
    ├── ActionValidationError
    └── ParseError
            ├── UnknownFlagError
            └── InvalidFlagValueError

Registration problems raise immediately. Parse-level problems are raised inside
the resolver and reported to callers through `ParseResult`.
"""
from __future__ import annotations

from enum import Enum


class StampedeError(Exception):
    """Base exception for Stampede."""


class ConfigurationError(StampedeError):
    """Exception raised when a flag or action is registered incorrectly."""


class UndefinedFlagError(StampedeError):
    """Exception raised when a flag is not registered in the requested scope."""

    def __init__(self, name: str, scope: str | None = None):
        where = f"action '{scope}'" if scope else "global scope"
        super().__init__(f"Flag '{name}' is not defined in {where}")
        self.name = name
        self.scope = scope


class TypeMismatchError(StampedeError):
    """Exception raised when an accessor type tag disagrees with the declared flag type."""


class FlagValidationError(StampedeError):
    """Exception raised when a flag validator rejects a value."""


class ActionValidationError(StampedeError):
    """Exception raised when an action's argument validator rejects its arguments."""


class ParseErrorKind(Enum):
    """Structural failure categories reported by the context resolver."""

    MISSING_ARGUMENT = "missing argument"
    UNKNOWN_ACTION = "unknown action"
    UNEXPECTED_ARGUMENT = "unexpected argument"
    NOT_CHAINABLE = "action cannot be chained"
    UNKNOWN_FLAG = "unknown flag"
    INVALID_FLAG_VALUE = "invalid flag value"

    def __str__(self) -> str:
        return self.value


class ParseError(StampedeError):
    """Exception raised when the token stream cannot be resolved."""

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_ARGUMENT,
        action_name: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.action_name = action_name


class UnknownFlagError(ParseError):
    """Exception raised when a flag token has no matching alias in the active scope."""

    def __init__(self, token: str, scope: str | None = None):
        where = f"action '{scope}'" if scope else "global scope"
        super().__init__(
            f"Unrecognized option '{token}' for {where}. Use --help to see available options.",
            kind=ParseErrorKind.UNKNOWN_FLAG,
            action_name=scope,
        )
        self.token = token


class InvalidFlagValueError(ParseError):
    """Exception raised when a known flag receives a missing or unusable value."""

    def __init__(self, message: str, scope: str | None = None):
        super().__init__(
            message, kind=ParseErrorKind.INVALID_FLAG_VALUE, action_name=scope
        )
