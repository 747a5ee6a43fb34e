# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Explicit accept/reject results for user-supplied validators.

Flag validators receive the candidate value; action validators receive the
list of bound argument strings. Both may return:

- `ValidationResult.accept()` or `ValidationResult.reject("why")`
- `True` / `None` (accept) or `False` (reject)

`check()` is the adapter at the callback boundary. It turns a rejection into
the expected error kind, lets errors of that kind through unchanged, and wraps
every other exception into the expected kind with the original message.

Example:
    def at_most_ten(value: int) -> ValidationResult:
        if value > 10:
            return ValidationResult.reject("at most 10 ponies fit in the stable")
        return ValidationResult.accept()
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from stampede.exceptions import StampedeError
from stampede.logger import logger

Validator = Callable[[Any], "ValidationResult | bool | None"]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validator call."""

    ok: bool
    message: str = ""

    @classmethod
    def accept(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def reject(cls, message: str = "") -> ValidationResult:
        return cls(ok=False, message=message)

    def __bool__(self) -> bool:
        return self.ok


def to_result(outcome: Any) -> ValidationResult:
    """Normalize a validator return value into a `ValidationResult`."""
    if isinstance(outcome, ValidationResult):
        return outcome
    if outcome is None or outcome is True:
        return ValidationResult.accept()
    if outcome is False:
        return ValidationResult.reject()
    raise TypeError(
        f"validator returned {type(outcome).__name__}; "
        "expected ValidationResult, bool or None"
    )


def check(
    validator: Validator,
    value: Any,
    error_type: type[StampedeError],
    subject: str,
) -> None:
    """
    Run `validator` on `value`, raising `error_type` if it does not accept.

    Args:
        validator: The user-supplied callable.
        value: The candidate value or argument list.
        error_type: The single error kind callers observe for this stage.
        subject: Human-readable name used in the default rejection message.
    """
    try:
        result = to_result(validator(value))
    except error_type:
        raise
    except Exception as error:
        logger.debug("[%s] validator raised %s: %s", subject, type(error).__name__, error)
        raise error_type(str(error) or f"{subject}: {type(error).__name__}") from error
    if not result.ok:
        raise error_type(result.message or f"Invalid value for {subject}")
