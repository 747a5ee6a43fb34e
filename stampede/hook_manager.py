# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `HookManager` and `HookType` used by the Stampede executor to run
callbacks around each action execution.

Key Components:
- HookType: Enum categorizing supported hook lifecycle stages
- HookManager: Registers and invokes hooks with an `ExecutionContext`

Usage:
    hooks = HookManager()
    hooks.register(HookType.BEFORE, log_before)
"""
from __future__ import annotations

from enum import Enum
from typing import Callable

from stampede.context import ExecutionContext
from stampede.logger import logger

Hook = Callable[[ExecutionContext], None]


class HookType(Enum):
    """
    Enum for supported hook lifecycle phases in Stampede.

    Members:
        BEFORE: Run before the action callback is invoked.
        ON_SUCCESS: Run after the callback returned status 0.
        ON_ERROR: Run when the callback raised or returned a non-zero status.
        AFTER: Run after success or failure (always runs).
        ON_TEARDOWN: Run at the very end, for resource cleanup.

    Aliases:
        "success" → "on_success"
        "error" → "on_error"
        "teardown" → "on_teardown"
    """

    BEFORE = "before"
    ON_SUCCESS = "on_success"
    ON_ERROR = "on_error"
    AFTER = "after"
    ON_TEARDOWN = "on_teardown"

    @classmethod
    def choices(cls) -> list[HookType]:
        """Return a list of all hook type choices."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "success": "on_success",
            "error": "on_error",
            "teardown": "on_teardown",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> HookType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the hook type."""
        return self.value


class HookManager:
    """
    Manages lifecycle hooks for action execution.

    Hook failures are logged and skipped; they never change the status of the
    action they observe.
    """

    def __init__(self) -> None:
        self._hooks: dict[HookType, list[Hook]] = {
            hook_type: [] for hook_type in HookType
        }

    def register(self, hook_type: HookType | str, hook: Hook):
        """
        Register a new hook for a given lifecycle phase.

        Raises:
            ValueError: If the hook type is invalid.
            TypeError: If the hook is not callable.
        """
        hook_type = HookType(hook_type)
        if not callable(hook):
            raise TypeError(f"Hook {hook!r} is not callable")
        self._hooks[hook_type].append(hook)

    def clear(self, hook_type: HookType | None = None):
        """Clear registered hooks for one or all hook types."""
        if hook_type:
            self._hooks[hook_type] = []
        else:
            for ht in self._hooks:
                self._hooks[ht] = []

    def trigger(self, hook_type: HookType, context: ExecutionContext):
        """Invoke all hooks registered for a given lifecycle phase."""
        if hook_type not in self._hooks:
            raise ValueError(f"Unsupported hook type: {hook_type}")
        for hook in self._hooks[hook_type]:
            try:
                hook(context)
            except Exception as hook_error:
                logger.warning(
                    "[Hook:%s] raised an exception during '%s' for '%s': %s",
                    getattr(hook, "__name__", repr(hook)),
                    hook_type,
                    context.name,
                    hook_error,
                )

    def __str__(self) -> str:
        """Return a formatted string of registered hooks grouped by hook type."""

        def format_hook_list(hooks: list[Hook]) -> str:
            return ", ".join(h.__name__ for h in hooks) if hooks else "—"

        lines = ["<HookManager>"]
        for hook_type in HookType:
            hook_list = self._hooks.get(hook_type, [])
            lines.append(f"  {hook_type.value}: {format_hook_list(hook_list)}")
        return "\n".join(lines)
