# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""action.py

Defines the `Action` model and the `ActionRegistry` for Stampede.

An action is one independently invocable sub-operation of a program. On the
command line it is named by a plain token, followed by the arguments its arity
requires and by flags from its own scope:

    prog --ponies 3 gallop --tired trot "mode bullet" "mode rocket"

Arity contract:
- `arity > 0`: exactly `arity` arguments are bound.
- `arity < 0`: at least `abs(arity)` arguments; binding continues to the end
  of the segment.
- `arity == 0`: no arguments.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator

from pydantic import BaseModel, ConfigDict, field_validator

from stampede.exceptions import ActionValidationError, ConfigurationError
from stampede.logger import logger
from stampede.themes import OneColors
from stampede.validation import check

ActionCallback = Callable[..., Any]
ArgsValidator = Callable[..., Any]


class Action(BaseModel):
    """
    Represents a registered action.

    Attributes:
        name (str): Unique token that selects the action on the command line.
        callback (ActionCallback): Called with the bound arguments; returns a status.
        arity (int): Argument-count contract (see module docstring).
        chainable (bool): Whether the action may share a chain with other actions.
        description (str): Short one-line description for global help.
        help_text (str): Longer text shown in the action's own help.
        validator (ArgsValidator | None): Optional check of the bound arguments.
        style (str): Rich style used when rendering the action name.
    """

    name: str
    callback: ActionCallback
    arity: int = 0
    chainable: bool = True
    description: str = ""
    help_text: str = ""
    validator: ArgsValidator | None = None
    style: str = OneColors.CYAN_b

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Action name must be a non-empty string")
        if value.startswith("-"):
            raise ValueError(f"Action name '{value}' must not start with '-'")
        if any(char.isspace() for char in value):
            raise ValueError(f"Action name '{value}' must not contain whitespace")
        return value

    @field_validator("callback")
    @classmethod
    def validate_callback(cls, value: Any) -> Any:
        if not callable(value):
            raise ValueError(f"Action callback {value!r} is not callable")
        return value

    @field_validator("validator")
    @classmethod
    def validate_validator(cls, value: Any) -> Any:
        if value is not None and not callable(value):
            raise ValueError(f"Action validator {value!r} is not callable")
        return value

    @property
    def min_args(self) -> int:
        return abs(self.arity)

    @property
    def is_variadic(self) -> bool:
        return self.arity < 0

    def get_arity_text(self) -> str:
        """Placeholder text for the action's arguments in usage lines."""
        if self.arity == 0:
            return ""
        required = " ".join("ARG" for _ in range(self.min_args))
        if self.is_variadic:
            return f"{required} [ARG ...]"
        return required

    def get_usage(self) -> str:
        return " ".join(filter(None, [self.name, self.get_arity_text(), "[options]"]))

    def validate_args(self, args: list[str]) -> None:
        """
        Run the argument validator, if any.

        Raises:
            ActionValidationError: If the validator rejects or raises.
        """
        if self.validator is None:
            return
        check(self.validator, list(args), ActionValidationError, f"action '{self.name}'")

    def __call__(self, args: list[str]) -> Any:
        return self.callback(list(args))

    def __str__(self) -> str:
        return (
            f"Action(name={self.name!r}, arity={self.arity}, "
            f"chainable={self.chainable}, "
            f"callback={getattr(self.callback, '__name__', repr(self.callback))})"
        )


class ActionRegistry:
    """Ordered, name-unique collection of actions."""

    def __init__(self) -> None:
        self._actions: dict[str, Action] = {}

    def register(self, action: Action) -> Action:
        """
        Add an action.

        Raises:
            ConfigurationError: If an action with the same name already exists.
        """
        if action.name in self._actions:
            raise ConfigurationError(f"Action '{action.name}' is already registered")
        self._actions[action.name] = action
        logger.debug("Registered %s", action)
        return action

    def get(self, name: str) -> Action | None:
        return self._actions.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)
