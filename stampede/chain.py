# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Chain model and post-resolution validation for Stampede.

- `Context`: one resolved action invocation (action, bound arguments, the
  action scope's flag values when the invocation closed, chain position).
- `ChainValidator`: enforces the chainability rule while contexts are appended
  and runs each action's argument validator once resolution succeeds.

Validation is fail-fast: the first rejecting validator stops the pass and the
remaining contexts are never validated.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from stampede.action import Action
from stampede.exceptions import ActionValidationError, ParseError, ParseErrorKind
from stampede.logger import logger


class Context(BaseModel):
    """
    A resolved unit of execution.

    Attributes:
        action (Action): The action this invocation binds to.
        args (list[str]): Arguments bound under the action's arity.
        flags (dict[str, Any]): Snapshot of the action scope's flag values.
        index (int): Position in the chain.
    """

    action: Action
    args: list[str] = Field(default_factory=list)
    flags: dict[str, Any] = Field(default_factory=dict)
    index: int = 0

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def name(self) -> str:
        return self.action.name

    def __str__(self) -> str:
        args = ", ".join(map(repr, self.args))
        return f"<Context #{self.index} {self.name}({args})>"


class ChainValidator:
    """Chainability and argument validation for a list of contexts."""

    def check_chainable(self, chain: list[Context], action: Action) -> None:
        """
        Ensure `action` may be appended after the contexts already in `chain`.

        Raises:
            ParseError: If the previous or the new action is not chainable.
        """
        if not chain:
            return
        previous = chain[-1].action
        if not previous.chainable:
            raise ParseError(
                f"Action '{previous.name}' cannot be chained with '{action.name}'",
                kind=ParseErrorKind.NOT_CHAINABLE,
                action_name=action.name,
            )
        if not action.chainable:
            raise ParseError(
                f"Action '{action.name}' cannot be chained after '{previous.name}'",
                kind=ParseErrorKind.NOT_CHAINABLE,
                action_name=action.name,
            )

    def validate(self, chain: list[Context]) -> None:
        """
        Run every context's argument validator in chain order.

        Raises:
            ActionValidationError: From the first context whose validator rejects.
        """
        for context in chain:
            try:
                context.action.validate_args(context.args)
            except ActionValidationError as error:
                logger.debug("[%s] argument validation failed: %s", context.name, error)
                raise
            logger.debug("[%s] arguments validated: %s", context.name, context.args)
