# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Runs a resolved chain of contexts in command-line order.

Every callback receives its bound argument list and returns a status: `0` (or
`None`) is success, any other value is failure. A callback that raises is a
failure too. The first failure halts the chain; later callbacks never run.

Each invocation is wrapped in an `ExecutionContext`, passed through the
lifecycle hooks, and recorded in the `ExecutionRegistry`.
"""
from __future__ import annotations

from collections import Counter
from typing import Any

from stampede.chain import Context
from stampede.context import ExecutionContext
from stampede.execution_registry import ExecutionRegistry
from stampede.flags import FlagStore
from stampede.hook_manager import HookManager, HookType
from stampede.logger import logger
from stampede.parser.parse_result import ParseOutcome

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def to_status(value: Any) -> int:
    """Map a callback return value to an integer status."""
    if value is None:
        return EXIT_SUCCESS
    if isinstance(value, int):
        return int(value)
    logger.warning("Callback returned non-status value %r; treating as failure", value)
    return EXIT_FAILURE


class Executor:
    """
    Short-circuiting chain runner.

    Args:
        flag_store (FlagStore): Store whose scope is restored from a context's
            snapshot when that action occurs more than once in the chain.
        hooks (HookManager | None): Lifecycle hooks around every callback.
        registry (ExecutionRegistry | None): Where execution contexts are recorded.
    """

    def __init__(
        self,
        flag_store: FlagStore,
        hooks: HookManager | None = None,
        registry: ExecutionRegistry | None = None,
    ) -> None:
        self.flag_store = flag_store
        self.hooks = hooks if hooks is not None else HookManager()
        self.registry = registry if registry is not None else ExecutionRegistry()

    def start(self, outcome: ParseOutcome | None) -> int:
        """
        Execute the chain from `outcome`.

        Returns:
            int: 0 when every executed callback succeeded, 1 otherwise (including
            when the parse did not succeed, in which case nothing runs).
        """
        if outcome is None or not outcome.ok:
            logger.debug("Refusing to execute: last parse was not OK")
            return EXIT_FAILURE

        occurrences = Counter(context.name for context in outcome.chain)
        for context in outcome.chain:
            if not self._run(context, restore=occurrences[context.name] > 1):
                logger.debug(
                    "Chain halted at '%s' (%d of %d)",
                    context.name,
                    context.index + 1,
                    len(outcome.chain),
                )
                return EXIT_FAILURE
        return EXIT_SUCCESS

    def _run(self, context: Context, restore: bool = False) -> bool:
        # A repeated action shares one scope; each occurrence gets its own values back.
        if restore:
            self.flag_store.restore(context.name, context.flags)
        execution = ExecutionContext(
            name=context.name,
            args=list(context.args),
            action=context.action,
            position=context.index,
        )
        execution.start_timer()
        try:
            self.hooks.trigger(HookType.BEFORE, execution)
            execution.status = to_status(context.action(context.args))
        except Exception as error:
            logger.debug("[%s] callback raised", context.name, exc_info=error)
            execution.exception = error
            execution.status = EXIT_FAILURE
        finally:
            execution.stop_timer()

        if execution.success:
            self.hooks.trigger(HookType.ON_SUCCESS, execution)
        else:
            self.hooks.trigger(HookType.ON_ERROR, execution)
        self.hooks.trigger(HookType.AFTER, execution)
        self.hooks.trigger(HookType.ON_TEARDOWN, execution)
        self.registry.record(execution)
        return execution.success
