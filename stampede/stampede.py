# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for constructing and running Stampede programs.

A `Stampede` instance owns everything one program needs: the scoped flag store,
the action registry, the delimiter configuration, lifecycle hooks and the
execution history. Nothing is global; two instances never share state.

Typical flow:

    app = Stampede(program="herd", version="1.2.0")
    app.add_flag(("-p", "--ponies"), "Number of ponies", default=1)
    app.add_action("gallop", gallop, description="Run fast")
    app.add_flag(("--tired",), "Slow down", scope="gallop")
    app.run()  # parse sys.argv, render help/version/errors, execute, exit

`parse()` and `start()` can also be called separately when the caller wants to
inspect the chain or the flag values before anything runs.
"""
from __future__ import annotations

import logging
import sys
from copy import deepcopy
from typing import Any, Iterable, Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from stampede.action import Action, ActionCallback, ActionRegistry, ArgsValidator
from stampede.chain import ChainValidator, Context
from stampede.console import console
from stampede.debug import register_debug_hooks
from stampede.exceptions import (
    ActionValidationError,
    ConfigurationError,
    FlagValidationError,
    StampedeError,
)
from stampede.execution_registry import ExecutionRegistry
from stampede.executor import EXIT_FAILURE, EXIT_SUCCESS, Executor
from stampede.flags import GLOBAL_SCOPE, Flag, FlagStore, FlagType
from stampede.help import HelpRenderer
from stampede.hook_manager import Hook, HookManager, HookType
from stampede.logger import logger
from stampede.parser import ContextResolver, ParseOutcome, ParseResult
from stampede.parser.resolver import define_builtin_flags
from stampede.themes import OneColors
from stampede.utils import get_program_invocation, verbosity_to_level
from stampede.validation import Validator
from stampede.version import __version__


class Stampede:
    """
    Coordinator for a chained-action command-line program.

    Args:
        program (str | None): Name shown in usage lines. Defaults to the
            invocation of the running script.
        banner (str): Text printed above the global help.
        version (str): Version reported by `--version`.
        delimiters (Sequence[str]): Literal tokens that separate segments. Empty
            by default, in which case actions simply follow one another.
        description (str): Text shown under the global usage line.
        epilog (str): Text shown at the end of the global help.
        console (Console): Rich console used for all output.
    """

    def __init__(
        self,
        program: str | None = None,
        banner: str = "",
        version: str = __version__,
        delimiters: Sequence[str] = (),
        description: str = "",
        epilog: str = "",
        console: Console = console,
    ) -> None:
        self.program = program or get_program_invocation()
        self.banner = banner
        self.version = version
        self.delimiters = delimiters
        self.description = description
        self.epilog = epilog
        self.console = console

        self.flags = FlagStore()
        self.actions = ActionRegistry()
        self.hooks = HookManager()
        self.registry = ExecutionRegistry(console=console)
        self.validator = ChainValidator()
        self._outcome: ParseOutcome | None = None
        self._debug_hooks_registered = False
        self._executing = False
        define_builtin_flags(self.flags, GLOBAL_SCOPE)

    @property
    def delimiters(self) -> tuple[str, ...]:
        return self._delimiters

    @delimiters.setter
    def delimiters(self, value: Iterable[str]) -> None:
        if isinstance(value, str):
            value = (value,)
        delimiters = tuple(value)
        for delimiter in delimiters:
            if not isinstance(delimiter, str) or not delimiter:
                raise ConfigurationError(
                    f"Delimiters must be non-empty strings, got {delimiter!r}"
                )
        self._delimiters = delimiters

    def add_flag(
        self,
        aliases: Iterable[str] | str,
        description: str = "",
        default: Any = None,
        validator: Validator | None = None,
        type: FlagType | str | None = None,
        name: str | None = None,
        scope: str | None = GLOBAL_SCOPE,
    ) -> Flag:
        """
        Register a flag in the global scope or in the scope of an action.

        Raises:
            ConfigurationError: If the scope does not exist or the alias is taken.
        """
        return self.flags.define(
            scope,
            aliases,
            description,
            default=default,
            validator=validator,
            type=type,
            name=name,
        )

    def add_action(
        self,
        name: str,
        callback: ActionCallback,
        arity: int = 0,
        chainable: bool = True,
        description: str = "",
        help_text: str = "",
        validator: ArgsValidator | None = None,
        style: str = OneColors.CYAN_b,
    ) -> Action:
        """
        Register an action and create its flag scope.

        Raises:
            ConfigurationError: If the name is taken or any field is invalid.
        """
        try:
            action = Action(
                name=name,
                callback=callback,
                arity=arity,
                chainable=chainable,
                description=description,
                help_text=help_text,
                validator=validator,
                style=style,
            )
        except ValidationError as error:
            raise ConfigurationError(f"Invalid action '{name}': {error}") from error
        return self.register_action(action)

    def register_action(self, action: Action) -> Action:
        """Register an already constructed `Action`."""
        self.actions.register(action)
        self.flags.add_scope(action.name)
        define_builtin_flags(self.flags, action.name)
        return action

    def register_hook(self, hook_type: HookType | str, hook: Hook) -> None:
        self.hooks.register(hook_type, hook)

    def enable_debug_hooks(self) -> None:
        """Log every action execution through the `stampede` logger."""
        if self._debug_hooks_registered:
            return
        logger.debug("Enabling debug hooks for all actions")
        register_debug_hooks(self.hooks)
        self._debug_hooks_registered = True

    def parse(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        Resolve `args` (defaults to `sys.argv[1:]`) into a chain.

        Argument validators run once resolution succeeds; the first rejection
        turns the result into `ParseResult.ERROR`.
        """
        if args is None:
            args = sys.argv[1:]
        resolver = ContextResolver(
            self.flags, self.actions, self.delimiters, self.validator
        )
        outcome = resolver.resolve(list(args))
        if outcome.ok:
            try:
                self.validator.validate(outcome.chain)
            except ActionValidationError as error:
                outcome = ParseOutcome(
                    ParseResult.ERROR, error=error, verbosity=outcome.verbosity
                )
        self._outcome = outcome
        logger.debug("Parse finished with %s", outcome.result)
        return outcome.result

    def start(self) -> int:
        """Execute the chain from the last parse; 0 on success, 1 otherwise."""
        executor = Executor(self.flags, self.hooks, self.registry)
        self._executing = True
        try:
            return executor.start(self._outcome)
        finally:
            self._executing = False

    @property
    def outcome(self) -> ParseOutcome | None:
        return self._outcome

    @property
    def result(self) -> ParseResult | None:
        return self._outcome.result if self._outcome else None

    @property
    def chain(self) -> list[Context]:
        """Contexts from the last successful parse, empty otherwise."""
        if self._outcome is None or not self._outcome.ok:
            return []
        return list(self._outcome.chain)

    @property
    def last_error(self) -> StampedeError | None:
        return self._outcome.error if self._outcome else None

    @property
    def verbosity(self) -> int:
        return self._outcome.verbosity if self._outcome else 0

    def get_flag(
        self,
        name: str,
        scope: str | None = GLOBAL_SCOPE,
        expected: FlagType | str | type | None = None,
    ) -> Any:
        """
        Read a flag value from `scope`.

        Raises:
            UndefinedFlagError: If the flag is not registered in `scope`.
            TypeMismatchError: If `expected` disagrees with the declared type.
        """
        return self.flags.get(scope, name, expected)

    def set_flag(self, name: str, value: Any, scope: str | None = GLOBAL_SCOPE) -> bool:
        """
        Store a flag value in `scope`.

        Returns:
            bool: False when the flag's validator rejects the value.

        Raises:
            UndefinedFlagError: If the flag is not registered in `scope`.
            TypeMismatchError: If the value kind disagrees with the declared type.
        """
        try:
            self.flags.set(scope, name, value)
        except FlagValidationError as error:
            logger.warning("Rejected value %r for flag '%s': %s", value, name, error)
            return False
        if not self._executing:
            self._sync_snapshots(scope, name)
        return True

    def _sync_snapshots(self, scope: str | None, name: str) -> None:
        """Carry a post-parse change into every parsed context of `scope`."""
        if scope is GLOBAL_SCOPE or self._outcome is None:
            return
        flag = self.flags.lookup(scope, name)
        for context in self._outcome.chain:
            if context.name == scope:
                context.flags[flag.name] = deepcopy(flag.value)

    @property
    def help_renderer(self) -> HelpRenderer:
        return HelpRenderer(
            program=self.program,
            flag_store=self.flags,
            actions=self.actions,
            banner=self.banner,
            version=self.version,
            description=self.description,
            epilog=self.epilog,
            console=self.console,
        )

    def show_help(self, action_name: str | None = None) -> None:
        """Render help for `action_name`, or for the target of the last parse."""
        if action_name is None and self._outcome is not None:
            action_name = self._outcome.help_target
        self.help_renderer.render(action_name)

    def show_version(self) -> None:
        self.help_renderer.render_version()

    def _apply_verbosity(self, verbosity: int) -> None:
        """
        Raise the `stampede` logger to match `-v`.

        Only the logger level changes. Handlers keep their own thresholds, so
        pass `console_log_level=logging.DEBUG` to `setup_logging` and gate
        output on the `stampede` logger instead.
        """
        if verbosity <= 0:
            return
        logging.getLogger("stampede").setLevel(verbosity_to_level(verbosity))
        if verbosity >= 2:
            self.enable_debug_hooks()

    def _report_parse_error(self) -> None:
        error = self.last_error
        scope = getattr(error, "action_name", None)
        prefix = f"['{scope}'] " if scope else ""
        self.console.print(f"[error]❌ {prefix}{escape(str(error))}[/error]")
        hint = f"{self.program} {scope} --help" if scope else f"{self.program} --help"
        self.console.print(f"Run '{escape(hint)}' for usage.", style="muted")

    def _report_execution_failure(self) -> None:
        latest = self.registry.get_latest()
        if latest is None:
            return
        if latest.exception is not None:
            self.console.print(
                f"[error]❌ ['{latest.name}'] {escape(type(latest.exception).__name__)}: "
                f"{escape(str(latest.exception))}[/error]"
            )
        else:
            logger.info("[%s] exited with status %s", latest.name, latest.status)

    def run(self, args: Sequence[str] | None = None, summary: bool = False) -> None:
        """
        Parse, render help/version/errors, execute the chain, and exit.

        Exit codes: 0 on success, help or version; 1 on a parse error or a
        failed action; 130 when interrupted.

        Raises:
            SystemExit: Always.
        """
        result = self.parse(args)
        self._apply_verbosity(self.verbosity)

        if result is ParseResult.HELP:
            self.show_help()
            sys.exit(EXIT_SUCCESS)

        if result is ParseResult.VERSION:
            self.show_version()
            sys.exit(EXIT_SUCCESS)

        if result is not ParseResult.OK:
            self._report_parse_error()
            sys.exit(EXIT_FAILURE)

        try:
            status = self.start()
        except KeyboardInterrupt:
            logger.info("[KeyboardInterrupt]. <- Exiting run.")
            sys.exit(130)

        if status != EXIT_SUCCESS:
            self._report_execution_failure()
        if summary:
            self.registry.summary()
        sys.exit(status)
