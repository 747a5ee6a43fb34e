# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The Stampede context resolver: a state machine that walks the token segments,
switches between the global context and per-action contexts, resolves flags
against the active scope, and binds action arguments according to arity.

States:
    GLOBAL        flags resolve against the global scope; a value token must
                  name an action.
    IN_ACTION     flags resolve against the current action's scope only.
    ERROR         a structural problem was found (terminal).
    HALT_HELP     `-h` / `--help` was seen (terminal).
    HALT_VERSION  `--version` was seen in the global context (terminal).

Argument binding happens as soon as an action name is read. While an action
is still owed arguments, value tokens are bound to it and are never matched
against the action registry. Once binding completes, a later value token in
the same or a following segment either opens the next action in the chain or
is rejected.

Flag syntax:
- `--name=value` and `-n=value` for any flag
- `--name value` / `-n value` for non-bool flags (value from the same segment)
- `--flag` / `--no-flag` for bool flags
- `-abc` bundles of short flags, a value-taking flag only in last position
- `-v`, `-vvv`, `--verbose` each add one to the verbosity counter

Structural errors are raised internally as `ParseError` and converted into a
`ParseOutcome` by `resolve()`, so callers branch on `ParseResult` only.
"""
from __future__ import annotations

from enum import Enum
from typing import Sequence

from stampede.action import Action, ActionRegistry
from stampede.chain import ChainValidator, Context
from stampede.exceptions import (
    FlagValidationError,
    InvalidFlagValueError,
    ParseError,
    ParseErrorKind,
    TypeMismatchError,
    UnknownFlagError,
)
from stampede.flags import GLOBAL_SCOPE, Flag, FlagStore, FlagType, coerce_bool
from stampede.logger import logger
from stampede.parser.parse_result import ParseOutcome, ParseResult
from stampede.parser.tokens import Segment, Token, TokenKind, split_segments
from stampede.signals import HelpSignal, VersionSignal

HELP_FLAG = "help"
VERSION_FLAG = "version"
VERBOSE_FLAG = "verbose"


def define_builtin_flags(store: FlagStore, scope: str | None) -> None:
    """Register the framework flags every scope carries."""
    store.define(
        scope,
        ("-h", "--help"),
        "Show this help message and exit.",
        type=FlagType.BOOL,
        builtin=True,
    )
    if scope is GLOBAL_SCOPE:
        store.define(
            scope,
            ("--version",),
            "Show the program version and exit.",
            type=FlagType.BOOL,
            builtin=True,
        )
        store.define(
            scope,
            ("-v", "--verbose"),
            "Increase log verbosity (repeat for more, e.g. -vv).",
            type=FlagType.BOOL,
            builtin=True,
        )


class ResolverState(Enum):
    GLOBAL = "global"
    IN_ACTION = "in_action"
    ERROR = "error"
    HALT_HELP = "halt_help"
    HALT_VERSION = "halt_version"

    def __str__(self) -> str:
        return self.value


class ContextResolver:
    """
    Resolves an argument vector into an ordered chain of contexts.

    Args:
        flag_store (FlagStore): Scoped flag storage, mutated during resolution.
        actions (ActionRegistry): Registered actions.
        delimiters (Sequence[str]): Literal tokens separating segments.
        validator (ChainValidator | None): Chainability checks.
    """

    def __init__(
        self,
        flag_store: FlagStore,
        actions: ActionRegistry,
        delimiters: Sequence[str] = (),
        validator: ChainValidator | None = None,
    ) -> None:
        self.flag_store = flag_store
        self.actions = actions
        self.delimiters: tuple[str, ...] = tuple(delimiters)
        self.validator = validator or ChainValidator()
        self.state: ResolverState = ResolverState.GLOBAL
        self.verbosity: int = 0
        self._chain: list[Context] = []
        self._current: Context | None = None

    @property
    def scope(self) -> str | None:
        """Flag scope that is active at the current position."""
        return self._current.name if self._current else GLOBAL_SCOPE

    def resolve(self, args: Sequence[str]) -> ParseOutcome:
        """
        Resolve `args` (program name excluded).

        Returns:
            ParseOutcome: Never raises for structural problems.
        """
        self.state = ResolverState.GLOBAL
        self.verbosity = 0
        self._chain = []
        self._current = None
        try:
            for segment in split_segments(args, self.delimiters):
                self._resolve_segment(segment)
            self._close_current()
        except HelpSignal as signal:
            self.state = ResolverState.HALT_HELP
            logger.debug("Help requested for %s", signal.action_name or "global scope")
            return ParseOutcome(
                ParseResult.HELP,
                help_target=signal.action_name,
                verbosity=self.verbosity,
            )
        except VersionSignal:
            self.state = ResolverState.HALT_VERSION
            return ParseOutcome(ParseResult.VERSION, verbosity=self.verbosity)
        except ParseError as error:
            self.state = ResolverState.ERROR
            logger.debug("Parse failed (%s): %s", error.kind, error)
            result = (
                ParseResult.INVALID_FLAG
                if error.kind is ParseErrorKind.INVALID_FLAG_VALUE
                else ParseResult.ERROR
            )
            return ParseOutcome(result, error=error, verbosity=self.verbosity)

        logger.debug(
            "Resolved chain: %s", " -> ".join(context.name for context in self._chain)
        )
        return ParseOutcome(
            ParseResult.OK, chain=list(self._chain), verbosity=self.verbosity
        )

    def _resolve_segment(self, segment: Segment) -> None:
        tokens = segment.tokens
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.kind is TokenKind.FLAG:
                i = self._handle_flag(tokens, i)
                continue
            action = self.actions.get(token.text)
            if action is None:
                self._raise_unmatched_value(token)
            i = self._enter_action(action, tokens, i + 1)

    def _raise_unmatched_value(self, token: Token) -> None:
        if self._current is None:
            raise ParseError(
                f"Unknown action '{token.text}'. "
                f"Available actions: {', '.join(self.actions.names) or 'none'}",
                kind=ParseErrorKind.UNKNOWN_ACTION,
            )
        raise ParseError(
            f"Unexpected argument '{token.text}' for action '{self._current.name}' "
            f"(arity {self._current.action.arity})",
            kind=ParseErrorKind.UNEXPECTED_ARGUMENT,
            action_name=self._current.name,
        )

    def _enter_action(self, action: Action, tokens: list[Token], start: int) -> int:
        self._close_current()
        self.validator.check_chainable(self._chain, action)
        context = Context(action=action, index=len(self._chain))
        self._chain.append(context)
        self._current = context
        self.state = ResolverState.IN_ACTION
        logger.debug("[%s] entered action (arity %d)", action.name, action.arity)

        i = start
        bound: list[str] = []
        while i < len(tokens):
            if not action.is_variadic and len(bound) == action.arity:
                break
            token = tokens[i]
            if token.kind is TokenKind.FLAG:
                i = self._handle_flag(tokens, i)
                continue
            bound.append(token.text)
            i += 1

        if len(bound) < action.min_args:
            qualifier = "at least " if action.is_variadic else ""
            raise ParseError(
                f"Action '{action.name}' expects {qualifier}{action.min_args} "
                f"argument{'s' if action.min_args != 1 else ''}, got {len(bound)}",
                kind=ParseErrorKind.MISSING_ARGUMENT,
                action_name=action.name,
            )
        context.args = bound
        return i

    def _close_current(self) -> None:
        if self._current is not None:
            self._current.flags = self.flag_store.snapshot(self._current.name)

    def _handle_flag(self, tokens: list[Token], i: int) -> int:
        token = tokens[i]
        scope = self.scope
        resolved = self.flag_store.resolve_token(scope, token.name)
        if resolved is not None:
            flag, negated = resolved
            return self._apply_flag(flag, negated, token, tokens, i)
        if token.is_bundle:
            return self._handle_bundle(tokens, i)
        raise UnknownFlagError(token.name, scope)

    def _handle_bundle(self, tokens: list[Token], i: int) -> int:
        token = tokens[i]
        scope = self.scope
        letters = token.name[1:]
        next_i = i + 1
        for position, letter in enumerate(letters):
            alias = f"-{letter}"
            resolved = self.flag_store.resolve_token(scope, alias)
            if resolved is None:
                raise UnknownFlagError(alias, scope)
            flag, _ = resolved
            is_last = position == len(letters) - 1
            if flag.type.takes_value and not is_last:
                raise InvalidFlagValueError(
                    f"Flag '{alias}' takes a value and must be last in '{token.name}'",
                    scope,
                )
            next_i = self._apply_flag(flag, False, token, tokens, i, alias=alias)
        return next_i

    def _apply_flag(
        self,
        flag: Flag,
        negated: bool,
        token: Token,
        tokens: list[Token],
        i: int,
        alias: str | None = None,
    ) -> int:
        alias = alias or token.name
        scope = self.scope
        if flag.builtin:
            self._apply_builtin(flag, negated, token.inline_value, alias)
            return i + 1

        try:
            if negated:
                if token.inline_value is not None:
                    raise InvalidFlagValueError(
                        f"Flag '{alias}' does not take a value", scope
                    )
                self.flag_store.set(scope, flag.name, False)
                return i + 1
            if flag.type is FlagType.BOOL:
                if token.inline_value is None:
                    self.flag_store.set(scope, flag.name, True)
                else:
                    self.flag_store.set_from_string(scope, flag.name, token.inline_value)
                return i + 1
            if token.inline_value is not None:
                self.flag_store.set_from_string(scope, flag.name, token.inline_value)
                return i + 1
            if i + 1 >= len(tokens) or tokens[i + 1].kind is not TokenKind.VALUE:
                raise InvalidFlagValueError(
                    f"Flag '{alias}' expects a {flag.type} value", scope
                )
            self.flag_store.set_from_string(scope, flag.name, tokens[i + 1].text)
            return i + 2
        except (TypeMismatchError, FlagValidationError) as error:
            raise InvalidFlagValueError(f"Flag '{alias}': {error}", scope) from error

    def _apply_builtin(
        self, flag: Flag, negated: bool, inline_value: str | None, alias: str
    ) -> None:
        if negated and flag.name != VERBOSE_FLAG:
            raise UnknownFlagError(alias, self.scope)
        if flag.name == HELP_FLAG:
            raise HelpSignal(self._current.name if self._current else None)
        if flag.name == VERSION_FLAG:
            raise VersionSignal()
        if flag.name == VERBOSE_FLAG:
            enabled = not negated
            if inline_value is not None:
                try:
                    enabled = coerce_bool(inline_value)
                except ValueError as error:
                    raise InvalidFlagValueError(f"Flag '{alias}': {error}") from error
            self.verbosity = self.verbosity + 1 if enabled else 0
            self.flag_store.set(GLOBAL_SCOPE, VERBOSE_FLAG, self.verbosity >= 1)
            return
        raise UnknownFlagError(alias, self.scope)
