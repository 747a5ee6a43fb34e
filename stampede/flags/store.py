# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the `FlagStore`, typed key/value storage for Stampede flags, split into
independent scopes.

The global scope (`None`) always exists. Every registered action owns one more
scope named after the action. Scopes never fall back to one another: a flag
registered for `gallop` is invisible from the global scope and from `trot`, even
when the same alias is reused there.

Public Interface:
- add_scope(scope): Create an empty action scope.
- define(scope, aliases, ...): Register a flag; rejects duplicate aliases.
- get(scope, name, expected): Read a value, optionally checking its type tag.
- set(scope, name, value, expected): Validate and store a typed value.
- set_from_string(scope, name, raw): Coerce a raw token, then `set` it.
- resolve_token(scope, token): Match a command-line token against aliases.
- flags(scope): Registered flags in registration order.
- snapshot(scope) / restore(scope, values): Capture and reinstate values.
- reset(): Restore every flag to its default.

Example:
    store = FlagStore()
    store.define(None, ("-p", "--ponies"), "Number of ponies", default=1)
    store.set(None, "ponies", 3)
    store.get(None, "ponies", expected=int)  # 3
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Iterable

from stampede.exceptions import (
    ConfigurationError,
    FlagValidationError,
    TypeMismatchError,
    UndefinedFlagError,
)
from stampede.flags.coerce import coerce_value
from stampede.flags.flag import Flag
from stampede.flags.flag_type import FlagType
from stampede.logger import logger
from stampede.validation import Validator, check

GLOBAL_SCOPE: str | None = None


class FlagStore:
    """
    Scoped registry of typed flags.

    Lookup accepts the canonical name or any alias. A name that is not
    registered in the requested scope raises `UndefinedFlagError` even if it
    exists in another scope.
    """

    def __init__(self) -> None:
        self._flags: dict[str | None, dict[str, Flag]] = {GLOBAL_SCOPE: {}}
        self._aliases: dict[str | None, dict[str, Flag]] = {GLOBAL_SCOPE: {}}

    def add_scope(self, scope: str) -> None:
        """Create an empty scope for an action."""
        if not scope:
            raise ConfigurationError("Scope name must be a non-empty string")
        if scope in self._flags:
            raise ConfigurationError(f"Scope '{scope}' already exists")
        self._flags[scope] = {}
        self._aliases[scope] = {}

    def has_scope(self, scope: str | None) -> bool:
        return scope in self._flags

    def _validate_aliases(self, aliases: tuple[str, ...]) -> None:
        if not aliases:
            raise ConfigurationError("No aliases provided")
        for alias in aliases:
            if not isinstance(alias, str):
                raise ConfigurationError(f"Alias '{alias}' must be a string")
            if not alias.startswith("-"):
                raise ConfigurationError(
                    f"Alias '{alias}' must start with '-' or '--'"
                )
            if alias.startswith("--") and len(alias) < 3:
                raise ConfigurationError(
                    f"Alias '{alias}' must be at least 3 characters long"
                )
            if not alias.startswith("--") and len(alias) != 2:
                raise ConfigurationError(
                    f"Alias '{alias}' must be a single character or start with '--'"
                )
            if "=" in alias or " " in alias:
                raise ConfigurationError(
                    f"Alias '{alias}' must not contain '=' or whitespace"
                )

    def _get_name_from_aliases(self, aliases: tuple[str, ...], name: str | None) -> str:
        if name:
            candidate = name
        else:
            long_aliases = [alias for alias in aliases if alias.startswith("--")]
            candidate = (long_aliases or list(aliases))[0].lstrip("-")
        candidate = candidate.replace("-", "_").lower()
        if not candidate.replace("_", "").isalnum():
            raise ConfigurationError(
                f"Flag name '{candidate}' must contain only letters, digits, and underscores"
            )
        return candidate

    def _resolve_type(self, flag_type: FlagType | str | type | None, default: Any) -> FlagType:
        if flag_type is None:
            try:
                return FlagType.infer(default)
            except ValueError as error:
                raise ConfigurationError(str(error)) from error
        try:
            return FlagType(flag_type)
        except ValueError as error:
            raise ConfigurationError(str(error)) from error

    def _resolve_default(self, flag_type: FlagType, default: Any, name: str) -> Any:
        if default is None:
            if flag_type is FlagType.BOOL:
                return False
            if flag_type is FlagType.LIST:
                return []
            return None
        if not flag_type.accepts(default):
            raise ConfigurationError(
                f"Default value {default!r} for '{name}' is not a valid {flag_type} value"
            )
        return flag_type.normalize(default)

    def define(
        self,
        scope: str | None,
        aliases: Iterable[str] | str,
        description: str = "",
        default: Any = None,
        validator: Validator | None = None,
        type: FlagType | str | None = None,
        name: str | None = None,
        builtin: bool = False,
    ) -> Flag:
        """
        Register a new flag in `scope`.

        Args:
            scope (str | None): Action name, or None for the global scope.
            aliases (Iterable[str] | str): Short/long forms, e.g. ("-p", "--ponies").
            description (str): Help text.
            default (Any): Default value; also used to infer the type.
            validator (Validator | None): Optional accept/reject callable.
            type (FlagType | str | type | None): Declared value kind.
            name (str | None): Canonical name; derived from the aliases if omitted.

        Raises:
            ConfigurationError: If the scope is unknown, an alias or the name is
                already registered in the scope, or the default does not match
                the declared type.
        """
        if not self.has_scope(scope):
            raise ConfigurationError(f"Scope '{scope}' does not exist")
        if isinstance(aliases, str):
            aliases = (aliases,)
        aliases = tuple(aliases)
        self._validate_aliases(aliases)
        if len(set(aliases)) != len(aliases):
            raise ConfigurationError(f"Duplicate aliases in {aliases}")
        if validator is not None and not callable(validator):
            raise ConfigurationError("validator must be callable")

        flag_name = self._get_name_from_aliases(aliases, name)
        for alias in aliases:
            if alias in self._aliases[scope]:
                existing = self._aliases[scope][alias]
                raise ConfigurationError(
                    f"Alias '{alias}' is already used by flag '{existing.name}'"
                )
        if flag_name in self._flags[scope]:
            raise ConfigurationError(f"Flag '{flag_name}' is already defined")

        flag_type = self._resolve_type(type, default)
        flag = Flag(
            name=flag_name,
            aliases=aliases,
            type=flag_type,
            default=self._resolve_default(flag_type, default, flag_name),
            description=description,
            scope=scope,
            validator=validator,
            builtin=builtin,
        )
        self._flags[scope][flag_name] = flag
        for alias in aliases:
            self._aliases[scope][alias] = flag
        logger.debug("Defined %s", flag)
        return flag

    def lookup(self, scope: str | None, name: str) -> Flag:
        """
        Return the flag registered as `name` (canonical name or alias) in `scope`.

        Raises:
            UndefinedFlagError: If no such flag exists in this scope.
        """
        if not self.has_scope(scope):
            raise UndefinedFlagError(name, scope)
        flags = self._flags[scope]
        aliases = self._aliases[scope]
        if name in flags:
            return flags[name]
        if name in aliases:
            return aliases[name]
        normalized = name.replace("-", "_").lower()
        if normalized in flags:
            return flags[normalized]
        raise UndefinedFlagError(name, scope)

    def resolve_token(self, scope: str | None, token: str) -> tuple[Flag, bool] | None:
        """
        Match a flag token exactly against the aliases of `scope`.

        Returns:
            (flag, negated) or None. `negated` is True for `--no-<name>` on bool flags.
        """
        aliases = self._aliases.get(scope, {})
        if token in aliases:
            return aliases[token], False
        if token.startswith("--no-"):
            for flag in self._flags.get(scope, {}).values():
                if flag.negated_alias == token:
                    return flag, True
        return None

    def _check_expected(
        self, flag: Flag, expected: FlagType | str | type | None
    ) -> None:
        if expected is None:
            return
        try:
            expected_type = FlagType(expected)
        except ValueError as error:
            raise TypeMismatchError(str(error)) from error
        if expected_type is not flag.type:
            raise TypeMismatchError(
                f"Flag '{flag.name}' is declared as {flag.type}, not {expected_type}"
            )

    def get(
        self,
        scope: str | None,
        name: str,
        expected: FlagType | str | type | None = None,
    ) -> Any:
        """Return the current value of a flag."""
        flag = self.lookup(scope, name)
        self._check_expected(flag, expected)
        return flag.value

    def set(
        self,
        scope: str | None,
        name: str,
        value: Any,
        expected: FlagType | str | type | None = None,
    ) -> Any:
        """
        Validate and store a new value.

        The validator runs before mutation; when it rejects, the stored value is
        left unchanged.

        Raises:
            UndefinedFlagError: If the flag is not registered in `scope`.
            TypeMismatchError: If `expected` or the value kind disagrees with the flag type.
            FlagValidationError: If the validator rejects or raises.
        """
        flag = self.lookup(scope, name)
        self._check_expected(flag, expected)
        if not flag.type.accepts(value):
            raise TypeMismatchError(
                f"Flag '{flag.name}' expects a {flag.type} value, "
                f"got {type(value).__name__} {value!r}"
            )
        value = flag.type.normalize(value)
        if flag.validator is not None:
            check(flag.validator, value, FlagValidationError, f"flag '{flag.name}'")
        flag.value = value
        logger.debug("[%s] %s = %r", flag.scope or "global", flag.name, value)
        return value

    def set_from_string(self, scope: str | None, name: str, raw: str) -> Any:
        """
        Coerce a raw command-line value and store it.

        `LIST` flags append `raw` to their current value.

        Raises:
            TypeMismatchError: If `raw` cannot be coerced to the flag type.
        """
        flag = self.lookup(scope, name)
        try:
            value = coerce_value(raw, flag.type)
        except ValueError as error:
            raise TypeMismatchError(
                f"Invalid value for '{flag.name}': {error}"
            ) from error
        if flag.type is FlagType.LIST:
            value = [*(flag.value or []), value]
        return self.set(scope, flag.name, value)

    def flags(self, scope: str | None = GLOBAL_SCOPE) -> list[Flag]:
        """Registered flags for `scope` in registration order."""
        if not self.has_scope(scope):
            raise UndefinedFlagError("*", scope)
        return list(self._flags[scope].values())

    def snapshot(self, scope: str | None) -> dict[str, Any]:
        """Copy of every current value in `scope`, keyed by canonical name."""
        return {flag.name: deepcopy(flag.value) for flag in self.flags(scope)}

    def restore(self, scope: str | None, values: dict[str, Any]) -> None:
        """Reinstate values captured by `snapshot()` without re-validating them."""
        for name, value in values.items():
            self.lookup(scope, name).value = deepcopy(value)

    def reset(self) -> None:
        """Restore every flag in every scope to its default."""
        for flags in self._flags.values():
            for flag in flags.values():
                flag.reset()

    def __str__(self) -> str:
        scopes = ", ".join(
            f"{scope or 'global'}={len(flags)}" for scope, flags in self._flags.items()
        )
        return f"FlagStore({scopes})"
