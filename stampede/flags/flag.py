# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Flag` dataclass used by `FlagStore` to represent one named,
typed option in either the global scope or a single action's scope.

Key Attributes:
- `name`: Canonical name used by `get_flag` / `set_flag`
- `aliases`: One or more short/long forms (e.g. `-p`, `--ponies`)
- `type`: `FlagType` tag fixed at registration
- `default` / `value`: Registration-time default and current value
- `validator`: Optional callable consulted before every mutation
- `scope`: `None` for global flags, otherwise the owning action name
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any

from stampede.flags.flag_type import FlagType
from stampede.validation import Validator


@dataclass
class Flag:
    """
    Represents a registered flag.

    Attributes:
        name (str): Canonical flag name.
        aliases (tuple[str, ...]): Short and long forms for the flag.
        type (FlagType): Declared value kind.
        default (Any): Value restored by `reset()`.
        description (str): Help text for the flag.
        scope (str | None): Owning action name, or None for the global scope.
        validator (Validator | None): Optional accept/reject callable.
        builtin (bool): True for flags the framework registers itself.
    """

    name: str
    aliases: tuple[str, ...]
    type: FlagType = FlagType.STRING
    default: Any = None
    description: str = ""
    scope: str | None = None
    validator: Validator | None = None
    builtin: bool = False
    value: Any = field(init=False)

    def __post_init__(self) -> None:
        self.value = deepcopy(self.default)

    def reset(self) -> None:
        """Restore the default value."""
        self.value = deepcopy(self.default)

    @property
    def negated_alias(self) -> str | None:
        """`--no-<name>` spelling for bool flags with a long alias."""
        if self.type is not FlagType.BOOL:
            return None
        long_aliases = [alias for alias in self.aliases if alias.startswith("--")]
        if not long_aliases:
            return None
        return f"--no-{long_aliases[0][2:]}"

    def get_alias_text(self) -> str:
        """Comma separated aliases, short forms first."""
        ordered = sorted(self.aliases, key=lambda alias: alias.startswith("--"))
        return ", ".join(ordered)

    def get_value_text(self) -> str:
        """Placeholder shown after the aliases in help output."""
        if self.type is FlagType.BOOL:
            return ""
        placeholder = self.name.upper()
        if self.type is FlagType.LIST:
            return f"{placeholder} [...]"
        return placeholder

    def __str__(self) -> str:
        where = self.scope or "global"
        return (
            f"Flag(name={self.name!r}, aliases={self.aliases}, type={self.type}, "
            f"scope={where}, value={self.value!r})"
        )
