# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declarative registration of Stampede programs from YAML or TOML files.

Example `stampede.yaml`:

    program: herd
    version: 1.2.0
    delimiters: ["+"]
    flags:
      - aliases: ["-p", "--ponies"]
        description: Number of ponies
        default: 1
    actions:
      - name: gallop
        callback: tasks.gallop
        chainable: false
        flags:
          - aliases: ["--tired"]
            type: bool
      - name: trot
        callback: tasks.trot
        arity: -2
        validator: tasks.check_modes
    hooks:
      before: [tasks.announce]
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from stampede.exceptions import ConfigurationError
from stampede.hook_manager import HookType
from stampede.importer import resolve_callable
from stampede.logger import logger
from stampede.stampede import Stampede
from stampede.themes import OneColors
from stampede.version import __version__


def import_callable(dotted_path: str, purpose: str) -> Any:
    """Import `dotted_path`, turning import problems into `ConfigurationError`."""
    try:
        return resolve_callable(dotted_path)
    except (ImportError, ValueError) as error:
        logger.error("Failed to import %s '%s': %s", purpose, dotted_path, error)
        raise ConfigurationError(
            f"Could not import {purpose} '{dotted_path}': {error}. "
            "Ensure the module is installed and discoverable via PYTHONPATH."
        ) from error


class RawFlag(BaseModel):
    """Raw flag model for Stampede configuration."""

    aliases: list[str]
    description: str = ""
    default: Any = None
    type: str | None = None
    name: str | None = None
    validator: str | None = None

    @field_validator("aliases", mode="before")
    @classmethod
    def validate_aliases(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def register(self, app: Stampede, scope: str | None = None) -> None:
        validator = (
            import_callable(self.validator, "flag validator") if self.validator else None
        )
        app.add_flag(
            tuple(self.aliases),
            self.description,
            default=self.default,
            validator=validator,
            type=self.type,
            name=self.name,
            scope=scope,
        )


class RawAction(BaseModel):
    """Raw action model for Stampede configuration."""

    name: str
    callback: str
    arity: int = 0
    chainable: bool = True
    description: str = ""
    help_text: str = ""
    validator: str | None = None
    style: str = OneColors.CYAN_b
    flags: list[RawFlag] = Field(default_factory=list)

    def register(self, app: Stampede) -> None:
        app.add_action(
            self.name,
            import_callable(self.callback, "action callback"),
            arity=self.arity,
            chainable=self.chainable,
            description=self.description,
            help_text=self.help_text,
            validator=(
                import_callable(self.validator, "action validator")
                if self.validator
                else None
            ),
            style=self.style,
        )
        for raw_flag in self.flags:
            raw_flag.register(app, scope=self.name)


class StampedeConfig(BaseModel):
    """Stampede program configuration model."""

    program: str | None = None
    banner: str = ""
    version: str = __version__
    description: str = ""
    epilog: str = ""
    delimiters: list[str] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)
    actions: list[RawAction] = Field(default_factory=list)
    hooks: dict[HookType, list[str]] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("delimiters", mode="before")
    @classmethod
    def validate_delimiters(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def to_stampede(self) -> Stampede:
        app = Stampede(
            program=self.program,
            banner=self.banner,
            version=self.version,
            delimiters=self.delimiters,
            description=self.description,
            epilog=self.epilog,
        )
        for raw_flag in self.flags:
            raw_flag.register(app)
        for raw_action in self.actions:
            raw_action.register(app)
        for hook_type, paths in self.hooks.items():
            for path in paths:
                app.register_hook(hook_type, import_callable(path, f"{hook_type} hook"))
        return app


def load_raw_config(path: Path) -> dict[str, Any]:
    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigurationError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigurationError(f"Could not parse {path}: {error}") from error

    if raw_config is None:
        return {}
    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping.\n"
            "Example:\n"
            "program: herd\n"
            "actions:\n"
            "  - name: gallop\n"
            "    callback: tasks.gallop"
        )
    return raw_config


def loader(file_path: Path | str) -> Stampede:
    """
    Load a Stampede program from a YAML or TOML file.

    Each action needs at least a `name` and a `callback` dotted import path.
    Flags listed at the top level are global; flags listed under an action
    belong to that action's scope.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        Stampede: A coordinator with every flag, action and hook registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file cannot be parsed, fails validation, or
            names a callable that cannot be imported.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = load_raw_config(path)
    try:
        config = StampedeConfig(**raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"Invalid configuration in {path}: {error}") from error
    logger.debug(
        "Loaded %s: %d global flags, %d actions",
        path,
        len(config.flags),
        len(config.actions),
    )
    return config.to_stampede()
