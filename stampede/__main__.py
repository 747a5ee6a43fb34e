"""
Stampede CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any

from rich.markup import escape

from stampede.config import loader
from stampede.console import console
from stampede.exceptions import ConfigurationError
from stampede.stampede import Stampede
from stampede.utils import setup_logging


def find_stampede_config() -> Path | None:
    candidates = [
        Path.cwd() / "stampede.yaml",
        Path.cwd() / "stampede.toml",
        Path.cwd() / ".stampede.yaml",
        Path.cwd() / ".stampede.toml",
    ]
    if os.environ.get("STAMPEDE_CONFIG"):
        candidates.append(Path(os.environ["STAMPEDE_CONFIG"]).expanduser())
    candidates.extend(
        [
            Path.home() / ".config" / "stampede" / "stampede.yaml",
            Path.home() / ".config" / "stampede" / "stampede.toml",
        ]
    )
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_stampede_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def get_init_program() -> Stampede:
    """Program offered when no configuration file exists yet."""
    from stampede.init import init_global, init_project

    app = Stampede(
        program="stampede",
        description="No stampede.yaml or stampede.toml found. Create one with 'init'.",
    )
    app.add_action(
        "init",
        lambda args: init_project(app.get_flag("path", scope="init")),
        chainable=False,
        description="Initialize a new Stampede project",
        help_text="Create stampede.yaml and tasks.py in the target directory.",
    )
    app.add_flag(
        ("--path",),
        "Directory of the new project",
        default=".",
        scope="init",
    )
    app.add_action(
        "init-global",
        lambda args: init_global(),
        chainable=False,
        description="Initialize Stampede global configuration",
        help_text="Create a global Stampede configuration at ~/.config/stampede/.",
    )
    return app


def main() -> Any:
    setup_logging(log_filename=None, console_log_level=logging.DEBUG)
    logging.getLogger("stampede").setLevel(logging.WARNING)
    bootstrap_path = bootstrap()
    if not bootstrap_path:
        app = get_init_program()
    else:
        try:
            app = loader(bootstrap_path)
        except ConfigurationError as error:
            console.print(f"[error]❌ {escape(str(error))}[/error]")
            sys.exit(1)
    return app.run()


if __name__ == "__main__":
    main()
