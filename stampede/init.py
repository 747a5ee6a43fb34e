# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""init.py"""
from pathlib import Path

from stampede.console import console

TEMPLATE_TASKS = """\
# This file is used by stampede.yaml to define CLI actions.
# Try: stampede --ponies 3 gallop --tired trot "mode bullet" "mode rocket"

from stampede.validation import ValidationResult


def gallop(args):
    print("🐎 Galloping!")
    return 0


def trot(args):
    for mode in args:
        print(f"🐴 Trotting in {mode}")
    return 0


def check_modes(args):
    if any(not mode.startswith("mode ") for mode in args):
        return ValidationResult.reject("every trot argument must start with 'mode '")
    return ValidationResult.accept()
"""

TEMPLATE_CONFIG = """\
# stampede.yaml: config-driven action chain definition
# Point callbacks at Python callables in tasks.py
program: herd
banner: "🐎 Herd"
version: 0.1.0
flags:
  - aliases: ["-p", "--ponies"]
    description: Number of ponies in the herd
    default: 1
actions:
  - name: gallop
    callback: tasks.gallop
    description: Run as fast as possible
    flags:
      - aliases: ["--tired"]
        description: Gallop a little slower
        type: bool
  - name: trot
    callback: tasks.trot
    arity: -2
    description: Trot through two or more modes
    validator: tasks.check_modes
"""

GLOBAL_TEMPLATE_TASKS = """\
def cleanup(args):
    print("🧹 Cleaning temp files...")
    return 0
"""

GLOBAL_CONFIG = """\
program: stampede
actions:
  - name: cleanup
    callback: tasks.cleanup
    description: Cleanup temp files
"""


def init_project(name: str) -> int:
    target = Path(name).resolve()
    target.mkdir(parents=True, exist_ok=True)

    tasks_path = target / "tasks.py"
    config_path = target / "stampede.yaml"

    if tasks_path.exists() or config_path.exists():
        console.print(f"⚠️  Project already initialized at {target}")
        return 1

    tasks_path.write_text(TEMPLATE_TASKS, encoding="UTF-8")
    config_path.write_text(TEMPLATE_CONFIG, encoding="UTF-8")

    console.print(f"✅ Initialized Stampede project in {target}")
    return 0


def init_global() -> int:
    config_dir = Path.home() / ".config" / "stampede"
    config_dir.mkdir(parents=True, exist_ok=True)

    tasks_path = config_dir / "tasks.py"
    config_path = config_dir / "stampede.yaml"

    if tasks_path.exists() or config_path.exists():
        console.print("⚠️  Global Stampede config already exists at ~/.config/stampede")
        return 1

    tasks_path.write_text(GLOBAL_TEMPLATE_TASKS, encoding="UTF-8")
    config_path.write_text(GLOBAL_CONFIG, encoding="UTF-8")

    console.print("✅ Initialized global Stampede config at ~/.config/stampede")
    return 0
