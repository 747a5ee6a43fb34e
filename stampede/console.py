# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Stampede CLI applications."""
from rich.console import Console

from stampede.themes import get_one_theme

console = Console(color_system="truecolor", theme=get_one_theme())
