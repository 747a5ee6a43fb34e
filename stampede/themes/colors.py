# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the Rich theme used for Stampede help and diagnostics.

`OneColors` values are plain Rich style strings, so they can be used directly
inside markup, e.g. `f"[{OneColors.DARK_RED}]error[/]"`. The `_b` variants are
the bold form of the same color.
"""
from rich.style import Style
from rich.theme import Theme


class OneColors:
    """One Dark inspired palette."""

    BLACK = "#282C34"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    LIGHT_RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    BLACK_b = f"bold {BLACK}"
    WHITE_b = f"bold {WHITE}"
    LIGHT_RED_b = f"bold {LIGHT_RED}"
    DARK_RED_b = f"bold {DARK_RED}"
    GREEN_b = f"bold {GREEN}"
    LIGHT_YELLOW_b = f"bold {LIGHT_YELLOW}"
    DARK_YELLOW_b = f"bold {DARK_YELLOW}"
    BLUE_b = f"bold {BLUE}"
    MAGENTA_b = f"bold {MAGENTA}"
    CYAN_b = f"bold {CYAN}"


def get_one_theme() -> Theme:
    """Named styles used by the help renderer."""
    return Theme(
        {
            "usage": Style.parse(OneColors.BLUE_b),
            "action": Style.parse(OneColors.CYAN_b),
            "flag": Style.parse(OneColors.GREEN),
            "banner": Style.parse(OneColors.MAGENTA_b),
            "error": Style.parse(OneColors.DARK_RED_b),
            "warning": Style.parse(OneColors.LIGHT_YELLOW),
            "muted": Style.parse(OneColors.COMMENT_GREY),
        }
    )
