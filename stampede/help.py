# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help and version rendering for Stampede programs.

`HelpRenderer` reads the flag store and action registry and prints either the
global help (banner, usage, global flags, actions in registration order) or the
help for a single action (usage with its arity placeholder, help text, the
action's own flags). It never changes parse or execution state.

`format()` returns the same output as plain text, which is what tests and
non-terminal callers use.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from stampede.action import Action, ActionRegistry
from stampede.console import console
from stampede.flags import GLOBAL_SCOPE, Flag, FlagStore

COLUMN_WIDTH = 30


class HelpRenderer:
    """
    Renders context-sensitive help for a Stampede program.

    Args:
        program (str): Program name shown in usage lines.
        flag_store (FlagStore): Source of the flags for each scope.
        actions (ActionRegistry): Source of the registered actions.
        banner (str): Optional banner printed above global help.
        version (str): Version string used by `render_version()`.
        description (str): Optional text shown under the global usage line.
        epilog (str): Optional text printed at the end of global help.
    """

    def __init__(
        self,
        program: str,
        flag_store: FlagStore,
        actions: ActionRegistry,
        banner: str = "",
        version: str = "",
        description: str = "",
        epilog: str = "",
        console: Console = console,
    ) -> None:
        self.program = program
        self.flag_store = flag_store
        self.actions = actions
        self.banner = banner
        self.version = version
        self.description = description
        self.epilog = epilog
        self.console = console

    def get_version_text(self) -> str:
        return f"{self.program} v{self.version}" if self.version else self.program

    def get_usage(self, action: Action | None = None) -> str:
        if action is None:
            return f"{self.program} [options] [action [args] [options]] ..."
        return f"{self.program} {action.get_usage()}"

    def _render_flags(self, flags: list[Flag]) -> None:
        self.console.print("[bold]options:[/bold]")
        for flag in flags:
            aliases = flag.get_alias_text()
            if flag.negated_alias and not flag.builtin:
                aliases = f"{aliases}, {flag.negated_alias}"
            signature = " ".join(filter(None, [aliases, flag.get_value_text()]))
            line = f"  {signature:<{COLUMN_WIDTH}} "
            help_text = flag.description
            if help_text and len(signature) > COLUMN_WIDTH:
                help_text = f"\n{'':<{COLUMN_WIDTH + 3}}{help_text}"
            self.console.print(f"[flag]{escape(line)}[/flag]{escape(help_text)}")

    def _render_actions(self) -> None:
        if not len(self.actions):
            return
        self.console.print("\n[bold]actions:[/bold]")
        for action in self.actions:
            signature = " ".join(filter(None, [action.name, action.get_arity_text()]))
            notes = [] if action.chainable else ["not chainable"]
            description = action.description
            if notes:
                description = f"{description} ({', '.join(notes)})".strip()
            line = f"  {signature:<{COLUMN_WIDTH}} "
            if description and len(signature) > COLUMN_WIDTH:
                description = f"\n{'':<{COLUMN_WIDTH + 3}}{description}"
            self.console.print(
                f"[{action.style}]{escape(line)}[/{action.style}]{escape(description)}"
            )

    def render_global(self) -> None:
        """Print the program-level help."""
        if self.banner:
            self.console.print(escape(self.banner), style="banner")
        self.console.print(f"[usage]usage: {escape(self.get_usage())}[/usage]\n")
        if self.description:
            self.console.print(escape(self.description) + "\n")
        self._render_flags(self.flag_store.flags(GLOBAL_SCOPE))
        self._render_actions()
        if self.epilog:
            self.console.print("\n" + escape(self.epilog), style="muted")

    def render_action(self, name: str) -> None:
        """Print the help for a single action, or global help if it is unknown."""
        action = self.actions.get(name)
        if action is None:
            self.console.print(f"[error]No action found for '{escape(name)}'.[/error]")
            self.render_global()
            return
        self.console.print(f"[usage]usage: {escape(self.get_usage(action))}[/usage]\n")
        if action.description:
            self.console.print(escape(action.description))
        if action.help_text:
            self.console.print(escape(action.help_text))
        if action.description or action.help_text:
            self.console.print()
        if not action.chainable:
            self.console.print("This action cannot be chained with others.\n", style="muted")
        self._render_flags(self.flag_store.flags(action.name))

    def render(self, help_target: str | None = None) -> None:
        if help_target is None:
            self.render_global()
        else:
            self.render_action(help_target)

    def render_version(self) -> None:
        self.console.print(escape(self.get_version_text()))

    def format(self, help_target: str | None = None) -> str:
        """Return the help for `help_target` as plain text."""
        with self.console.capture() as capture:
            self.render(help_target)
        return Text.from_ansi(capture.get()).plain
