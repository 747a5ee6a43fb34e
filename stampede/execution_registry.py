# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the `ExecutionRegistry`, an in-memory store of the `ExecutionContext`
objects produced while a Stampede chain runs.

Each `Stampede` instance owns its own registry, so two coordinators in the same
process never see each other's history.

Public Interface:
- record(context): Log an ExecutionContext and assign its index.
- get_all(): All stored contexts in execution order.
- get_by_name(name): All contexts recorded for one action.
- get_latest(): The most recent context, or None.
- clear(): Reset the registry.
- summary(...): Rich table of stored executions.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Literal

from rich import box
from rich.console import Console
from rich.table import Table

from stampede.console import console
from stampede.context import ExecutionContext
from stampede.logger import logger
from stampede.themes import OneColors


class ExecutionRegistry:
    """
    Registry for recording and inspecting action executions.

    Attributes:
        _store_by_name (dict): Maps action name → list of ExecutionContext objects.
        _store_all (list): Ordered list of all contexts.
        _index (int): Counter for assigning execution indices.
        _console (Console): Rich console used for rendering summaries.
    """

    def __init__(self, console: Console = console) -> None:
        self._store_by_name: dict[str, list[ExecutionContext]] = defaultdict(list)
        self._store_all: list[ExecutionContext] = []
        self._index = 0
        self._console = console

    def record(self, context: ExecutionContext):
        """Record an execution context and assign it the next index."""
        logger.debug(context.to_log_line())
        context.index = self._index
        self._index += 1
        self._store_by_name[context.name].append(context)
        self._store_all.append(context)

    def get_all(self) -> list[ExecutionContext]:
        return list(self._store_all)

    def get_by_name(self, name: str) -> list[ExecutionContext]:
        return list(self._store_by_name.get(name, []))

    def get_latest(self) -> ExecutionContext | None:
        return self._store_all[-1] if self._store_all else None

    def clear(self):
        self._store_by_name.clear()
        self._store_all.clear()
        self._index = 0

    def __len__(self) -> int:
        return len(self._store_all)

    def summary(
        self,
        name: str = "",
        status: Literal["all", "success", "error"] = "all",
    ):
        """
        Display a Rich table of recorded executions.

        Args:
            name (str): Only show executions of this action.
            status (Literal): One of "all", "success", or "error".
        """
        if name:
            contexts = self.get_by_name(name)
            if not contexts:
                self._console.print(
                    f"[{OneColors.DARK_RED}]❌ No executions found for action '{name}'."
                )
                return
            title = f"📊 Execution History for '{name}'"
        else:
            contexts = self.get_all()
            title = "📊 Execution History"

        table = Table(title=title, expand=True, box=box.SIMPLE)

        table.add_column("Index", justify="right", style="dim")
        table.add_column("Name", style="bold cyan")
        table.add_column("Args", overflow="fold")
        table.add_column("Start", justify="right", style="dim")
        table.add_column("Duration", justify="right")
        table.add_column("Status", style="bold")
        table.add_column("Result / Exception", overflow="fold")

        for ctx in contexts:
            start = ctx.start_wall.strftime("%H:%M:%S") if ctx.start_wall else "n/a"
            duration = f"{ctx.duration:.3f}s" if ctx.duration is not None else "n/a"

            if not ctx.success and status in ("all", "error"):
                final_status = f"[{OneColors.DARK_RED}]❌ Error"
                final_result = (
                    repr(ctx.exception) if ctx.exception else f"status {ctx.status}"
                )
            elif ctx.success and status in ("all", "success"):
                final_status = f"[{OneColors.GREEN}]✅ Success"
                final_result = f"status {ctx.status}"
            else:
                continue

            table.add_row(
                str(ctx.index),
                ctx.name,
                " ".join(ctx.args),
                start,
                duration,
                final_status,
                final_result,
            )

        self._console.print(table)
