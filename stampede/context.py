# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Execution context for one Stampede action invocation.

`ExecutionContext` captures what happened when the executor ran a chain
context: the bound arguments, the returned status, any exception raised by the
callback, and wall-clock/performance timing. Instances are passed to lifecycle
hooks and recorded by the `ExecutionRegistry`.
"""
from __future__ import annotations

import time
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console

from stampede.console import console


class ExecutionContext(BaseModel):
    """
    Represents the runtime metadata and state for a single action execution.

    Attributes:
        name (str): The name of the action being executed.
        args (list[str]): Arguments bound to the action.
        action (Any): The action being executed.
        position (int): Index of the context in the chain.
        status (int | None): Status returned by the callback (0 is success).
        exception (Exception | None): The exception raised, if execution failed.
        start_time (float | None): High-resolution performance start time.
        end_time (float | None): High-resolution performance end time.
        start_wall (datetime | None): Wall-clock timestamp when execution began.
        end_wall (datetime | None): Wall-clock timestamp when execution ended.
        index (int | None): Registry index assigned by `ExecutionRegistry.record`.
        extra (dict): Metadata for custom introspection by hooks.

    Properties:
        duration (float | None): The execution duration in seconds.
        success (bool): True when no exception was raised and the status is 0.
        outcome (str): "OK" if successful, otherwise "ERROR".
    """

    name: str
    args: list[str] = Field(default_factory=list)
    action: Any
    position: int = 0
    status: int | None = None
    exception: Exception | None = None

    start_time: float | None = None
    end_time: float | None = None
    start_wall: datetime | None = None
    end_wall: datetime | None = None

    index: int | None = None

    extra: dict[str, Any] = Field(default_factory=dict)
    console: Console = console

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def start_timer(self):
        self.start_wall = datetime.now()
        self.start_time = time.perf_counter()

    def stop_timer(self):
        self.end_time = time.perf_counter()
        self.end_wall = datetime.now()

    @property
    def duration(self) -> float | None:
        if self.start_time is None:
            return None
        if self.end_time is None:
            return time.perf_counter() - self.start_time
        return self.end_time - self.start_time

    @property
    def success(self) -> bool:
        return self.exception is None and self.status == 0

    @property
    def outcome(self) -> str:
        return "OK" if self.success else "ERROR"

    @property
    def signature(self) -> str:
        args = ", ".join(map(repr, self.args))
        return f"{self.name}({args})"

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "args": self.args,
            "status": self.status,
            "exception": repr(self.exception) if self.exception else None,
            "duration": self.duration,
            "extra": self.extra,
        }

    def log_summary(self, logger=None) -> None:
        summary = self.as_dict()
        message = [f"[SUMMARY] {summary['name']} | "]

        if self.start_wall:
            message.append(f"Start: {self.start_wall.strftime('%H:%M:%S')} | ")

        if self.end_wall:
            message.append(f"End: {self.end_wall.strftime('%H:%M:%S')} | ")

        if summary["duration"] is not None:
            message.append(f"Duration: {summary['duration']:.3f}s | ")

        if summary["exception"]:
            message.append(f"Exception: {summary['exception']}")
        else:
            message.append(f"Status: {summary['status']}")
        (logger or self.console.print)("".join(message))

    def to_log_line(self) -> str:
        """Structured flat-line format for logging and metrics."""
        duration_str = f"{self.duration:.3f}s" if self.duration is not None else "n/a"
        exception_str = (
            f"{type(self.exception).__name__}: {self.exception}"
            if self.exception
            else "None"
        )
        return (
            f"[{self.name}] outcome={self.outcome} status={self.status} "
            f"duration={duration_str} exception={exception_str}"
        )

    def __str__(self) -> str:
        duration_str = f"{self.duration:.3f}s" if self.duration is not None else "n/a"
        detail = (
            f"Exception: {self.exception}"
            if self.exception
            else f"Status: {self.status}"
        )
        return (
            f"<ExecutionContext '{self.name}' | {self.outcome} | "
            f"Duration: {duration_str} | {detail}>"
        )
