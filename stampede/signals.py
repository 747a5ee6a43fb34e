# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the Stampede context resolver.

These signals are raised to interrupt token resolution (e.g., when `--help` or
`--version` is encountered) without being treated as traditional exceptions.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Halt parsing and display help, optionally for a specific action.
- VersionSignal: Halt parsing and display the program version.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Stampede.

    These are not errors. They're used to stop resolution early when the
    command line asks for help or version output.
    """


class HelpSignal(FlowSignal):
    """Raised to display help information for the global scope or an action."""

    def __init__(
        self, action_name: str | None = None, message: str = "Help signal received."
    ):
        super().__init__(message)
        self.action_name = action_name


class VersionSignal(FlowSignal):
    """Raised to display the program version."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
