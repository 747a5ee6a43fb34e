import logging

import pytest
from rich.text import Text

from stampede import Stampede


@pytest.fixture
def calls():
    return []


@pytest.fixture
def herd(calls):
    """A small program with a global flag and two actions."""
    app = Stampede(program="herd", version="1.2.0", banner="🐎 Herd")
    app.add_flag(("-p", "--ponies"), "Number of ponies", default=1)

    def gallop(args):
        calls.append(("gallop", list(args)))
        return 0

    def trot(args):
        calls.append(("trot", list(args)))
        return 0

    app.add_action("gallop", gallop, description="Run as fast as possible")
    app.add_flag(("--tired",), "Gallop a little slower", type=bool, scope="gallop")
    app.add_action("trot", trot, arity=-2, description="Trot through modes")
    return app


@pytest.fixture
def plain():
    """Strip Rich styling from captured output."""

    def _plain(output: str) -> str:
        return Text.from_ansi(output).plain

    return _plain


@pytest.fixture(autouse=True)
def reset_stampede_logger():
    logger = logging.getLogger("stampede")
    level = logger.level
    yield
    logger.setLevel(level)
