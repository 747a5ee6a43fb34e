import pytest

from stampede import Stampede
from stampede.context import ExecutionContext
from stampede.hook_manager import HookManager, HookType


def test_hook_type_aliases():
    assert HookType("success") is HookType.ON_SUCCESS
    assert HookType(" Error ") is HookType.ON_ERROR
    assert HookType("teardown") is HookType.ON_TEARDOWN
    assert HookType("before") is HookType.BEFORE
    with pytest.raises(ValueError):
        HookType("during")
    with pytest.raises(ValueError):
        HookType(3)


def test_register_and_trigger():
    hooks = HookManager()
    seen = []
    hooks.register("before", lambda context: seen.append(context.name))
    hooks.trigger(HookType.BEFORE, ExecutionContext(name="gallop", action=None))
    assert seen == ["gallop"]


def test_register_rejects_non_callable():
    with pytest.raises(TypeError):
        HookManager().register(HookType.AFTER, "not callable")


def test_failing_hook_is_logged_and_skipped(caplog):
    hooks = HookManager()
    seen = []

    def broken(context):
        raise RuntimeError("hook broke")

    hooks.register(HookType.AFTER, broken)
    hooks.register(HookType.AFTER, lambda context: seen.append("after"))
    hooks.trigger(HookType.AFTER, ExecutionContext(name="gallop", action=None))
    assert seen == ["after"]
    assert "hook broke" in caplog.text


def test_clear():
    hooks = HookManager()
    hooks.register(HookType.BEFORE, print)
    hooks.register(HookType.AFTER, print)
    hooks.clear(HookType.BEFORE)
    assert "before: —" in str(hooks)
    assert "after: print" in str(hooks)
    hooks.clear()
    assert "after: —" in str(hooks)


def test_lifecycle_order_on_success_and_error():
    app = Stampede(program="herd")
    app.add_action("gallop", lambda args: 0)
    app.add_action("lame", lambda args: 1)
    events = []
    for hook_type in HookType:
        app.register_hook(
            hook_type,
            lambda context, hook_type=hook_type: events.append(
                (context.name, hook_type.value)
            ),
        )
    app.parse(["gallop", "lame", "gallop"])
    assert app.start() == 1
    assert events == [
        ("gallop", "before"),
        ("gallop", "on_success"),
        ("gallop", "after"),
        ("gallop", "on_teardown"),
        ("lame", "before"),
        ("lame", "on_error"),
        ("lame", "after"),
        ("lame", "on_teardown"),
    ]


def test_hooks_see_status_and_exception():
    app = Stampede(program="herd")

    def lame(args):
        raise ValueError("lame")

    app.add_action("lame", lame)
    contexts = []
    app.register_hook(HookType.ON_ERROR, contexts.append)
    app.parse(["lame"])
    app.start()
    assert contexts[0].status == 1
    assert isinstance(contexts[0].exception, ValueError)
    assert "exception=ValueError: lame" in contexts[0].to_log_line()
