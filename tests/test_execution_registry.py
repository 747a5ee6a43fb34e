import io

from rich.console import Console

from stampede.context import ExecutionContext
from stampede.execution_registry import ExecutionRegistry


def read(output):
    text = output.getvalue()
    output.seek(0)
    output.truncate()
    return text


def make_context(name, status=0, exception=None):
    context = ExecutionContext(name=name, args=["a"], action=None)
    context.start_timer()
    context.status = status
    context.exception = exception
    context.stop_timer()
    return context


def test_record_and_lookup():
    registry = ExecutionRegistry()
    first = make_context("gallop")
    second = make_context("trot", status=1)
    third = make_context("gallop")
    for context in (first, second, third):
        registry.record(context)
    assert len(registry) == 3
    assert [context.index for context in registry.get_all()] == [0, 1, 2]
    assert registry.get_by_name("gallop") == [first, third]
    assert registry.get_by_name("canter") == []
    assert registry.get_latest() is third


def test_clear():
    registry = ExecutionRegistry()
    registry.record(make_context("gallop"))
    registry.clear()
    assert registry.get_all() == []
    assert registry.get_latest() is None
    registry.record(make_context("trot"))
    assert registry.get_latest().index == 0


def test_registries_are_independent():
    first = ExecutionRegistry()
    second = ExecutionRegistry()
    first.record(make_context("gallop"))
    assert len(second) == 0


def test_summary():
    output = io.StringIO()
    registry = ExecutionRegistry(console=Console(file=output, width=200))
    registry.record(make_context("gallop"))
    registry.record(make_context("lame", exception=RuntimeError("sore hoof")))
    registry.summary()
    out = read(output)
    assert "Execution History" in out
    assert "gallop" in out
    assert "Success" in out
    assert "sore hoof" in out

    registry.summary(status="success")
    out = read(output)
    assert "sore hoof" not in out

    registry.summary(name="canter")
    assert "No executions found for action 'canter'" in read(output)


def test_context_outcome():
    good = make_context("gallop")
    bad = make_context("lame", status=2)
    assert good.success and good.outcome == "OK"
    assert not bad.success and bad.outcome == "ERROR"
    assert "outcome=ERROR status=2" in bad.to_log_line()
    assert good.signature == "gallop('a')"
    assert "<ExecutionContext 'gallop' | OK" in str(good)
