import logging

import pytest

from stampede import Stampede


def run(app, args):
    with pytest.raises(SystemExit) as exc_info:
        app.run(args)
    return exc_info.value.code


def test_run_success(herd, calls):
    assert run(herd, ["gallop", "trot", "a", "b"]) == 0
    assert calls == [("gallop", []), ("trot", ["a", "b"])]


def test_run_help(herd, calls, capsys, plain):
    assert run(herd, ["--help", "gallop"]) == 0
    out = plain(capsys.readouterr().out)
    assert "usage: herd" in out
    assert calls == []


def test_run_action_help(herd, capsys, plain):
    assert run(herd, ["trot", "-h"]) == 0
    assert "usage: herd trot ARG ARG [ARG ...] [options]" in plain(
        capsys.readouterr().out
    )


def test_run_version(herd, capsys, plain):
    assert run(herd, ["--version"]) == 0
    assert "herd v1.2.0" in plain(capsys.readouterr().out)


def test_run_parse_error(herd, calls, capsys, plain):
    assert run(herd, ["gallop", "canter"]) == 1
    out = plain(capsys.readouterr().out)
    assert "Unexpected argument 'canter'" in out
    assert "herd gallop --help" in out
    assert calls == []


def test_run_invalid_flag(herd, capsys, plain):
    assert run(herd, ["--ponies", "many"]) == 1
    assert "ponies" in plain(capsys.readouterr().out)


def test_run_failing_action(capsys, plain):
    app = Stampede(program="herd")

    def lame(args):
        raise RuntimeError("lame horse")

    app.add_action("gallop", lame)
    assert run(app, ["gallop"]) == 1
    assert "lame horse" in plain(capsys.readouterr().out)


def test_run_non_zero_status():
    app = Stampede(program="herd")
    app.add_action("gallop", lambda args: 7)
    assert run(app, ["gallop"]) == 1


def test_run_verbosity_sets_log_level(herd):
    run(herd, ["-v", "gallop"])
    assert logging.getLogger("stampede").level == logging.INFO
    run(herd, ["-vv", "gallop"])
    assert logging.getLogger("stampede").level == logging.DEBUG


def test_run_keyboard_interrupt():
    app = Stampede(program="herd")

    def interrupted(args):
        raise KeyboardInterrupt

    app.add_action("gallop", interrupted)
    assert run(app, ["gallop"]) == 130


def test_run_summary(herd, capsys, plain):
    assert run(herd, ["gallop"]) == 0
    herd.registry.summary()
    assert "Execution History" in plain(capsys.readouterr().out)


def test_run_uses_sys_argv(herd, calls, monkeypatch):
    monkeypatch.setattr("sys.argv", ["herd", "gallop"])
    assert run(herd, None) == 0
    assert calls == [("gallop", [])]
