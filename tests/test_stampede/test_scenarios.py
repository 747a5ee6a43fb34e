from stampede import ParseResult, Stampede
from stampede.exceptions import ParseErrorKind


def ok(args):
    return 0


def test_trot_binds_quoted_arguments(herd):
    assert herd.parse(["trot", "mode bullet", "mode rocket"]) is ParseResult.OK
    assert len(herd.chain) == 1
    context = herd.chain[0]
    assert context.name == "trot"
    assert context.args == ["mode bullet", "mode rocket"]


def test_non_chainable_gallop_with_trot():
    app = Stampede(program="herd")
    app.add_action("gallop", ok, chainable=False)
    app.add_action("trot", ok, arity=-2)
    assert app.parse(["gallop", "trot"]) is ParseResult.ERROR
    assert app.last_error.kind is ParseErrorKind.NOT_CHAINABLE


def test_tired_is_unknown_at_global_scope(herd):
    assert herd.parse(["--tired"]) is ParseResult.ERROR
    assert herd.last_error.kind is ParseErrorKind.UNKNOWN_FLAG


def test_tired_inside_gallop(herd):
    assert herd.parse(["gallop", "--tired"]) is ParseResult.OK
    assert herd.get_flag("tired", scope="gallop") is True
    assert herd.get_flag("ponies") == 1


def test_full_command_line(herd, calls):
    args = ["--ponies", "3", "-vv", "gallop", "--tired"]
    args += ["trot", "mode bullet", "mode rocket"]
    assert herd.parse(args) is ParseResult.OK
    assert herd.get_flag("ponies", expected=int) == 3
    assert herd.verbosity == 2
    assert [(context.name, context.args) for context in herd.chain] == [
        ("gallop", []),
        ("trot", ["mode bullet", "mode rocket"]),
    ]
    assert herd.start() == 0
    assert calls == [("gallop", []), ("trot", ["mode bullet", "mode rocket"])]
