import pytest

from stampede import ParseResult, Stampede, ValidationResult
from stampede.action import Action
from stampede.chain import ChainValidator, Context
from stampede.exceptions import ActionValidationError, ParseError, ParseErrorKind


def ok(args):
    return 0


def test_non_chainable_action_alone_is_ok():
    app = Stampede(program="herd")
    app.add_action("gallop", ok, chainable=False)
    app.add_action("trot", ok, arity=-2)
    assert app.parse(["gallop"]) is ParseResult.OK


@pytest.mark.parametrize(
    "args", [["gallop", "trot", "a", "b"], ["trot", "a", "b", "+", "gallop"]]
)
def test_non_chainable_action_in_chain(args):
    app = Stampede(program="herd", delimiters=["+"])
    app.add_action("gallop", ok, chainable=False)
    app.add_action("trot", ok, arity=-2)
    assert app.parse(args) is ParseResult.ERROR
    assert app.last_error.kind is ParseErrorKind.NOT_CHAINABLE


def test_non_chainable_action_twice():
    app = Stampede(program="herd")
    app.add_action("gallop", ok, chainable=False)
    assert app.parse(["gallop", "gallop"]) is ParseResult.ERROR


def test_check_chainable_direct():
    gallop = Action(name="gallop", callback=ok, chainable=False)
    trot = Action(name="trot", callback=ok)
    validator = ChainValidator()
    validator.check_chainable([], gallop)
    with pytest.raises(ParseError) as exc_info:
        validator.check_chainable([Context(action=trot)], gallop)
    assert exc_info.value.kind is ParseErrorKind.NOT_CHAINABLE


def test_argument_validators_run_in_order_and_fail_fast():
    seen = []

    def first(args):
        seen.append("first")
        return ValidationResult.reject("first rejects")

    def second(args):
        seen.append("second")
        return True

    app = Stampede(program="herd")
    app.add_action("trot", ok, arity=1, validator=first)
    app.add_action("gallop", ok, validator=second)
    assert app.parse(["trot", "x", "gallop"]) is ParseResult.ERROR
    assert isinstance(app.last_error, ActionValidationError)
    assert str(app.last_error) == "first rejects"
    assert seen == ["first"]
    assert app.chain == []


def test_argument_validator_receives_bound_args():
    received = []

    def check(args):
        received.append(args)

    app = Stampede(program="herd")
    app.add_action("trot", ok, arity=-2, validator=check)
    assert app.parse(["trot", "mode bullet", "mode rocket"]) is ParseResult.OK
    assert received == [["mode bullet", "mode rocket"]]


def test_argument_validator_foreign_errors_are_wrapped():
    def check(args):
        raise ValueError("modes must differ")

    app = Stampede(program="herd")
    app.add_action("trot", ok, arity=-2, validator=check)
    assert app.parse(["trot", "a", "a"]) is ParseResult.ERROR
    assert isinstance(app.last_error, ActionValidationError)
    assert "modes must differ" in str(app.last_error)
    assert isinstance(app.last_error.__cause__, ValueError)


def test_argument_validator_default_message():
    app = Stampede(program="herd")
    app.add_action("trot", ok, arity=1, validator=lambda args: False)
    assert app.parse(["trot", "a"]) is ParseResult.ERROR
    assert "action 'trot'" in str(app.last_error)


def test_argument_validator_bad_return_type_is_wrapped():
    app = Stampede(program="herd")
    app.add_action("trot", ok, arity=1, validator=lambda args: "yes")
    assert app.parse(["trot", "a"]) is ParseResult.ERROR
    assert isinstance(app.last_error, ActionValidationError)
