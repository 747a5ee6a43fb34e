import sys
from pathlib import Path

import pytest

from stampede import ParseResult, Stampede
from stampede.config import loader
from stampede.exceptions import ConfigurationError

TASKS = """\
from stampede.validation import ValidationResult

calls = []


def gallop(args):
    calls.append(("gallop", args))
    return 0


def trot(args):
    calls.append(("trot", args))
    return 0


def check_modes(args):
    if any(not mode.startswith("mode ") for mode in args):
        return ValidationResult.reject("modes must start with 'mode '")
    return ValidationResult.accept()


def at_most_ten(value):
    return value <= 10


def announce(context):
    calls.append(("before", context.name))
"""

YAML_CONFIG = """\
program: herd
banner: Herd
version: 1.2
delimiters: "+"
flags:
  - aliases: ["-p", "--ponies"]
    description: Number of ponies
    default: 1
    validator: stampede_sample_tasks.at_most_ten
actions:
  - name: gallop
    callback: stampede_sample_tasks.gallop
    chainable: false
    description: Run fast
    flags:
      - aliases: --tired
        type: bool
  - name: trot
    callback: stampede_sample_tasks:trot
    arity: -2
    validator: stampede_sample_tasks.check_modes
hooks:
  before: [stampede_sample_tasks.announce]
"""

TOML_CONFIG = """\
program = "herd"
delimiters = ["+"]

[[flags]]
aliases = ["-p", "--ponies"]
default = 1

[[actions]]
name = "trot"
callback = "stampede_sample_tasks.trot"
arity = -2
"""


@pytest.fixture
def tasks(tmp_path, monkeypatch):
    (tmp_path / "stampede_sample_tasks.py").write_text(TASKS)
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, "stampede_sample_tasks", raising=False)
    yield tmp_path
    sys.modules.pop("stampede_sample_tasks", None)


def write(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    path.write_text(text)
    return path


def test_yaml_loader(tasks):
    app = loader(write(tasks, "stampede.yaml", YAML_CONFIG))
    assert isinstance(app, Stampede)
    assert app.program == "herd"
    assert app.version == "1.2"
    assert app.delimiters == ("+",)
    assert app.actions.names == ["gallop", "trot"]
    assert app.actions.get("gallop").chainable is False
    assert app.get_flag("tired", scope="gallop") is False

    assert app.parse(["--ponies", "3", "trot", "mode a", "mode b"]) is ParseResult.OK
    assert app.get_flag("ponies") == 3
    assert app.start() == 0

    import stampede_sample_tasks

    assert stampede_sample_tasks.calls == [
        ("before", "trot"),
        ("trot", ["mode a", "mode b"]),
    ]


def test_yaml_loader_wires_validators(tasks):
    app = loader(write(tasks, "stampede.yaml", YAML_CONFIG))
    assert app.parse(["--ponies", "11"]) is ParseResult.INVALID_FLAG
    assert app.parse(["trot", "walk", "run"]) is ParseResult.ERROR
    assert "modes must start" in str(app.last_error)
    assert app.parse(["gallop", "+", "trot", "mode a", "mode b"]) is ParseResult.ERROR


def test_toml_loader(tasks):
    app = loader(write(tasks, "stampede.toml", TOML_CONFIG))
    assert app.parse(["trot", "a", "b", "+", "trot", "c", "d"]) is ParseResult.OK
    assert len(app.chain) == 2


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")
    with pytest.raises(TypeError):
        loader(42)


def test_unsupported_format(tmp_path):
    with pytest.raises(ConfigurationError, match="Unsupported config format"):
        loader(write(tmp_path, "stampede.json", "{}"))


def test_not_a_mapping(tmp_path):
    with pytest.raises(ConfigurationError, match="must contain a mapping"):
        loader(write(tmp_path, "stampede.yaml", "- gallop\n- trot\n"))


def test_invalid_yaml(tmp_path):
    with pytest.raises(ConfigurationError, match="Could not parse"):
        loader(write(tmp_path, "stampede.yaml", "actions: [gallop\n"))


def test_schema_errors(tmp_path):
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        loader(write(tmp_path, "stampede.yaml", "actions:\n  - arity: 2\n"))


def test_unimportable_callback(tmp_path):
    config = "actions:\n  - name: gallop\n    callback: no_such_module_here.gallop\n"
    with pytest.raises(ConfigurationError, match="Could not import action callback"):
        loader(write(tmp_path, "stampede.yaml", config))


def test_empty_file_gives_empty_program(tmp_path):
    app = loader(write(tmp_path, "stampede.yaml", ""))
    assert len(app.actions) == 0
    assert app.parse([]) is ParseResult.OK
