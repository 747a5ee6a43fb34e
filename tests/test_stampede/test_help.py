from stampede import Stampede


def ok(args):
    return 0


def test_global_help(herd):
    text = herd.help_renderer.format()
    assert "🐎 Herd" in text
    assert "usage: herd [options]" in text
    assert "-p, --ponies PONIES" in text
    assert "--version" in text
    assert "-v, --verbose" in text
    assert "gallop" in text
    assert "Run as fast as possible" in text
    assert "trot ARG ARG [ARG ...]" in text
    assert "--tired" not in text


def test_global_help_lists_actions_in_registration_order(herd):
    text = herd.help_renderer.format()
    assert text.index("gallop") < text.index("trot")


def test_action_help(herd):
    text = herd.help_renderer.format("gallop")
    assert "usage: herd gallop [options]" in text
    assert "Run as fast as possible" in text
    assert "--tired, --no-tired" in text
    assert "Gallop a little slower" in text
    assert "--ponies" not in text


def test_action_help_shows_arity_and_chainability():
    app = Stampede(program="herd")
    app.add_action("pair", ok, arity=2, chainable=False, help_text="Exactly two.")
    text = app.help_renderer.format("pair")
    assert "usage: herd pair ARG ARG [options]" in text
    assert "Exactly two." in text
    assert "cannot be chained" in text
    assert "not chainable" in app.help_renderer.format()


def test_unknown_action_help_falls_back_to_global(herd):
    text = herd.help_renderer.format("canter")
    assert "No action found for 'canter'" in text
    assert "usage: herd [options]" in text


def test_description_and_epilog():
    app = Stampede(program="herd", description="Moves ponies.", epilog="Bye.")
    text = app.help_renderer.format()
    assert "Moves ponies." in text
    assert "Bye." in text


def test_version_text(herd):
    assert herd.help_renderer.get_version_text() == "herd v1.2.0"


def test_show_help_uses_parse_target(herd, capsys, plain):
    herd.parse(["gallop", "-h"])
    herd.show_help()
    out = plain(capsys.readouterr().out)
    assert "usage: herd gallop [options]" in out


def test_show_version(herd, capsys, plain):
    herd.show_version()
    assert plain(capsys.readouterr().out).strip() == "herd v1.2.0"
