import sys

from flagkit import ArgParser, cli, const, help, vt100


def makeParser() -> ArgParser:
    parser = ArgParser("Draw a circle")
    parser.addArgument(str, ["-v", "--version"], "Version to report", False, "1.0.0")
    parser.addArgument(float, ["-r", "--radius"], "Radius of the circle", True, 1.0)
    parser.addArgument(bool, ["--use-color"], "Colorize the output")
    return parser


# --- Usage ------------------------------------------------------------------ #


def test_usage():
    assert (
        help.usage(makeParser(), "prog")
        == "prog [-v, --version <string>] -r, --radius <f32> [--use-color]"
    )


def test_usage_empty():
    assert help.usage(ArgParser(), "prog") == "prog"


def test_help(capsys):
    help.help(makeParser(), "prog")
    out = capsys.readouterr().out
    assert "Usage" in out
    assert "Draw a circle" in out
    assert "-v, --version" in out
    assert "Version to report" in out
    assert "(default: '1.0.0')" in out
    assert "(default: false)" in out
    assert "(required)" in out


# --- Exec ------------------------------------------------------------------- #


def test_exec_success():
    parser = makeParser()
    assert cli.exec(parser, ["prog", "-r", "2"]) is True
    assert parser.isParsed() is True
    assert parser.getArgument("-r", float) == 2.0


def test_exec_help(capsys):
    parser = makeParser()
    assert cli.exec(parser, ["prog", "-r", "2", "--help"]) is False
    assert parser.isParsed() is False
    assert "Options" in capsys.readouterr().out


def test_exec_declared_help_key_is_parsed():
    parser = ArgParser()
    parser.addArgument(bool, ["-h", "--help"])
    assert cli.exec(parser, ["prog", "-h"]) is True
    assert parser.getArgument("--help", bool) is True


def test_exec_error(capsys):
    parser = makeParser()
    assert cli.exec(parser, ["/usr/bin/prog", "-x"]) is False
    captured = capsys.readouterr()
    assert "Unknown argument '-x'" in captured.err
    assert "Usage: prog " in captured.out


def test_exec_missing_required(capsys):
    parser = makeParser()
    assert cli.exec(parser, ["prog"]) is False
    assert "Required argument '-r, --radius' is not provided" in capsys.readouterr().err


def test_help_requested():
    parser = makeParser()
    assert cli.helpRequested(parser, ["prog", "-h"]) is True
    assert cli.helpRequested(parser, ["prog", "-v", "--help"]) is True
    assert cli.helpRequested(parser, ["-h"]) is False
    assert cli.helpRequested(parser, ["prog", "-r", "1"]) is False


# --- Argv ------------------------------------------------------------------- #


def test_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "-r", "1"])
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    assert cli.argv() == ["prog", "-r", "1"]


def test_argv_extra_args(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "-r", "1"])
    monkeypatch.setenv(const.EXTRA_ARGS_ENV, "--use-color true  -v 2.0")
    assert cli.argv() == ["prog", "--use-color", "true", "-v", "2.0", "-r", "1"]

    parser = makeParser()
    assert cli.exec(parser, cli.argv()) is True
    assert parser.getArgument("--use-color", bool) is True
    assert parser.getArgument("-v", str) == "2.0"


# --- Main ------------------------------------------------------------------- #


def test_main(monkeypatch, capsys):
    import flagkit

    monkeypatch.setattr(sys, "argv", ["flagkit", "-r", "2.5", "--verbose"])
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    assert flagkit.main() == 0
    out = capsys.readouterr().out
    assert "-r, --radius: 2.5 (provided)" in out
    assert "-c, --col: 0 (default)" in out


def test_main_error(monkeypatch, capsys):
    import flagkit

    monkeypatch.setattr(sys, "argv", ["flagkit", "--verbose", "true", "--bogus"])
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    assert flagkit.main() == 1
    assert "Unknown argument '--bogus'" in capsys.readouterr().err


# --- Colors ----------------------------------------------------------------- #


class FakeTty:
    def isatty(self) -> bool:
        return True


def test_no_escape_codes_when_not_a_tty(capsys, monkeypatch):
    monkeypatch.delenv(const.NO_COLOR_ENV, raising=False)
    help.help(makeParser(), "prog")
    assert cli.exec(makeParser(), ["prog", "-x"]) is False
    captured = capsys.readouterr()
    assert "\033[" not in captured.out
    assert "\033[" not in captured.err


def test_paint(monkeypatch):
    monkeypatch.delenv(const.NO_COLOR_ENV, raising=False)
    assert vt100.paint("x", vt100.RED, stream=FakeTty()) == "\033[31mx\033[0m"
    assert vt100.paint("x", stream=FakeTty()) == "x"

    monkeypatch.setenv(const.NO_COLOR_ENV, "1")
    assert vt100.enabled(FakeTty()) is False
    assert vt100.paint("x", vt100.RED, stream=FakeTty()) == "x"


def test_paragraph():
    text = " ".join(["word"] * 30)
    lines = vt100.paragraph(text).split("\n")
    assert len(lines) > 1
    for line in lines:
        assert line.startswith("    word")
        assert len(line) <= 4 + const.HELP_WIDTH
