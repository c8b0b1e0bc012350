"""Tests for the command line entry point."""

import io
import json

from config import validate_config
from core import ErrorCode
from main import cli, interactive
from session import CalculatorSession
from utils import ERROR_LABELS, describe_error, format_result


# --- One-shot expressions ---

def test_cli_prints_results(capsys):
    code = cli(["--no_persist", "2+3*4", "(1+2)(3+4)", "0.1+0.2"])
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == ["2+3*4 = 14", "(1+2)(3+4) = 21", "0.1+0.2 = 0.3"]


def test_cli_reports_errors_with_exit_status(capsys):
    code = cli(["--no_persist", "5/0", "1+1"])
    out = capsys.readouterr().out.splitlines()
    assert code == 1
    assert out == ["5/0 : Div/0", "1+1 = 2"]


def test_cli_verbose_errors(capsys):
    cli(["--no_persist", "--verbose_errors", "1.2.3"])
    out = capsys.readouterr().out
    assert "A number contains more than one decimal point." in out


def test_cli_negative_expression_after_separator(capsys):
    assert cli(["--no_persist", "--", "-5+3"]) == 0
    assert capsys.readouterr().out.strip() == "-5+3 = -2"


def test_cli_persists_history(tmp_path, capsys):
    path = tmp_path / "state.json"
    cli(["--state_path", str(path), "50%", "2(3+4)"])
    capsys.readouterr()
    saved = json.loads(path.read_text(encoding="utf-8"))["cleancalc_state"]
    assert [item["expr"] for item in saved["history"]] == ["50%", "2(3+4)"]
    assert saved["lastResult"] == 14


# --- Interactive loop ---

def test_interactive_session():
    session = CalculatorSession()
    stdin = io.StringIO("2+2\n5/0\n:history\n:recall 0\n:quit\n3+3\n")
    out = io.StringIO()
    assert interactive(session, stdin=stdin, out=out) == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == "4"
    assert lines[1] == "Div/0 (DivZero)"
    assert lines[2] == "  0  2+2 = 4"
    assert lines[3] == "2+2 = 4"
    # nothing after :quit is evaluated
    assert len(session.history) == 1


def test_interactive_clear_commands():
    session = CalculatorSession()
    stdin = io.StringIO("7*6\n:clear\n:clear-history\n:history\n")
    out = io.StringIO()
    interactive(session, stdin=stdin, out=out)
    assert out.getvalue().splitlines() == ["42", "0", "History cleared", "(no history)"]


def test_interactive_unknown_command_prints_help():
    out = io.StringIO()
    interactive(CalculatorSession(), stdin=io.StringIO(":help\n"), out=out)
    assert ":recall N" in out.getvalue()


# --- Labels, formatting, config ---

def test_every_error_code_has_labels():
    assert set(ERROR_LABELS) == set(ErrorCode)
    assert describe_error("DivZero") == "Div/0"
    assert describe_error(ErrorCode.MATH_ERR, verbose=True) == "The result is not a finite number."


def test_format_result():
    assert format_result(14.0) == "14"
    assert format_result(0.3) == "0.3"
    assert format_result(-2.5) == "-2.5"
    assert format_result(-0.0) == "0"
    assert format_result(1e20) == "100000000000000000000"


def test_validate_config():
    assert validate_config() is True
