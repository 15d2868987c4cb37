"""Tests for the yardcalc command line interface."""

import json

import pytest
from typer.testing import CliRunner

from yardcalc.__main__ import app


@pytest.fixture
def runner():
    return CliRunner()


# --- eval ---

def test_eval_prints_result(runner):
    result = runner.invoke(app, ["eval", "2 + 3 * 4"])
    assert result.exit_code == 0
    assert result.output.strip() == "14"


def test_eval_with_rpn(runner):
    result = runner.invoke(app, ["eval", "2 ^ 3 ^ 2", "--rpn"])
    assert result.exit_code == 0
    assert "rpn:    2 3 2 ^ ^" in result.output
    assert "result: 512" in result.output


def test_eval_precision(runner):
    result = runner.invoke(app, ["eval", "10 / 3", "--precision", "4"])
    assert result.exit_code == 0
    assert result.output.strip() == "3.333"


def test_eval_precision_from_env(runner):
    result = runner.invoke(app, ["eval", "10 / 3"], env={"YARDCALC_PRECISION": "2"})
    assert result.output.strip() == "3.3"


def test_eval_error_exits_nonzero(runner):
    result = runner.invoke(app, ["eval", "(1 + 2"])
    assert result.exit_code == 1
    assert "unbalanced-parentheses" in result.output


def test_eval_json(runner):
    result = runner.invoke(app, ["eval", "1.5 * 2", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["ok"] is True
    assert data["value"] == 3.0
    assert data["postfix"] == "1.5 2 *"


def _strict_loads(text):
    def reject(constant):
        raise ValueError(f"non-standard JSON constant {constant}")
    return json.loads(text, parse_constant=reject)


@pytest.mark.parametrize("expr,text", [
    ("1 / 0", "inf"),
    ("0 / 0", "nan"),
])
def test_eval_json_non_finite_is_strict_json(runner, expr, text):
    result = runner.invoke(app, ["eval", expr, "--json"])
    assert result.exit_code == 0
    data = _strict_loads(result.output)
    assert data["ok"] is True
    assert data["value"] is None
    assert data["value_text"] == text


def test_eval_json_error(runner):
    result = runner.invoke(app, ["eval", "1 .5 . 2", "--json"])
    assert result.exit_code == 1
    data = json.loads(result.output)
    assert data["ok"] is False
    assert data["error"]["kind"] == "malformed-number"
    assert data["error"]["position"] == 5


def test_verbose_flag(runner):
    result = runner.invoke(app, ["--verbose", "eval", "1 + 1"])
    assert result.exit_code == 0
    assert "2" in result.output


# --- rpn / tokens ---

def test_rpn(runner):
    result = runner.invoke(app, ["rpn", "3 + 4 * 2 / (1 - 5) ^ 2 ^ 3"])
    assert result.exit_code == 0
    assert result.output.strip() == "3 4 2 * 1 5 - 2 3 ^ ^ / +"


def test_rpn_error(runner):
    result = runner.invoke(app, ["rpn", "1 + 2)"])
    assert result.exit_code == 1
    assert "unbalanced-parentheses" in result.output


def test_tokens_table(runner):
    result = runner.invoke(app, ["tokens", "1.5 * (2 - 3)"])
    assert result.exit_code == 0
    assert "number" in result.output
    assert "0:3" in result.output


def test_tokens_invalid_character(runner):
    result = runner.invoke(app, ["tokens", "1 [ 2"])
    assert result.exit_code == 1
    assert "invalid-character" in result.output


# --- check ---

def test_check_passes(runner):
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0
    assert "6/6 passed" in result.output


def test_check_rejects_negative_tolerance(runner):
    result = runner.invoke(app, ["check", "--tolerance", "-1"])
    assert result.exit_code == 2


# --- repl ---

def test_repl(runner):
    result = runner.invoke(app, ["repl"], input="1 + 2\n\n(1\n2 ^ 3 ^ 2\nquit\n9\n")
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0] == "3"
    assert lines[1].startswith("error: unbalanced-parentheses")
    assert lines[2] == "512"
    assert len(lines) == 3
