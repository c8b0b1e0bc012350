"""End-to-end tests for the evaluation pipeline."""

import pytest

from core import evaluate, evaluate_or_raise, normalize, CalcError, ErrorCode


def _value(text):
    outcome = evaluate(text)
    assert outcome.ok, f"{text!r} -> {outcome}"
    return outcome.value


# --- Precedence and parentheses ---

@pytest.mark.parametrize("text, expected", [
    ("2+3*4", 14),
    ("(2+3)*4", 20),
    ("10 - 2 * 3 + 4 / 2", 6),
    ("8-3-2", 3),
    ("((2 + 3) * (4 - 1))", 15),
    ("15 / 4", 3.75),
])
def test_infix_arithmetic(text, expected):
    assert _value(text) == expected


# --- Unary minus ---

@pytest.mark.parametrize("text, expected", [
    ("-(3+2)", -5),
    ("5*-2", -10),
    ("-5+3", -2),
    ("(-2)*(-3)", 6),
    ("2 - -3", 5),
])
def test_unary_minus(text, expected):
    assert _value(text) == expected


# --- Percent and implicit multiplication ---

@pytest.mark.parametrize("text, expected", [
    ("50%", 0.5),
    ("40%(50%+2)", 1.0),
    ("200*10%", 20),
    ("-5%", -0.05),
    ("5-3%", 4.97),
])
def test_percent(text, expected):
    assert _value(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("2(3+4)", 14),
    ("(1+2)(3+4)", 21),
    ("(3+2)5", 25),
    ("(2+3)(-4+1)", -15),
    ("2 (3)", 6),
])
def test_implicit_multiplication(text, expected):
    assert _value(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("10%3", 1),
    ("-7 % 3", -1),
    ("(7)%4", 3),
])
def test_modulo(text, expected):
    assert _value(text) == expected


# --- Precision ---

def test_binary_noise_is_rounded_away():
    assert _value("0.1+0.2") == 0.3


def test_twelve_significant_digits():
    assert _value("1/3") == 0.333333333333
    assert _value("2/3") == 0.666666666667


def test_results_are_plain_floats():
    assert type(_value("1+1")) is float


# --- Empty input ---

@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_empty_input_is_zero(text):
    assert _value(text) == 0


# --- Errors ---

@pytest.mark.parametrize("text, code", [
    ("5/0", ErrorCode.DIV_ZERO),
    ("5/(2-2)", ErrorCode.DIV_ZERO),
    ("1.2.3", ErrorCode.BAD_NUMBER),
    ("(1+2", ErrorCode.PAREN_MISMATCH),
    ("1+2)", ErrorCode.PAREN_MISMATCH),
    ("2+a", ErrorCode.INVALID_CHAR),
    ("1 2", ErrorCode.SYNTAX),
    ("+", ErrorCode.SYNTAX),
    ("*5", ErrorCode.SYNTAX),
    ("()", ErrorCode.SYNTAX),
    ("5%0", ErrorCode.MATH_ERR),
])
def test_error_codes(text, code):
    outcome = evaluate(text)
    assert not outcome.ok
    assert outcome.value is None
    assert outcome.error == code


def test_overflow_is_math_error():
    big = "1" + "0" * 200
    assert evaluate(f"{big}*{big}").error == ErrorCode.MATH_ERR


def test_error_codes_are_stable_identifiers():
    assert evaluate("5/0").error.value == "DivZero"
    assert {code.value for code in ErrorCode} == {
        "BadNumber", "InvalidChar", "ParenMismatch", "Syntax",
        "DivZero", "UnknownOp", "MathErr",
    }


# --- Determinism ---

def test_repeated_evaluation_is_identical():
    text = "40%(50%+2) - 1/3 + (3+2)5"
    assert evaluate(text) == evaluate(text)


# --- Helpers ---

def test_normalize_rejects_non_finite():
    assert normalize(float('inf')).error == ErrorCode.MATH_ERR
    assert normalize(float('nan')).error == ErrorCode.MATH_ERR


def test_evaluate_or_raise():
    assert evaluate_or_raise("2+2") == 4
    with pytest.raises(CalcError) as excinfo:
        evaluate_or_raise("5/0")
    assert excinfo.value.code == ErrorCode.DIV_ZERO
    assert str(excinfo.value) == "DivZero"
