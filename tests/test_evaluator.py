"""Tests for the postfix stack machine."""

import math

import pytest

from calcengine import (
    AngleMode, InvalidResult, MalformedExpression, StackUnderflow, Token, TokenKind,
    evaluate_postfix, to_postfix, tokenize,
)

DEG = AngleMode.DEGREES
RAD = AngleMode.RADIANS


def run(text, mode=RAD):
    return evaluate_postfix(to_postfix(tokenize(text)), mode)


def test_single_literal_passes_through():
    assert evaluate_postfix([Token(TokenKind.NUMBER, "42.5")], RAD) == 42.5


@pytest.mark.parametrize("text,expected", [
    ("2+3*4", 14.0),
    ("(2+3)*4", 20.0),
    ("2^3^2", 512.0),
    ("10-4-3", 3.0),
    ("7/2", 3.5),
    ("50%20", 10.0),
    ("5!", 120.0),
    ("0!", 1.0),
    ("3!!", 720.0),
    ("2*-3", -6.0),
    ("-2^2", -4.0),
])
def test_arithmetic(text, expected):
    assert run(text) == expected


def test_power_with_fractional_exponent():
    assert run("2^0.5") == pytest.approx(math.sqrt(2))
    assert run("2^-1") == 0.5


@pytest.mark.parametrize("text,expected", [
    ("sin(180)", 0.0),
    ("sin(90)", 1.0),
    ("sin(270)", -1.0),
    ("cos(90)", 0.0),
    ("cos(180)", -1.0),
    ("cos(0)", 1.0),
])
def test_trig_in_degrees_is_snapped(text, expected):
    assert run(text, DEG) == expected


def test_trig_in_radians_is_snapped():
    assert run("sin(π)", RAD) == 0.0
    assert run("cos(π)", RAD) == -1.0
    assert run("sin(1)", RAD) == pytest.approx(math.sin(1))


def test_tangent():
    assert run("tan(45)", DEG) == pytest.approx(1.0)
    assert run("tan(1)", RAD) == pytest.approx(math.tan(1))
    with pytest.raises(InvalidResult):
        run("tan(90)", DEG)


def test_angle_mode_does_not_affect_logs():
    assert run("ln(e)", DEG) == pytest.approx(1.0)
    assert run("log(1000)", DEG) == pytest.approx(3.0)
    assert run("sqrt(16)", DEG) == 4.0


@pytest.mark.parametrize("text", [
    "1/0",
    "0/0",
    "sqrt(0-1)",
    "ln(0)",
    "-1!",
    "2.5!",
    "171!",
    "(0-8)^(1/3)",
    "10^400",
])
def test_domain_errors_surface_as_invalid_result(text):
    with pytest.raises(InvalidResult) as exc:
        run(text)
    assert not math.isfinite(exc.value.value)


def test_nan_propagates_through_later_arithmetic():
    with pytest.raises(InvalidResult):
        run("1/0*0+5")


def test_largest_finite_factorial():
    assert run("170!") == pytest.approx(math.factorial(170), rel=1e-12)


@pytest.mark.parametrize("postfix", [
    [Token(TokenKind.OPERATOR, "+")],
    [Token(TokenKind.NUMBER, "1"), Token(TokenKind.OPERATOR, "*")],
    [Token(TokenKind.FUNCTION, "sin")],
    [Token(TokenKind.FACTORIAL, "!")],
])
def test_stack_underflow(postfix):
    with pytest.raises(StackUnderflow):
        evaluate_postfix(postfix, RAD)


def test_minus_after_factorial_is_unary():
    # 5 (0-3)! leaves two values
    with pytest.raises(MalformedExpression):
        run("5!-3")
    assert run("5!+3") == 123.0


def test_leftover_operands_are_malformed():
    with pytest.raises(MalformedExpression) as exc:
        run("1.2.3")
    assert not isinstance(exc.value, StackUnderflow)


def test_empty_postfix_is_malformed():
    with pytest.raises(MalformedExpression):
        evaluate_postfix([], RAD)
