"""Postfix stack machine over float64 values."""
import logging
import math
from typing import List

import numpy as np

from calcengine.errors import InvalidResult, MalformedExpression, StackUnderflow, UnknownFunction
from calcengine.tokens import EPSILON, AngleMode, Token, TokenKind

logger = logging.getLogger(__name__)

_NAN = np.float64(np.nan)
_MAX_FACTORIAL = 170  # 171! overflows a double


def _snap(x):
    """Pull values within EPSILON of 0 or ±1 onto them."""
    if abs(x) < EPSILON:
        return np.float64(0.0)
    if abs(1 - abs(x)) < EPSILON:
        return np.float64(1.0) if x > 0 else np.float64(-1.0)
    return x


def _factorial(a):
    if not np.isfinite(a):
        return _NAN
    k = round(float(a))
    if k < 0 or abs(a - k) > EPSILON:
        return _NAN
    if k > _MAX_FACTORIAL:
        return np.float64(np.inf)
    return np.float64(math.factorial(k))


def _apply_function(name: str, a, angle_mode: AngleMode):
    if name in ("sin", "cos", "tan") and angle_mode is AngleMode.DEGREES:
        a = a * np.pi / 180
    if name == "sin":
        return _snap(np.sin(a))
    if name == "cos":
        return _snap(np.cos(a))
    if name == "tan":
        if abs(np.cos(a)) < EPSILON:
            return _NAN
        return np.tan(a)
    if name == "ln":
        return np.log(a)
    if name == "log":
        return np.log10(a)
    if name == "sqrt":
        return np.sqrt(a)
    raise UnknownFunction(name)


def _apply_binary(op: str, a, b):
    if op == "+":
        return np.add(a, b)
    if op == "-":
        return np.subtract(a, b)
    if op == "*":
        return np.multiply(a, b)
    if op == "/":
        return _NAN if b == 0 else np.divide(a, b)
    if op == "%":
        # percent-of, not modulo
        return a * b / 100
    if op == "^":
        return np.power(a, b)
    raise MalformedExpression(f"Unknown operator: {op!r}")


def _pop(stack: list, token: Token):
    if not stack:
        raise StackUnderflow(f"Missing operand for {token.text!r}")
    return stack.pop()


def evaluate_postfix(postfix: List[Token], angle_mode: AngleMode = AngleMode.RADIANS) -> float:
    """
    Run a postfix token sequence and return the single value it leaves.

    Args:
        postfix: output of parser.to_postfix
        angle_mode: how sin/cos/tan read their argument

    Raises:
        StackUnderflow: an operator or function found too few operands.
        MalformedExpression: the stack does not end with exactly one value.
        InvalidResult: the value is NaN or infinite.
    """
    stack = []

    # domain problems become inf/NaN here and are reported once, at the end
    with np.errstate(all="ignore"):
        for token in postfix:
            kind = token.kind
            if kind is TokenKind.NUMBER:
                try:
                    stack.append(np.float64(float(token.text)))
                except ValueError:
                    raise MalformedExpression(f"Malformed number: {token.text!r}") from None
            elif kind is TokenKind.FUNCTION:
                a = _pop(stack, token)
                stack.append(_apply_function(token.text, a, angle_mode))
            elif kind is TokenKind.FACTORIAL:
                a = _pop(stack, token)
                stack.append(_factorial(a))
            elif kind is TokenKind.OPERATOR:
                b = _pop(stack, token)
                a = _pop(stack, token)
                stack.append(_apply_binary(token.text, a, b))
            else:
                raise MalformedExpression(f"Unexpected token in postfix: {token.text!r}")

    if len(stack) != 1:
        raise MalformedExpression(f"Expression left {len(stack)} values on the stack, expected 1")

    value = float(stack[0])
    logger.debug("value: %r", value)
    if not math.isfinite(value):
        raise InvalidResult(value)
    return value
