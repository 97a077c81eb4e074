import logging
from typing import Optional, Union

from calcengine.errors import CalculatorError
from calcengine.evaluator import evaluate_postfix
from calcengine.formatter import ERROR_TEXT, format_number
from calcengine.parser import to_postfix
from calcengine.tokenizer import tokenize
from calcengine.tokens import GLYPHS, MAX_INPUT_LENGTH, AngleMode

logger = logging.getLogger(__name__)

Mode = Union[AngleMode, str]


def normalize(expression: str) -> str:
    """Drop whitespace, map keypad glyphs to operators and cap the length."""
    cleaned = "".join(expression.split())
    cleaned = "".join(GLYPHS.get(c, c) for c in cleaned)
    return cleaned[:MAX_INPUT_LENGTH]


def evaluate_numeric(expression: Optional[str], angle_mode: Mode = AngleMode.RADIANS) -> float:
    """
    Evaluate an expression string and return the raw float.

    Empty input evaluates to 0. Any CalculatorError raised by a stage is
    propagated unchanged.
    """
    mode = AngleMode.from_string(angle_mode)
    if not expression:
        return 0.0
    cleaned = normalize(expression)
    if not cleaned:
        return 0.0

    tokens = tokenize(cleaned)
    postfix = to_postfix(tokens)
    return evaluate_postfix(postfix, mode)


def evaluate(expression: Optional[str], angle_mode: Mode = AngleMode.RADIANS) -> str:
    """Evaluate an expression string and return the display text."""
    return format_number(evaluate_numeric(expression, angle_mode))


def preview(expression: Optional[str], angle_mode: Mode = AngleMode.RADIANS) -> str:
    """
    Live "answer so far" for an expression that is still being typed.
    Returns "" while the expression does not evaluate.
    """
    if not expression:
        return ""
    try:
        return evaluate(expression, angle_mode)
    except CalculatorError as e:
        logger.debug("preview of %r failed: %s", expression, e)
        return ""


class CalculatorEngine:
    """
    Facade for UI code: remembers a default angle mode and collapses every
    failure into the display text "Error".
    """

    def __init__(self, mode: Mode = AngleMode.RADIANS):
        self.mode = AngleMode.from_string(mode)

    def set_mode(self, mode: Mode):
        self.mode = AngleMode.from_string(mode)

    def calculate(self, expression: Optional[str], angle_mode: Optional[Mode] = None) -> str:
        mode = self.mode if angle_mode is None else angle_mode
        try:
            return evaluate(expression, mode)
        except CalculatorError as e:
            logger.debug("calculate(%r) failed: %s", expression, e)
            return ERROR_TEXT

    def preview(self, expression: Optional[str], angle_mode: Optional[Mode] = None) -> str:
        return preview(expression, self.mode if angle_mode is None else angle_mode)
