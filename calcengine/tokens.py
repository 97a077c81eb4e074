"""calcengine/tokens.py

Token kinds, the operator table and the engine-wide constants.
"""
import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple

# -------------------------
# Limits / tolerances
# -------------------------
MAX_INPUT_LENGTH = 1000
EPSILON = 1e-12

# Display glyphs produced by keypads, mapped to the operator characters the
# tokenizer understands.
GLYPHS = MappingProxyType({
    "×": "*",
    "÷": "/",
    "−": "-",
})


class AngleMode(Enum):
    RADIANS = "rad"
    DEGREES = "deg"

    @classmethod
    def from_string(cls, value) -> "AngleMode":
        """Accept an AngleMode or one of "rad"/"deg"/"radians"/"degrees"."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in ("rad", "radians"):
            return cls.RADIANS
        if key in ("deg", "degrees"):
            return cls.DEGREES
        raise ValueError(f"angle mode must be 'rad' or 'deg', not {value!r}")


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    CONSTANT = "constant"
    PAREN_OPEN = "("
    PAREN_CLOSE = ")"
    FACTORIAL = "!"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    start: int = 0
    end: int = 0
    unary: bool = False  # only set on the "-" a unary minus is rewritten to


class Associativity(Enum):
    LEFT = "L"
    RIGHT = "R"


class OperatorSpec(NamedTuple):
    precedence: int
    associativity: Associativity


OPERATORS = MappingProxyType({
    "+": OperatorSpec(1, Associativity.LEFT),
    "-": OperatorSpec(1, Associativity.LEFT),
    "*": OperatorSpec(2, Associativity.LEFT),
    "/": OperatorSpec(2, Associativity.LEFT),
    "%": OperatorSpec(2, Associativity.LEFT),
    "^": OperatorSpec(3, Associativity.RIGHT),
    "!": OperatorSpec(4, Associativity.RIGHT),
})

FUNCTIONS = frozenset({"sin", "cos", "tan", "ln", "log", "sqrt"})

# Constants are substituted by their literal text before evaluation.
CONSTANTS = MappingProxyType({
    "PI": repr(math.pi),
    "E": repr(math.e),
})

PUNCTUATION = MappingProxyType({
    "(": TokenKind.PAREN_OPEN,
    ")": TokenKind.PAREN_CLOSE,
    "!": TokenKind.FACTORIAL,
    "+": TokenKind.OPERATOR,
    "-": TokenKind.OPERATOR,
    "*": TokenKind.OPERATOR,
    "/": TokenKind.OPERATOR,
    "%": TokenKind.OPERATOR,
    "^": TokenKind.OPERATOR,
})


# A pending unary minus sits between "*" and "^": a following "*", "/" or "%"
# outputs it, a following "^" does not.
UNARY_MINUS_PRECEDENCE = 2.5


def binds_before(incoming: str, top: Token) -> bool:
    """True when the operator on the stack top must be output before `incoming` is pushed."""
    new = OPERATORS[incoming]
    old_precedence = UNARY_MINUS_PRECEDENCE if top.unary else OPERATORS[top.text].precedence
    if new.associativity is Associativity.LEFT:
        return new.precedence <= old_precedence
    return new.precedence < old_precedence
