"""Arithmetic expression engine for a keypad calculator."""
from .errors import (
    CalculatorError, InvalidCharacter, UnknownFunction, MismatchedParentheses,
    MalformedExpression, StackUnderflow, InvalidResult
)
from .tokens import AngleMode, Token, TokenKind, OPERATORS
from .tokenizer import tokenize
from .parser import to_postfix
from .evaluator import evaluate_postfix
from .formatter import format_number
from .engine import CalculatorEngine, evaluate, evaluate_numeric, preview

__all__ = [
    'CalculatorError', 'InvalidCharacter', 'UnknownFunction', 'MismatchedParentheses',
    'MalformedExpression', 'StackUnderflow', 'InvalidResult',
    'AngleMode', 'Token', 'TokenKind', 'OPERATORS',
    'tokenize', 'to_postfix', 'evaluate_postfix', 'format_number',
    'CalculatorEngine', 'evaluate', 'evaluate_numeric', 'preview'
]
