"""Shunting-yard conversion of infix tokens to postfix (RPN)."""
import logging
import math
from typing import List, Optional

from calcengine.errors import MalformedExpression, MismatchedParentheses, UnknownFunction
from calcengine.tokens import CONSTANTS, FUNCTIONS, Token, TokenKind, binds_before

logger = logging.getLogger(__name__)

# classes of the previous token, used to tell unary from binary minus
NONE, NUMBER, OPERATOR, OPEN, CLOSE, FUNCTION = "none", "number", "operator", "open", "close", "function"
_UNARY_CONTEXT = (NONE, OPERATOR, OPEN)


def _as_number(token: Token) -> Optional[float]:
    if token.kind not in (TokenKind.NUMBER, TokenKind.FUNCTION):
        return None
    try:
        value = float(token.text)
    except ValueError:
        return None
    # "inf" / "nan" spelled as identifiers are not literals
    return value if math.isfinite(value) else None


def _is_operator(token: Token) -> bool:
    return token.kind in (TokenKind.OPERATOR, TokenKind.FACTORIAL)


def _is_unary_minus(token: Token) -> bool:
    return token.kind is TokenKind.OPERATOR and token.unary


def to_postfix(tokens: List[Token]) -> List[Token]:
    """
    Reorder `tokens` into postfix order.

    Constants are replaced by their numeric literal, functions are emitted
    right after the closing parenthesis of their argument, and a "-" at the
    start of the expression, after an operator (including "!") or after "("
    becomes "0 - operand"; that minus is output before a following "*", "/",
    "%" or "!", but not before "^".

    Raises:
        MismatchedParentheses: a ")" without its "(", or a "(" never closed.
        UnknownFunction: an identifier that is not a known function.
        MalformedExpression: a number literal that does not parse (".").
    """
    output: List[Token] = []
    stack: List[Token] = []
    prev = NONE

    for token in tokens:
        kind = token.kind

        if kind is TokenKind.CONSTANT:
            output.append(Token(TokenKind.NUMBER, CONSTANTS[token.text], token.start, token.end))
            prev = NUMBER
            continue

        if _as_number(token) is not None:
            output.append(Token(TokenKind.NUMBER, token.text, token.start, token.end))
            prev = NUMBER
            continue

        if kind is TokenKind.NUMBER:
            raise MalformedExpression(f"Malformed number: {token.text!r}")

        if kind is TokenKind.FUNCTION:
            name = token.text.lower()
            if name not in FUNCTIONS:
                raise UnknownFunction(token.text, token.start)
            stack.append(Token(TokenKind.FUNCTION, name, token.start, token.end))
            prev = FUNCTION

        elif kind is TokenKind.PAREN_OPEN:
            stack.append(token)
            prev = OPEN

        elif kind is TokenKind.PAREN_CLOSE:
            while stack and stack[-1].kind is not TokenKind.PAREN_OPEN:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParentheses(f"Unmatched ')' at position {token.start}")
            stack.pop()
            if stack and stack[-1].kind is TokenKind.FUNCTION:
                output.append(stack.pop())
            prev = CLOSE

        elif kind is TokenKind.FACTORIAL:
            # a pending unary minus belongs to the operand "!" applies to
            while stack and (_is_unary_minus(stack[-1])
                             or (_is_operator(stack[-1]) and binds_before("!", stack[-1]))):
                output.append(stack.pop())
            stack.append(token)
            prev = OPERATOR

        elif token.text == "-" and prev in _UNARY_CONTEXT:
            output.append(Token(TokenKind.NUMBER, "0", token.start, token.start))
            stack.append(Token(TokenKind.OPERATOR, "-", token.start, token.end, unary=True))
            prev = OPERATOR

        else:
            while stack and _is_operator(stack[-1]) and binds_before(token.text, stack[-1]):
                output.append(stack.pop())
            stack.append(token)
            prev = OPERATOR

    while stack:
        token = stack.pop()
        if token.kind is TokenKind.PAREN_OPEN:
            raise MismatchedParentheses(f"Unclosed '(' at position {token.start}")
        output.append(token)

    logger.debug("postfix: %s", " ".join(t.text for t in output))
    return output
