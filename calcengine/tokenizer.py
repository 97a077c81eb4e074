"""Lexer: normalized expression text -> list of Tokens."""
import logging
import string
from typing import List

from calcengine.errors import InvalidCharacter
from calcengine.tokens import MAX_INPUT_LENGTH, PUNCTUATION, Token, TokenKind

logger = logging.getLogger(__name__)

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


def _scan_number(text: str, start: int, end: int) -> int:
    # at most one decimal point; a second one ends the literal right before it
    dots = 1 if text[start] == "." else 0
    i = start + 1
    while i < end:
        ch = text[i]
        if ch == ".":
            dots += 1
            if dots > 1:
                break
        elif ch not in _DIGITS:
            break
        i += 1
    return i


def tokenize(text: str) -> List[Token]:
    """
    Split `text` into tokens, left to right.

    Only the first MAX_INPUT_LENGTH characters are looked at. Letters are
    grouped into identifier runs (checked against the known functions by the
    parser), "π" and a lone "e"/"E" become constants, digits and dots become
    number literals. Anything else raises InvalidCharacter.
    """
    tokens: List[Token] = []
    end = min(len(text), MAX_INPUT_LENGTH)
    i = 0
    while i < end:
        c = text[i]
        if c == " ":
            i += 1
            continue
        if c in PUNCTUATION:
            tokens.append(Token(PUNCTUATION[c], c, i, i + 1))
            i += 1
        elif c == "π":
            tokens.append(Token(TokenKind.CONSTANT, "PI", i, i + 1))
            i += 1
        elif c.lower() == "e":
            tokens.append(Token(TokenKind.CONSTANT, "E", i, i + 1))
            i += 1
        elif c in _LETTERS:
            j = i + 1
            while j < end and text[j] in _LETTERS:
                j += 1
            tokens.append(Token(TokenKind.FUNCTION, text[i:j], i, j))
            i = j
        elif c in _DIGITS or c == ".":
            j = _scan_number(text, i, end)
            tokens.append(Token(TokenKind.NUMBER, text[i:j], i, j))
            i = j
        else:
            raise InvalidCharacter(c, i)

    logger.debug("tokens: %s", " ".join(t.text for t in tokens))
    return tokens
