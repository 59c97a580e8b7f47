"""Tokenizer for freeform track titles.

Turns "A1. Vern - Eter [LKMV004]" into

    Literal(A1) Dot Literal(Vern) Minus Literal(Eter)
    LeftBracket Literal(LKMV004) RightBracket EOF

Punctuation that carries structure gets its own token, words become
literals unless they are one of the mix/feat keywords.  Scanning is a
single left-to-right pass; the only lookbehind is the track-side check
that decides whether a "." ends the current word.
"""

import enum
import re
from dataclasses import dataclass

from trackmatch.config import (
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    TRACK_SIDE_PATTERN,
    WHITESPACE,
)


class TokenType(enum.Enum):
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    LEFT_BRACKET = enum.auto()
    RIGHT_BRACKET = enum.auto()
    AND = enum.auto()
    MINUS = enum.auto()
    PLUS = enum.auto()
    COLUMN = enum.auto()
    DOT = enum.auto()
    MIX = enum.auto()
    FEAT = enum.auto()
    LITERAL = enum.auto()
    EOF = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str | None = None  # only set for LITERAL


_NON_ASCII = re.compile(r"[^\x00-\x7f]")


def strip_non_ascii(text):
    """Delete (not replace) every non-ASCII character."""
    return _NON_ASCII.sub("", text)


def is_track_side(value):
    """True for vinyl side codes like "A1" or "b9"."""
    return bool(TRACK_SIDE_PATTERN.match(value))


def _scan_word(text, start):
    """Return the index one past the end of the word starting at ``start``.

    A "." normally stays inside the word ("Tobias.", "L.E.M", "feat."),
    except right after a track side, where it ends the word so "A1." lexes
    as Literal(A1) Dot.
    """
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch in WHITESPACE:
            break
        if ch in SINGLE_CHAR_TOKENS:
            if ch != "." or is_track_side(text[start:i]):
                break
        i += 1
    return i


def _word_token(word):
    kind = KEYWORDS.get(word)
    if kind is not None:
        return Token(TokenType[kind])
    return Token(TokenType.LITERAL, word)


def lex(text):
    """Tokenize ``text`` into a list of Tokens ending with EOF.

    Non-ASCII characters are removed first.  Never raises; the empty
    string lexes to ``[EOF]``.
    """
    text = strip_non_ascii(text)
    tokens = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in SINGLE_CHAR_TOKENS:
            tokens.append(Token(TokenType[SINGLE_CHAR_TOKENS[ch]]))
            i += 1
        elif ch in WHITESPACE:
            i += 1
        else:
            end = _scan_word(text, i)
            tokens.append(_word_token(text[i:end]))
            i = end
    tokens.append(Token(TokenType.EOF))
    return tokens
