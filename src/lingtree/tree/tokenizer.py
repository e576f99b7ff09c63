"""Tokenizer for the bracket tree notation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lingtree.errors import UnterminatedQuote


class TokenKind(Enum):
    SYMBOL = "symbol"
    OPEN = "'['"
    CLOSE = "']'"
    QUOTED = "quoted symbol"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    pos: int


def tokenize(source: str) -> list[Token]:
    """Split ``source`` into a flat list of tokens.

    Brackets are always single tokens. A double quote starts a verbatim span
    that runs to the next double quote; the quotes are dropped from the value.

    Raises:
        UnterminatedQuote: If a quoted span is never closed.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)
    while i < n:
        c = source[i]
        if c.isspace():
            i += 1
        elif c == "[":
            tokens.append(Token(TokenKind.OPEN, c, i))
            i += 1
        elif c == "]":
            tokens.append(Token(TokenKind.CLOSE, c, i))
            i += 1
        elif c == '"':
            end = source.find('"', i + 1)
            if end < 0:
                raise UnterminatedQuote(i)
            tokens.append(Token(TokenKind.QUOTED, source[i + 1:end], i))
            i = end + 1
        else:
            j = i
            while j < n and not source[j].isspace() and source[j] not in "[]":
                j += 1
            tokens.append(Token(TokenKind.SYMBOL, source[i:j], i))
            i = j
    return tokens
