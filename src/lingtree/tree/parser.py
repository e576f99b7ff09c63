"""Recursive-descent parser for the bracket tree notation.

Grammar::

    Node         ::= '[' LabelSym (FeatureGroup | Node | LeafSym)* ']' | LabelSym
    LabelSym     ::= symbol                 (optional "#id" suffix)
    FeatureGroup ::= '[' SignedSym ']'      (SignedSym starts with '+' or '-')
    LeafSym      ::= symbol | quoted-symbol

The only ambiguity is an open bracket inside a node body, which may start a
feature group or a child node. It is settled by one token of backtracking
lookahead: if the token after the bracket is a plain symbol starting with a
sign, it is a feature group; otherwise the cursor is rewound and a child node
is parsed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lingtree.errors import (
    EmptyFeatureName,
    ExpectedTokenKind,
    ExtraTrailingInput,
    NestingTooDeep,
    UnclosedBracket,
    UnexpectedEndOfInput,
    UnrecognizedLeadingToken,
)
from lingtree.tree.tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

# Bracket nesting limit; keeps the recursive descent well inside the
# interpreter's recursion limit.
MAX_DEPTH = 200

_SIGNS = ("+", "-")


@dataclass(frozen=True)
class Feature:
    sign: str
    name: str

    def __str__(self) -> str:
        return f"{self.sign}{self.name}"


@dataclass
class Node:
    label: str
    features: list[Feature] = field(default_factory=list)
    id: str | None = None
    children: list[Node] = field(default_factory=list)


def split_label(text: str) -> tuple[str, str | None]:
    """Split ``"DP#wh"`` into ``("DP", "wh")`` at the first ``#``."""
    label, sep, ident = text.partition("#")
    if not sep:
        return text, None
    return label, ident


class _Cursor:
    """Token cursor with mark/reset for backtracking."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def eat(self, kind: TokenKind | None = None) -> Token:
        tok = self.peek()
        if tok is None:
            raise UnexpectedEndOfInput()
        if kind is not None and tok.kind is not kind:
            raise ExpectedTokenKind(kind.value, tok.kind.value, tok.pos)
        self._pos += 1
        return tok

    def mark(self) -> int:
        return self._pos

    def reset(self, mark: int) -> None:
        self._pos = mark


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self._cur = _Cursor(tokens)
        self.node_count = 0

    def parse(self) -> Node:
        first = self._cur.peek()
        if first is None:
            raise UnexpectedEndOfInput()
        root = self._node(0)
        extra = self._cur.peek()
        if extra is not None:
            raise ExtraTrailingInput(extra.pos)
        return root

    def _node(self, depth: int) -> Node:
        tok = self._cur.peek()
        if tok is None:
            raise UnexpectedEndOfInput()
        if tok.kind is TokenKind.SYMBOL:
            self._cur.eat()
            return self._leaf(tok)
        if tok.kind is not TokenKind.OPEN:
            raise UnrecognizedLeadingToken(tok.kind.value, tok.pos)
        if depth >= MAX_DEPTH:
            raise NestingTooDeep(MAX_DEPTH, tok.pos)

        open_tok = self._cur.eat(TokenKind.OPEN)
        label, ident = split_label(self._cur.eat(TokenKind.SYMBOL).value)
        node = Node(label=label, id=ident)
        self.node_count += 1

        while True:
            nxt = self._cur.peek()
            if nxt is None:
                raise UnclosedBracket(open_tok.pos)
            if nxt.kind is TokenKind.CLOSE:
                break
            if nxt.kind is TokenKind.OPEN:
                feature = self._try_feature()
                if feature is not None:
                    node.features.append(feature)
                else:
                    node.children.append(self._node(depth + 1))
            else:
                self._cur.eat()
                node.children.append(self._leaf(nxt))
        self._cur.eat(TokenKind.CLOSE)
        return node

    def _try_feature(self) -> Feature | None:
        mark = self._cur.mark()
        self._cur.eat(TokenKind.OPEN)
        tok = self._cur.peek()
        if tok is None or tok.kind is not TokenKind.SYMBOL or not tok.value.startswith(_SIGNS):
            self._cur.reset(mark)
            return None
        self._cur.eat()
        name = tok.value[1:]
        if not name:
            raise EmptyFeatureName(tok.pos)
        self._cur.eat(TokenKind.CLOSE)
        return Feature(sign=tok.value[0], name=name)

    def _leaf(self, tok: Token) -> Node:
        label, ident = split_label(tok.value)
        self.node_count += 1
        return Node(label=label, id=ident)


def parse_tree(source: str) -> Node:
    """Parse bracket notation into a :class:`Node` tree.

    The whole input must be exactly one node.

    Raises:
        ParseError: One of its subclasses, describing the first problem found.
    """
    tokens = tokenize(source)
    parser = _Parser(tokens)
    root = parser.parse()
    logger.debug("Parsed tree: %d tokens, %d nodes", len(tokens), parser.node_count)
    return root
