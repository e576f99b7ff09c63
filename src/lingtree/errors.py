"""Parse errors raised by the bracket-notation tokenizer and parser."""

from __future__ import annotations


class ParseError(Exception):
    """Base class for all tree notation errors.

    ``pos`` is the character offset in the source where the problem was
    detected, or ``None`` when the error is at end of input.
    """

    def __init__(self, message: str, pos: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.pos = pos

    def __str__(self) -> str:
        if self.pos is None:
            return self.message
        return f"{self.message} (at offset {self.pos})"


class UnterminatedQuote(ParseError):
    def __init__(self, pos: int) -> None:
        super().__init__("Unclosed quote", pos)


class UnexpectedEndOfInput(ParseError):
    def __init__(self) -> None:
        super().__init__("Unexpected end of input")


class UnclosedBracket(ParseError):
    def __init__(self, pos: int) -> None:
        super().__init__("Unclosed '['", pos)


class ExpectedTokenKind(ParseError):
    def __init__(self, expected: str, got: str, pos: int) -> None:
        super().__init__(f"Expected {expected}, got {got}", pos)
        self.expected = expected
        self.got = got


class ExtraTrailingInput(ParseError):
    def __init__(self, pos: int) -> None:
        super().__init__("Extra input after tree", pos)


class UnrecognizedLeadingToken(ParseError):
    def __init__(self, got: str, pos: int) -> None:
        super().__init__(f"Cannot start a node with {got}", pos)
        self.got = got


class EmptyFeatureName(ParseError):
    def __init__(self, pos: int) -> None:
        super().__init__("Feature has a sign but no name", pos)


class NestingTooDeep(ParseError):
    def __init__(self, limit: int, pos: int) -> None:
        super().__init__(f"Brackets nested deeper than {limit} levels", pos)
        self.limit = limit
