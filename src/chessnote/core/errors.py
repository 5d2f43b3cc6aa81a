"""Exceptions raised by the notation layer."""

from __future__ import annotations


class NotationError(ValueError):
    """Base class for every error raised by :mod:`chessnote`."""


class ParseError(NotationError):
    """Text could not be turned into a structured move."""


class InvalidTokenError(ParseError):
    """A sub-token did not decode against its vocabulary."""

    def __init__(self, token: str, vocabulary: str) -> None:
        super().__init__(f"Invalid {vocabulary} token: {token!r}")
        self.token = token
        self.vocabulary = vocabulary


class ExhaustedGrammarError(ParseError):
    """No notation shape matched the whole input."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Could not parse move: {text!r}")
        self.text = text


class CompileError(NotationError):
    """A structured move could not be rendered as text."""


class MissingFieldError(CompileError):
    """A field required for rendering was never set."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Move field {field!r} is not set")
        self.field = field
