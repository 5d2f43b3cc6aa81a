"""Notation vocabulary: pieces, castling, check markers and annotations.

Every enumeration maps to exactly one SAN token and back::

    >>> Piece.from_text("N").to_text()
    'N'
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TypeVar

from chessnote.core.errors import InvalidTokenError

_E = TypeVar("_E")


def _lookup(table: dict[str, _E], text: str, vocabulary: str) -> _E:
    try:
        return table[text]
    except KeyError:
        raise InvalidTokenError(text, vocabulary) from None


class Piece(Enum):
    """Moving or promoted piece. Pawns carry no letter in SAN."""

    PAWN = auto()
    BISHOP = auto()
    KING = auto()
    KNIGHT = auto()
    QUEEN = auto()
    ROOK = auto()

    def to_text(self) -> str:
        return _PIECE_TEXT[self]

    @classmethod
    def from_text(cls, text: str) -> Piece:
        """Decode a piece letter; the empty string is a pawn."""
        return _lookup(_PIECE_FROM_TEXT, text, cls.__name__)

    def __str__(self) -> str:
        return self.to_text()


class CastleType(Enum):
    """Castling side."""

    KINGSIDE = auto()
    QUEENSIDE = auto()

    def to_text(self) -> str:
        return _CASTLE_TEXT[self]

    @classmethod
    def from_text(cls, text: str) -> CastleType:
        return _lookup(_CASTLE_FROM_TEXT, text, cls.__name__)

    def __str__(self) -> str:
        return self.to_text()


class CheckType(Enum):
    """Check or mate marker that follows the move."""

    CHECK = auto()
    MATE = auto()

    def to_text(self) -> str:
        return _CHECK_TEXT[self]

    @classmethod
    def from_text(cls, text: str) -> CheckType:
        return _lookup(_CHECK_FROM_TEXT, text, cls.__name__)

    def __str__(self) -> str:
        return self.to_text()


class Annotation(Enum):
    """Move-quality suffix, always the last token of a move."""

    BLUNDER = auto()
    MISTAKE = auto()
    INTERESTING = auto()
    GOOD = auto()
    BRILLIANT = auto()

    def to_text(self) -> str:
        return _ANNOTATION_TEXT[self]

    @classmethod
    def from_text(cls, text: str) -> Annotation:
        return _lookup(_ANNOTATION_FROM_TEXT, text, cls.__name__)

    def __str__(self) -> str:
        return self.to_text()


_PIECE_TEXT: dict[Piece, str] = {
    Piece.PAWN: "",
    Piece.BISHOP: "B",
    Piece.KING: "K",
    Piece.KNIGHT: "N",
    Piece.QUEEN: "Q",
    Piece.ROOK: "R",
}
_PIECE_FROM_TEXT: dict[str, Piece] = {v: k for k, v in _PIECE_TEXT.items()}

_CASTLE_TEXT: dict[CastleType, str] = {
    CastleType.KINGSIDE: "O-O",
    CastleType.QUEENSIDE: "O-O-O",
}
_CASTLE_FROM_TEXT: dict[str, CastleType] = {v: k for k, v in _CASTLE_TEXT.items()}

_CHECK_TEXT: dict[CheckType, str] = {
    CheckType.CHECK: "+",
    CheckType.MATE: "#",
}
_CHECK_FROM_TEXT: dict[str, CheckType] = {v: k for k, v in _CHECK_TEXT.items()}

_ANNOTATION_TEXT: dict[Annotation, str] = {
    Annotation.BLUNDER: "??",
    Annotation.MISTAKE: "?",
    Annotation.INTERESTING: "?!",
    Annotation.GOOD: "!",
    Annotation.BRILLIANT: "!!",
}
_ANNOTATION_FROM_TEXT: dict[str, Annotation] = {
    v: k for k, v in _ANNOTATION_TEXT.items()
}
