"""Core notation layer — pure move-text handling with zero external dependencies.

Quick start::

    from chessnote.core import parse_san, move_to_san

    move = parse_san("exd8=Q+!")
    assert move.is_capture
    assert move_to_san(move) == "exd8=Q+!"
"""

from chessnote.core.enums import Annotation, CastleType, CheckType, Piece
from chessnote.core.errors import (
    CompileError,
    ExhaustedGrammarError,
    InvalidTokenError,
    MissingFieldError,
    NotationError,
    ParseError,
)
from chessnote.core.move import Castle, Move, MoveKind, Normal
from chessnote.core.notation import move_to_san, parse_san
from chessnote.core.types import SQUARE_NONE, Square

__all__ = [
    # Vocabulary
    "Annotation",
    "CastleType",
    "CheckType",
    "Piece",
    # Squares / moves
    "SQUARE_NONE",
    "Square",
    "Castle",
    "Move",
    "MoveKind",
    "Normal",
    # Notation
    "move_to_san",
    "parse_san",
    # Errors
    "NotationError",
    "ParseError",
    "InvalidTokenError",
    "ExhaustedGrammarError",
    "CompileError",
    "MissingFieldError",
]
