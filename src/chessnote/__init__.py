"""chessnote — SAN / LAN chess move notation codec."""

from chessnote.core import (
    SQUARE_NONE,
    Annotation,
    Castle,
    CastleType,
    CheckType,
    CompileError,
    ExhaustedGrammarError,
    InvalidTokenError,
    MissingFieldError,
    Move,
    MoveKind,
    Normal,
    NotationError,
    ParseError,
    Piece,
    Square,
    move_to_san,
    parse_san,
)

__version__ = "0.1.0"

__all__ = [
    "SQUARE_NONE",
    "Annotation",
    "Castle",
    "CastleType",
    "CheckType",
    "CompileError",
    "ExhaustedGrammarError",
    "InvalidTokenError",
    "MissingFieldError",
    "Move",
    "MoveKind",
    "Normal",
    "NotationError",
    "ParseError",
    "Piece",
    "Square",
    "move_to_san",
    "parse_san",
]
