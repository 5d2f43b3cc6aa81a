"""SAN / LAN move parsing and serialization.

Parsing walks an ordered table of notation shapes and commits to the first
one that matches the whole token. Several shapes overlap textually, so the
order of :data:`SHAPES` is part of the grammar.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from chessnote.core.enums import Annotation, CastleType, CheckType, Piece
from chessnote.core.errors import ExhaustedGrammarError, MissingFieldError
from chessnote.core.move import Castle, Move, Normal
from chessnote.core.types import Square, file_from_char, rank_from_char

_LOGGER = logging.getLogger(__name__)

_PIECE = r"(?P<piece>[KQBNR])"
_FROM_FILE = r"(?P<from_file>[a-h])"
_FROM_RANK = r"(?P<from_rank>[1-8])"
_TO = r"(?P<to_file>[a-h])(?P<to_rank>[1-8])"
_PROMOTION = r"=?(?P<promotion>[KQBNR])"
_SUFFIX = r"(?P<check>[+#])?(?P<annotation>\?\?|\?!|\?|!!|!)?"


@dataclass(frozen=True, slots=True)
class Shape:
    """One notation form: a whole-token pattern plus its capture flag."""

    name: str
    pattern: re.Pattern[str]
    is_capture: bool = False


def _shape(name: str, body: str, is_capture: bool = False) -> Shape:
    return Shape(name, re.compile(body + _SUFFIX), is_capture)


SHAPES: tuple[Shape, ...] = (
    _shape("castle", r"(?P<castle>O-O-O|O-O|0-0-0|0-0)"),
    _shape("pawn push", _TO),
    _shape("pawn push (long)", _FROM_FILE + _FROM_RANK + _TO),
    _shape("piece push", _PIECE + _TO),
    _shape("piece push from file", _PIECE + _FROM_FILE + _TO),
    _shape("piece push from rank", _PIECE + _FROM_RANK + _TO),
    _shape("piece push (long)", _PIECE + _FROM_FILE + _FROM_RANK + _TO),
    _shape("pawn capture", _FROM_FILE + "x" + _TO + f"(?:{_PROMOTION})?", True),
    _shape(
        "pawn capture (long)",
        _FROM_FILE + _FROM_RANK + "x" + _TO + f"(?:{_PROMOTION})?",
        True,
    ),
    _shape("piece capture", _PIECE + "x" + _TO, True),
    _shape("piece capture from file", _PIECE + _FROM_FILE + "x" + _TO, True),
    _shape("piece capture from rank", _PIECE + _FROM_RANK + "x" + _TO, True),
    _shape(
        "piece capture (long)", _PIECE + _FROM_FILE + _FROM_RANK + "x" + _TO, True
    ),
    _shape("pawn promotion", _TO + _PROMOTION),
    _shape("pawn promotion (long)", _FROM_FILE + _FROM_RANK + _TO + _PROMOTION),
)


def _origin(groups: dict[str, str | None]) -> Square:
    file_text = groups.get("from_file")
    rank_text = groups.get("from_rank")
    return Square(
        file_from_char(file_text) if file_text is not None else None,
        rank_from_char(rank_text) if rank_text is not None else None,
    )


def _build_move(shape: Shape, match: re.Match[str]) -> Move:
    groups = match.groupdict()

    check_text = groups["check"]
    annotation_text = groups["annotation"]
    check_type = CheckType.from_text(check_text) if check_text is not None else None
    annotation = (
        Annotation.from_text(annotation_text) if annotation_text is not None else None
    )

    castle_text = groups.get("castle")
    if castle_text is not None:
        # Accept the digit-zero spelling, but always store the letter form.
        castle_type = CastleType.from_text(castle_text.replace("0", "O"))
        return Move.castle(castle_type, check_type=check_type, annotation=annotation)

    promotion_text = groups.get("promotion")
    promotion = Piece.from_text(promotion_text) if promotion_text is not None else None
    destination = Square(
        file_from_char(groups["to_file"]), rank_from_char(groups["to_rank"])
    )
    return Move(
        Normal(_origin(groups), destination),
        piece=Piece.from_text(groups.get("piece") or ""),
        promotion=promotion,
        annotation=annotation,
        check_type=check_type,
        is_capture=shape.is_capture,
    )


def parse_san(text: str) -> Move:
    """Parse a single SAN or LAN token into a :class:`Move`.

    The token must already be stripped of move numbers and comments.
    Raises :class:`ExhaustedGrammarError` when no notation shape matches.
    """
    if not isinstance(text, str):
        raise TypeError(f"SAN token must be str, not {type(text).__name__}")

    for shape in SHAPES:
        match = shape.pattern.fullmatch(text)
        if match is None:
            continue
        _LOGGER.debug("Parsed %r as %s", text, shape.name)
        return _build_move(shape, match)

    _LOGGER.debug("No notation shape matches %r", text)
    raise ExhaustedGrammarError(text)


def move_to_san(move: Move) -> str:
    """Render *move* as canonical SAN (or LAN, if the origin is a full square)."""
    kind = move.move_kind
    if isinstance(kind, Castle):
        san = kind.castle_type.to_text()
    elif isinstance(kind, Normal):
        if move.piece is None:
            raise MissingFieldError("piece")
        san = move.piece.to_text() + str(kind.origin)
        if move.is_capture:
            san += "x"
        san += str(kind.destination)
    else:
        raise TypeError(f"Unknown move kind: {kind!r}")

    if move.promotion is not None:
        san += "=" + move.promotion.to_text()
    if move.check_type is not None:
        san += move.check_type.to_text()
    if move.annotation is not None:
        san += move.annotation.to_text()
    return san
