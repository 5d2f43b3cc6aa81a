"""Structured move record produced by the SAN parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from chessnote.core.enums import Annotation, CastleType, CheckType, Piece
from chessnote.core.types import SQUARE_NONE, Square


@dataclass(frozen=True, slots=True)
class Normal:
    """Any non-castling move. The origin may be partially or fully unknown."""

    origin: Square
    destination: Square


@dataclass(frozen=True, slots=True)
class Castle:
    """Castling move; carries no squares."""

    castle_type: CastleType


MoveKind: TypeAlias = Normal | Castle


@dataclass(slots=True)
class Move:
    """A single move as written in SAN or LAN.

    ``piece`` is ``None`` only while a caller is still filling the record in;
    the parser always sets it (King for castling).
    """

    move_kind: MoveKind
    piece: Piece | None = None
    promotion: Piece | None = None
    annotation: Annotation | None = None
    check_type: CheckType | None = None
    is_capture: bool = False

    @classmethod
    def normal(
        cls,
        piece: Piece,
        destination: Square,
        origin: Square = SQUARE_NONE,
        **fields: Any,
    ) -> Move:
        return cls(Normal(origin, destination), piece, **fields)

    @classmethod
    def castle(cls, castle_type: CastleType, **fields: Any) -> Move:
        return cls(Castle(castle_type), Piece.KING, **fields)

    @property
    def is_castle(self) -> bool:
        return isinstance(self.move_kind, Castle)
