"""Notation package: SAN / LAN move parsing and serialization."""

from chessnote.core.notation.san import SHAPES, Shape, move_to_san, parse_san

__all__ = [
    "SHAPES",
    "Shape",
    "move_to_san",
    "parse_san",
]
