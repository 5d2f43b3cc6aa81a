"""Square coordinates as written in algebraic notation.

Coordinates have their origin in the top-left corner of the board as seen
from White::

    file: a=0, b=1, ..., h=7
    rank: 8=0, 7=1, ..., 1=7

Either axis may be absent, since SAN often names only part of the origin
square (``Nbd2``, ``R1e2``) or none of it (``Nf3``).
"""

from __future__ import annotations

from dataclasses import dataclass

from chessnote.core.errors import InvalidTokenError

FILES = "abcdefgh"
RANKS = "12345678"


def file_from_char(char: str) -> int:
    """File index 0–7 from a letter a–h."""
    return ord(char) - ord("a")


def rank_from_char(char: str) -> int:
    """Rank coordinate 0–7 from a digit 1–8 (``'8'`` → 0, ``'1'`` → 7)."""
    return 7 - (int(char) - 1)


def file_to_char(file: int) -> str:
    return chr(ord("a") + file)


def rank_to_char(rank: int) -> str:
    return str(8 - rank)


@dataclass(frozen=True, slots=True)
class Square:
    """Board coordinate with independently optional file and rank."""

    file: int | None = None
    rank: int | None = None

    @classmethod
    def of(cls, file: int, rank: int) -> Square:
        """Fully specified square."""
        return cls(file, rank)

    @classmethod
    def from_name(cls, name: str) -> Square:
        """Parse a square name, e.g. ``'e4'`` → ``Square(4, 4)``."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
            raise InvalidTokenError(name, "Square")
        return cls(file_from_char(name[0]), rank_from_char(name[1]))

    @property
    def is_full(self) -> bool:
        return self.file is not None and self.rank is not None

    @property
    def is_empty(self) -> bool:
        return self.file is None and self.rank is None

    def __str__(self) -> str:
        """Notation text; absent axes are omitted."""
        text = ""
        if self.file is not None:
            text += file_to_char(self.file)
        if self.rank is not None:
            text += rank_to_char(self.rank)
        return text


# Origin square left unspecified by the notation.
SQUARE_NONE = Square()
