from __future__ import annotations

import functools
from typing import Iterator, NamedTuple, Optional

from .exceptions import Contradiction

DIGITS = range(1, 10)
SIZE = 9
REGION_SIZE = 3

_ALL_CANDIDATES = (1 << SIZE) - 1


def _bit(digit: int) -> int:
    return 1 << (digit - 1)


class Coordinate(NamedTuple):
    """A position on the board. ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def __mul__(self, k: int) -> Coordinate:  # type: ignore[override]
        return Coordinate(self.x * k, self.y * k)

    @classmethod
    def all(cls) -> Iterator[Coordinate]:
        """Iterate through every coordinate in row-major order."""
        for y in range(SIZE):
            for x in range(SIZE):
                yield cls(x, y)

    def region_origin(self) -> Coordinate:
        """The top left corner of the 3x3 region this coordinate is in."""
        return Coordinate(self.x // REGION_SIZE, self.y // REGION_SIZE) * REGION_SIZE

    def row(self) -> frozenset[Coordinate]:
        return frozenset(Coordinate(x, self.y) for x in range(SIZE))

    def column(self) -> frozenset[Coordinate]:
        return frozenset(Coordinate(self.x, y) for y in range(SIZE))

    def region(self) -> frozenset[Coordinate]:
        origin = self.region_origin()
        return frozenset(
            Coordinate(origin.x + dx, origin.y + dy)
            for dy in range(REGION_SIZE)
            for dx in range(REGION_SIZE)
        )

    @functools.lru_cache(maxsize=None)
    def relatives(self) -> frozenset[Coordinate]:
        """Coordinates sharing a row, column or region with this one.

        The coordinate itself is not included, leaving 20 relatives for any
        position on the board.
        """
        return (self.row() | self.column() | self.region()) - {self}


class Cell:
    """State of a single position on the board.

    A cell is either *collapsed* to a fixed digit, or *uncollapsed* and
    holding a non-empty set of candidate digits. The two variants share this
    class; ``is_collapsed`` is the tag. Candidates are kept as a bitset where
    bit ``d - 1`` marks digit ``d``.
    """

    __slots__ = ("_value", "_candidates")

    def __init__(self, value: int, candidates: int) -> None:
        self._value = value
        self._candidates = candidates

    @classmethod
    def new_empty(cls) -> Cell:
        return cls(0, _ALL_CANDIDATES)

    @classmethod
    def new_filled(cls, value: int) -> Cell:
        return cls(value, 0)

    def __repr__(self) -> str:
        if self.is_collapsed:
            return f"Cell.collapsed({self._value})"
        digits = "".join(str(d) for d in self.candidates)
        return f"Cell.uncollapsed({digits})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (self._value, self._candidates) == (other._value, other._candidates)

    __hash__ = None  # type: ignore[assignment]

    @property
    def is_collapsed(self) -> bool:
        return self._value != 0

    @property
    def value(self) -> Optional[int]:
        """The fixed digit, or None if the cell is not collapsed yet."""
        if self.is_collapsed:
            return self._value
        return None

    @property
    def candidates(self) -> tuple[int, ...]:
        if self.is_collapsed:
            return (self._value,)
        return tuple(d for d in DIGITS if self._candidates & _bit(d))

    def copy(self) -> Cell:
        return type(self)(self._value, self._candidates)

    def entropy(self) -> int:
        """Number of digits this cell could still take.

        Only used to decide which cell to collapse next.
        """
        if self.is_collapsed:
            return 1
        return bin(self._candidates).count("1")

    def remove(self, value: int) -> None:
        """Rule out a digit for this cell.

        Raises `Contradiction` if the cell is left with no possible digit,
        in which case the cell is not modified. A cell left with a single
        candidate stays uncollapsed until `collapse()` is called on it.
        """
        if self.is_collapsed:
            if self._value == value:
                raise Contradiction(value)
            return
        remaining = self._candidates & ~_bit(value)
        if not remaining:
            raise Contradiction(value)
        self._candidates = remaining

    def collapse(self) -> Optional[Cell]:
        """Fix the cell to its lowest candidate.

        Returns the *shadow* of the cell, an uncollapsed cell holding every
        candidate except the one just chosen, or None if there was no other
        candidate.
        """
        assert not self.is_collapsed, "cell is already collapsed"
        chosen = self._candidates & -self._candidates
        remaining = self._candidates & ~chosen
        self._value = chosen.bit_length()
        self._candidates = 0
        if not remaining:
            return None
        return type(self)(0, remaining)


class Board:
    """A 9x9 mapping of coordinates to cells.

    Iterating through a board yields coordinates in row-major order.
    """

    def __init__(self) -> None:
        self._rows = [[Cell.new_empty() for _ in range(SIZE)] for _ in range(SIZE)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.digits()!r})"

    def __getitem__(self, coordinate: Coordinate) -> Cell:
        return self._rows[coordinate.y][coordinate.x]

    def __setitem__(self, coordinate: Coordinate, cell: Cell) -> None:
        self._rows[coordinate.y][coordinate.x] = cell

    def __iter__(self) -> Iterator[Coordinate]:
        return Coordinate.all()

    def __len__(self) -> int:
        return SIZE * SIZE

    def copy(self) -> Board:
        """Return a deep copy of this board.

        No cell is shared between the copy and this board.
        """
        other = type(self).__new__(type(self))
        other._rows = [[cell.copy() for cell in row] for row in self._rows]
        return other

    def items(self) -> Iterator[tuple[Coordinate, Cell]]:
        for coordinate in self:
            yield coordinate, self[coordinate]

    def uncollapsed(self) -> Iterator[tuple[Coordinate, Cell]]:
        return ((c, cell) for c, cell in self.items() if not cell.is_collapsed)

    def digits(self) -> list[list[int]]:
        """Collapsed digits of each row. Uncollapsed cells read as 0."""
        return [[cell.value or 0 for cell in row] for row in self._rows]
