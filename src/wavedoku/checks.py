from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

from .structs import DIGITS, REGION_SIZE, SIZE

if TYPE_CHECKING:
    from .structs import Board


def is_complete_group(digits: Iterable[int]) -> bool:
    """Whether a row, column or region holds every digit exactly once."""
    return sorted(digits) == list(DIGITS)


def iter_groups(board: Board) -> Iterator[list[int]]:
    """Yield the digits of every row, column and region of a board.

    Cells that are not collapsed yet read as 0.
    """
    digits = board.digits()
    yield from digits
    for x in range(SIZE):
        yield [row[x] for row in digits]
    for oy in range(0, SIZE, REGION_SIZE):
        for ox in range(0, SIZE, REGION_SIZE):
            yield [
                digits[oy + dy][ox + dx]
                for dy in range(REGION_SIZE)
                for dx in range(REGION_SIZE)
            ]


def is_solved(board: Board) -> bool:
    return all(is_complete_group(group) for group in iter_groups(board))
