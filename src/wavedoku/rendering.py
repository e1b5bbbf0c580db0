from __future__ import annotations

from typing import TYPE_CHECKING

from .structs import REGION_SIZE, SIZE

if TYPE_CHECKING:
    from .structs import Board

# Regions are delimited with "| " between cells and with this line between
# rows, "+" sitting below each "|".
REGION_SEPARATOR = "------+-------+------"


def render_row(digits: list[int]) -> str:
    parts = []
    for x, digit in enumerate(digits):
        parts.append(f"{digit or ' '} ")
        if x % REGION_SIZE == REGION_SIZE - 1 and x != SIZE - 1:
            parts.append("| ")
    return "".join(parts)


def render(board: Board) -> str:
    """Render a board as text.

    Collapsed cells show their digit, the others are left blank.
    """
    lines = []
    for y, digits in enumerate(board.digits()):
        lines.append(render_row(digits) + "\n")
        if y % REGION_SIZE == REGION_SIZE - 1 and y != SIZE - 1:
            lines.append(REGION_SEPARATOR + "\n")
    return "".join(lines)
