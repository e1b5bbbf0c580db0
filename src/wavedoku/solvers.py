from __future__ import annotations

import itertools
from typing import Optional, Sequence

from .checks import is_solved
from .exceptions import (
    Contradiction,
    InconsistentStartingGrid,
    InvalidGrid,
    SudokuUnsolvable,
)
from .rendering import render
from .reporters import BaseReporter
from .structs import DIGITS, SIZE, Board, Cell, Coordinate

# One checkpoint per cell of an empty board at most.
MAX_CHECKPOINTS = SIZE * SIZE


def _iter_givens(starting_grid: Sequence[Sequence[int]]):
    if len(starting_grid) != SIZE:
        raise InvalidGrid(f"expected {SIZE} rows, got {len(starting_grid)}")
    for y, row in enumerate(starting_grid):
        if len(row) != SIZE:
            raise InvalidGrid(f"expected {SIZE} digits in row {y}, got {len(row)}")
        for x, digit in enumerate(row):
            # bool is an int subclass but never a digit.
            if type(digit) is not int or (digit != 0 and digit not in DIGITS):
                raise InvalidGrid(f"invalid digit {digit!r} at ({x}, {y})")
            if digit == 0:
                continue
            yield Coordinate(x, y), digit


class Solver:
    """Solve a sudoku by repeatedly collapsing its most constrained cell.

    The board is built from ``starting_grid``, a sequence of nine rows of nine
    digits each, with 0 marking a blank. Given digits are propagated to their
    relatives right away, so a grid that contradicts itself is rejected with
    `InconsistentStartingGrid` before any search happens.
    """

    def __init__(
        self,
        starting_grid: Sequence[Sequence[int]],
        reporter: Optional[BaseReporter] = None,
    ) -> None:
        self._r = reporter if reporter is not None else BaseReporter()
        self._board = Board()
        self._checkpoints: list[Board] = []

        # The whole grid is checked before anything is propagated.
        givens = list(_iter_givens(starting_grid))
        for coordinate, digit in givens:
            self._board[coordinate] = Cell.new_filled(digit)
            try:
                self._propagate_collapse(coordinate, digit)
            except Contradiction as e:
                raise InconsistentStartingGrid(coordinate, digit) from e

    def __str__(self) -> str:
        return render(self._board)

    @property
    def board(self) -> Board:
        return self._board

    def _select_lowest_entropy(self) -> Optional[Coordinate]:
        """Find the uncollapsed cell with the fewest candidates.

        Ties go to the cell that comes first in row-major order. None is
        returned if every cell is collapsed.
        """
        selected = None
        lowest_entropy = SIZE + 1
        for coordinate, cell in self._board.uncollapsed():
            entropy = cell.entropy()
            if entropy < lowest_entropy:
                selected = coordinate
                lowest_entropy = entropy
        return selected

    def _propagate_collapse(self, coordinate: Coordinate, value: int) -> None:
        for relative in coordinate.relatives():
            self._board[relative].remove(value)

    def _collapse_cell_and_save_state(self, coordinate: Coordinate) -> None:
        cell = self._board[coordinate]
        shadow = cell.collapse()
        value = cell.value
        assert value is not None

        self._r.collapsing(
            coordinate, value, shadow.candidates if shadow is not None else ()
        )

        # Resuming from the checkpoint retries this cell without the digit
        # just chosen.
        if shadow is not None:
            checkpoint = self._board.copy()
            checkpoint[coordinate] = shadow
            self._checkpoints.append(checkpoint)
            assert len(self._checkpoints) <= MAX_CHECKPOINTS
            self._r.saving_checkpoint(coordinate, len(self._checkpoints))

        self._propagate_collapse(coordinate, value)

    def _backtrack(self) -> bool:
        """Restore the most recent checkpoint.

        Returns False if there is no checkpoint left to restore.
        """
        try:
            self._board = self._checkpoints.pop()
        except IndexError:
            return False
        self._r.backtracking(len(self._checkpoints))
        return True

    def solve(self) -> None:
        """Collapse every cell of the board.

        The board is modified in place. `SudokuUnsolvable` is raised if every
        branch of the search ended in a contradiction; the content of the
        board is unspecified in that case.
        """
        self._r.starting()

        backtrack_count = 0
        for round_index in itertools.count():
            self._r.starting_round(round_index)

            coordinate = self._select_lowest_entropy()

            # Every cell is collapsed, we are done!
            if coordinate is None:
                self._r.ending(self._board)
                return

            try:
                self._collapse_cell_and_save_state(coordinate)
            except Contradiction:
                if not self._backtrack():
                    raise SudokuUnsolvable(round_index + 1, backtrack_count)
                backtrack_count += 1

            self._r.ending_round(round_index, self._board)

    def check_if_correct(self) -> bool:
        """Whether every row, column and region holds each digit once."""
        return is_solved(self._board)
