from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .structs import Coordinate


class SolverException(Exception):
    """A base class for all exceptions raised by this package.

    `Contradiction` is raised and handled internally while solving. Any
    instance of it bubbling past the solver should be treated as a bug.
    """


class Contradiction(SolverException):
    """A cell was left without any possible digit."""

    def __init__(self, value: int) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"removing {self.value} leaves the cell without candidates"


class InvalidGrid(SolverException, ValueError):
    """The starting grid is not a 9x9 grid of digits from 0 to 9."""


class SolvingError(SolverException):
    pass


class InconsistentStartingGrid(SolvingError):
    """The given digits of the starting grid contradict each other."""

    def __init__(self, coordinate: Coordinate, value: int) -> None:
        super().__init__(coordinate, value)
        self.coordinate = coordinate
        self.value = value

    def __str__(self) -> str:
        return (
            f"initial state is inconsistent: "
            f"{self.value} at ({self.coordinate.x}, {self.coordinate.y}) "
            f"conflicts with another given digit"
        )


class SudokuUnsolvable(SolvingError):
    def __init__(self, round_count: int, backtrack_count: int) -> None:
        super().__init__(round_count, backtrack_count)
        self.round_count = round_count
        self.backtrack_count = backtrack_count

    def __str__(self) -> str:
        return (
            f"sudoku is unsolvable: every branch ended in a contradiction "
            f"({self.round_count} rounds, {self.backtrack_count} backtracks)"
        )
