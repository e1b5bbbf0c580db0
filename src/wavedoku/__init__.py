__all__ = [
    "BaseReporter",
    "Board",
    "Cell",
    "Contradiction",
    "Coordinate",
    "InconsistentStartingGrid",
    "InvalidGrid",
    "SolverException",
    "SolvingError",
    "Solver",
    "SudokuUnsolvable",
    "__version__",
    "is_solved",
    "render",
]

__version__ = "0.1.0.dev0"


from .checks import is_solved
from .exceptions import (
    Contradiction,
    InconsistentStartingGrid,
    InvalidGrid,
    SolverException,
    SolvingError,
    SudokuUnsolvable,
)
from .rendering import render
from .reporters import BaseReporter
from .solvers import Solver
from .structs import Board, Cell, Coordinate
