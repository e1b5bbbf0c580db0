import pytest

from wavedoku import BaseReporter

CLASSIC = [
    [0, 0, 0, 0, 0, 0, 0, 8, 0],
    [6, 8, 0, 4, 7, 0, 0, 2, 0],
    [0, 1, 9, 5, 0, 8, 6, 4, 7],
    [0, 6, 0, 9, 0, 0, 0, 0, 4],
    [3, 4, 2, 6, 8, 0, 0, 0, 0],
    [1, 9, 0, 0, 5, 0, 8, 3, 0],
    [0, 0, 0, 7, 2, 0, 4, 0, 3],
    [0, 0, 6, 0, 0, 5, 0, 1, 0],
    [0, 0, 3, 8, 9, 1, 5, 0, 0],
]

WIKIPEDIA = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

# (0, 0), (1, 0) and (2, 0) can only hold 2 or 3. Nothing notices until the
# search tries both digits for the first of them.
PIGEONHOLE = [
    [0, 0, 0, 1, 4, 5, 6, 7, 8],
    [0, 9, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
]


def _solved_grid():
    return [[(x + 3 * y + y // 3) % 9 + 1 for x in range(9)] for y in range(9)]


class RecordingReporter(BaseReporter):
    def __init__(self):
        self.events = []
        self.solver = None

    def collapsing(self, coordinate, value, alternatives):
        self.events.append(("collapse", coordinate, value, alternatives))

    def saving_checkpoint(self, coordinate, depth):
        self.events.append(("checkpoint", coordinate, depth))

    def backtracking(self, depth):
        self.events.append(("backtrack", depth))

    def ending(self, board):
        self.events.append(("end",))

    def collapses(self):
        return [(e[1], e[2]) for e in self.events if e[0] == "collapse"]


class ShadowCheckingReporter(RecordingReporter):
    """Verify every checkpoint rules out the digit that was just tried.

    Needs the `solver` attribute set before solving starts.
    """

    def saving_checkpoint(self, coordinate, depth):
        super().saving_checkpoint(coordinate, depth)
        collapsed_at, value = self.collapses()[-1]
        shadow = self.solver._checkpoints[-1][coordinate]
        assert collapsed_at == coordinate
        assert depth == len(self.solver._checkpoints)
        assert not shadow.is_collapsed
        assert value not in shadow.candidates
        assert all(digit > value for digit in shadow.candidates)


@pytest.fixture(scope="session")
def reporter_cls():
    return RecordingReporter


@pytest.fixture()
def reporter(reporter_cls):
    return reporter_cls()


@pytest.fixture()
def checking_reporter():
    return ShadowCheckingReporter()


@pytest.fixture()
def classic():
    return [list(row) for row in CLASSIC]


@pytest.fixture()
def wikipedia():
    return [list(row) for row in WIKIPEDIA]


@pytest.fixture()
def pigeonhole():
    return [list(row) for row in PIGEONHOLE]


@pytest.fixture()
def solved_grid():
    """A valid complete grid, built by shifting the first row."""
    return _solved_grid()
