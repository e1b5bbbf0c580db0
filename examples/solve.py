import argparse

import wavedoku

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


class Reporter(wavedoku.BaseReporter):
    def starting(self):
        print("starting()")

    def ending(self, board):
        print("ending(...)")

    def collapsing(self, coordinate, value, alternatives):
        print(f"  collapsing({tuple(coordinate)}, {value}, {alternatives})")

    def saving_checkpoint(self, coordinate, depth):
        print(f"  saving_checkpoint({tuple(coordinate)}, {depth})")

    def backtracking(self, depth):
        print(f"  backtracking({depth})")


def parse_puzzle(text):
    """Read 81 characters, row by row. Both "0" and "." mark a blank."""
    digits = [0 if c == "." else int(c) for c in text if not c.isspace()]
    if len(digits) != 81:
        raise argparse.ArgumentTypeError(f"expected 81 cells, got {len(digits)}")
    return [digits[i : i + 9] for i in range(0, 81, 9)]


def main():
    parser = argparse.ArgumentParser(description="Solve a sudoku puzzle.")
    parser.add_argument(
        "puzzle",
        nargs="?",
        type=parse_puzzle,
        default=CLASSIC,
        help="81 digits read row by row, 0 or . for blanks",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    options = parser.parse_args()

    reporter = Reporter() if options.verbose else None
    try:
        solver = wavedoku.Solver(options.puzzle, reporter)
        solver.solve()
    except wavedoku.SolvingError as e:
        print(f"Error: {e}")
        return

    print(f"Is sudoku correct: {solver.check_if_correct()}")
    print(solver)


if __name__ == "__main__":
    main()
