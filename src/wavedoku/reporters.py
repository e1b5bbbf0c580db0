class BaseReporter(object):
    """Delegate class to provide progress reporting for the solver.
    """

    def starting(self):
        """Called before the solving loop actually starts.
        """

    def starting_round(self, index):
        """Called before each round of solving starts.

        The index is zero-based.
        """

    def ending_round(self, index, board):
        """Called before each round of solving ends.

        This is NOT called if solving ends at this round, either because the
        board is complete or because it turned out to be unsolvable. Use
        `ending` if you want to report finalization. The index is zero-based.
        """

    def ending(self, board):
        """Called before solving ends successfully.
        """

    def collapsing(self, coordinate, value, alternatives):
        """Called when a cell is fixed to a digit, before the digit is
        propagated to its relatives.

        `alternatives` holds the candidates of the cell that were not chosen.
        """

    def saving_checkpoint(self, coordinate, depth):
        """Called after a checkpoint is saved for a collapsed cell.

        `depth` is the number of checkpoints held, including the new one.
        """

    def backtracking(self, depth):
        """Called after the most recent checkpoint is restored.

        `depth` is the number of checkpoints left.
        """
