"""Warning classes for root finding module."""


class ConvergenceWarning(UserWarning):
    """Issued when an iteration stops at its step cap without converging."""

    pass
