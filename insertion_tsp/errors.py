"""Exceptions raised at the public boundary of the path builder."""


class InsertionTSPError(Exception):
    """Base class for every error raised by insertion_tsp."""


class OrientationError(InsertionTSPError, ValueError):
    """An element's orientation candidates are missing or malformed."""

    def __init__(self, index, reason):
        self.index = index
        self.reason = reason
        super().__init__(f"element #{index}: {reason}")


class StartingPointError(InsertionTSPError, ValueError):
    """The starting point is not a finite 2D point."""
