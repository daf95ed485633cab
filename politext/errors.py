"""Exception types raised across the analysis pipeline."""

from __future__ import annotations


class PolitextError(Exception):
    """Base class for every error raised by politext."""


class UnsupportedMetric(PolitextError, ValueError):
    """Metric name is not part of the supported registry."""

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        self.name = name
        self.available = available
        message = f"Unsupported metric '{name}'."
        if available:
            message += f" Available: {', '.join(available)}"
        super().__init__(message)


class EmptyCorpus(PolitextError, ValueError):
    """No documents (or no usable terms) were supplied to a computation."""


class ReferenceNotFound(PolitextError, LookupError):
    """The reference group is absent from a score matrix."""

    def __init__(self, reference: object) -> None:
        self.reference = reference
        super().__init__(f"Reference group {reference!r} not present in the score matrix.")


class UndefinedStatistic(PolitextError, ArithmeticError):
    """A dispersion statistic cannot be computed for the given sample size."""


class LabelParseError(PolitextError, ValueError):
    """A combined group label does not match the ``author_YYYY-MM-DD`` layout."""


__all__ = [
    "EmptyCorpus",
    "LabelParseError",
    "PolitextError",
    "ReferenceNotFound",
    "UndefinedStatistic",
    "UnsupportedMetric",
]
