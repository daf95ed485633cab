"""Closed registry of every metric name the pipeline understands.

Pairwise measures (similarity and distance) operate on grouped
document-feature matrices; readability formulas operate on single documents.
Both families are resolved here so callers can validate a name once and
dispatch by family.
"""

from __future__ import annotations

from typing import Dict, Literal, Tuple

from politext.errors import UnsupportedMetric

from .readability import READABILITY_REGISTRY
from .similarity import PAIRWISE_REGISTRY

MetricFamily = Literal["pairwise", "readability"]
MetricKind = Literal["similarity", "distance", "readability"]

DEFAULT_PAIRWISE: Tuple[str, ...] = ("correlation", "cosine", "dice", "edice", "euclidean", "manhattan")
DEFAULT_READABILITY: Tuple[str, ...] = ("Flesch.Kincaid", "SMOG", "Flesch", "Dale.Chall")

_FAMILIES: Dict[MetricFamily, Tuple[str, ...]] = {
    "pairwise": tuple(PAIRWISE_REGISTRY),
    "readability": tuple(READABILITY_REGISTRY),
}
_DEFAULTS: Dict[MetricFamily, Tuple[str, ...]] = {
    "pairwise": DEFAULT_PAIRWISE,
    "readability": DEFAULT_READABILITY,
}


def _check_family(family: str) -> None:
    if family not in _FAMILIES:
        raise ValueError(f"Unknown metric family '{family}'. Available: {list(_FAMILIES)}")


def available_metrics(family: MetricFamily) -> Tuple[str, ...]:
    _check_family(family)
    return _FAMILIES[family]


def default_metrics(family: MetricFamily) -> Tuple[str, ...]:
    _check_family(family)
    return _DEFAULTS[family]


def canonical_name(name: str, family: MetricFamily) -> str:
    """Resolve ``name`` case-insensitively to its registered spelling."""
    available = available_metrics(family)
    lookup = {metric.lower(): metric for metric in available}
    try:
        return lookup[name.strip().lower()]
    except KeyError as exc:
        raise UnsupportedMetric(name, available) from exc


def metric_kind(name: str) -> MetricKind:
    if name in PAIRWISE_REGISTRY:
        return PAIRWISE_REGISTRY[name].kind
    if name in READABILITY_REGISTRY:
        return "readability"
    raise UnsupportedMetric(name, tuple(PAIRWISE_REGISTRY) + tuple(READABILITY_REGISTRY))


__all__ = [
    "DEFAULT_PAIRWISE",
    "DEFAULT_READABILITY",
    "MetricFamily",
    "MetricKind",
    "available_metrics",
    "canonical_name",
    "default_metrics",
    "metric_kind",
]
