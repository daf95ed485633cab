from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .registry import MetricFamily, canonical_name, default_metrics


def select_metrics(names: Optional[Iterable[str]], family: MetricFamily) -> Tuple[str, ...]:
    """Validate and de-duplicate metric names, keeping the caller's order.

    An empty or missing selection falls back to the family defaults.
    """
    selected: List[str] = []
    for name in names or ():
        metric = canonical_name(name, family)
        if metric not in selected:
            selected.append(metric)
    if not selected:
        return default_metrics(family)
    return tuple(selected)


__all__ = ["select_metrics"]
