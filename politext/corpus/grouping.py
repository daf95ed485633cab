from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence

from politext.datahub.document import Document
from politext.errors import LabelParseError

from .timebucket import MONDAY, floor_to_week, validate_week_start

LABEL_SEPARATOR = "_"
_WEEK_LABEL = re.compile(r"^(?P<author>.+)_(?P<week>\d{4}-\d{2}-\d{2})$")


@dataclass(frozen=True, order=True)
class GroupKey:
    """Composite grouping key; ``week`` is None when grouping by author only."""

    author: str
    week: Optional[date] = None

    @property
    def label(self) -> str:
        return format_group_label(self)


KeyFn = Callable[[Document], GroupKey]


@dataclass(frozen=True)
class GroupPlan:
    """Lookup helpers describing how documents map to group keys."""

    keys: List[GroupKey]
    indices: Dict[GroupKey, List[int]]

    @property
    def sizes(self) -> Dict[GroupKey, int]:
        return {key: len(members) for key, members in self.indices.items()}


def group_by_author(document: Document) -> GroupKey:
    return GroupKey(author=document.author)


def group_by_author_week(week_start: int = MONDAY) -> KeyFn:
    """Build a key function bucketing documents by (author, calendar week)."""
    validate_week_start(week_start)

    def key_fn(document: Document) -> GroupKey:
        return GroupKey(author=document.author, week=floor_to_week(document.timestamp, week_start))

    return key_fn


def build_group_plan(documents: Sequence[Document], key_fn: KeyFn = group_by_author) -> GroupPlan:
    """Group documents by ``key_fn``; keys come back sorted for stable matrix order."""
    buckets: Dict[GroupKey, List[int]] = defaultdict(list)
    for idx, document in enumerate(documents):
        buckets[key_fn(document)].append(idx)
    keys = sorted(buckets)
    return GroupPlan(keys=keys, indices={key: buckets[key] for key in keys})


def format_group_label(key: GroupKey) -> str:
    """Render a key as ``author`` or ``author_YYYY-MM-DD`` for display."""
    if key.week is None:
        return key.author
    return f"{key.author}{LABEL_SEPARATOR}{key.week.isoformat()}"


def parse_group_label(label: str, with_week: bool = True) -> GroupKey:
    """Recover a GroupKey from a display label produced by `format_group_label`."""
    if not with_week:
        if not label:
            raise LabelParseError("Group label cannot be empty.")
        return GroupKey(author=label)

    match = _WEEK_LABEL.match(label)
    if match is None:
        raise LabelParseError(f"Label {label!r} does not end with '_YYYY-MM-DD'.")
    try:
        week = date.fromisoformat(match.group("week"))
    except ValueError as exc:
        raise LabelParseError(f"Label {label!r} carries an invalid date.") from exc
    return GroupKey(author=match.group("author"), week=week)


__all__ = [
    "GroupKey",
    "GroupPlan",
    "KeyFn",
    "LABEL_SEPARATOR",
    "build_group_plan",
    "format_group_label",
    "group_by_author",
    "group_by_author_week",
    "parse_group_label",
]
