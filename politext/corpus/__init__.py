"""Document grouping, week bucketing and document-feature matrices."""

from .dfm import DfmConfig, DocumentFeatureMatrix, build_dfm
from .grouping import (
    GroupKey,
    GroupPlan,
    build_group_plan,
    format_group_label,
    group_by_author,
    group_by_author_week,
    parse_group_label,
)
from .timebucket import MONDAY, SUNDAY, floor_to_week

__all__ = [
    "DfmConfig",
    "DocumentFeatureMatrix",
    "GroupKey",
    "GroupPlan",
    "MONDAY",
    "SUNDAY",
    "build_dfm",
    "build_group_plan",
    "floor_to_week",
    "format_group_label",
    "group_by_author",
    "group_by_author_week",
    "parse_group_label",
]
