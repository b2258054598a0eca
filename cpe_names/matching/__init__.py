"""Name matching: per-attribute relations and set-theoretic predicates."""

from __future__ import annotations

from .matcher import (
    compare,
    compare_all,
    compare_strings,
    is_disjoint,
    is_equal,
    is_subset,
    is_superset,
)
from .report import MatchReport

__all__ = [
    "MatchReport",
    "compare",
    "compare_all",
    "compare_strings",
    "is_disjoint",
    "is_equal",
    "is_subset",
    "is_superset",
]
