"""CPE 2.3 naming, binding and matching.

The public API covers the Well-Formed Name model, the URI and
formatted-string codecs, and the wildcard-aware matcher.
"""

import importlib.metadata

from .exceptions import CPEError, IllegalArgumentError, ParseError
from .grammar import (
    ANY,
    NA,
    Attribute,
    LogicalValue,
    Relation,
    WellFormedName,
    parse_logical_value,
    validate_string_value,
)
from .matching import (
    MatchReport,
    compare,
    compare_all,
    compare_strings,
    is_disjoint,
    is_equal,
    is_subset,
    is_superset,
)
from .naming import bind_to_fs, bind_to_uri, unbind, unbind_fs, unbind_uri

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# In-tree execution (tests run before the distribution is installed) has no
# metadata; normalise to a neutral placeholder.
try:  # pragma: no cover - trivial guard
    __version__ = importlib.metadata.version("cpe-names")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ANY",
    "NA",
    "Attribute",
    "CPEError",
    "IllegalArgumentError",
    "LogicalValue",
    "MatchReport",
    "ParseError",
    "Relation",
    "WellFormedName",
    "__version__",
    "bind_to_fs",
    "bind_to_uri",
    "compare",
    "compare_all",
    "compare_strings",
    "is_disjoint",
    "is_equal",
    "is_subset",
    "is_superset",
    "parse_logical_value",
    "unbind",
    "unbind_fs",
    "unbind_uri",
    "validate_string_value",
]
