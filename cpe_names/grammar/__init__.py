"""Attribute grammar and the Well-Formed Name model for CPE 2.3 names.

This package hosts the value grammar (logical values, quoting and wildcard
rules) and the WFN container that enforces it on assignment.
"""

from __future__ import annotations

from .model import WellFormedName
from .support import (
    coerce_enum,
    contains_questions,
    contains_wildcards,
    count_escape_characters,
    count_preceding_backslashes,
    enum_values,
    is_alphanum,
    unescaped_colon_index,
    unescaped_length,
    validate_string_value,
)
from .types import (
    ANY,
    ATTRIBUTES,
    NA,
    PACKED_ATTRIBUTES,
    URI_ATTRIBUTES,
    Attribute,
    AttributeValue,
    LogicalValue,
    Relation,
    parse_logical_value,
)

__all__ = [
    "ANY",
    "ATTRIBUTES",
    "NA",
    "PACKED_ATTRIBUTES",
    "URI_ATTRIBUTES",
    "Attribute",
    "AttributeValue",
    "LogicalValue",
    "Relation",
    "WellFormedName",
    "coerce_enum",
    "contains_questions",
    "contains_wildcards",
    "count_escape_characters",
    "count_preceding_backslashes",
    "enum_values",
    "is_alphanum",
    "parse_logical_value",
    "unescaped_colon_index",
    "unescaped_length",
    "validate_string_value",
]
