"""Enumerations shared across the CPE naming grammar."""

from __future__ import annotations

from enum import Enum, StrEnum

from cpe_names.exceptions import IllegalArgumentError


class LogicalValue(Enum):
    """Sentinel attribute value: ``ANY`` (unconstrained) or ``NA`` (not applicable).

    Members never compare equal to strings, so the literal string ``"ANY"``
    remains distinct from the logical value.
    """

    ANY = "ANY"
    NA = "NA"

    @classmethod
    def parse(cls, token: str) -> LogicalValue:
        """Return the member named by ``token`` (case-insensitive).

        Raises:
            IllegalArgumentError: If ``token`` is not ``ANY`` or ``NA``.
        """
        if isinstance(token, str):
            member = cls.__members__.get(token.upper())
            if member is not None:
                return member
        raise IllegalArgumentError("logical value must be 'ANY' or 'NA'", token)

    def __str__(self) -> str:
        return self.value


ANY = LogicalValue.ANY
NA = LogicalValue.NA

parse_logical_value = LogicalValue.parse


class Attribute(StrEnum):
    """The closed set of WFN attribute names, in canonical order."""

    PART = "part"
    VENDOR = "vendor"
    PRODUCT = "product"
    VERSION = "version"
    UPDATE = "update"
    EDITION = "edition"
    LANGUAGE = "language"
    SW_EDITION = "sw_edition"
    TARGET_SW = "target_sw"
    TARGET_HW = "target_hw"
    OTHER = "other"


class Relation(StrEnum):
    """Outcome of comparing a source attribute value with a target value."""

    DISJOINT = "disjoint"
    SUBSET = "subset"
    SUPERSET = "superset"
    EQUAL = "equal"
    UNDEFINED = "undefined"


AttributeValue = LogicalValue | str

ATTRIBUTES: tuple[Attribute, ...] = tuple(Attribute)

# Seven components of the legacy 2.2 URI binding.
URI_ATTRIBUTES: tuple[Attribute, ...] = ATTRIBUTES[:7]

# Attributes packed into the URI edition component, in packing order.
PACKED_ATTRIBUTES: tuple[Attribute, ...] = (
    Attribute.EDITION,
    Attribute.SW_EDITION,
    Attribute.TARGET_SW,
    Attribute.TARGET_HW,
    Attribute.OTHER,
)

PART_VALUES = frozenset({"a", "o", "h"})

__all__ = [
    "ANY",
    "ATTRIBUTES",
    "NA",
    "PACKED_ATTRIBUTES",
    "PART_VALUES",
    "URI_ATTRIBUTES",
    "Attribute",
    "AttributeValue",
    "LogicalValue",
    "Relation",
    "parse_logical_value",
]
