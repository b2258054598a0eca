"""Bind Well-Formed Names to the URI and formatted-string forms."""

from __future__ import annotations

from cpe_names.grammar.model import WellFormedName
from cpe_names.grammar.support import is_alphanum
from cpe_names.grammar.types import (
    ANY,
    ATTRIBUTES,
    NA,
    PACKED_ATTRIBUTES,
    URI_ATTRIBUTES,
    Attribute,
    AttributeValue,
)
from cpe_names.naming.percent import MULTI_WILDCARD, SINGLE_WILDCARD, pct_encode

URI_PREFIX = "cpe:/"
FS_PREFIX = "cpe:2.3:"


def bind_to_uri(wfn: WellFormedName) -> str:
    """Bind ``wfn`` to a CPE 2.2 URI, trimming trailing empty components.

    Example:
        >>> bind_to_uri(WellFormedName(part="a", vendor="microsoft"))
        'cpe:/a:microsoft'
    """
    components: list[str] = []
    for attribute in URI_ATTRIBUTES:
        if attribute is Attribute.EDITION:
            component = pack(*(bind_value_for_uri(wfn.get(a)) for a in PACKED_ATTRIBUTES))
        else:
            component = bind_value_for_uri(wfn.get(attribute))
        components.append(component)
    return (URI_PREFIX + ":".join(components)).rstrip(":")


def bind_to_fs(wfn: WellFormedName) -> str:
    """Bind ``wfn`` to a CPE 2.3 formatted string (always 11 components)."""
    return FS_PREFIX + ":".join(bind_value_for_fs(wfn.get(a)) for a in ATTRIBUTES)


def bind_value_for_uri(value: AttributeValue) -> str:
    if value is ANY:
        return ""
    if value is NA:
        return "-"
    return transform_for_uri(value)


def bind_value_for_fs(value: AttributeValue) -> str:
    if value is ANY:
        return "*"
    if value is NA:
        return "-"
    return process_quoted_chars(value)


def transform_for_uri(value: str) -> str:
    """Percent-encode quoted characters and map unquoted wildcards.

    Alphanumerics pass through, ``\\x`` is replaced by the percent form of
    ``x``, and unquoted ``?``/``*`` become ``%01``/``%02``. Any other
    unquoted character is dropped.
    """
    result: list[str] = []
    index = 0
    while index < len(value):
        char = value[index]
        if is_alphanum(char):
            result.append(char)
            index += 1
            continue
        if char == "\\":
            result.append(pct_encode(value[index + 1 : index + 2]))
            index += 2
            continue
        if char == "?":
            result.append(SINGLE_WILDCARD)
        elif char == "*":
            result.append(MULTI_WILDCARD)
        index += 1
    return "".join(result)


def process_quoted_chars(value: str) -> str:
    """Drop the escape before ``.``, ``-`` and ``_``; keep every other character."""
    result: list[str] = []
    index = 0
    while index < len(value):
        char = value[index]
        if char == "\\":
            next_char = value[index + 1 : index + 2]
            if next_char in (".", "-", "_"):
                result.append(next_char)
            else:
                result.append("\\" + next_char)
            index += 2
            continue
        result.append(char)
        index += 1
    return "".join(result)


def pack(edition: str, sw_edition: str, target_sw: str, target_hw: str, other: str) -> str:
    """Pack the five edition-related components into one URI component.

    When all extended attributes are blank only ``edition`` is returned.
    """
    if not (sw_edition or target_sw or target_hw or other):
        return edition
    return f"~{edition}~{sw_edition}~{target_sw}~{target_hw}~{other}"


__all__ = [
    "FS_PREFIX",
    "URI_PREFIX",
    "bind_to_fs",
    "bind_to_uri",
    "bind_value_for_fs",
    "bind_value_for_uri",
    "pack",
    "process_quoted_chars",
    "transform_for_uri",
]
