"""Percent-encoding table for the CPE 2.2 URI binding.

Quoted punctuation in a WFN string is bound to the URI through this table.
The hyphen and period have no entry and bind without encoding.
:data:`PERCENT_DECODINGS` is the exact inverse, mapping each form back to
the escaped WFN character.
"""

from __future__ import annotations

PERCENT_ENCODINGS: dict[str, str] = {
    "!": "%21",
    '"': "%22",
    "#": "%23",
    "$": "%24",
    "%": "%25",
    "&": "%26",
    "'": "%27",
    "(": "%28",
    ")": "%29",
    "*": "%2a",
    "+": "%2b",
    ",": "%2c",
    "/": "%2f",
    ":": "%3a",
    ";": "%3b",
    "<": "%3c",
    "=": "%3d",
    ">": "%3e",
    "?": "%3f",
    "@": "%40",
    "[": "%5b",
    "\\": "%5c",
    "]": "%5d",
    "^": "%5e",
    "`": "%60",
    "{": "%7b",
    "|": "%7c",
    "}": "%7d",
    "~": "%7e",
}

PERCENT_DECODINGS: dict[str, str] = {
    form: "\\" + char for char, form in PERCENT_ENCODINGS.items()
}

# Unquoted wildcards in the URI binding.
SINGLE_WILDCARD = "%01"
MULTI_WILDCARD = "%02"


def pct_encode(char: str) -> str:
    """Return the percent form of a quoted character.

    ``-``, ``.`` and any character outside the table are returned unchanged.
    """
    return PERCENT_ENCODINGS.get(char, char)


def pct_decode(form: str) -> str | None:
    """Return the escaped WFN character for a percent form, or None."""
    return PERCENT_DECODINGS.get(form.lower())


__all__ = [
    "MULTI_WILDCARD",
    "PERCENT_DECODINGS",
    "PERCENT_ENCODINGS",
    "SINGLE_WILDCARD",
    "pct_decode",
    "pct_encode",
]
