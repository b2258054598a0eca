"""Binding and unbinding between Well-Formed Names and CPE strings."""

from __future__ import annotations

from .binder import FS_PREFIX, URI_PREFIX, bind_to_fs, bind_to_uri
from .percent import PERCENT_DECODINGS, PERCENT_ENCODINGS, pct_decode, pct_encode
from .unbinder import decode, unbind, unbind_fs, unbind_uri

__all__ = [
    "FS_PREFIX",
    "PERCENT_DECODINGS",
    "PERCENT_ENCODINGS",
    "URI_PREFIX",
    "bind_to_fs",
    "bind_to_uri",
    "decode",
    "pct_decode",
    "pct_encode",
    "unbind",
    "unbind_fs",
    "unbind_uri",
]
