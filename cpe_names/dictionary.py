"""Regression fixtures generated from the official CPE dictionary.

The NVD publishes the official CPE dictionary as (optionally gzipped) XML in
which every ``cpe-item`` carries a 2.2 URI and a nested ``cpe23-item`` with
the matching 2.3 formatted string. This module reads a local copy of that
file, drives every pair through the unbinders and binders, and stores the
results as YAML so later releases can be checked for regressions.

Fetching the feed is left to the caller; nothing here touches the network.
"""

from __future__ import annotations

import gzip
import logging
import random
from collections.abc import Iterable
from pathlib import Path
from xml.etree import ElementTree as ET

import yaml
from pydantic import BaseModel, ConfigDict, Field

from cpe_names.exceptions import CPEError
from cpe_names.naming.binder import bind_to_fs, bind_to_uri
from cpe_names.naming.unbinder import unbind_fs, unbind_uri

logger = logging.getLogger(__name__)


class DictionaryItem(BaseModel):
    """One dictionary entry: a URI and its formatted-string equivalent."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    uri: str
    formatted_string: str


class RoundTripCase(BaseModel):
    """Expected conversions for one dictionary entry.

    ``uri_to_fs`` is the formatted string bound from the unbound URI and
    ``fs_to_uri`` the URI bound from the unbound formatted string. When
    either side fails to unbind, ``error`` holds the parse error instead.
    """

    model_config = ConfigDict(extra="forbid")

    uri: str
    formatted_string: str
    uri_to_fs: str | None = None
    fs_to_uri: str | None = None
    error: str | None = Field(default=None, description="Parse error, if any.")


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def read_dictionary(path: str | Path) -> list[DictionaryItem]:
    """Read ``(URI, formatted string)`` pairs from a dictionary XML file.

    Files ending in ``.gz`` are decompressed transparently. Element
    namespaces are ignored, so both the 2.2 and 2.3 dictionary schemas load.
    """
    path = Path(path)
    opener = gzip.open if path.suffix == ".gz" else open
    with opener(path, "rb") as stream:
        root = ET.parse(stream).getroot()

    items: list[DictionaryItem] = []
    for element in root.iter():
        if _local_name(element.tag) != "cpe-item":
            continue
        uri = element.get("name")
        formatted = None
        for child in element:
            if _local_name(child.tag) == "cpe23-item":
                formatted = child.get("name")
                break
        if not uri or not formatted:
            logger.warning(f"Skipping dictionary item without both names: {uri!r}")
            continue
        items.append(DictionaryItem(uri=uri, formatted_string=formatted))
    logger.info(f"Read {len(items)} dictionary items from {path}")
    return items


def build_case(item: DictionaryItem) -> RoundTripCase:
    """Bind both names of ``item`` across to the other form."""
    try:
        uri_to_fs = bind_to_fs(unbind_uri(item.uri))
        fs_to_uri = bind_to_uri(unbind_fs(item.formatted_string))
    except CPEError as e:
        logger.debug(f"Dictionary item {item.uri!r} failed to unbind: {e}")
        return RoundTripCase(uri=item.uri, formatted_string=item.formatted_string, error=str(e))
    return RoundTripCase(
        uri=item.uri,
        formatted_string=item.formatted_string,
        uri_to_fs=uri_to_fs,
        fs_to_uri=fs_to_uri,
    )


def generate_cases(
    items: Iterable[DictionaryItem],
    limit: int | None = None,
    shuffle: bool = False,
    seed: int | None = None,
) -> list[RoundTripCase]:
    """Build round-trip cases, optionally shuffled and truncated to ``limit``."""
    selected = list(items)
    if shuffle:
        random.Random(seed).shuffle(selected)
    if limit is not None:
        selected = selected[:limit]
    return [build_case(item) for item in selected]


def write_cases(cases: Iterable[RoundTripCase], path: str | Path) -> Path:
    path = Path(path)
    payload = [case.model_dump(exclude_none=True) for case in cases]
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(payload, f, sort_keys=False, allow_unicode=True)
    return path


def load_cases(path: str | Path) -> list[RoundTripCase]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or []
    if not isinstance(data, list):
        raise ValueError(f"Fixture file {path} must hold a list of cases")
    return [RoundTripCase.model_validate(entry) for entry in data]


def check_cases(cases: Iterable[RoundTripCase]) -> list[str]:
    """Replay stored cases and return a list of regressions found."""
    issues: list[str] = []
    for case in cases:
        actual = build_case(
            DictionaryItem(uri=case.uri, formatted_string=case.formatted_string)
        )
        for field in ("uri_to_fs", "fs_to_uri", "error"):
            expected_value = getattr(case, field)
            actual_value = getattr(actual, field)
            if expected_value != actual_value:
                issues.append(
                    f"{case.uri}: {field} expected {expected_value!r}, got {actual_value!r}"
                )
    return issues


__all__ = [
    "DictionaryItem",
    "RoundTripCase",
    "build_case",
    "check_cases",
    "generate_cases",
    "load_cases",
    "read_dictionary",
    "write_cases",
]
