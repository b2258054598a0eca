"""Shared pytest fixtures for cpe_names tests."""

import gzip
from pathlib import Path

import pytest

from cpe_names.grammar import WellFormedName

DICTIONARY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<cpe-list xmlns="http://cpe.mitre.org/dictionary/2.0"
          xmlns:cpe-23="http://scap.nist.gov/schema/cpe-extension/2.3">
  <generator>
    <product_name>National Vulnerability Database (NVD)</product_name>
    <schema_version>2.3</schema_version>
  </generator>
  <cpe-item name="cpe:/a:microsoft:internet_explorer:8.0.6001:beta">
    <title xml:lang="en-US">Microsoft Internet Explorer 8.0.6001 Beta</title>
    <cpe-23:cpe23-item name="cpe:2.3:a:microsoft:internet_explorer:8.0.6001:beta:*:*:*:*:*:*"/>
  </cpe-item>
  <cpe-item name="cpe:/a:hp:insight_diagnostics:7.4.0.1570::~~online~win2003~x64~">
    <title xml:lang="en-US">HP Insight Diagnostics 7.4.0.1570 Online Edition</title>
    <cpe-23:cpe23-item name="cpe:2.3:a:hp:insight_diagnostics:7.4.0.1570:-:*:*:online:win2003:x64:*"/>
  </cpe-item>
  <cpe-item name="cpe:/a:%240.99_kindle_books_project:%240.99_kindle_books:6::~~~android~~">
    <title xml:lang="en-US">$0.99 Kindle Books project 6 for Android</title>
    <cpe-23:cpe23-item name="cpe:2.3:a:\\$0.99_kindle_books_project:\\$0.99_kindle_books:6:*:*:*:*:android:*:*"/>
  </cpe-item>
  <cpe-item name="cpe:/a:orphan:without_23_name:1.0">
    <title xml:lang="en-US">Entry missing its 2.3 name</title>
  </cpe-item>
</cpe-list>
"""


def make_wfn(**values):
    """Build a WellFormedName starting from the all-ANY default."""
    return WellFormedName(**values)


@pytest.fixture
def wfn_factory():
    """Fixture providing the make_wfn helper function."""
    return make_wfn


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    """Plain-XML copy of a small official CPE dictionary."""
    path = tmp_path / "official-cpe-dictionary_v2.3.xml"
    path.write_text(DICTIONARY_XML, encoding="utf-8")
    return path


@pytest.fixture
def gzipped_dictionary_file(tmp_path: Path) -> Path:
    """Gzip-compressed copy of the same dictionary."""
    path = tmp_path / "official-cpe-dictionary_v2.3.xml.gz"
    with gzip.open(path, "wb") as f:
        f.write(DICTIONARY_XML.encode("utf-8"))
    return path
