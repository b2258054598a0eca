import pytest

from cpe_names import ANY, NA, WellFormedName, bind_to_fs, bind_to_uri
from cpe_names.naming.binder import pack, process_quoted_chars, transform_for_uri

PUNCTUATION_NAME = {
    "part": "a",
    "vendor": "micro??",
    "product": "internet*",
    "version": r"\!\"\#\$\%\&\'\(\)\*\+\,",
    "update": r"beta\-\.",
    "language": r"online\/\:\;\<\=\>\?\@\[\\\]\^",
}


@pytest.mark.parametrize(
    "values, expected",
    [
        ({"part": "a"}, "cpe:/a"),
        (
            {
                "part": "a",
                "vendor": "microsoft",
                "product": "internet_explorer",
                "version": r"8\.0\.6001",
                "update": "beta",
                "edition": ANY,
                "language": "sp2",
            },
            "cpe:/a:microsoft:internet_explorer:8.0.6001:beta::sp2",
        ),
        (
            {
                "part": "a",
                "vendor": r"foo\$bar",
                "product": "insight",
                "version": r"7\.4\.0\.1570",
                "update": NA,
                "sw_edition": "online",
                "target_sw": "win2003",
                "target_hw": "x64",
            },
            "cpe:/a:foo%24bar:insight:7.4.0.1570:-:~~online~win2003~x64~",
        ),
        (
            PUNCTUATION_NAME,
            "cpe:/a:micro%01%01:internet%02:%21%22%23%24%25%26%27%28%29%2a%2b%2c:beta-.::"
            "online%2f%3a%3b%3c%3d%3e%3f%40%5b%5c%5d%5e",
        ),
        ({"part": "a", "vendor": r"\`", "product": r"\{\|\}\~\a"}, "cpe:/a:%60:%7b%7c%7d%7ea"),
        ({"part": "o", "vendor": NA, "product": NA}, "cpe:/o:-:-"),
        ({}, "cpe:/"),
    ],
)
def test_bind_to_uri(values, expected):
    assert bind_to_uri(WellFormedName(**values)) == expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ({"part": "a"}, "cpe:2.3:a:*:*:*:*:*:*:*:*:*:*"),
        (
            {
                "part": "a",
                "vendor": "microsoft",
                "product": "internet_explorer",
                "version": r"8\.0\.6001",
                "update": "beta",
                "edition": ANY,
                "language": "sp2",
            },
            "cpe:2.3:a:microsoft:internet_explorer:8.0.6001:beta:*:sp2:*:*:*:*",
        ),
        (
            {
                "part": "a",
                "vendor": r"foo\$bar",
                "product": "insight",
                "version": r"7\.4\.0\.1570",
                "update": NA,
                "sw_edition": "online",
                "target_sw": "win2003",
                "target_hw": "x64",
            },
            r"cpe:2.3:a:foo\$bar:insight:7.4.0.1570:-:*:*:online:win2003:x64:*",
        ),
        (
            {"part": "a", "vendor": "microsoft", "product": "internet_explorer????"},
            "cpe:2.3:a:microsoft:internet_explorer????:*:*:*:*:*:*:*:*",
        ),
        ({}, "cpe:2.3:*:*:*:*:*:*:*:*:*:*:*"),
    ],
)
def test_bind_to_fs(values, expected):
    assert bind_to_fs(WellFormedName(**values)) == expected


def test_formatted_string_always_has_eleven_components():
    fs = bind_to_fs(WellFormedName(part="h"))
    assert fs.count(":") == 12


@pytest.mark.parametrize(
    "value, expected",
    [
        ("foo", "foo"),
        (r"foo\.bar", "foo.bar"),
        (r"foo\-bar\_baz", "foo-bar_baz"),
        (r"foo\:bar", r"foo\:bar"),
        (r"foo\\bar", r"foo\\bar"),
        ("foo*", "foo*"),
    ],
)
def test_process_quoted_chars(value, expected):
    assert process_quoted_chars(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("foo_bar", "foo_bar"),
        (r"8\.0", "8.0"),
        (r"a\~b", "a%7eb"),
        ("??foo*", "%01%01foo%02"),
        (r"\?", "%3f"),
    ],
)
def test_transform_for_uri(value, expected):
    assert transform_for_uri(value) == expected


def test_pack():
    assert pack("beta", "", "", "", "") == "beta"
    assert pack("", "", "", "", "") == ""
    assert pack("-", "", "wordpress", "", "") == "~-~~wordpress~~"
    assert pack("", "online", "win2003", "x64", "") == "~~online~win2003~x64~"
