"""Unbind CPE URIs and formatted strings into Well-Formed Names.

Both entry points validate the overall structure first, then unbind each
component with an escape-aware scanner and assign it through
:meth:`WellFormedName.set`. The name being built is private until every
component has been applied, so a failure never exposes a partial result.
"""

from __future__ import annotations

import logging

from cpe_names.exceptions import IllegalArgumentError, ParseError
from cpe_names.grammar.model import WellFormedName
from cpe_names.grammar.support import is_alphanum, unescaped_colon_index
from cpe_names.grammar.types import (
    ANY,
    ATTRIBUTES,
    NA,
    PACKED_ATTRIBUTES,
    URI_ATTRIBUTES,
    Attribute,
    AttributeValue,
)
from cpe_names.naming.binder import FS_PREFIX, URI_PREFIX
from cpe_names.naming.percent import MULTI_WILDCARD, SINGLE_WILDCARD, pct_decode

logger = logging.getLogger(__name__)

# A URI holds the scheme plus at most seven components.
MAX_URI_COLONS = 7
# A formatted string holds the scheme, the version tag and eleven components.
FS_COLONS = 12


def validate_uri(uri: str) -> None:
    """Check the URI prefix and component count.

    Raises:
        ParseError: If ``uri`` does not start with ``cpe:/`` or holds more
            than seven components.
    """
    lowered = uri.lower()
    if not lowered.startswith(URI_PREFIX):
        raise ParseError(f"URI must start with '{URI_PREFIX}'", uri)
    count = lowered.count(":")
    if count > MAX_URI_COLONS:
        raise ParseError(f"Found {count - MAX_URI_COLONS} extra components in URI", uri)


def validate_fs(fs: str) -> None:
    """Check the formatted-string prefix, field count and empty fields.

    A colon counts as a delimiter unless the character before it is a
    backslash.

    Raises:
        ParseError: On a bad prefix, an empty component, or a component
            count other than eleven.
    """
    lowered = fs.lower()
    if not lowered.startswith(FS_PREFIX):
        raise ParseError(f"Formatted string must start with '{FS_PREFIX}'", fs)
    count = 0
    for index, char in enumerate(lowered):
        if char != ":":
            continue
        if index > 0 and lowered[index - 1] == "\\":
            continue
        count += 1
        if lowered[index + 1 : index + 2] == ":":
            raise ParseError("Found empty component in formatted string", fs)
    if count > FS_COLONS:
        raise ParseError(f"Found {count - FS_COLONS} extra components in formatted string", fs)
    if count < FS_COLONS:
        raise ParseError(f"Missing {FS_COLONS - count} components in formatted string", fs)


def unbind_uri(uri: str) -> WellFormedName:
    """Unbind a CPE 2.2 URI into a new :class:`WellFormedName`.

    Components missing from the URI are left unbound. A packed edition
    component (``~ed~sw_ed~t_sw~t_hw~oth``) is unpacked into its five
    attributes. A legacy edition component that fails to decode binds
    ``ANY``.

    Raises:
        ParseError: If the URI or any component is malformed.
    """
    validate_uri(uri)
    logger.debug(f"Unbinding URI {uri!r}")
    result = WellFormedName.empty()
    for index, attribute in enumerate(URI_ATTRIBUTES, start=1):
        component = get_comp_uri(uri, index)
        if attribute is Attribute.EDITION and component.startswith("~"):
            unpack(component, result)
        elif attribute is Attribute.EDITION:
            try:
                value = decode(component)
            except ParseError as e:
                logger.debug(f"Binding ANY for undecodable edition {component!r}: {e}")
                value = ANY
            _assign(result, attribute, value)
        else:
            _assign(result, attribute, decode(component))
    return result


def unbind_fs(fs: str) -> WellFormedName:
    """Unbind a CPE 2.3 formatted string into a new :class:`WellFormedName`.

    Raises:
        ParseError: If the string or any component is malformed.
    """
    validate_fs(fs)
    logger.debug(f"Unbinding formatted string {fs!r}")
    result = WellFormedName()
    # Field 0 is the scheme and field 1 the version tag.
    for index, attribute in enumerate(ATTRIBUTES, start=2):
        _assign(result, attribute, unbind_value_fs(get_comp_fs(fs, index)))
    return result


def unbind(text: str) -> WellFormedName:
    """Unbind either binding, choosing the formatted string on a ``cpe:2.3:`` prefix."""
    if text.lower().startswith(FS_PREFIX):
        return unbind_fs(text)
    return unbind_uri(text)


def _assign(wfn: WellFormedName, attribute: Attribute, value: AttributeValue) -> None:
    try:
        wfn.set(attribute, value)
    except IllegalArgumentError as e:
        raise ParseError(f"Invalid {attribute} component", value) from e


def get_comp_uri(uri: str, index: int) -> str:
    """Return the ``index``'th URI component.

    Component 0 is the scheme (``"cpe:"``); components past the end of the
    URI are blank.
    """
    if index == 0:
        return uri[: uri.index("/")]
    components = uri.split(":")
    if index >= len(components):
        return ""
    if index == 1:
        return components[1].lstrip("/")
    return components[index]


def get_comp_fs(fs: str, index: int) -> str:
    """Return the ``index``'th field of a formatted string.

    The colon is the field delimiter unless the character before it is a
    backslash. Fields past the end are blank.
    """
    if index < 0:
        return ""
    for _ in range(index):
        colon = unescaped_colon_index(fs)
        if colon == -1:
            return ""
        fs = fs[colon + 1 :]
    end = unescaped_colon_index(fs)
    if end == -1:
        return fs
    return fs[:end]


def unbind_value_fs(value: str) -> AttributeValue:
    """Map ``*``/``-`` to logical values; quote anything else."""
    if value == "*":
        return ANY
    if value == "-":
        return NA
    return add_quoting(value)


def add_quoting(value: str) -> str:
    """Escape the non-alphanumerics of a formatted-string field.

    Characters already quoted stay quoted. An unquoted ``*`` may only be the
    first or last character; an unquoted ``?`` may only appear in a leading
    or trailing run.

    Raises:
        ParseError: On an embedded wildcard or a dangling backslash.
    """
    result: list[str] = []
    last = len(value) - 1
    embedded = False
    index = 0
    while index < len(value):
        char = value[index]
        if is_alphanum(char):
            result.append(char)
            index += 1
            embedded = True
            continue
        if char == "\\":
            pair = value[index : index + 2]
            if len(pair) < 2:
                raise ParseError("dangling escape character in formatted string", value)
            result.append(pair)
            index += 2
            embedded = True
            continue
        if char == "*":
            if index not in (0, last):
                raise ParseError("cannot have unquoted * embedded in formatted string", value)
            result.append(char)
            index += 1
            embedded = True
            continue
        if char == "?":
            valid = (
                index in (0, last)
                # not embedded: must follow another ?
                or (not embedded and index > 0 and value[index - 1] == "?")
                # embedded: must be followed by another ?
                or (embedded and value[index + 1 : index + 2] == "?")
            )
            if not valid:
                raise ParseError("cannot have unquoted ? embedded in formatted string", value)
            result.append(char)
            index += 1
            embedded = False
            continue
        result.append("\\" + char)
        index += 1
        embedded = True
    return "".join(result)


def decode(value: str) -> AttributeValue:
    """Decode a percent-encoded URI component.

    Blank decodes to ``ANY`` and ``-`` to ``NA``. ``.``, ``-`` and ``~`` are
    re-quoted, ``%01`` becomes ``?`` in a leading or trailing run and
    ``%02`` becomes ``*`` at either end. Other forms are looked up in the
    percent table.

    Raises:
        ParseError: On a misplaced wildcard form or an unknown form.
    """
    if value == "":
        return ANY
    if value == "-":
        return NA

    value = value.lower()
    length = len(value)
    result: list[str] = []
    embedded = False
    index = 0
    while index < length:
        char = value[index]
        if char in ".-~":
            result.append("\\" + char)
            index += 1
            embedded = True
            continue
        if char != "%":
            result.append(char)
            index += 1
            embedded = True
            continue

        form = value[index : index + 3]
        if form == SINGLE_WILDCARD:
            valid = (
                index == 0
                or index == length - 3
                or (not embedded and index >= 3 and value[index - 3 : index] == SINGLE_WILDCARD)
                or (embedded and value[index + 3 : index + 6] == SINGLE_WILDCARD)
            )
            if not valid:
                raise ParseError("%01 may only appear in a leading or trailing run", value)
            result.append("?")
            index += 3
            continue
        if form == MULTI_WILDCARD:
            if index not in (0, length - 3):
                raise ParseError("%02 may only appear at the beginning or end", value)
            result.append("*")
        else:
            decoded = pct_decode(form)
            if decoded is None:
                raise ParseError(f"Unknown percent-encoded form {form!r}", value)
            result.append(decoded)
        index += 3
        embedded = True
    return "".join(result)


def unpack(packed: str, wfn: WellFormedName) -> WellFormedName:
    """Unpack a ``~``-packed edition component into ``wfn``.

    The value after the leading tilde is split into at most five fields, so
    any further tildes stay in ``other``.

    Raises:
        ParseError: If fewer than five fields are present or a field fails
            to decode.
    """
    fields = packed[1:].split("~", len(PACKED_ATTRIBUTES) - 1)
    if len(fields) != len(PACKED_ATTRIBUTES):
        raise ParseError(
            f"packed edition must hold {len(PACKED_ATTRIBUTES)} components", packed
        )
    for attribute, field in zip(PACKED_ATTRIBUTES, fields, strict=True):
        _assign(wfn, attribute, decode(field))
    return wfn


__all__ = [
    "add_quoting",
    "decode",
    "get_comp_fs",
    "get_comp_uri",
    "unbind",
    "unbind_fs",
    "unbind_uri",
    "unbind_value_fs",
    "unpack",
    "validate_fs",
    "validate_uri",
]
