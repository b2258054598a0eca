"""The Well-Formed Name (WFN) model.

A WFN maps the eleven CPE attributes to either a :class:`LogicalValue` or a
grammar-valid string. Every assignment goes through :meth:`WellFormedName.set`
so the invariants below always hold:

    * only the fixed attribute keys can be bound;
    * ``part`` is ``"a"``, ``"o"`` or ``"h"`` and never a logical value;
    * every other value is a logical value or passes
      :func:`~cpe_names.grammar.support.validate_string_value`.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from cpe_names.exceptions import IllegalArgumentError, ParseError
from cpe_names.grammar.support import coerce_enum, validate_string_value
from cpe_names.grammar.types import (
    ANY,
    ATTRIBUTES,
    PART_VALUES,
    Attribute,
    AttributeValue,
    LogicalValue,
)


class WellFormedName:
    """Attribute collection over the fixed CPE 2.3 attribute domain.

    ``WellFormedName()`` binds every attribute except ``part`` to ``ANY``;
    keyword arguments are then applied through :meth:`set`. Use
    :meth:`empty` for a name with nothing bound. Unbound attributes read as
    ``ANY``.

    Example:
        >>> wfn = WellFormedName(part="a", vendor="microsoft")
        >>> wfn.get("vendor")
        'microsoft'
        >>> wfn.get("version")
        <LogicalValue.ANY: 'ANY'>
    """

    __slots__ = ("_values",)

    def __init__(self, **values: AttributeValue | None):
        self._values: dict[Attribute, AttributeValue] = {
            attribute: ANY for attribute in ATTRIBUTES if attribute is not Attribute.PART
        }
        for attribute, value in values.items():
            self.set(attribute, value)

    @classmethod
    def empty(cls) -> WellFormedName:
        """Return a name with no attribute bound."""
        wfn = cls()
        wfn._values.clear()
        return wfn

    def get(self, attribute: Attribute | str) -> AttributeValue:
        """Return the bound value, or ``ANY`` when the attribute is unbound."""
        try:
            return self._values.get(attribute, ANY)  # type: ignore[call-overload]
        except TypeError:
            return ANY

    def set(self, attribute: Attribute | str, value: Any) -> None:
        """Bind ``value`` to ``attribute`` after validating both.

        ``None`` binds ``ANY``; for ``part`` it removes the binding instead,
        which reads back as ``ANY`` without storing a logical value there.

        Raises:
            IllegalArgumentError: Unknown attribute, a logical value for
                ``part``, or a value that is neither a logical value nor a str.
            ParseError: A string that fails the grammar, or a ``part`` other
                than ``a``, ``o`` or ``h``.
        """
        key = coerce_enum(Attribute, attribute)

        if value is None:
            if key is Attribute.PART:
                self._values.pop(key, None)
            else:
                self._values[key] = ANY
            return

        if isinstance(value, LogicalValue):
            if key is Attribute.PART:
                raise IllegalArgumentError("part component cannot be a logical value", value)
            self._values[key] = value
            return

        if not isinstance(value, str):
            raise IllegalArgumentError("value must be a logical value or string", value)

        try:
            validate_string_value(value)
        except ParseError as e:
            raise ParseError(f"Failed to validate {key} component", value) from e

        if key is Attribute.PART and value not in PART_VALUES:
            raise ParseError("part component must be one of 'a', 'o', 'h'", value)

        self._values[key] = value

    def is_bound(self, attribute: Attribute | str) -> bool:
        return attribute in self._values

    __contains__ = is_bound

    def items(self) -> Iterator[tuple[Attribute, AttributeValue]]:
        """Yield every attribute with its (possibly default) value, in order."""
        for attribute in ATTRIBUTES:
            yield attribute, self.get(attribute)

    def copy(self) -> WellFormedName:
        clone = WellFormedName.empty()
        clone._values.update(self._values)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WellFormedName):
            return NotImplemented
        return all(self.get(a) == other.get(a) for a in ATTRIBUTES)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        rendered = []
        for attribute, value in self.items():
            if isinstance(value, LogicalValue):
                rendered.append(f"{attribute}={value}")
            else:
                rendered.append(f'{attribute}="{value}"')
        return "wfn:[" + ", ".join(rendered) + "]"

    def __repr__(self) -> str:
        return f"WellFormedName({self})"


__all__ = ["WellFormedName"]
