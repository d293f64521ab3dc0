"""CSS selector builder: chainable Selector values and the builder facade.

A compound selector is assembled part by part in a fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element

class, attribute and pseudo-class parts may repeat; element, id and
pseudo-element may appear once. Two selectors are joined with a combinator
(' ', '+', '~', '>') via ``combine``.

Example:
    >>> b = css_selector_builder
    >>> b.id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'
    >>> b.combine(b.element("div"), "+", b.element("span")).stringify()
    'div + span'
"""

from __future__ import annotations

import logging
from enum import StrEnum

from selectorkit.errors import DuplicateSingletonPart, OutOfOrderPart

__all__ = [
    "PartKind",
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]

logger = logging.getLogger(__name__)


class PartKind(StrEnum):
    """Kinds of simple selector that make up a compound selector."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTR = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def singleton(self) -> bool:
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's prefix/suffix characters."""
        return _FORMATS[self].format(value)


_RANKS: dict[PartKind, int] = {
    PartKind.ELEMENT: 0,
    PartKind.ID: 1,
    PartKind.CLASS: 2,
    PartKind.ATTR: 3,
    PartKind.PSEUDO_CLASS: 4,
    PartKind.PSEUDO_ELEMENT: 5,
}

_FORMATS: dict[PartKind, str] = {
    PartKind.ELEMENT: "{}",
    PartKind.ID: "#{}",
    PartKind.CLASS: ".{}",
    PartKind.ATTR: "[{}]",
    PartKind.PSEUDO_CLASS: ":{}",
    PartKind.PSEUDO_ELEMENT: "::{}",
}

_SINGLETONS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})


class Selector:
    """Mutable buffer of selector fragments with chainable part methods.

    Each part method checks the ordering and uniqueness rules before touching
    any state, so a rejected call leaves the selector unchanged.
    """

    def __init__(self) -> None:
        self.fragments: list[str] = []
        self.seen: set[PartKind] = set()
        self.last: PartKind | None = None

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> Selector:
        return self.append(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.append(PartKind.ATTR, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_ELEMENT, value)

    def append(self, kind: PartKind, value: str) -> Selector:
        """Validate and append one part of *kind*, returning self."""
        # Only the immediately preceding part is compared against.
        if self.last is not None and kind.rank < self.last.rank:
            logger.debug("rejecting %s after %s", kind, self.last)
            raise OutOfOrderPart(kind, self.last)
        if kind.singleton and kind in self.seen:
            logger.debug("rejecting second %s", kind)
            raise DuplicateSingletonPart(kind)

        self.fragments.append(kind.render(value))
        self.last = kind
        if kind.singleton:
            self.seen.add(kind)
        return self

    # --- composition ----------------------------------------------------------

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        """Append *first* and *second* joined by a space-padded *combinator*."""
        self.fragments.extend(
            [first.stringify(), f" {combinator} ", second.stringify()]
        )
        return self

    def stringify(self) -> str:
        return "".join(self.fragments)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"


class SelectorBuilder:
    """Facade whose entry points each start a fresh Selector."""

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def part(self, kind: PartKind, value: str) -> Selector:
        return Selector().append(kind, value)

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        return Selector().combine(first, combinator, second)


# ``class`` is a keyword; expose it under its CSS name for getattr-style access.
setattr(Selector, "class", Selector.class_)
setattr(SelectorBuilder, "class", SelectorBuilder.class_)

css_selector_builder = SelectorBuilder()

element = css_selector_builder.element
id_ = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
