"""Selector model: fragment kinds, combinators, and the Selector builder."""

from __future__ import annotations

import logging
from enum import IntEnum, StrEnum

from selectorkit.errors import DuplicateFragmentError, FragmentOrderError

logger = logging.getLogger(__name__)


class FragmentKind(IntEnum):
    """The six fragment kinds, valued in the order they must appear.

    A compound selector reads::

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


class Combinator(StrEnum):
    """Tokens that join two complete selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


# Kinds that may occur at most once per selector.
SINGLETON_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_TEMPLATES: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}


class Selector:
    """Mutable builder for a single CSS selector.

    Fragment methods return ``self`` so calls can be chained::

        Selector().element("a").attr('href$=".png"').pseudo_class("focus")

    Fragments must be added in :class:`FragmentKind` order.  Adding a kind
    lower than one already present raises :class:`FragmentOrderError`; adding
    a second element, id or pseudo-element raises
    :class:`DuplicateFragmentError`.  A failed call leaves the builder as it
    was.

    A selector produced by :meth:`combine` is terminal and takes no further
    fragments.
    """

    def __init__(self) -> None:
        self._fragments: dict[FragmentKind, list[str]] = {}
        self._composed = ""

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> Selector:
        return self._add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._add(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self._add(FragmentKind.CLASS, value)

    def attribute(self, value: str) -> Selector:
        """Add an attribute fragment; *value* is wrapped in brackets as is."""
        return self._add(FragmentKind.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> Selector:
        return self._add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._add(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind, value: str) -> Selector:
        """Add a fragment of an explicit *kind*."""
        return self._add(FragmentKind(kind), value)

    def _add(self, kind: FragmentKind, value: str) -> Selector:
        if self._composed:
            raise FragmentOrderError(
                "A combined selector cannot take further fragments", kind=kind
            )
        if kind in SINGLETON_KINDS and kind in self._fragments:
            raise DuplicateFragmentError(kind=kind)
        if self._fragments and kind < max(self._fragments):
            raise FragmentOrderError(kind=kind)

        self._fragments.setdefault(kind, []).append(_TEMPLATES[kind].format(value))
        logger.debug("Added %s fragment %r", kind.name.lower(), value)
        return self

    # --- combination ----------------------------------------------------------

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> Selector:
        """Join two built selectors as ``"<left> <combinator> <right>"``.

        *left* and *right* are only rendered, never modified.
        """
        if self._composed or self._fragments:
            raise FragmentOrderError(
                "Only an empty selector can hold a combination"
            )
        self._composed = " ".join([left.render(), str(combinator), right.render()])
        logger.debug("Combined selector %r", self._composed)
        return self

    # --- output ---------------------------------------------------------------

    @property
    def is_combined(self) -> bool:
        return bool(self._composed)

    def render(self) -> str:
        """Return the selector string."""
        parts = [self._composed]
        for kind in FragmentKind:
            parts.extend(self._fragments.get(kind, ()))
        return "".join(parts)

    stringify = render

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Selector({self.render()!r})"
