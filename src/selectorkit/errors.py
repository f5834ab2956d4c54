"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import FragmentKind


class SelectorKitError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(SelectorKitError):
    """A selector builder was used against its ordering or cardinality rules."""

    def __init__(self, message: str, *, kind: FragmentKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateFragmentError(SelectorError):
    """An element, id or pseudo-element was added a second time."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, message: str = MESSAGE, **kwargs) -> None:
        super().__init__(message, **kwargs)


class FragmentOrderError(SelectorError):
    """A fragment was added after a fragment of a later kind."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, message: str = MESSAGE, **kwargs) -> None:
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Serialization errors
# ---------------------------------------------------------------------------


class SerializationError(SelectorKitError):
    """A value could not be encoded to JSON or bound to a prototype."""


class ParseError(SerializationError):
    """Raised when JSON text cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
