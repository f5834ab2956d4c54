"""selectorkit: CSS selector builder, rectangle value, and JSON helpers."""

from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import (
    DuplicateFragmentError,
    FragmentOrderError,
    ParseError,
    SelectorError,
    SelectorKitError,
    SerializationError,
)
from selectorkit.model import Rectangle
from selectorkit.selector import (
    Combinator,
    FragmentKind,
    Selector,
    attr,
    attribute,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from selectorkit.serialization import from_json, to_json

__all__ = [
    "__version__",
    # config
    "SelectorKitConfig",
    # errors
    "SelectorKitError",
    "SelectorError",
    "DuplicateFragmentError",
    "FragmentOrderError",
    "SerializationError",
    "ParseError",
    # model
    "Rectangle",
    # selector
    "Combinator",
    "FragmentKind",
    "Selector",
    "element",
    "id",
    "class_",
    "attribute",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # serialization
    "to_json",
    "from_json",
]
