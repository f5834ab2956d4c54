from selectorkit.selector.model import Combinator, FragmentKind, Selector
from selectorkit.selector.builder import (
    attr,
    attribute,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)

__all__ = [
    "Combinator",
    "FragmentKind",
    "Selector",
    "attr",
    "attribute",
    "class_",
    "combine",
    "element",
    "id",
    "pseudo_class",
    "pseudo_element",
]
