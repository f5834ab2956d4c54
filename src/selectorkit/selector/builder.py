"""Facade functions that start a new Selector from a single fragment.

Example::

    from selectorkit.selector import builder as css

    css.id("main").class_("container").class_("editable").render()
    # '#main.container.editable'

    css.combine(
        css.element("div").id("main"),
        "+",
        css.element("table").id("data"),
    ).render()
    # 'div#main + table#data'
"""

from __future__ import annotations

from selectorkit.selector.model import Combinator, Selector

__all__ = [
    "element",
    "id",
    "class_",
    "attribute",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def element(value: str) -> Selector:
    return Selector().element(value)


def id(value: str) -> Selector:  # noqa: A001
    return Selector().id(value)


def class_(value: str) -> Selector:
    return Selector().class_(value)


def attribute(value: str) -> Selector:
    return Selector().attribute(value)


attr = attribute


def pseudo_class(value: str) -> Selector:
    return Selector().pseudo_class(value)


def pseudo_element(value: str) -> Selector:
    return Selector().pseudo_element(value)


def combine(left: Selector, combinator: Combinator | str, right: Selector) -> Selector:
    """Return a new selector joining *left* and *right* with *combinator*."""
    return Selector().combine(left, combinator, right)
