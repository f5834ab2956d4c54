"""Tests for the CSS selector builder."""

import pytest

from selectorkit.errors import (
    DuplicateFragmentError,
    FragmentOrderError,
    SelectorError,
    SelectorKitError,
)
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


# ---------------------------------------------------------------------------
# Single fragments
# ---------------------------------------------------------------------------


class TestSingleFragments:
    def test_element(self):
        assert element("div").render() == "div"

    def test_id(self):
        assert id("main").render() == "#main"

    def test_class(self):
        assert class_("container").render() == ".container"

    def test_attribute(self):
        assert attribute("target").render() == "[target]"

    def test_attr_alias(self):
        assert attr('href$=".png"').render() == '[href$=".png"]'

    def test_pseudo_class(self):
        assert pseudo_class("focus").render() == ":focus"

    def test_pseudo_element(self):
        assert pseudo_element("before").render() == "::before"

    def test_empty_selector_renders_empty_string(self):
        assert Selector().render() == ""


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


class TestCompoundSelectors:
    def test_element_id_classes(self):
        assert element("a").id("main").class_("x").class_("y").render() == "a#main.x.y"

    def test_id_with_classes(self):
        sel = id("main").class_("container").class_("editable")
        assert sel.render() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        sel = element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.render() == 'a[href$=".png"]:focus'

    def test_all_kinds_in_order(self):
        sel = (
            element("p")
            .id("intro")
            .class_("lead")
            .attribute("lang=en")
            .pseudo_class("first-child")
            .pseudo_element("first-line")
        )
        assert sel.render() == "p#intro.lead[lang=en]:first-child::first-line"

    def test_repeated_attributes_keep_insertion_order(self):
        sel = element("input").attr("type=text").attr("required")
        assert sel.render() == "input[type=text][required]"

    def test_repeated_pseudo_classes(self):
        sel = element("li").pseudo_class("hover").pseudo_class("not(.active)")
        assert sel.render() == "li:hover:not(.active)"

    def test_pseudo_class_payload_keeps_spaces(self):
        assert pseudo_class("nth-child(2n + 1)").render() == ":nth-child(2n + 1)"

    def test_methods_return_same_builder(self):
        sel = Selector()
        assert sel.element("a") is sel
        assert sel.class_("x") is sel

    def test_add_with_explicit_kind(self):
        sel = Selector().add(FragmentKind.ELEMENT, "a").add(FragmentKind.CLASS, "b")
        assert sel.render() == "a.b"

    def test_str_and_stringify(self):
        sel = element("a").id("b")
        assert str(sel) == "a#b"
        assert sel.stringify() == "a#b"
        assert repr(sel) == "Selector('a#b')"


# ---------------------------------------------------------------------------
# Duplicate singleton fragments
# ---------------------------------------------------------------------------


class TestDuplicateFragments:
    def test_duplicate_element(self):
        with pytest.raises(DuplicateFragmentError):
            element("a").element("b")

    def test_duplicate_id(self):
        with pytest.raises(DuplicateFragmentError):
            id("x").id("y")

    def test_duplicate_pseudo_element(self):
        with pytest.raises(DuplicateFragmentError):
            pseudo_element("before").pseudo_element("after")

    def test_duplicate_reported_before_order(self):
        with pytest.raises(DuplicateFragmentError):
            id("x").class_("c").id("y")

    def test_error_carries_kind(self):
        with pytest.raises(DuplicateFragmentError) as exc_info:
            id("x").id("y")
        assert exc_info.value.kind is FragmentKind.ID

    def test_message(self):
        with pytest.raises(DuplicateFragmentError, match="more than one time"):
            element("a").element("b")

    def test_repeatable_kinds_do_not_raise(self):
        sel = class_("a").class_("b").attr("c").attr("d").pseudo_class("e").pseudo_class("f")
        assert sel.render() == ".a.b[c][d]:e:f"


# ---------------------------------------------------------------------------
# Fragment ordering
# ---------------------------------------------------------------------------


class TestFragmentOrder:
    def test_element_after_class(self):
        with pytest.raises(FragmentOrderError):
            class_("x").element("a")

    def test_element_after_id(self):
        with pytest.raises(FragmentOrderError):
            id("x").element("a")

    def test_id_after_class(self):
        with pytest.raises(FragmentOrderError):
            class_("x").id("main")

    def test_class_after_attribute(self):
        with pytest.raises(FragmentOrderError):
            attr("href").class_("x")

    def test_attribute_after_pseudo_class(self):
        with pytest.raises(FragmentOrderError):
            pseudo_class("hover").attr("href")

    def test_pseudo_class_after_pseudo_element(self):
        with pytest.raises(FragmentOrderError):
            pseudo_element("after").pseudo_class("hover")

    def test_id_after_pseudo_element(self):
        with pytest.raises(FragmentOrderError):
            element("a").pseudo_element("after").id("x")

    def test_message(self):
        with pytest.raises(FragmentOrderError, match="arranged in the following order"):
            class_("x").element("a")

    def test_failed_call_leaves_builder_unchanged(self):
        sel = element("a").class_("x")
        with pytest.raises(FragmentOrderError):
            sel.id("main")
        assert sel.render() == "a.x"

    def test_other_builders_unaffected(self):
        good = element("a").id("main")
        with pytest.raises(FragmentOrderError):
            class_("x").element("a")
        assert good.render() == "a#main"


class TestErrorHierarchy:
    def test_both_kinds_are_selector_errors(self):
        assert issubclass(DuplicateFragmentError, SelectorError)
        assert issubclass(FragmentOrderError, SelectorError)
        assert issubclass(SelectorError, SelectorKitError)


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------


class TestCombine:
    def test_child_combinator(self):
        sel = combine(element("div").id("a"), ">", element("span"))
        assert sel.render() == "div#a > span"

    def test_combinator_tokens(self):
        assert [str(c) for c in Combinator] == [" ", "+", "~", ">"]

    def test_combinator_enum(self):
        sel = combine(element("h1"), Combinator.ADJACENT_SIBLING, element("p"))
        assert sel.render() == "h1 + p"

    def test_descendant_combinator_keeps_spacing(self):
        sel = combine(element("ul"), Combinator.DESCENDANT, element("li"))
        assert sel.render() == "ul   li"

    def test_nested_combination(self):
        sel = combine(
            element("div").id("main").class_("container").class_("draggable"),
            "+",
            combine(
                element("table").id("data"),
                "~",
                combine(
                    element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.render() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_operands_not_modified(self):
        left = element("div")
        right = element("span").class_("x")
        combine(left, Combinator.CHILD, right)
        assert left.render() == "div"
        assert right.render() == "span.x"
        left.id("still-open")
        assert left.render() == "div#still-open"

    def test_is_combined(self):
        assert combine(element("a"), "~", element("b")).is_combined
        assert not element("a").is_combined

    def test_combined_selector_rejects_fragments(self):
        sel = combine(element("a"), ">", element("b"))
        with pytest.raises(FragmentOrderError):
            sel.class_("x")

    def test_combine_on_non_empty_builder(self):
        with pytest.raises(FragmentOrderError):
            element("a").combine(element("b"), ">", element("c"))
