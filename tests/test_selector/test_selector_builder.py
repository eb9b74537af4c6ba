"""Tests for the CSS selector builder."""

import pytest

from objkit.selector import (
    DuplicateSelectorPartError,
    OutOfOrderSelectorPartError,
    PartKind,
    SelectorBuilder,
    SelectorError,
    SelectorState,
    selector,
    strict_selector,
)


# ---------------------------------------------------------------------------
# Single parts
# ---------------------------------------------------------------------------


class TestSingleParts:
    def test_element(self):
        assert selector.element("a").stringify() == "a"

    def test_id(self):
        assert selector.id("main").stringify() == "#main"

    def test_class(self):
        assert selector.class_("container").stringify() == ".container"

    def test_attr(self):
        assert selector.attr("target").stringify() == "[target]"

    def test_pseudo_class(self):
        assert selector.pseudo_class("hover").stringify() == ":hover"

    def test_pseudo_element(self):
        assert selector.pseudo_element("before").stringify() == "::before"

    def test_empty_state_renders_empty(self):
        assert selector.empty().stringify() == ""

    def test_str_matches_stringify(self):
        sel = selector.element("p").class_("lead")
        assert str(sel) == sel.stringify() == "p.lead"


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


class TestCompound:
    def test_id_and_classes(self):
        sel = selector.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        sel = selector.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_all_parts_in_order(self):
        sel = (
            selector.element("input")
            .id("name")
            .class_("field")
            .attr("type=text")
            .pseudo_class("focus")
            .pseudo_element("placeholder")
        )
        assert sel.stringify() == "input#name.field[type=text]:focus::placeholder"

    def test_repeated_attrs_and_pseudo_classes(self):
        sel = (
            selector.element("li")
            .attr("data-a")
            .attr("data-b")
            .pseudo_class("first-child")
            .pseudo_class("hover")
        )
        assert sel.stringify() == "li[data-a][data-b]:first-child:hover"

    def test_values_passed_verbatim(self):
        sel = selector.pseudo_class("nth-of-type(even)")
        assert sel.stringify() == ":nth-of-type(even)"

    def test_render_uses_canonical_order_not_call_order(self):
        # Lenient mode accepts an id after an attribute; rendering still
        # places the id first.
        sel = selector.attr("href").id("x")
        assert sel.stringify() == "#x[href]"

    def test_generic_append(self):
        sel = selector.append(PartKind.ELEMENT, "div").append("class", "box")
        assert sel.stringify() == "div.box"

    def test_append_by_kind_name(self):
        sel = selector.append("ELEMENT", "a").append("PSEUDO_CLASS", "hover")
        assert sel.stringify() == "a:hover"

    def test_append_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown selector part kind"):
            selector.append("attr", "href")

    def test_parts_mapping(self):
        sel = selector.element("a").class_("x").class_("y")
        assert sel.parts() == {PartKind.ELEMENT: "a", PartKind.CLASS: ".x.y"}


# ---------------------------------------------------------------------------
# Uniqueness
# ---------------------------------------------------------------------------


class TestDuplicateParts:
    def test_second_id(self):
        with pytest.raises(DuplicateSelectorPartError):
            selector.id("x").id("y")

    def test_second_element(self):
        with pytest.raises(DuplicateSelectorPartError):
            selector.element("div").element("span")

    def test_second_pseudo_element(self):
        with pytest.raises(DuplicateSelectorPartError):
            selector.pseudo_element("before").pseudo_element("after")

    def test_message(self):
        with pytest.raises(DuplicateSelectorPartError) as exc_info:
            selector.id("x").id("y")
        assert str(exc_info.value) == (
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector"
        )

    def test_error_carries_kind_and_value(self):
        with pytest.raises(DuplicateSelectorPartError) as exc_info:
            selector.element("div").id("a").id("b")
        assert exc_info.value.kind is PartKind.ID
        assert exc_info.value.value == "b"

    def test_uniqueness_checked_before_order(self):
        # A second element after an id violates both rules; uniqueness wins.
        with pytest.raises(DuplicateSelectorPartError):
            selector.element("div").id("main").element("span")

    def test_classes_may_repeat(self):
        assert selector.class_("a").class_("b").stringify() == ".a.b"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            selector.id("x").id("y")


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOutOfOrder:
    def test_id_after_class(self):
        with pytest.raises(OutOfOrderSelectorPartError):
            selector.class_("x").id("y")

    def test_id_after_pseudo_class(self):
        with pytest.raises(OutOfOrderSelectorPartError):
            selector.pseudo_class("hover").id("y")

    def test_id_after_pseudo_element(self):
        with pytest.raises(OutOfOrderSelectorPartError):
            selector.pseudo_element("after").id("y")

    def test_element_after_id(self):
        with pytest.raises(OutOfOrderSelectorPartError):
            selector.id("main").element("div")

    def test_class_after_attr(self):
        with pytest.raises(OutOfOrderSelectorPartError):
            selector.attr("href").class_("x")

    def test_attr_after_pseudo_class(self):
        with pytest.raises(OutOfOrderSelectorPartError):
            selector.pseudo_class("hover").attr("href")

    def test_pseudo_class_after_pseudo_element(self):
        with pytest.raises(OutOfOrderSelectorPartError):
            selector.pseudo_element("after").pseudo_class("hover")

    def test_message_and_conflict(self):
        with pytest.raises(OutOfOrderSelectorPartError) as exc_info:
            selector.class_("x").id("y")
        err = exc_info.value
        assert str(err) == (
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
        assert err.kind is PartKind.ID
        assert err.conflict is PartKind.CLASS
        assert isinstance(err, SelectorError)


class TestLenientOrderMatrix:
    """Combinations the lenient checks deliberately let through."""

    def test_element_after_class(self):
        assert selector.class_("x").element("div").stringify() == "div.x"

    def test_id_after_attr(self):
        assert selector.attr("href").id("a").stringify() == "#a[href]"

    def test_class_after_pseudo_class(self):
        assert selector.pseudo_class("hover").class_("x").stringify() == ".x:hover"

    def test_attr_after_pseudo_element(self):
        assert selector.pseudo_element("after").attr("x").stringify() == "[x]::after"


class TestStrictMode:
    def test_strict_accepts_canonical_order(self):
        sel = strict_selector.element("a").id("b").class_("c").attr("d")
        assert sel.stringify() == "a#b.c[d]"

    def test_strict_rejects_element_after_class(self):
        with pytest.raises(OutOfOrderSelectorPartError) as exc_info:
            strict_selector.class_("x").element("div")
        assert exc_info.value.conflict is PartKind.CLASS

    def test_strict_rejects_id_after_attr(self):
        with pytest.raises(OutOfOrderSelectorPartError):
            strict_selector.attr("href").id("a")

    def test_strict_is_inherited(self):
        sel = strict_selector.element("a")
        assert sel.strict is True
        assert sel.class_("x").strict is True

    def test_strict_survives_combine(self):
        combined = strict_selector.combine(
            strict_selector.element("a"), ">", strict_selector.element("b")
        )
        assert combined.strict is True

    def test_builder_repr(self):
        assert repr(SelectorBuilder(strict=True)) == "SelectorBuilder(strict=True)"


# ---------------------------------------------------------------------------
# Immutability
# ---------------------------------------------------------------------------


class TestImmutability:
    def test_branches_do_not_share_parts(self):
        base = selector.element("a")
        with_id = base.id("x")
        with_class = base.class_("y")
        assert base.stringify() == "a"
        assert with_id.stringify() == "a#x"
        assert with_class.stringify() == "a.y"

    def test_failed_append_leaves_state_untouched(self):
        base = selector.id("x")
        with pytest.raises(DuplicateSelectorPartError):
            base.id("y")
        assert base.stringify() == "#x"

    def test_state_is_frozen(self):
        sel = selector.element("a")
        with pytest.raises(AttributeError):
            sel.element_part = "b"  # type: ignore[misc]

    def test_facade_starts_fresh_each_time(self):
        selector.id("first")
        assert selector.id("second").stringify() == "#second"

    def test_structural_equality(self):
        assert selector.element("a").class_("b") == SelectorState(
            element_part="a", class_part=".b"
        )


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self):
        sel = selector.combine(
            selector.element("div").id("main"), "+", selector.element("span")
        )
        assert sel.stringify() == "div#main + span"
        assert sel.is_combined

    def test_nested_combination(self):
        sel = selector.combine(
            selector.element("div").id("main").class_("container").class_("draggable"),
            "+",
            selector.combine(
                selector.element("table").id("data"),
                "~",
                selector.combine(
                    selector.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    selector.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combinator_not_validated(self):
        sel = selector.combine(selector.element("a"), "||", selector.element("b"))
        assert sel.stringify() == "a || b"

    def test_operands_unchanged(self):
        left = selector.element("ul")
        right = selector.element("li")
        selector.combine(left, ">", right)
        assert left.stringify() == "ul"
        assert right.stringify() == "li"
        assert not left.is_combined

    def test_appends_after_combine_are_not_rendered(self):
        combined = selector.combine(selector.element("a"), ">", selector.element("b"))
        extended = combined.class_("ignored")
        assert extended.class_part == ".ignored"
        assert extended.stringify() == "a > b"

    def test_later_combine_replaces_text(self):
        first = selector.combine(selector.element("a"), ">", selector.element("b"))
        second = first.combine(selector.element("c"), "~", selector.element("d"))
        assert second.stringify() == "c ~ d"
        assert first.stringify() == "a > b"
