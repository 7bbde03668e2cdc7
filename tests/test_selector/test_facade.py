"""Tests for the selector facade and combinator composition."""

import logging

import pytest

from cssbuilder.selector import (
    DuplicateError,
    OrderError,
    SelectorBuilder,
    css_selector_builder as builder,
)


class TestEntryPoints:
    def test_each_entry_point_returns_builder(self):
        for sel in (
            builder.element("a"),
            builder.id("x"),
            builder.class_("c"),
            builder.attr("href"),
            builder.pseudo_class("hover"),
            builder.pseudo_element("after"),
        ):
            assert isinstance(sel, SelectorBuilder)

    def test_entry_points_do_not_share_state(self):
        first = builder.id("main")
        second = builder.id("other")
        assert first is not second
        assert first.stringify() == "#main"
        assert second.stringify() == "#other"

    def test_facade_examples(self):
        assert builder.id("main").class_("container").class_("editable").stringify() == (
            "#main.container.editable"
        )
        assert builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify() == (
            'a[href$=".png"]:focus'
        )

    def test_chained_errors(self):
        with pytest.raises(DuplicateError):
            builder.id("a").id("b")
        with pytest.raises(OrderError):
            builder.class_("x").element("div")


class TestCombine:
    def test_combine_joins_with_spaces(self):
        a = builder.element("ul").class_("menu")
        b = builder.element("li")
        assert builder.combine(a, ">", b).stringify() == "ul.menu > li"

    @pytest.mark.parametrize("combinator", ["+", "~", ">", " "])
    def test_combine_equals_concatenation(self, combinator):
        a = builder.element("div").id("main")
        b = builder.class_("x").pseudo_class("hover")
        combined = builder.combine(a, combinator, b)
        assert combined.stringify() == f"{a.stringify()} {combinator} {b.stringify()}"

    def test_combinator_is_not_validated(self):
        combined = builder.combine(builder.element("a"), "||", builder.element("b"))
        assert combined.stringify() == "a || b"

    def test_nested_combination(self):
        selector = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert selector.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_mutating_operands_after_combine_has_no_effect(self):
        a = builder.element("div")
        b = builder.element("span")
        combined = builder.combine(a, "+", b)
        before = combined.stringify()
        a.class_("late")
        b.class_("late")
        assert combined.stringify() == before == "div + span"

    def test_combined_builder_rejects_second_element(self):
        combined = builder.combine(builder.element("a"), "+", builder.element("b"))
        with pytest.raises(DuplicateError):
            combined.element("c")

    def test_combined_builder_is_new_instance(self):
        a = builder.element("a")
        b = builder.element("b")
        combined = builder.combine(a, "+", b)
        assert combined is not a
        assert combined is not b

    def test_parts_chained_onto_combination_render_before_combinator(self):
        combined = builder.combine(builder.element("a"), "+", builder.element("b"))
        assert combined.class_("x").stringify() == "a.x + b"

    def test_combination_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cssbuilder.selector.builder"):
            builder.combine(builder.element("div"), "+", builder.element("span"))
        assert "Combined selector with '+': div + span" in caplog.messages
