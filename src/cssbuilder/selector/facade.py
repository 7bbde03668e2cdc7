"""Stateless entry points that start a fresh selector per call."""

from __future__ import annotations

from cssbuilder.selector.builder import SelectorBuilder

__all__ = ["SelectorFacade", "css_selector_builder"]


class SelectorFacade:
    """Creates a new SelectorBuilder for every selector expression.

    Example:
        css_selector_builder.combine(
            css_selector_builder.element("div").id("main"),
            "+",
            css_selector_builder.element("table").id("data"),
        ).stringify()
        # -> div#main + table#data
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return SelectorBuilder.combined(left, combinator, right)


css_selector_builder = SelectorFacade()
