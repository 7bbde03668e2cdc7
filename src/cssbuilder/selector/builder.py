"""Chainable builder for compound and combined CSS selectors.

Usage example:
    SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
    # -> a[href$=".png"]:focus
"""

from __future__ import annotations

import logging

from cssbuilder.selector.errors import DuplicateError, OrderError
from cssbuilder.selector.model import Part

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates the parts of one selector expression.

    Each fragment method validates ordering and cardinality before storing
    anything, so a rejected call leaves the builder unchanged.
    """

    def __init__(self) -> None:
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None
        self._trailer: str | None = None
        self.stage: Part = Part.NONE

    # --- fragments --------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        self._advance(Part.ELEMENT)
        self._element = value
        return self

    def id(self, value: str) -> SelectorBuilder:
        self._advance(Part.ID)
        self._id = f"#{value}"
        return self

    def class_(self, value: str) -> SelectorBuilder:
        self._advance(Part.CLASS)
        self._classes.append(f".{value}")
        return self

    def attr(self, value: str) -> SelectorBuilder:
        self._advance(Part.ATTRIBUTE)
        self._attributes.append(f"[{value}]")
        return self

    def pseudo_class(self, value: str) -> SelectorBuilder:
        self._advance(Part.PSEUDO_CLASS)
        self._pseudo_classes.append(f":{value}")
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        self._advance(Part.PSEUDO_ELEMENT)
        self._pseudo_element = f"::{value}"
        return self

    def add(self, part: Part, value: str) -> SelectorBuilder:
        """Add a fragment by kind; dispatches to the matching fragment method."""
        try:
            method = getattr(self, _METHODS[part])
        except KeyError:
            raise ValueError(f"Not a selector part: {part!r}") from None
        return method(value)

    # --- combination ------------------------------------------------------------

    @classmethod
    def combined(
        cls, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with *combinator*, snapshotting both operands."""
        builder = cls().element(left.stringify())
        builder._trailer = f" {combinator} {right.stringify()}"
        logger.debug("Combined selector with %r: %s", combinator, builder)
        return builder

    # --- rendering --------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector in fixed part order."""
        return "".join(
            [
                self._element or "",
                self._id or "",
                "".join(self._classes),
                "".join(self._attributes),
                "".join(self._pseudo_classes),
                self._pseudo_element or "",
                self._trailer or "",
            ]
        )

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r}, stage={self.stage.label})"

    # --- internals --------------------------------------------------------------

    def _advance(self, part: Part) -> None:
        if part.singleton and getattr(self, _SLOTS[part]) is not None:
            logger.debug("Rejected duplicate %s on %r", part.label, self)
            raise DuplicateError(part)
        if self.stage > part:
            logger.debug("Rejected %s after %s on %r", part.label, self.stage.label, self)
            raise OrderError(part, self.stage)
        self.stage = part


_SLOTS: dict[Part, str] = {
    Part.ELEMENT: "_element",
    Part.ID: "_id",
    Part.PSEUDO_ELEMENT: "_pseudo_element",
}

_METHODS: dict[Part, str] = {
    Part.ELEMENT: "element",
    Part.ID: "id",
    Part.CLASS: "class_",
    Part.ATTRIBUTE: "attr",
    Part.PSEUDO_CLASS: "pseudo_class",
    Part.PSEUDO_ELEMENT: "pseudo_element",
}
