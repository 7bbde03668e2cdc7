"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.model import Part


DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector builder failures."""

    def __init__(self, message: str, *, part: Part | None = None) -> None:
        super().__init__(message)
        self.part = part


class DuplicateError(SelectorError):
    """An element, id or pseudo-element was supplied twice to one selector."""

    def __init__(self, part: Part) -> None:
        super().__init__(DUPLICATE_MESSAGE, part=part)


class OrderError(SelectorError):
    """A selector part was supplied after a part that must follow it."""

    def __init__(self, part: Part, stage: Part) -> None:
        super().__init__(ORDER_MESSAGE, part=part)
        self.stage = stage
