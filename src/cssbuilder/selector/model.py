"""Selector part kinds and their required ordering."""

from __future__ import annotations

from enum import IntEnum


class Part(IntEnum):
    """Kinds of compound selector parts, valued by their rank.

    Parts must be supplied in non-decreasing rank order:
        element#id.class[attr]:pseudo-class::pseudo-element
    """

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def singleton(self) -> bool:
        """True for parts that may occur at most once per selector."""
        return self in _SINGLETONS

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


_SINGLETONS = frozenset({Part.ELEMENT, Part.ID, Part.PSEUDO_ELEMENT})
