"""cssbuilder: chainable CSS selector builder plus small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.config import CssBuilderConfig
from cssbuilder.selector import (
    DuplicateError,
    OrderError,
    Part,
    SelectorBuilder,
    SelectorError,
    SelectorFacade,
    css_selector_builder,
)
from cssbuilder.serialization import DeserializationError, from_json, to_json
from cssbuilder.shapes import Rectangle, area

__all__ = [
    "__version__",
    "CssBuilderConfig",
    "css_selector_builder",
    "SelectorFacade",
    "SelectorBuilder",
    "Part",
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "DeserializationError",
    "to_json",
    "from_json",
    "Rectangle",
    "area",
]
