from cssbuilder.selector.builder import SelectorBuilder
from cssbuilder.selector.errors import DuplicateError, OrderError, SelectorError
from cssbuilder.selector.facade import SelectorFacade, css_selector_builder
from cssbuilder.selector.model import Part

__all__ = [
    "SelectorBuilder",
    "SelectorFacade",
    "css_selector_builder",
    "Part",
    "SelectorError",
    "DuplicateError",
    "OrderError",
]
