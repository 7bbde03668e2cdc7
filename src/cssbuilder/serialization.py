"""JSON helpers: serialize any value, deserialize into a known dataclass."""

from __future__ import annotations

import json
from dataclasses import MISSING, asdict, fields, is_dataclass
from typing import Any, TypeVar, get_type_hints

__all__ = ["DeserializationError", "to_json", "from_json"]

T = TypeVar("T")


class DeserializationError(ValueError):
    """Raised when JSON text cannot be turned into the requested type."""

    def __init__(self, message: str, *, target: type | None = None) -> None:
        self.target = target
        name = target.__name__ if target is not None else "object"
        super().__init__(f"Cannot load {name}: {message}")


def to_json(obj: Any, *, indent: int | None = None, compact: bool = False) -> str:
    """Return the JSON representation of *obj*.

    Dataclass instances are converted field by field; other values are passed
    to ``json.dumps`` as-is.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    separators = (",", ":") if compact else None
    return json.dumps(obj, indent=indent, separators=separators)


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* and build an instance of the dataclass *cls* from it.

    The JSON must be an object whose keys are exactly the fields of *cls*,
    with fields that declare defaults allowed to be omitted. Values of fields
    annotated with a plain class must be instances of it (an int is accepted
    where a float is declared); generic annotations are not checked.
    """
    if not (is_dataclass(cls) and isinstance(cls, type)):
        raise TypeError(f"from_json target must be a dataclass type, got {cls!r}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError(f"invalid JSON ({exc.msg})", target=cls) from exc

    if not isinstance(data, dict):
        raise DeserializationError(
            f"expected a JSON object, got {type(data).__name__}", target=cls
        )

    init_fields = [f for f in fields(cls) if f.init]
    known = {f.name for f in init_fields}
    unknown = sorted(set(data) - known)
    if unknown:
        raise DeserializationError(f"unknown field(s) {', '.join(unknown)}", target=cls)

    missing = [
        f.name
        for f in init_fields
        if f.name not in data
        and f.default is MISSING
        and f.default_factory is MISSING
    ]
    if missing:
        raise DeserializationError(f"missing field(s) {', '.join(missing)}", target=cls)

    hints = get_type_hints(cls)
    for name, value in data.items():
        expected = hints.get(name)
        if isinstance(expected, type) and not _is_instance(value, expected):
            raise DeserializationError(
                f"field {name!r} expects {expected.__name__}, got {type(value).__name__}",
                target=cls,
            )

    return cls(**data)


def _is_instance(value: Any, expected: type) -> bool:
    # JSON has no int/float split, and bool must not pass as a number
    if isinstance(value, bool) and expected in (int, float):
        return False
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)
