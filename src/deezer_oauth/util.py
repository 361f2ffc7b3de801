# Argument validation and CSV helpers.
# Created: 2026-10-19

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Any

from deezer_oauth.errors import InvalidArgument

_CHECKS: dict[str, Callable[[Any], bool]] = {
    "str": lambda v: isinstance(v, str),
    # bool is an int subclass, but never a valid id
    "int": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "list": lambda v: isinstance(v, (list, tuple)),
    "callable": callable,
    "None": lambda v: v is None,
}


def validate_argument(name: str, value: Any, accepted: Sequence[str]) -> None:
    """Raise InvalidArgument unless ``value`` matches one of ``accepted``.

    Args:
        name: Parameter name, reported in the error.
        value: The value the caller passed.
        accepted: Type names, any of "str", "int", "list", "callable", "None".
    """
    for type_name in accepted:
        check = _CHECKS.get(type_name)
        if check is None:
            raise ValueError(f"Unknown type name: {type_name}")
        if check(value):
            return
    raise InvalidArgument(name, value, accepted)


def to_csv(values: Iterable[Any]) -> str:
    """Join values with commas, keeping order and duplicates."""
    return ",".join(v.value if isinstance(v, Enum) else str(v) for v in values)
