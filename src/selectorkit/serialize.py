"""JSON helpers: dump plain values and rebuild typed dataclass values."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.errors import SerializationError

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default(obj: object) -> Any:
    """Fallback encoder: dataclass instances become their field mapping."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: object, indent: int | None = None) -> str:
    """Return the JSON representation of *obj*.

    Without *indent* the output is compact, e.g. ``[1,2,3]`` or
    ``{"width":10,"height":20}``.
    """
    separators = (",", ":") if indent is None else None
    try:
        return json.dumps(obj, indent=indent, separators=separators, default=_default)
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc), cause=exc) from exc


def _required(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING
    )


def from_json(target: type[T], text: str) -> T:
    """Parse *text* and build an instance of the dataclass *target*.

    Only the fields *target* declares are copied; other keys are ignored.
    A required field absent from the JSON object is an error rather than
    being left unset.
    """
    if not (dataclasses.is_dataclass(target) and isinstance(target, type)):
        raise SerializationError(f"{target!r} is not a dataclass type")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {target.__name__}, got {type(data).__name__}"
        )

    kwargs: dict[str, Any] = {}
    missing: list[str] = []
    for field in dataclasses.fields(target):
        if not field.init:
            continue
        if field.name in data:
            kwargs[field.name] = data[field.name]
        elif _required(field):
            missing.append(field.name)

    if missing:
        raise SerializationError(
            f"Missing required field(s) for {target.__name__}: {', '.join(missing)}"
        )

    ignored = set(data) - set(kwargs)
    if ignored:
        logger.debug("ignoring unknown keys for %s: %s", target.__name__, sorted(ignored))
    return target(**kwargs)
