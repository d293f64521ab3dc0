"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector import PartKind


class SelectorkitError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder rules
# ---------------------------------------------------------------------------


class SelectorRuleViolation(SelectorkitError):
    """A chained call broke one of the selector composition rules."""

    rule: str = ""

    def __init__(self, message: str, *, kind: PartKind) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateSingletonPart(SelectorRuleViolation):
    """element, id or pseudo-element appended twice to the same selector."""

    rule = "duplicate"

    def __init__(self, kind: PartKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            kind=kind,
        )


class OutOfOrderPart(SelectorRuleViolation):
    """A part ranked lower than the previously appended one."""

    rule = "order"

    def __init__(self, kind: PartKind, previous: PartKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            kind=kind,
        )
        self.previous = previous


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class SerializationError(SelectorkitError):
    """JSON text could not be produced or mapped onto the target type."""
