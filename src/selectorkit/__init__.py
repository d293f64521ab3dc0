"""selectorkit: CSS selector builder and small object helpers."""
from __future__ import annotations

from selectorkit.config import SelectorkitConfig
from selectorkit.errors import (
    DuplicateSingletonPart,
    OutOfOrderPart,
    SelectorkitError,
    SelectorRuleViolation,
    SerializationError,
)
from selectorkit.selector import PartKind, Selector, SelectorBuilder, css_selector_builder
from selectorkit.serialize import from_json, to_json
from selectorkit.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "SelectorkitConfig",
    "SelectorkitError",
    "SelectorRuleViolation",
    "DuplicateSingletonPart",
    "OutOfOrderPart",
    "SerializationError",
    "PartKind",
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "Rectangle",
    "to_json",
    "from_json",
]
