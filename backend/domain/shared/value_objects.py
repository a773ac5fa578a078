"""
Shared Value Objects used across multiple domains.

Value Objects are immutable objects that describe characteristics of a thing.
Two value objects are equal if all their properties are equal.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union
import re


# =============================================================================
# ENUMERATIONS
# =============================================================================

class AttributeType(str, Enum):
    """Type of a product characteristic. Fixed when the attribute is created."""

    SELECT = "select"      # Справочник значений
    BOOLEAN = "boolean"    # Да / Нет
    NUMBER = "number"      # Число
    STRING = "string"      # Строка

    @classmethod
    def classify(cls, sample_value: str) -> AttributeType:
        """
        Pick the type for a new attribute from its first observed value.

        Import never assigns SELECT or BOOLEAN: those are provisioned
        by administrators.
        """
        return cls.NUMBER if is_numeric(sample_value) else cls.STRING


class MediaCollection(str, Enum):
    """Named media collections of a product."""

    MAIN = "main"
    ADDITIONAL = "additional"
    VIDEO = "video"


class WarehouseLinkType(str, Enum):
    """How a warehouse serves a region."""

    PRIMARY = "primary"      # Наличие
    PREORDER = "preorder"    # Предзаказ


# =============================================================================
# CLASSIFICATION HELPERS
# =============================================================================

NUMERIC_RE = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')

TRUTHY_VALUES = frozenset({'да', 'yes', 'true', '1', 'on'})

# Feed convention for flags: only this literal means "yes"
FEED_YES = 'Да'


def is_numeric(value: Optional[str]) -> bool:
    """Check whether a raw feed string looks like a decimal number."""
    if value is None:
        return False
    return bool(NUMERIC_RE.match(str(value)))


def parse_truthy(value: Optional[str]) -> bool:
    """Map a raw characteristic value to a boolean (case-insensitive)."""
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY_VALUES


def is_feed_yes(value: Optional[str]) -> bool:
    """Check a feed flag field ("Да" means true, anything else false)."""
    return value == FEED_YES


# =============================================================================
# ATTRIBUTE VALUE SLOT
# =============================================================================

@dataclass(frozen=True)
class SelectSlot:
    """Reference to a dictionary entry of a select attribute."""

    attribute_value_id: object


@dataclass(frozen=True)
class BooleanSlot:
    value: bool


@dataclass(frozen=True)
class NumberSlot:
    value: float


@dataclass(frozen=True)
class TextSlot:
    value: str


AttributeValueSlot = Union[SelectSlot, BooleanSlot, NumberSlot, TextSlot]


def build_slot(
    attribute_type: AttributeType,
    raw_value: str,
    resolve_select: Callable[[str], object],
) -> AttributeValueSlot:
    """
    Choose the single value slot for a raw characteristic value.

    Args:
        attribute_type: Type of the owning attribute
        raw_value: Value as it appears in the feed
        resolve_select: Returns the dictionary entry id for select attributes
    """
    attribute_type = AttributeType(attribute_type)

    if attribute_type == AttributeType.SELECT:
        return SelectSlot(attribute_value_id=resolve_select(raw_value))
    if attribute_type == AttributeType.BOOLEAN:
        return BooleanSlot(value=parse_truthy(raw_value))
    if attribute_type == AttributeType.NUMBER and is_numeric(raw_value):
        return NumberSlot(value=float(raw_value))
    # Strings, and numbers that do not parse, keep the raw text
    return TextSlot(value=raw_value)
