"""
Attention fields shared by concepts, sources and source authors.

Each of these carries a key, a weight in [-1, 1], the application it came
from and the time it was last updated. The loading, writing and comparison
of those fields lives once in AttentionFieldAdapter.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from syndication.common.comparison import combine, compare_text, compare_values
from syndication.common.dates import DATETIME_UNSET, format_datetime, is_unset, try_parse_datetime
from syndication.common.guard import argument_in_range, argument_not_none, normalize_text
from syndication.common.xml import XmlNavigator, XmlWriter

MINIMUM_VALUE = Decimal(-1)
MAXIMUM_VALUE = Decimal(1)
_TWO_PLACES = Decimal("0.01")

Weight = Union[Decimal, int, float, str]


def to_weight(value: Weight) -> Decimal:
    """Coerce to Decimal and enforce the [-1, 1] range."""
    argument_not_none(value, "value")
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"value is not a number: {value!r}") from e
    argument_in_range(value, "value", MINIMUM_VALUE, MAXIMUM_VALUE)
    return value


def parse_weight(text: str) -> Optional[Decimal]:
    """Parse an attribute value; None when malformed or out of range."""
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not value.is_finite() or not MINIMUM_VALUE <= value <= MAXIMUM_VALUE:
        return None
    return value


def format_weight(value: Decimal) -> str:
    # Two decimal places unless that would drop precision
    rounded = value.quantize(_TWO_PLACES)
    if rounded == value:
        return f"{rounded:f}"
    return f"{value.normalize():f}"


class AttentionFieldsMixin:
    """Storage and normalization for key/value/from/updated."""

    def __init__(self):
        super().__init__()
        self._key = ""
        self._value = Decimal(0)
        self._origin = ""
        self.updated_on: datetime = DATETIME_UNSET

    @property
    def key(self) -> str:
        return self._key

    @key.setter
    def key(self, value: Optional[str]) -> None:
        self._key = normalize_text(value)

    @property
    def value(self) -> Decimal:
        """Relative importance, from -1 (avoid) to 1 (highly relevant)."""
        return self._value

    @value.setter
    def value(self, value: Weight) -> None:
        self._value = to_weight(value)

    @property
    def origin(self) -> str:
        """Application that produced the entry (the "from" attribute)."""
        return self._origin

    @origin.setter
    def origin(self, value: Optional[str]) -> None:
        self._origin = normalize_text(value)


class AttentionFieldAdapter:
    """Reads, writes and compares the attention fields of any entity."""

    @staticmethod
    def fill(target: Any, navigator: XmlNavigator) -> bool:
        argument_not_none(target, "target")
        argument_not_none(navigator, "navigator")
        if not navigator.has_attributes:
            return False

        loaded = False
        key = navigator.get_attribute("key")
        value = parse_weight(navigator.get_attribute("value"))
        origin = navigator.get_attribute("from")
        updated = try_parse_datetime(navigator.get_attribute("updated"))

        if key:
            target.key = key
            loaded = True
        if value is not None:
            target.value = value
            loaded = True
        if origin:
            target.origin = origin
            loaded = True
        if updated is not None:
            target.updated_on = updated
            loaded = True
        return loaded

    @staticmethod
    def write_key(target: Any, writer: XmlWriter) -> None:
        writer.write_attribute("key", target.key)

    @staticmethod
    def write_value(target: Any, writer: XmlWriter) -> None:
        writer.write_attribute("value", format_weight(target.value))

    @staticmethod
    def write_provenance(target: Any, writer: XmlWriter) -> None:
        if target.origin:
            writer.write_attribute("from", target.origin)
        if not is_unset(target.updated_on):
            writer.write_attribute("updated", format_datetime(target.updated_on))

    @staticmethod
    def compare(first: Any, second: Any) -> int:
        if first is None and second is None:
            return 0
        if first is None:
            return -1
        if second is None:
            return 1
        return combine(
            compare_text(first.origin, second.origin),
            compare_text(first.key, second.key),
            compare_values(first.updated_on, second.updated_on),
            compare_values(first.value, second.value),
        )
