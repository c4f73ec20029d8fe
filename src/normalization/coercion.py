"""
Key resolution and type coercion helpers for analytics documents

Every coercer has the signature coerce(value, default) and never raises:
anything it cannot interpret becomes the default.
"""
from __future__ import annotations

import json
import math
import re
from typing import Any, Callable, List, Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")

Coercer = Callable[[Any, T], T]

# Characters kept before a numeric string is parsed
_NON_NUMERIC = re.compile(r"[^0-9.\-]")
# Longest leading decimal literal of an already-stripped string
_LEADING_DECIMAL = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")

_MISSING = object()


def lookup(section: Optional[Mapping[str, Any]], candidates: Sequence[str]) -> Any:
    """
    Return the value of the first candidate key present in section

    A present key wins even when its value is falsy (0, "", None);
    only absent keys fall through to the next candidate.

    Returns:
        The value found, or the module sentinel _MISSING
    """
    if not isinstance(section, Mapping):
        return _MISSING
    for key in candidates:
        if key in section:
            return section[key]
    return _MISSING


def resolve_field(
    section: Optional[Mapping[str, Any]],
    candidates: Sequence[str],
    coerce: Coercer,
    default: T,
) -> T:
    """
    Resolve one output field from a section object

    Args:
        section: Section of the raw document (non-mappings count as empty)
        candidates: Source key names, tried in order
        coerce: Coercer applied to the value found
        default: Value used when no candidate is present or coercion fails

    Returns:
        The coerced value or the default
    """
    value = lookup(section, candidates)
    if value is _MISSING:
        return default
    return coerce(value, default)


def _finite(number: float) -> bool:
    return not (math.isnan(number) or math.isinf(number))


def to_number(value: Any, default: float) -> float:
    """
    Coerce a number or numeric-looking string to float

    Strings are stripped of everything but digits, '.' and '-', then the
    longest leading decimal is parsed: "$12,500.50 approx" -> 12500.5
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return default
        return number if _finite(number) else default
    if isinstance(value, str):
        match = _LEADING_DECIMAL.match(_NON_NUMERIC.sub("", value))
        if not match:
            return default
        number = float(match.group(0))
        return number if _finite(number) else default
    return default


def to_int(value: Any, default: int) -> int:
    """Coerce to int (truncating), keeping default when the value is not numeric"""
    number = to_number(value, math.nan)
    if math.isnan(number):
        return default
    return int(number)


def to_optional_int(value: Any, default: Optional[int]) -> Optional[int]:
    return to_int(value, default)


def stringify(value: Any) -> str:
    """Render a JSON scalar or container as display text"""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and _finite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def to_text(value: Any, default: str) -> str:
    """Coerce to a display string; empty values (None, "", 0, False, NaN, inf) give the default"""
    if not value or (isinstance(value, float) and not _finite(value)):
        return default
    return stringify(value)


def to_bool(value: Any, default: bool = False) -> bool:
    return bool(value)


def to_string_list(value: Any, default: Optional[List[str]] = None) -> List[str]:
    """
    Coerce to a list of strings

    A list is mapped element-wise, a single non-empty string becomes a
    one-element list, anything else becomes an empty list
    """
    if isinstance(value, (list, tuple)):
        return [stringify(item) for item in value]
    if isinstance(value, str) and value:
        return [value]
    return []


def group_thousands(number: float) -> str:
    """
    Format like en-US toLocaleString: comma grouping, at most three
    fraction digits, trailing zeros dropped

    1500 -> '1,500', 1234.5 -> '1,234.5', 0.12345 -> '0.123'
    """
    if isinstance(number, int) and not isinstance(number, bool):
        return f"{number:,}"
    if not _finite(number):
        return stringify(number)
    rounded = round(number, 3)
    if rounded.is_integer():
        return f"{int(rounded):,}"
    return f"{rounded:,.3f}".rstrip("0")


def _format_price(value: Any) -> str:
    if isinstance(value, bool):
        return stringify(value)
    if isinstance(value, (int, float)):
        return f"${group_thousands(value)}"
    if isinstance(value, str):
        return value if value.startswith("$") else f"${value}"
    return stringify(value)


def to_price_list(value: Any, default: Optional[List[str]] = None) -> List[str]:
    """
    Coerce a list of quoted prices to display strings

    Numbers are formatted with '$' and grouping (1500 -> '$1,500');
    strings only get a '$' prefix when missing ('1500' -> '$1500');
    a single non-empty string is wrapped like in to_string_list
    """
    if isinstance(value, (list, tuple)):
        return [_format_price(item) for item in value]
    if isinstance(value, str) and value:
        return [_format_price(value)]
    return []


def to_price(value: Any, default: str) -> str:
    """
    Coerce a single price: numbers are formatted ('$' + grouping),
    strings pass through unchanged, empty values give the default
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"${group_thousands(value)}"
    return to_text(value, default)
