from __future__ import annotations

from decimal import Decimal
from typing import Any


def to_int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        return int(value)
    text = str(value).strip()
    if not text:
        return default
    return int(Decimal(text))


def to_optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return to_int(value)


def to_text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def to_optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def to_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal(0)
    return Decimal(str(value))
