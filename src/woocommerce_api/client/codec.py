"""
JSON codec for request and response bodies.

Money fields get one special rule: they are read from JSON numbers or
numeric strings, rounded to 2 decimal places, and always written back as
strings with a period separator. WooCommerce sends prices as strings and
rejects or mangles locale-formatted numbers.
"""

from __future__ import annotations

import json
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from functools import lru_cache
from typing import Annotated, Any, Mapping, Optional

from pydantic import BaseModel, BeforeValidator, PlainSerializer, TypeAdapter, ValidationError

from .exceptions import SerializationError


TWO_PLACES = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    # Same midpoint rule as the store's own decimal handling (banker's rounding)
    try:
        return value.quantize(TWO_PLACES, rounding=ROUND_HALF_EVEN)
    except InvalidOperation as e:
        # quantize needs more digits than the decimal context allows
        raise ValueError(f"decimal value out of range: {value}") from e


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValueError(f"expected a decimal number, got {value!r}")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"not a decimal number: {value!r}") from e
    else:
        raise ValueError(f"expected a decimal number, got {type(value).__name__}")

    if not number.is_finite():
        raise ValueError(f"not a finite decimal number: {value!r}")
    return round_money(number)


def parse_money(value: Any) -> Decimal:
    if value is None or value == "":
        raise ValueError("a decimal value is required here")
    return _to_decimal(value)


def parse_optional_money(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    return _to_decimal(value)


def format_money(value: Decimal) -> str:
    return format(round_money(Decimal(value)), "f")


Money = Annotated[
    Decimal,
    BeforeValidator(parse_money),
    PlainSerializer(format_money, return_type=str),
]

OptionalMoney = Annotated[
    Optional[Decimal],
    BeforeValidator(parse_optional_money),
    PlainSerializer(format_money, return_type=str, when_used="unless-none"),
]


def to_payload(obj: Any) -> Any:
    """
    Convert models (and containers of models) to plain JSON-ready data.

    Fields that were never set, or are None, are left out so a partial
    update does not overwrite them on the store.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)
    if isinstance(obj, Mapping):
        return {str(k): to_payload(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, (list, tuple, set)):
        return [to_payload(v) for v in obj]
    if isinstance(obj, Decimal):
        return format_money(obj)
    return obj


def serialize(obj: Any) -> str:
    try:
        return json.dumps(to_payload(obj))
    except (TypeError, ValueError, ArithmeticError) as e:
        raise SerializationError(f"Cannot serialize {type(obj).__name__}: {e}") from e


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def deserialize(text: str, target: Any) -> Any:
    """
    Parse a JSON document into `target` (a model, List[Model], dict, ...).

    Raises:
        SerializationError: malformed JSON or data that does not fit `target`
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Invalid JSON: {e}") from e

    try:
        return _adapter(target).validate_python(data)
    except ValidationError as e:
        raise SerializationError(
            f"Response does not match {getattr(target, '__name__', target)}: {e}"
        ) from e
