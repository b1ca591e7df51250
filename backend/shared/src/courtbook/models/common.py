"""Shared field types and model configuration."""

from decimal import Decimal
from typing import Annotated

from pydantic import ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def _serialize_percent(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Percentages are Decimals internally and plain JSON numbers on the wire
Percent = Annotated[
    Decimal,
    PlainSerializer(_serialize_percent, return_type=int | float, when_used="json"),
]

# REST payloads from the booking backend are camelCase
CAMEL_CASE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
)

FROZEN_CAMEL_CASE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)
