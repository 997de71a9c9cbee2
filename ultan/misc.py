"""Small general-purpose helpers: type tags, random ranges, rounding and ids."""

import random
import uuid
from collections.abc import Mapping
from datetime import date
from decimal import ROUND_HALF_UP, Decimal


def get_type(value: object) -> str:
    """Lowercase type tag in the spirit of ``Object.prototype.toString``."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, date):
        return "date"
    if callable(value):
        return "function"
    return type(value).__name__.lower()


def get_random_in_range(low: float, high: float) -> float:
    return random.uniform(low, high)


def round_to(number: float, decimals: int = 2) -> float:
    """Round half away from zero at ``decimals`` places.

    Works on the decimal representation, so ``round_to(1.005, 2) == 1.01``
    where the builtin ``round`` gives 1.0.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(number)).quantize(quantum, rounding=ROUND_HALF_UP))


def generate_uuid() -> str:
    """Random version-4 UUID string."""
    return str(uuid.uuid4())
