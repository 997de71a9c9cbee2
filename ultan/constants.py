"""Shared immutable enumerations and validation patterns."""

import re
from enum import Enum, IntEnum
from types import MappingProxyType


class DaysOfWeek(str, Enum):
    """Weekday names, Monday first."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class HttpStatus(IntEnum):
    """Commonly used HTTP status codes."""

    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    SERVER_ERROR = 500


REGEXES: MappingProxyType[str, re.Pattern[str]] = MappingProxyType(
    {
        "email": re.compile(r"\S+@\S+\.\S+"),
        "phone": re.compile(r"\+?[1-9]\d{1,14}"),
        "url": re.compile(r"^(http|https)://[^ \"]+$"),
    }
)
