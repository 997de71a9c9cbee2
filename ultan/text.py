"""
String formatting, escaping, encoding and masking helpers.

All functions are pure and operate on ``str``.
"""

import base64
import binascii
import re
from datetime import date
from typing import Any

_POSITIONAL_TOKEN = re.compile(r"\{(\d+)\}")
_WORD = re.compile(r"\w\S*")
_HTML_SPECIAL = re.compile(r"[&<>\"']")
_HTML_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#039;"}

# Applied in order: SSN before phone so the phone pattern never sees SSN digits,
# email last since the masks contain no "@".
_PHI_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\b\d{3}-\d{2}-\d{4}\b"), "[SSN_MASKED]"),
    (re.compile(r"\b\d{10}\b"), "[PHONE_MASKED]"),
    (re.compile(r"\S+@\S+\.\S+"), "[EMAIL_MASKED]"),
)


def string_format(template: str, *args: Any) -> str:
    """Replace ``{i}`` tokens with ``args[i]``; out-of-range tokens are kept as-is.

    >>> string_format("Hello, {0}! You are {1} years old.", "John", 25)
    'Hello, John! You are 25 years old.'
    """

    def _replace(match: re.Match[str]) -> str:
        index = int(match.group(1))
        return str(args[index]) if index < len(args) else match.group(0)

    return _POSITIONAL_TOKEN.sub(_replace, template)


def to_title_case(text: str) -> str:
    """Uppercase the first character of each word and lowercase the rest."""
    return _WORD.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), text)


def sanitize_string(text: str) -> str:
    """Escape the five HTML-significant characters ``& < > " '``."""
    return _HTML_SPECIAL.sub(lambda m: _HTML_ESCAPES[m.group(0)], text)


def to_base64(text: str) -> str:
    """Encode ``text`` as UTF-8 and return its standard base64 form."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def from_base64(encoded: str) -> str:
    """Inverse of ``to_base64``.

    Raises:
        ValueError: if ``encoded`` is not valid base64 or does not decode to UTF-8.
    """
    try:
        raw = base64.b64decode(encoded, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 input: {e}") from e
    return raw.decode("utf-8")


def count_occurrences(text: str, sub: str) -> int:
    """Count non-overlapping occurrences of ``sub`` in ``text``.

    Raises:
        ValueError: if ``sub`` is empty.
    """
    if not sub:
        raise ValueError("substring must not be empty")
    return text.count(sub)


def mask_phi(text: str) -> str:
    """Mask SSNs, bare 10-digit phone numbers and email addresses."""
    for pattern, mask in _PHI_PATTERNS:
        text = pattern.sub(mask, text)
    return text


def format_date(value: date) -> str:
    """Format a date or datetime as ``MM/DD/YYYY``."""
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def greet(name: str = "User", age: int | str = "unknown") -> str:
    """Print and return a greeting line."""
    message = f"Hello, {name}! You are {age} years old."
    print(message)
    return message
