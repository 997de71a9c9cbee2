"""
Prompt templating and tolerant parsing of LLM responses.

Models often wrap JSON answers in Markdown code fences; ``parse_ai_json``
strips them before parsing and reports failure as ``None`` instead of raising.
"""

import json
import re
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ultan.log import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_NAMED_TOKEN = re.compile(r"\{\{(\w+)\}\}")
_CODE_FENCE = re.compile(r"```json|```")


def fill_prompt(template: str, variables: Mapping[str, Any]) -> str:
    """Replace ``{{name}}`` tokens with ``variables[name]``.

    Tokens whose key is missing or maps to ``None`` are left unchanged;
    falsy values such as ``0`` or ``""`` are substituted.
    """

    def _replace(match: re.Match[str]) -> str:
        value = variables.get(match.group(1))
        return match.group(0) if value is None else str(value)

    return _NAMED_TOKEN.sub(_replace, template)


def parse_ai_json(text: str) -> Any | None:
    """Parse a JSON answer, ignoring Markdown code fences. Returns None on failure."""
    clean = _CODE_FENCE.sub("", text).strip()
    try:
        return json.loads(clean)
    except (ValueError, RecursionError) as e:
        logger.debug("ai_json_parse_failed", error=str(e), preview=clean[:80])
        return None


def parse_ai_model(text: str, model: type[ModelT]) -> ModelT | None:
    """Parse a fenced JSON answer and validate it into ``model``.

    Returns None if the text is not JSON or does not match the model.
    """
    data = parse_ai_json(text)
    if data is None:
        return None
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.debug(
            "ai_json_validation_failed", model=model.__name__, errors=e.error_count()
        )
        return None
