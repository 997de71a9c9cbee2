"""Utility library: text, collections, reactive values, timing and clinical/AI helpers.

Every function and constant is importable from the package root.
"""

from ultan.log import configure_logging, set_package_level

set_package_level()

from ultan.clinical import get_acuity_score, get_fhir_name, is_valid_fhir  # noqa: E402
from ultan.constants import REGEXES, DaysOfWeek, HttpStatus  # noqa: E402
from ultan.errors import HttpError, UltanError  # noqa: E402
from ultan.http import req_flow  # noqa: E402
from ultan.mappings import (  # noqa: E402
    array_to_object,
    deep_clone,
    get_nested_property,
    is_empty,
    object_to_array,
    set_nested_property,
)
from ultan.misc import generate_uuid, get_random_in_range, get_type, round_to  # noqa: E402
from ultan.prompts import fill_prompt, parse_ai_json, parse_ai_model  # noqa: E402
from ultan.reactive import Signal, create_signal  # noqa: E402
from ultan.sequences import (  # noqa: E402
    array_difference,
    average_array,
    group_by,
    merge_arrays,
    remove_falsy_values,
    sum_array,
)
from ultan.text import (  # noqa: E402
    count_occurrences,
    format_date,
    from_base64,
    greet,
    mask_phi,
    sanitize_string,
    string_format,
    to_base64,
    to_title_case,
)
from ultan.timing import debounce, is_zombie, throttle  # noqa: E402

__all__ = [
    # text
    "string_format",
    "to_title_case",
    "sanitize_string",
    "to_base64",
    "from_base64",
    "count_occurrences",
    "mask_phi",
    "format_date",
    "greet",
    # mappings
    "set_nested_property",
    "get_nested_property",
    "object_to_array",
    "array_to_object",
    "is_empty",
    "deep_clone",
    # sequences
    "merge_arrays",
    "array_difference",
    "sum_array",
    "average_array",
    "remove_falsy_values",
    "group_by",
    # reactive
    "Signal",
    "create_signal",
    # timing
    "debounce",
    "throttle",
    "is_zombie",
    # clinical
    "is_valid_fhir",
    "get_fhir_name",
    "get_acuity_score",
    # prompts
    "fill_prompt",
    "parse_ai_json",
    "parse_ai_model",
    # http
    "req_flow",
    # misc
    "get_type",
    "get_random_in_range",
    "round_to",
    "generate_uuid",
    # constants
    "DaysOfWeek",
    "HttpStatus",
    "REGEXES",
    # errors and setup
    "UltanError",
    "HttpError",
    "configure_logging",
    "set_package_level",
]
