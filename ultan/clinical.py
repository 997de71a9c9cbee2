"""
Healthcare record helpers.

Inputs may be raw FHIR-style dicts or the pydantic models from
``ultan.domain.models``; dicts are validated into the models (or, for
names, just the name list) before use.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter

from ultan.domain.models import HumanName, Patient, VitalSigns
from ultan.log import get_logger

logger = get_logger(__name__)

UNKNOWN_NAME = "Unknown"

_NAMES = TypeAdapter(list[HumanName])

# Normal ranges (inclusive) and penalties for the acuity score
HEART_RATE_RANGE = (50, 110)
HEART_RATE_POINTS = 2
RESPIRATORY_RATE_RANGE = (10, 24)
RESPIRATORY_RATE_POINTS = 3
SYSTOLIC_BP_FLOOR = 90
SYSTOLIC_BP_POINTS = 3


def is_valid_fhir(resource: Any) -> bool:
    """True if ``resource`` carries both a resource type and an id."""
    if resource is None:
        return False
    if isinstance(resource, Mapping):
        resource_type = resource.get("resourceType")
        resource_id = resource.get("id")
    else:
        resource_type = getattr(resource, "resource_type", None) or getattr(
            resource, "resourceType", None
        )
        resource_id = getattr(resource, "id", None)
    return bool(resource_type and resource_id)


def get_fhir_name(patient: Patient | Mapping[str, Any] | None) -> str:
    """
    Display name for a patient.

    Prefers the ``official`` name entry, then the first entry; returns
    ``"Unknown"`` when the patient has no names.
    """
    if patient is None:
        return UNKNOWN_NAME
    # Only the name list is read, so other fields are not validated
    if isinstance(patient, Mapping):
        names = _NAMES.validate_python(patient.get("name") or [])
    else:
        names = patient.name

    if not names:
        return UNKNOWN_NAME

    chosen = next((n for n in names if n.use == "official"), names[0])
    return chosen.full_name


def get_acuity_score(vitals: VitalSigns | Mapping[str, Any]) -> int:
    """
    Additive early-warning score from bedside vitals.

    +2 for heart rate outside 50-110, +3 for respiratory rate outside 10-24,
    +3 for systolic pressure below 90. Temperature is accepted but does not
    contribute.

    Raises:
        pydantic.ValidationError: if a dict is missing required vitals.
    """
    if isinstance(vitals, Mapping):
        vitals = VitalSigns.model_validate(vitals)

    score = 0
    low, high = HEART_RATE_RANGE
    if not low <= vitals.hr <= high:
        score += HEART_RATE_POINTS
    low, high = RESPIRATORY_RATE_RANGE
    if not low <= vitals.rr <= high:
        score += RESPIRATORY_RATE_POINTS
    if vitals.sbp < SYSTOLIC_BP_FLOOR:
        score += SYSTOLIC_BP_POINTS

    logger.debug("acuity_scored", score=score)
    return score
