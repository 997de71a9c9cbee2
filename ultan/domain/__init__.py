"""Structural types for the loosely-shaped records the helpers accept."""

from .models import FhirResource, HumanName, Patient, VitalSigns

__all__ = ["FhirResource", "HumanName", "Patient", "VitalSigns"]
