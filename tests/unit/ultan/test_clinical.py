"""
Tests for healthcare helpers in `ultan/clinical.py`.

Covers:
- FHIR envelope validation for dicts and models
- Patient display-name selection (official > first > Unknown)
- Acuity scoring thresholds and the unused temperature field
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from ultan.clinical import get_acuity_score, get_fhir_name, is_valid_fhir
from ultan.domain.models import FhirResource, HumanName, Patient, VitalSigns


class TestIsValidFhir:
    def test_resource_with_type_and_id(self) -> None:
        assert is_valid_fhir({"resourceType": "Patient", "id": "123"}) is True

    def test_resource_without_type(self) -> None:
        assert is_valid_fhir({"name": "John"}) is False

    @pytest.mark.parametrize(
        "resource",
        [None, {}, {"resourceType": "", "id": "1"}, {"resourceType": "Patient", "id": ""}],
    )
    def test_incomplete_resources(self, resource: dict | None) -> None:
        assert is_valid_fhir(resource) is False

    def test_model_instance(self) -> None:
        resource = FhirResource.model_validate({"resourceType": "Observation", "id": "obs-1"})
        assert is_valid_fhir(resource) is True
        assert is_valid_fhir(FhirResource(id="obs-1")) is False

    def test_numeric_id(self) -> None:
        assert is_valid_fhir({"resourceType": "Patient", "id": 123}) is True
        assert FhirResource.model_validate({"resourceType": "Patient", "id": 123}).id == 123


class TestGetFhirName:
    def test_prefers_official_name(self) -> None:
        patient = {
            "resourceType": "Patient",
            "name": [
                {"use": "nickname", "given": ["Jack"], "family": "Doe"},
                {"use": "official", "given": ["John", "Robert"], "family": "Doe"},
            ],
        }
        assert get_fhir_name(patient) == "John Robert Doe"

    def test_falls_back_to_first_name(self) -> None:
        patient = {"name": [{"use": "usual", "given": ["Jane"], "family": "Roe"}, {"given": ["J"]}]}
        assert get_fhir_name(patient) == "Jane Roe"

    def test_missing_names_yield_unknown(self) -> None:
        assert get_fhir_name({"resourceType": "Patient"}) == "Unknown"
        assert get_fhir_name({"name": []}) == "Unknown"
        assert get_fhir_name(None) == "Unknown"

    def test_partial_name_parts(self) -> None:
        assert get_fhir_name({"name": [{"family": "Doe"}]}) == "Doe"
        assert get_fhir_name({"name": [{"given": ["Ann"]}]}) == "Ann"

    def test_numeric_resource_id(self) -> None:
        patient = {"resourceType": "Patient", "id": 123, "name": [{"given": ["A"], "family": "B"}]}
        assert get_fhir_name(patient) == "A B"

    def test_accepts_patient_model(self) -> None:
        patient = Patient(name=[HumanName(use="official", given=["Ada"], family="Lovelace")])
        assert get_fhir_name(patient) == "Ada Lovelace"


class TestAcuityScore:
    def test_reference_case(self) -> None:
        assert get_acuity_score({"hr": 120, "rr": 20, "temp": 37, "sbp": 80}) == 5

    def test_normal_vitals_score_zero(self) -> None:
        assert get_acuity_score({"hr": 72, "rr": 16, "temp": 36.8, "sbp": 120}) == 0

    @pytest.mark.parametrize(
        "hr,rr,sbp,expected",
        [
            (50, 10, 90, 0),  # inclusive lower bounds
            (110, 24, 90, 0),  # inclusive upper bounds
            (49, 16, 120, 2),
            (111, 16, 120, 2),
            (72, 9, 120, 3),
            (72, 25, 120, 3),
            (72, 16, 89, 3),
            (130, 30, 70, 8),
        ],
    )
    def test_thresholds(self, hr: float, rr: float, sbp: float, expected: int) -> None:
        assert get_acuity_score(VitalSigns(hr=hr, rr=rr, sbp=sbp)) == expected

    @given(temp=st.floats(min_value=30.0, max_value=44.0))
    def test_temperature_does_not_contribute(self, temp: float) -> None:
        assert get_acuity_score({"hr": 120, "rr": 20, "temp": temp, "sbp": 80}) == 5

    def test_missing_vitals_raise(self) -> None:
        with pytest.raises(ValidationError):
            get_acuity_score({"hr": 80})
