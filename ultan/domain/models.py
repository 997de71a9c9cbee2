"""
Domain models for clinical records.

These models narrow the dict-shaped inputs of the clinical helpers into
validated types. Field aliases follow the FHIR JSON names so raw resources
validate directly.
"""

from pydantic import BaseModel, ConfigDict, Field


class FhirResource(BaseModel):
    """Minimal FHIR resource envelope."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    resource_type: str | None = Field(default=None, alias="resourceType")
    id: str | int | None = None


class HumanName(BaseModel):
    """One entry of a FHIR ``Patient.name`` list."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    use: str | None = Field(default=None, description="e.g. official, usual, nickname")
    given: list[str] = Field(default_factory=list)
    family: str | None = None

    @property
    def full_name(self) -> str:
        return " ".join([*self.given, self.family or ""]).strip()


class Patient(FhirResource):
    """FHIR Patient resource, reduced to the fields the helpers read."""

    name: list[HumanName] = Field(default_factory=list)


class VitalSigns(BaseModel):
    """Bedside vital signs used for acuity scoring."""

    model_config = ConfigDict(frozen=True)  # Immutable for better reasoning

    hr: float = Field(description="Heart rate, beats per minute")
    rr: float = Field(description="Respiratory rate, breaths per minute")
    temp: float | None = Field(default=None, description="Body temperature, Celsius")
    sbp: float = Field(description="Systolic blood pressure, mmHg")
