"""Record model for a single laboratory test entry."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LabTest(BaseModel):
    """One lab test as loaded from the dataset."""
    
    model_config = ConfigDict(frozen=True)
    
    id: str = Field(..., min_length=1, description="Stable unique identifier")
    name: str = Field(..., min_length=1, description="Display name of the test")
    synonyms: str = Field(default="", description="Pipe-separated alternate names")
    clinical_purpose: str = Field(default="", description="Why the test is ordered")
    biomarker_or_parameter: str = Field(default="", description="Measured biomarker or parameter")
    range_or_values: str = Field(default="", description="Possible ranges or values")
    meaning_result_interpretation: str = Field(default="", description="How to read the result")
    general_notes: str = Field(default="", description="Additional notes")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that are blank after trimming."""
        if not v.strip():
            raise ValueError("Test name cannot be empty")
        return v
