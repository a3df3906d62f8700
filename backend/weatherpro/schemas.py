from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CompareRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    city1: str = Field(min_length=1, max_length=80, description="First city to compare.")
    city2: str = Field(min_length=1, max_length=80, description="Second city to compare.")

    @model_validator(mode="after")
    def validate_city_names(self) -> "CompareRequest":
        if not self.city1.strip() or not self.city2.strip():
            raise ValueError("Provide two non-empty city names to compare.")
        return self
