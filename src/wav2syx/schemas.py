"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from wav2syx.application.options import (
    DEFAULT_CHANNELS,
    DEFAULT_SAMPLE_RATE,
    FINAL_EXTENSION,
    INTERMEDIATE_EXTENSION,
    SOURCE_EXTENSION,
)


class BatchConversionConfig(BaseModel):
    """Validated input for a directory-tree conversion run."""

    model_config = ConfigDict(extra="forbid")

    source_extension: str = SOURCE_EXTENSION
    intermediate_extension: str = INTERMEDIATE_EXTENSION
    final_extension: str = FINAL_EXTENSION
    sample_rate: int = Field(default=DEFAULT_SAMPLE_RATE, gt=0)
    channels: int = Field(default=DEFAULT_CHANNELS, gt=0)
    jobs: int = Field(default=1, ge=1)

    @field_validator("source_extension", "intermediate_extension", "final_extension")
    @classmethod
    def _validate_extension(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("extension cannot be empty.")
        if value.startswith("."):
            raise ValueError("extension must be given without a leading dot.")
        if "/" in value or "\\" in value:
            raise ValueError("extension cannot contain path separators.")
        return value

    @model_validator(mode="after")
    def _validate_distinct_outputs(self) -> BatchConversionConfig:
        if self.intermediate_extension == self.final_extension:
            raise ValueError("intermediate and final extensions must differ.")
        return self

