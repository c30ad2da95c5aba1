"""
Generator settings — loaded from autoerror.yml.

Controls the few inference knobs that are not annotation-driven.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

PLACEHOLDER = "{}"


class GeneratorSettings(BaseModel):
    """Inference settings shared by every variant of every type.

    Attributes:
        error_type_names: Type names treated as error-like.
        error_match:      "last_segment" compares only the final path
                          segment (``std::io::Error`` → ``Error``);
                          "full_path" compares the whole reference.
        field_delimiter:  Separator between placeholders in the default
                          display template of multi-field variants.
    """

    error_type_names: list[str] = Field(default_factory=lambda: ["Error"])
    error_match: Literal["last_segment", "full_path"] = "last_segment"
    field_delimiter: str = " "

    @field_validator("field_delimiter")
    @classmethod
    def check_field_delimiter(cls, value: str) -> str:
        if PLACEHOLDER in value:
            raise ValueError(f"field_delimiter must not contain '{PLACEHOLDER}'")
        return value
