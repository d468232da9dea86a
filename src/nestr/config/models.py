"""Pydantic configuration models with code-baked defaults.

Each model is one nestr.toml table; defaults live here and the file only
holds overrides. NestrSettings composes them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from nestr.domain.chars import require_char


class PadConfig(BaseModel):
    """[pad] section."""

    model_config = {"frozen": True}

    fill: str = " "

    @field_validator("fill")
    @classmethod
    def _single_char(cls, value: str) -> str:
        return require_char(value, "pad.fill")


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)

