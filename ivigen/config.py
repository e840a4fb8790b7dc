"""Pydantic options model and YAML loading for the transform."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_COMPONENT_NAME = "Component"

IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


class TransformOptions(BaseModel):
    """Options fixed for the duration of one transformation."""

    component_name: str = Field(
        DEFAULT_COMPONENT_NAME,
        alias="componentName",
        description="Identifier of the emitted function.",
    )
    trim: bool = Field(
        True, description="Drop whitespace-only text children."
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    @field_validator("component_name")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if not IDENTIFIER_RE.fullmatch(value):
            raise ValueError(f"component name must be an identifier, got {value!r}")
        return value


def load_options(path: Path, **overrides: Any) -> TransformOptions:
    """Load options from a YAML mapping; non-None ``overrides`` win over file values."""
    data: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of transform options.")
    options = TransformOptions.model_validate(data)
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return options
    return TransformOptions.model_validate({**options.model_dump(), **updates})


__all__ = ["DEFAULT_COMPONENT_NAME", "TransformOptions", "load_options"]
