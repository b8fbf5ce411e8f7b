# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Layout settings for usage text rendering.

`UsageSettings` is a validated pydantic model passed explicitly to
`OptionSet`, `ArgumentSet` and `Runner`; there is no process-wide layout state.

Fields:
- width: Maximum length of a wrapped usage-text line, excluding its indent.
- indent: Spaces before each signature.
- text_indent: Column where wrapped usage text starts.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UsageSettings(BaseModel):
    """Column layout used by the usage renderer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = Field(default=80, ge=20)
    indent: int = Field(default=2, ge=0)
    text_indent: int = Field(default=8, ge=1)

    @model_validator(mode="after")
    def validate_columns(self) -> UsageSettings:
        if self.text_indent <= self.indent:
            raise ValueError(
                f"text_indent ({self.text_indent}) must be greater than indent ({self.indent})"
            )
        return self


DEFAULT_SETTINGS = UsageSettings()
