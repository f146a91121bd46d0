"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, romanctl.toml only contains
overrides. An empty (or absent) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- romanctl.toml sections ---


class ConvertConfig(BaseModel):
    """[convert] section.

    These knobs act at the service boundary only. The domain functions
    stay case-sensitive and whitespace-strict regardless.

    ``lowercase`` also turns on case folding for decoding, so numerals the
    service renders can be fed straight back in. Folding touches only the
    seven ASCII numeral letters.
    """

    model_config = {"frozen": True}

    case_sensitive: bool = True
    lowercase: bool = False
    strip_whitespace: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=20)
    color: bool = True

