"""Persisted chat settings model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SettingsSnapshot(BaseModel):
    """Read-only view of the persisted chat settings at the moment of a call.

    Attributes:
        default_provider: Persisted provider name (parsed at resolution time, None = unset)
        temperature: Sampling temperature (0.0-2.0)
        max_retries: Retries after the first failed request
        top_p: Nucleus sampling parameter (0.0-1.0)
        timeout: Request timeout in seconds
        max_output_tokens: Maximum tokens in response (0 = use system default)
    """

    default_provider: Optional[str] = None
    temperature: float = Field(0.7, ge=0.0, le=2.0)
    max_retries: int = Field(3, ge=0, le=10)
    top_p: float = Field(0.9, ge=0.0, le=1.0)
    timeout: int = Field(60, gt=0)
    max_output_tokens: int = Field(0, ge=0, le=100000)

    model_config = ConfigDict(frozen=True, extra="forbid")
