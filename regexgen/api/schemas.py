"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


# =============================================================================
# Generation Schemas
# =============================================================================


class GenerateRequest(BaseModel):
    """Request to derive a pattern for a target inside a source text.

    Emptiness of source and target is checked by the deriver so that it is
    reported as a distinct error instead of a generic validation failure.
    """

    source: str = Field(description="Sample text containing the value to extract")
    target: str = Field(description="The exact value to extract from the source")
    annotation: str | None = Field(
        default=None,
        max_length=2000,
        description="Optional custom logic note, emitted as comments in the Groovy script",
    )
    context_limit: int | None = Field(
        default=None,
        ge=1,
        le=200,
        description="Characters of context on each side. Defaults to the server setting.",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "source": "token=abc123&type=x",
                "target": "abc123",
                "annotation": "Convert to uppercase",
            }
        }


class ArtifactsResponse(BaseModel):
    """The derived pattern rendered in each supported format."""

    jmeter: str = Field(description="JMeter Regular Expression Extractor XML")
    groovy: str = Field(description="Groovy JSR223 extraction script")
    test: str = Field(description="Self-test match listing")


class GenerateResponse(BaseModel):
    """Response for the pattern generation endpoint."""

    pattern: str = Field(description="The derived regular expression")
    matches: list[str] = Field(description="Values captured from the source, in order")
    match_count: int
    context_limit: int
    artifacts: ArtifactsResponse
    generated_at: datetime


# =============================================================================
# Pattern Test Schemas
# =============================================================================


class PatternTestRequest(BaseModel):
    """Request to run an arbitrary pattern against a text."""

    pattern: str = Field(min_length=1, description="Regular expression to test")
    text: str = Field(description="Text to search")


class PatternTestResponse(BaseModel):
    """Matches found by a pattern test."""

    pattern: str
    matches: list[str]
    match_count: int


# =============================================================================
# Format Schemas
# =============================================================================


class FormatInfo(BaseModel):
    """An available artifact format."""

    format: str
    label: str


class FormatListResponse(BaseModel):
    """Response for listing artifact formats."""

    formats: list[FormatInfo]


# =============================================================================
# Error Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(description="Error message")
    error_code: str | None = Field(default=None, description="Application-specific error code")
    extra: dict[str, Any] | None = Field(default=None, description="Additional error context")
