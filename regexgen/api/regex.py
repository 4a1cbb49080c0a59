"""Regex generation API routes.

Handles pattern derivation, artifact rendering and ad-hoc pattern tests.
"""

import logging
import re
from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from regexgen.api.deps import get_component_factory
from regexgen.api.schemas import (
    ArtifactsResponse,
    ErrorResponse,
    FormatInfo,
    FormatListResponse,
    GenerateRequest,
    GenerateResponse,
    PatternTestRequest,
    PatternTestResponse,
)
from regexgen.core.factory import ComponentFactory
from regexgen.interfaces.deriver import GenerationRequest
from regexgen.strategies.derivers import collect_matches

logger = logging.getLogger(__name__)
audit_logger = structlog.get_logger("regexgen.audit")

router = APIRouter(prefix="/regex", tags=["regex"])


# =============================================================================
# Endpoints
# =============================================================================


@router.post(
    "/generate",
    response_model=GenerateResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse},
    },
)
def generate_pattern(
    body: GenerateRequest,
    factory: ComponentFactory = Depends(get_component_factory),
) -> GenerateResponse:
    """Derive a pattern for the target and render every artifact.

    Derivation errors (empty input, target not found) propagate to the
    application's exception handler, which maps them to error responses.

    Args:
        body: Source, target and optional annotation.
        factory: Component factory.

    Returns:
        GenerateResponse with the pattern, its matches and rendered artifacts.
    """
    deriver = factory.get_deriver(context_limit=body.context_limit)
    request = GenerationRequest(
        source=body.source,
        target=body.target,
        context_limit=deriver.context_limit,
    )

    derived = deriver.derive(request.source, request.target)

    artifacts = {
        renderer.format_name: renderer.render(derived, request, body.annotation).content
        for renderer in factory.get_renderers()
    }

    audit_logger.info(
        "pattern_generated",
        pattern=derived.pattern,
        match_count=derived.match_count,
        source_length=len(request.source),
        context_limit=request.context_limit,
    )

    return GenerateResponse(
        pattern=derived.pattern,
        matches=list(derived.matches),
        match_count=derived.match_count,
        context_limit=request.context_limit,
        artifacts=ArtifactsResponse(**artifacts),
        generated_at=datetime.now(timezone.utc),
    )


@router.post(
    "/test",
    response_model=PatternTestResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def run_pattern_test(body: PatternTestRequest):
    """Run a pattern globally against a text and list what it captures.

    Each match contributes its first capturing group, or the whole match
    when the pattern has no groups.
    """
    try:
        matches = collect_matches(body.pattern, body.text)
    except re.error as e:
        logger.warning(f"Invalid pattern {body.pattern!r}: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(
                detail=f"Invalid pattern: {e}",
                error_code="INVALID_PATTERN",
            ).model_dump(),
        )

    return PatternTestResponse(
        pattern=body.pattern,
        matches=matches,
        match_count=len(matches),
    )


@router.get("/formats", response_model=FormatListResponse)
def list_formats(
    factory: ComponentFactory = Depends(get_component_factory),
) -> FormatListResponse:
    """List the artifact formats every generation returns."""
    return FormatListResponse(
        formats=[
            FormatInfo(format=renderer.format_name, label=renderer.label)
            for renderer in factory.get_renderers()
        ]
    )
