"""Abstract base classes for pattern derivation and rendering strategies."""

from regexgen.interfaces.deriver import (
    BasePatternDeriver,
    DerivedPattern,
    EmptyInputError,
    GenerationRequest,
    PatternDerivationError,
    TargetNotFoundError,
)
from regexgen.interfaces.renderer import BaseArtifactRenderer, RenderedArtifact

__all__ = [
    "BasePatternDeriver",
    "BaseArtifactRenderer",
    "DerivedPattern",
    "GenerationRequest",
    "RenderedArtifact",
    "PatternDerivationError",
    "EmptyInputError",
    "TargetNotFoundError",
]
