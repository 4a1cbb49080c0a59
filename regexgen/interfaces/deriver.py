"""Abstract base class for pattern derivation strategies.

A deriver takes a sample text and a target substring and produces a
regular expression whose single capturing group isolates the target.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationRequest:
    """Input to a pattern derivation.

    Attributes:
        source: The full sample text (e.g. a server response body).
        target: The substring to extract from the source.
        context_limit: Maximum characters of context taken on each side.
    """

    source: str
    target: str
    context_limit: int = 20


@dataclass(frozen=True)
class DerivedPattern:
    """A generated pattern and its self-test results.

    Attributes:
        pattern: The regular expression text.
        matches: Captured values found when running the pattern over the source.
    """

    pattern: str
    matches: tuple[str, ...] = ()

    @property
    def match_count(self) -> int:
        """Return the number of self-test matches."""
        return len(self.matches)


class PatternDerivationError(Exception):
    """Base exception for rejected derivations."""

    error_code = "DERIVATION_FAILED"
    title = "Generation Failed"


class EmptyInputError(PatternDerivationError):
    """Raised when the source or the target is empty."""

    error_code = "EMPTY_INPUT"
    title = "Missing Input"


class TargetNotFoundError(PatternDerivationError):
    """Raised when the target does not occur in the source."""

    error_code = "TARGET_NOT_FOUND"
    title = "Target Not Found"


class BasePatternDeriver(ABC):
    """Abstract base class for pattern derivation strategies.

    Example:
        ```python
        deriver = ContextWindowDeriver(context_limit=20)
        result = deriver.derive("token=abc123&type=x", "abc123")
        result.pattern  # 'token=(.+?)&type=x'
        ```
    """

    @abstractmethod
    def derive(self, source: str, target: str) -> DerivedPattern:
        """Derive a pattern that captures target from its context in source.

        Args:
            source: The sample text.
            target: The substring to capture.

        Returns:
            A DerivedPattern with the pattern and its self-test matches.

        Raises:
            EmptyInputError: If source or target is empty.
            TargetNotFoundError: If target does not occur in source.
        """
        ...

    @property
    @abstractmethod
    def context_limit(self) -> int:
        """Return the maximum context length used on each side."""
        ...
