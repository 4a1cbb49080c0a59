"""Abstract base class for artifact renderers.

Renderers project a derived pattern into a fixed textual format such as a
JMeter extractor block or a Groovy script.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from regexgen.interfaces.deriver import DerivedPattern, GenerationRequest


@dataclass(frozen=True)
class RenderedArtifact:
    """A textual projection of a derived pattern.

    Attributes:
        format: Machine name of the format (e.g. "jmeter").
        label: Human-readable name shown in the UI.
        content: The rendered text.
    """

    format: str
    label: str
    content: str


class BaseArtifactRenderer(ABC):
    """Abstract base class for artifact renderers."""

    @abstractmethod
    def render(
        self,
        derived: DerivedPattern,
        request: GenerationRequest,
        annotation: str | None = None,
    ) -> RenderedArtifact:
        """Render a derived pattern.

        Args:
            derived: The pattern produced by a deriver.
            request: The request the pattern was derived from.
            annotation: Optional free text supplied by the caller.

        Returns:
            The rendered artifact.
        """
        ...

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the machine name of the rendered format."""
        ...

    @property
    @abstractmethod
    def label(self) -> str:
        """Return the human-readable format name."""
        ...
