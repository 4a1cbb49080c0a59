"""Plain-text report of a pattern's self-test matches."""

from regexgen.interfaces.deriver import DerivedPattern, GenerationRequest
from regexgen.interfaces.renderer import BaseArtifactRenderer, RenderedArtifact

NO_MATCHES = "✗ No matches found"


class MatchReportRenderer(BaseArtifactRenderer):
    """Renderer listing every captured value in order of occurrence."""

    def render(
        self,
        derived: DerivedPattern,
        request: GenerationRequest,
        annotation: str | None = None,
    ) -> RenderedArtifact:
        if not derived.matches:
            content = NO_MATCHES
        else:
            lines = [f"✓ Found {derived.match_count} match(es):"]
            lines.extend(
                f'Match {index}: "{match}"' for index, match in enumerate(derived.matches, start=1)
            )
            content = "\n".join(lines)

        return RenderedArtifact(format=self.format_name, label=self.label, content=content)

    @property
    def format_name(self) -> str:
        return "test"

    @property
    def label(self) -> str:
        return "Test Results"
