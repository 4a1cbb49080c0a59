"""Groovy extraction script renderer.

Produces a script for a JMeter JSR223 PostProcessor that applies the
derived pattern and stores the captured value as a JMeter variable.
"""

import logging

from regexgen.interfaces.deriver import DerivedPattern, GenerationRequest
from regexgen.interfaces.renderer import BaseArtifactRenderer, RenderedArtifact
from regexgen.strategies.renderers.jmeter import DEFAULT_VALUE, REFNAME

logger = logging.getLogger(__name__)

_SCRIPT_TEMPLATE = """\
// Groovy script for regex extraction
import java.util.regex.Pattern
import java.util.regex.Matcher

// Define the regex pattern
String pattern = "{pattern}"
String input = \"\"\"{source}\"\"\"

// Create pattern and matcher
Pattern regexPattern = Pattern.compile(pattern)
Matcher matcher = regexPattern.matcher(input)

// Extract the value
if (matcher.find()) {{
    String {refname} = matcher.group(1)
    log.info("Extracted value: " + {refname})

    // Set as JMeter variable
    vars.put("{refname}", {refname})

    // Custom processing based on prompt
    {custom_logic}
}} else {{
    log.error("Pattern not matched")
    vars.put("{refname}", "{default}")
}}"""


def groovy_escape(text: str) -> str:
    """Escape text for a double-quoted Groovy string.

    Backslashes are doubled, and quotes, dollar signs and line breaks are
    escaped so the string stays on one line, is not terminated early and is
    not interpolated as a GString.
    """
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def _custom_logic_comment(annotation: str | None) -> str:
    if not annotation or not annotation.strip():
        return "// Add any custom processing logic here"

    lines = annotation.strip().splitlines()
    comment = [f"// Custom logic: {lines[0]}"]
    comment.extend(f"// {line}" for line in lines[1:])
    comment.append("// Add your custom processing here")
    return "\n    ".join(comment)


class GroovyScriptRenderer(BaseArtifactRenderer):
    """Renderer for the Groovy JSR223 extraction script."""

    def render(
        self,
        derived: DerivedPattern,
        request: GenerationRequest,
        annotation: str | None = None,
    ) -> RenderedArtifact:
        """Render the Groovy script.

        Args:
            derived: The derived pattern.
            request: The originating request; its source is embedded as the
                script's sample input.
            annotation: Optional custom logic note, emitted as comments.

        Returns:
            The rendered script.
        """
        logger.debug(f"Rendering Groovy script for pattern {derived.pattern!r}")

        content = _SCRIPT_TEMPLATE.format(
            pattern=groovy_escape(derived.pattern),
            source=groovy_escape(request.source),
            refname=REFNAME,
            default=DEFAULT_VALUE,
            custom_logic=_custom_logic_comment(annotation),
        )
        return RenderedArtifact(format=self.format_name, label=self.label, content=content)

    @property
    def format_name(self) -> str:
        return "groovy"

    @property
    def label(self) -> str:
        return "Groovy Script"
