"""JMeter Regular Expression Extractor renderer.

Produces the XML element JMeter stores in a .jmx test plan for a
Regular Expression Extractor post-processor.
"""

from xml.sax.saxutils import escape

from regexgen.interfaces.deriver import DerivedPattern, GenerationRequest
from regexgen.interfaces.renderer import BaseArtifactRenderer, RenderedArtifact

REFNAME = "extractedValue"
TEMPLATE = "$1$"
DEFAULT_VALUE = "NOT_FOUND"
MATCH_NUMBER = "1"

_EXTRACTOR_TEMPLATE = """\
<RegexExtractor guiclass="RegexExtractorGui" testclass="RegexExtractor" testname="Extract Value" enabled="true">
  <stringProp name="RegexExtractor.useHeaders">false</stringProp>
  <stringProp name="RegexExtractor.refname">{refname}</stringProp>
  <stringProp name="RegexExtractor.regex">{regex}</stringProp>
  <stringProp name="RegexExtractor.template">{template}</stringProp>
  <stringProp name="RegexExtractor.default">{default}</stringProp>
  <stringProp name="RegexExtractor.match_number">{match_number}</stringProp>
</RegexExtractor>"""


class JMeterExtractorRenderer(BaseArtifactRenderer):
    """Renderer for the JMeter extractor configuration block.

    The pattern is embedded verbatim unless ``escape_xml`` is set, in which
    case ``&``, ``<`` and ``>`` are replaced by XML entities so the block
    can be pasted into a .jmx file.
    """

    def __init__(self, escape_xml: bool = False) -> None:
        self._escape_xml = escape_xml

    def render(
        self,
        derived: DerivedPattern,
        request: GenerationRequest,
        annotation: str | None = None,
    ) -> RenderedArtifact:
        regex = escape(derived.pattern) if self._escape_xml else derived.pattern
        content = _EXTRACTOR_TEMPLATE.format(
            refname=REFNAME,
            regex=regex,
            template=TEMPLATE,
            default=DEFAULT_VALUE,
            match_number=MATCH_NUMBER,
        )
        return RenderedArtifact(format=self.format_name, label=self.label, content=content)

    @property
    def format_name(self) -> str:
        return "jmeter"

    @property
    def label(self) -> str:
        return "JMeter Config"
