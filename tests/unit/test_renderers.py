"""Unit tests for artifact renderers."""

import pytest

from regexgen.interfaces.deriver import DerivedPattern, GenerationRequest
from regexgen.strategies.derivers import ContextWindowDeriver
from regexgen.strategies.renderers import (
    GroovyScriptRenderer,
    JMeterExtractorRenderer,
    MatchReportRenderer,
)
from regexgen.strategies.renderers.groovy import groovy_escape
from regexgen.strategies.renderers.match_report import NO_MATCHES


@pytest.fixture
def request_():
    """Create the request the sample pattern was derived from."""
    return GenerationRequest(source="token=abc123&type=x", target="abc123")


@pytest.fixture
def derived():
    """Create a sample derived pattern."""
    return DerivedPattern(pattern="token=(.+?)&type=x", matches=("abc123",))


# =============================================================================
# JMeter Renderer Tests
# =============================================================================


class TestJMeterExtractorRenderer:
    """Test suite for JMeterExtractorRenderer."""

    def test_format_metadata(self):
        """Test the format name and label."""
        renderer = JMeterExtractorRenderer()

        assert renderer.format_name == "jmeter"
        assert renderer.label == "JMeter Config"

    def test_fixed_properties(self, derived, request_):
        """Test that every fixed extractor property is present."""
        content = JMeterExtractorRenderer().render(derived, request_).content

        assert content.startswith('<RegexExtractor guiclass="RegexExtractorGui"')
        assert '<stringProp name="RegexExtractor.useHeaders">false</stringProp>' in content
        assert '<stringProp name="RegexExtractor.refname">extractedValue</stringProp>' in content
        assert '<stringProp name="RegexExtractor.template">$1$</stringProp>' in content
        assert '<stringProp name="RegexExtractor.default">NOT_FOUND</stringProp>' in content
        assert '<stringProp name="RegexExtractor.match_number">1</stringProp>' in content
        assert content.endswith("</RegexExtractor>")

    def test_pattern_embedded_verbatim(self, derived, request_):
        """Test that the pattern is embedded unchanged by default."""
        content = JMeterExtractorRenderer().render(derived, request_).content

        assert '<stringProp name="RegexExtractor.regex">token=(.+?)&type=x</stringProp>' in content

    def test_pattern_xml_escaped_when_enabled(self, derived, request_):
        """Test that escape_xml replaces XML special characters."""
        content = JMeterExtractorRenderer(escape_xml=True).render(derived, request_).content

        assert "token=(.+?)&amp;type=x" in content

    def test_annotation_ignored(self, derived, request_):
        """Test that an annotation does not change the extractor block."""
        renderer = JMeterExtractorRenderer()

        assert renderer.render(derived, request_, "note") == renderer.render(derived, request_)


# =============================================================================
# Groovy Renderer Tests
# =============================================================================


class TestGroovyScriptRenderer:
    """Test suite for GroovyScriptRenderer."""

    @pytest.fixture
    def renderer(self):
        """Create a Groovy renderer instance."""
        return GroovyScriptRenderer()

    def test_format_metadata(self, renderer):
        """Test the format name and label."""
        assert renderer.format_name == "groovy"
        assert renderer.label == "Groovy Script"

    def test_embeds_pattern_and_source(self, renderer, derived, request_):
        """Test that the pattern and the source are declared as strings."""
        content = renderer.render(derived, request_).content

        assert 'String pattern = "token=(.+?)&type=x"' in content
        assert 'String input = """token=abc123&type=x"""' in content
        assert "Pattern regexPattern = Pattern.compile(pattern)" in content

    def test_sets_variable_or_sentinel(self, renderer, derived, request_):
        """Test that extractedValue is set from group 1 or to NOT_FOUND."""
        content = renderer.render(derived, request_).content

        assert "String extractedValue = matcher.group(1)" in content
        assert 'vars.put("extractedValue", extractedValue)' in content
        assert 'vars.put("extractedValue", "NOT_FOUND")' in content

    def test_backslashes_doubled_in_pattern(self, renderer):
        """Test that escaped metacharacters survive the Groovy string literal."""
        derived = DerivedPattern(pattern=r"a\.b(.+?)c", matches=("x",))
        request = GenerationRequest(source="a.bxc", target="x")

        content = renderer.render(derived, request).content

        assert r'String pattern = "a\\.b(.+?)c"' in content

    def test_multiline_source_keeps_pattern_on_one_line(self, renderer):
        """Test that line breaks in the context are escaped in both literals."""
        source = '{\n  "id": "VALUE",\n  "x": 1\n}'
        request = GenerationRequest(source=source, target="VALUE")
        derived = ContextWindowDeriver().derive(source, "VALUE")

        content = renderer.render(derived, request).content

        pattern_line = next(
            line for line in content.splitlines() if line.startswith("String pattern = ")
        )
        assert pattern_line.endswith('"')
        assert r"\n" in pattern_line
        assert 'String input = """{\\n  \\"id\\": \\"VALUE\\",' in content

    def test_placeholder_comment_without_annotation(self, renderer, derived, request_):
        """Test the default custom-logic placeholder."""
        content = renderer.render(derived, request_).content

        assert "// Add any custom processing logic here" in content
        assert "// Custom logic:" not in content

    def test_annotation_inserted_as_comment(self, renderer, derived, request_):
        """Test that a caller annotation becomes a code comment."""
        content = renderer.render(derived, request_, "Convert to uppercase").content

        assert "// Custom logic: Convert to uppercase" in content
        assert "// Add your custom processing here" in content
        assert "// Add any custom processing logic here" not in content

    def test_multiline_annotation_stays_commented(self, renderer, derived, request_):
        """Test that every annotation line is commented out."""
        content = renderer.render(derived, request_, "trim\nuppercase").content

        assert "    // Custom logic: trim\n    // uppercase\n" in content

    def test_blank_annotation_uses_placeholder(self, renderer, derived, request_):
        """Test that a whitespace-only annotation is treated as absent."""
        content = renderer.render(derived, request_, "   ").content

        assert "// Add any custom processing logic here" in content


class TestGroovyEscape:
    """Test suite for groovy_escape."""

    def test_doubles_backslashes(self):
        assert groovy_escape(r"\d+\.") == r"\\d+\\."

    def test_escapes_quotes(self):
        assert groovy_escape('{"id":"(.+?)"}') == r'{\"id\":\"(.+?)\"}'

    def test_escapes_dollar_signs(self):
        """Test that $ cannot start GString interpolation."""
        assert groovy_escape("a(.+?)$") == r"a(.+?)\$"
        assert groovy_escape(r"\$5") == r"\\\$5"

    def test_escapes_line_breaks(self):
        """Test that line breaks cannot end a single-line string."""
        assert groovy_escape("a\r\nb") == r"a\r\nb"


# =============================================================================
# Match Report Renderer Tests
# =============================================================================


class TestMatchReportRenderer:
    """Test suite for MatchReportRenderer."""

    @pytest.fixture
    def renderer(self):
        """Create a match report renderer instance."""
        return MatchReportRenderer()

    def test_format_metadata(self, renderer):
        """Test the format name and label."""
        assert renderer.format_name == "test"
        assert renderer.label == "Test Results"

    def test_lists_matches_in_order(self, renderer, request_):
        """Test that matches are numbered from one."""
        derived = DerivedPattern(pattern="<b>(.+?)</b", matches=("x", "y"))

        content = renderer.render(derived, request_).content

        assert content == '✓ Found 2 match(es):\nMatch 1: "x"\nMatch 2: "y"'

    def test_no_matches(self, renderer, request_):
        """Test the explicit no-matches indicator."""
        derived = DerivedPattern(pattern="z(.+?)z")

        assert renderer.render(derived, request_).content == NO_MATCHES
