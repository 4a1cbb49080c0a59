from regexgen.strategies.renderers.groovy import GroovyScriptRenderer
from regexgen.strategies.renderers.jmeter import JMeterExtractorRenderer
from regexgen.strategies.renderers.match_report import MatchReportRenderer

__all__ = [
    "JMeterExtractorRenderer",
    "GroovyScriptRenderer",
    "MatchReportRenderer",
]
