"""Concrete strategy implementations."""

from regexgen.strategies.derivers import (
    ContextWindowDeriver,
)
from regexgen.strategies.renderers import (
    GroovyScriptRenderer,
    JMeterExtractorRenderer,
    MatchReportRenderer,
)

__all__ = [
    "ContextWindowDeriver",
    "JMeterExtractorRenderer",
    "GroovyScriptRenderer",
    "MatchReportRenderer",
]
