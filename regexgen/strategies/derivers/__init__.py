from regexgen.strategies.derivers.context_window import ContextWindowDeriver, derive
from regexgen.strategies.derivers.matching import collect_matches, escape_regex

__all__ = [
    "ContextWindowDeriver",
    "derive",
    "collect_matches",
    "escape_regex",
]
