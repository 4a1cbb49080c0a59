"""Context-window pattern deriver.

Builds a pattern from the literal text surrounding the first occurrence of
the target, with a non-greedy capture in place of the target itself.
"""

import logging

from regexgen.interfaces.deriver import (
    BasePatternDeriver,
    DerivedPattern,
    EmptyInputError,
    TargetNotFoundError,
)
from regexgen.strategies.derivers.matching import collect_matches, escape_regex

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_LIMIT = 20

CAPTURE = "(.+?)"


class ContextWindowDeriver(BasePatternDeriver):
    """Deriver that anchors the capture on bounded literal context.

    Up to ``context_limit`` characters before and after the target are
    escaped and placed around a non-greedy capture. When one side has no
    context, the matching input anchor (``^`` or ``$``) is used instead.

    Attributes:
        context_limit: Maximum characters of context on each side.
    """

    def __init__(self, context_limit: int = DEFAULT_CONTEXT_LIMIT) -> None:
        """Initialize the deriver.

        Args:
            context_limit: Maximum characters of context on each side.

        Raises:
            ValueError: If context_limit is not positive.
        """
        if context_limit < 1:
            raise ValueError(f"context_limit must be positive, got {context_limit}")
        self._context_limit = context_limit

    def derive(self, source: str, target: str) -> DerivedPattern:
        """Derive a pattern capturing target from its context in source.

        Args:
            source: The sample text.
            target: The substring to capture.

        Returns:
            The derived pattern and the values it captures from source.

        Raises:
            EmptyInputError: If source or target is empty.
            TargetNotFoundError: If target does not occur in source.
        """
        if not source or not target:
            raise EmptyInputError("Please provide both source string and target string")

        index = source.find(target)
        if index == -1:
            raise TargetNotFoundError("Target string not found in source string")

        end = index + len(target)
        before = escape_regex(source[max(0, index - self._context_limit):index])
        after = escape_regex(source[end:end + self._context_limit])

        if before and after:
            pattern = f"{before}{CAPTURE}{after}"
        elif before:
            pattern = f"{before}{CAPTURE}$"
        elif after:
            pattern = f"^{CAPTURE}{after}"
        else:
            pattern = f"({escape_regex(target)})"

        matches = tuple(collect_matches(pattern, source))

        logger.info(f"Derived pattern {pattern!r} with {len(matches)} match(es)")
        return DerivedPattern(pattern=pattern, matches=matches)

    @property
    def context_limit(self) -> int:
        """Return the maximum context length used on each side."""
        return self._context_limit


def derive(source: str, target: str, context_limit: int = DEFAULT_CONTEXT_LIMIT) -> DerivedPattern:
    """Derive a pattern with a one-off ContextWindowDeriver."""
    return ContextWindowDeriver(context_limit).derive(source, target)
