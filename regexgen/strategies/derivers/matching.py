"""Regex helpers shared by derivers and the pattern test endpoint."""

import re

# Only these are escaped. re.escape() also escapes "&", "-", "=" and
# whitespace, which would change the pattern text handed to JMeter.
_METACHARACTERS = re.compile(r"[.*+?^${}()|\[\]\\]")


def escape_regex(text: str) -> str:
    """Backslash-escape regex metacharacters so text is matched literally."""
    return _METACHARACTERS.sub(r"\\\g<0>", text)


def collect_matches(pattern: str | re.Pattern[str], text: str) -> list[str]:
    """Run a pattern globally over text and collect one value per match.

    The first capturing group is used when the pattern has one and it
    captured something; otherwise the whole match is used.

    Raises:
        re.error: If pattern is not a valid regular expression.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    matches = []
    for match in compiled.finditer(text):
        value = match.group(1) if compiled.groups else None
        matches.append(value or match.group(0))
    return matches
