"""API routes package."""

from regexgen.api.regex import router as regex_router

__all__ = [
    "regex_router",
]
