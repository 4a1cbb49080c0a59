"""Core configuration and factory components."""

from regexgen.core.config import Settings, get_settings
from regexgen.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
]
