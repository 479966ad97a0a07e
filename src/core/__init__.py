"""
Core functionality shared across the package: settings and observability.
"""

from src.core.config import settings, Settings
from src.core.observability import configure_observability

__all__ = [
    "settings",
    "Settings",
    "configure_observability",
]
