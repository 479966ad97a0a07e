"""
Genetic Optimizer - Source Package

This package contains the binary-encoded genetic optimizer together with the
shared settings and observability setup it runs with.
"""

__version__ = "1.0.0"

# Package-level imports for convenience
from src.core.config import settings

__all__ = [
    "settings",
    "__version__"
]
