"""
Infrastructure - Logging setup

License: MIT
"""

from .logging_config import (
    setup_logging,
    setup_production_logging,
    setup_standard_logging,
    JSONFormatter,
)

__all__ = [
    "setup_logging",
    "setup_production_logging",
    "setup_standard_logging",
    "JSONFormatter",
]
