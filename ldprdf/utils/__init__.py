"""
Utilities Module - Helper functions for ldp-rdf.
"""

from .logging import setup_colored_logging

__all__ = [
    "setup_colored_logging",
]
