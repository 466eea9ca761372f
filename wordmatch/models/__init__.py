"""Shared typed data models for wordmatch.

This package contains the boundary enum and scanner records used across text
and sentence modules to avoid circular imports.
"""

from .datatypes import Boundary, BoundaryScan, WordMarker

__all__ = [
    "Boundary",
    "BoundaryScan",
    "WordMarker",
]
