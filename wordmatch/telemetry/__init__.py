"""Telemetry scaffolds.

This package emits phase events for deterministic CLI auditing.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
