"""Utility functions for fourierdraw.

This module provides utility functions including:

- Logging setup and configuration
- Pipeline statistics collection
"""

from fourierdraw.utils.logging import (
    PipelineLogger,
    PipelineStats,
    configure_logging,
)

__all__ = [
    "PipelineLogger",
    "PipelineStats",
    "configure_logging",
]
