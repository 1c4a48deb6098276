"""Shared typed data models for namesplit."""

from .datatypes import SplitOptions, SplitResult

__all__ = ["SplitOptions", "SplitResult"]
