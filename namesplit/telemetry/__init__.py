"""Run logging for the splitting pipeline."""

from .logger import RunLogger

__all__ = ["RunLogger"]
