"""Downstream notification sinks."""

from .lookout import LookoutNotifier

__all__ = ["LookoutNotifier"]
