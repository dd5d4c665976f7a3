"""Data models for epubtoc package."""

from .toc import TocElement, add_by_level

__all__ = ["TocElement", "add_by_level"]
