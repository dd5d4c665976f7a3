"""Utility functions for epubtoc package."""

from .format import format_toc_tree, format_toc_json

__all__ = ["format_toc_tree", "format_toc_json"]
