"""Core functionality for epubtoc package."""

from .toc import Toc
from .document import render_ncx, render_nav, render_contents_page
from .processor import TocExtractor
from .config import Config, validate_config

__all__ = [
    "Toc",
    "TocExtractor",
    "Config",
    "render_ncx",
    "render_nav",
    "render_contents_page",
    "validate_config",
]
