"""
epubtoc - EPUB 목차 생성 패키지

레벨 기반으로 계층적 목차를 구성하고, 본문용 HTML 목록과
toc.ncx 내비게이션 맵으로 렌더링합니다.
"""

__version__ = "0.1.0"
__author__ = "Synopsis Team"
__email__ = "synopsis@example.com"

# Core classes and functions
from .core.toc import Toc
from .core.processor import TocExtractor
from .core.document import render_ncx, render_nav, render_contents_page
from .core.config import Config, validate_config

# Data models
from .models.toc import TocElement

# Utilities
from .utils.format import format_toc_tree, format_toc_json

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",
    # Core classes
    "Toc",
    "TocExtractor",
    "Config",
    # Data models
    "TocElement",
    # Document rendering
    "render_ncx",
    "render_nav",
    "render_contents_page",
    "validate_config",
    # Utilities
    "format_toc_tree",
    "format_toc_json",
]
