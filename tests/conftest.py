"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from epubtoc import Toc, TocElement


@pytest.fixture
def nested_toc():
    """Toc with two chapters, each holding one section."""
    toc = Toc()
    toc.add(TocElement("#1", "1"))
    toc.add(TocElement("#1.1", "1.1").set_level(2))
    toc.add(TocElement("#2", "2"))
    toc.add(TocElement("#2.1", "2.1").set_level(2))
    return toc


@pytest.fixture
def chapter_html():
    """Provide a sample XHTML chapter with headings."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml">
<body>
  <h1 id="ch1">Chapter
      One</h1>
  <p>Intro text.</p>
  <h2 id="s1">Section &amp; More</h2>
  <p>Body.</p>
  <h2><a id="s2"></a>Second section</h2>
  <h3>No anchor</h3>
  <h4 id="deep">Too deep</h4>
</body>
</html>
"""
