"""
목차 문서 렌더링
Toc 조각을 toc.ncx, EPUB 3 nav.xhtml, 본문용 목차 페이지 문서로 감쌉니다.
"""

import html
import logging

from .toc import Toc
from ..models.toc import escape_text

# 로깅 설정
logger = logging.getLogger(__name__)

NCX_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/" version="2005-1">
  <head>
    <meta name="dtb:uid" content="{uid}"/>
    <meta name="dtb:depth" content="{depth}"/>
    <meta name="dtb:totalPageCount" content="0"/>
    <meta name="dtb:maxPageNumber" content="0"/>
  </head>
  <docTitle>
    <text>{title}</text>
  </docTitle>
  <navMap>{nav_points}
  </navMap>
</ncx>
"""

NAV_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE html>
<html xmlns="http://www.w3.org/1999/xhtml" xmlns:epub="http://www.idpf.org/2007/ops">
<head>
<meta charset="UTF-8"/>
<title>{title}</title>
</head>
<body>
<nav epub:type="toc" id="toc">
<h1>{title}</h1>
{toc}</nav>
</body>
</html>
"""

CONTENTS_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE html>
<html xmlns="http://www.w3.org/1999/xhtml">
<head>
<meta charset="UTF-8"/>
<title>{title}</title>
</head>
<body>
<h1>{title}</h1>
{toc}</body>
</html>
"""


def render_ncx(toc: Toc, uid: str, title: str) -> str:
    """
    완전한 toc.ncx 문서를 생성합니다.

    Args:
        toc: 렌더링할 목차
        uid: dtb:uid 값 (OPF의 고유 식별자와 같아야 함)
        title: 책 제목

    Returns:
        toc.ncx 문서 문자열
    """
    depth = max(1, toc.depth())
    logger.info(f"toc.ncx 생성: 항목 {len(toc)}개, 깊이 {depth}")
    return NCX_TEMPLATE.format(
        uid=html.escape(uid, quote=True),
        depth=depth,
        title=escape_text(title),
        nav_points=toc.render_epub(),
    )


def render_nav(toc: Toc, title: str) -> str:
    """
    EPUB 3 내비게이션 문서(nav.xhtml)를 생성합니다.

    epub:type="toc" nav는 <ol>만 허용하므로 항상 번호 목록으로 렌더링합니다.
    """
    logger.info(f"nav.xhtml 생성: 항목 {len(toc)}개")
    return NAV_TEMPLATE.format(title=escape_text(title), toc=toc.render(True))


def render_contents_page(toc: Toc, title: str, numbered: bool = False) -> str:
    """
    본문에 삽입할 목차 페이지(XHTML)를 생성합니다.

    항목이 하나 이하인 목차도 그대로 렌더링하므로, 페이지를 넣을지 여부는
    호출하는 쪽에서 toc.is_empty()로 판단합니다.
    """
    if toc.is_empty():
        logger.warning("목차 항목이 하나 이하입니다. 목차 페이지가 거의 비어 있습니다.")
    return CONTENTS_TEMPLATE.format(
        title=escape_text(title), toc=toc.render(numbered)
    )
