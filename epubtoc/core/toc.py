"""
계층적 목차(Toc) 구성 및 렌더링
레벨 기반으로 항목을 자동 중첩하고 HTML 목록 또는 toc.ncx navPoint로 출력합니다.
"""

import logging
from typing import List, Dict, Any, Iterator

from ..models.toc import TocElement, add_by_level, list_tag

# 로깅 설정
logger = logging.getLogger(__name__)


class Toc:
    """
    목차 클래스

    최상위 TocElement 목록을 보관합니다.

    Example:
        toc = Toc()
        toc.add(TocElement("intro.xhtml", "Introduction")).add(
            TocElement("chapter_1.xhtml", "Chapter 1")
        )
        # 레벨 2 항목은 직전 레벨 1 항목의 자식이 됩니다
        toc.add(TocElement("chapter_1.xhtml#s3", "1.3").set_level(2))
        html = toc.render(False)
    """

    def __init__(self):
        self.elements: List[TocElement] = []

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())

    def __repr__(self) -> str:
        return f"Toc(elements={self.elements!r})"

    def is_empty(self) -> bool:
        """
        목차가 비어 있는지 확인합니다.

        항목이 0개 *또는 1개*이면 비어 있는 것으로 봅니다.
        항목 하나짜리 목차는 표시할 가치가 없기 때문입니다.
        """
        return len(self.elements) <= 1

    def add(self, element: TocElement) -> "Toc":
        """
        레벨에 따라 항목을 삽입합니다.

        마지막 최상위 항목보다 레벨이 깊으면 그 아래로 (재귀적으로) 들어가고,
        아니면 최상위 항목으로 추가됩니다.

        Args:
            element: 추가할 항목

        Returns:
            self (체이닝용)
        """
        add_by_level(self.elements, element)
        logger.debug(f"TOC 항목 추가: {element.title} (레벨 {element.level})")
        return self

    def walk(self) -> Iterator[TocElement]:
        """전위 순회로 모든 항목을 반환합니다 (navPoint 번호 순서)."""
        for element in self.elements:
            yield from element.walk()

    def depth(self) -> int:
        if not self.elements:
            return 0
        return max(element.depth() for element in self.elements)

    def to_list(self) -> List[Dict[str, Any]]:
        return [element.to_dict() for element in self.elements]

    def render_epub(self) -> str:
        """toc.ncx의 navMap에 들어갈 navPoint 마크업을 생성합니다."""
        output = ""
        offset = 0
        for element in self.elements:
            offset, rendered = element.render_epub(offset)
            output += rendered

        logger.debug(f"navPoint {offset}개 렌더링 완료")
        return output

    def render(self, numbered: bool) -> str:
        """
        목차를 <ul> 또는 <ol> 목록으로 렌더링합니다.

        Args:
            numbered: True이면 <ol>, False이면 <ul>

        Returns:
            목록 마크업 문자열
        """
        tag = list_tag(numbered)
        output = "".join(element.render(numbered) for element in self.elements)
        return f"<{tag}>\n{output}\n</{tag}>\n"
