"""
목차 콘솔/JSON 포맷팅 유틸리티
"""

import json
from typing import List

from ..core.toc import Toc
from ..models.toc import TocElement


def _format_element(element: TocElement, lines: List[str]) -> None:
    stack = [(element, 0)]
    while stack:
        node, indent = stack.pop()
        title = node.title or "(제목 없음)"
        link = f" -> {node.link}" if node.link else ""
        lines.append(f"{'  ' * indent}├─ 레벨 {node.level}: {title}{link}")
        stack.extend((child, indent + 1) for child in reversed(node.children))


def format_toc_tree(toc: Toc) -> str:
    """
    목차를 들여쓰기 트리로 포맷팅합니다.

    Args:
        toc: 포맷팅할 목차

    Returns:
        포맷팅된 트리 문자열
    """
    if not toc.elements:
        return "목차 항목 없음"

    lines = [f"📖 목차 ({len(toc)}개 항목, 깊이 {toc.depth()}):"]
    for element in toc.elements:
        _format_element(element, lines)
    return "\n".join(lines)


def format_toc_json(toc: Toc) -> str:
    """목차를 JSON 문자열로 변환합니다."""
    return json.dumps(toc.to_list(), ensure_ascii=False, indent=2)
