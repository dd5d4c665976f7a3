"""TOC (Table of Contents) related data models."""

import html
from typing import List, Dict, Any, Iterator, Tuple, Union
from dataclasses import dataclass, field


def escape_text(text: str) -> str:
    """마크업 텍스트용 이스케이프 (&, <, >)"""
    return html.escape(text, quote=False)


def list_tag(numbered: bool) -> str:
    return "ol" if numbered else "ul"


def add_by_level(siblings: List["TocElement"], element: "TocElement") -> None:
    """
    레벨에 따라 항목을 형제 목록 또는 마지막 형제의 자식으로 삽입합니다.

    마지막 형제보다 레벨이 깊으면 그 형제의 자식 목록으로 내려가고,
    그렇지 않으면 현재 목록 끝에 그대로 추가합니다. 마지막 형제만 검사하므로
    레벨 순서가 어긋난 항목도 오류 없이 형제로 들어갑니다.

    Args:
        siblings: 삽입 대상 형제 목록 (Toc.elements 또는 TocElement.children)
        element: 삽입할 항목
    """
    while siblings and element.level > siblings[-1].level:
        siblings = siblings[-1].children
    siblings.append(element)


@dataclass(eq=False, repr=False)
class TocElement:
    """
    TOC 항목을 나타내는 데이터 클래스

    level은 0: 파트, 1: 챕터, 2: 섹션 ... 순으로 깊어집니다.
    트리 순회는 모두 명시적 스택을 사용하므로 중첩 깊이에 제한이 없습니다.

    Example:
        TocElement("chapter_1.xhtml", "Chapter 1").child(
            TocElement("chapter_1.xhtml#1", "Chapter 1, section 1")
        )
    """

    link: str
    title: str
    level: int = 1
    children: List["TocElement"] = field(default_factory=list)

    def set_level(self, level: int) -> "TocElement":
        """레벨을 지정하고 자기 자신을 반환합니다."""
        self.level = level
        return self

    def __repr__(self) -> str:
        return (
            f"TocElement(link={self.link!r}, title={self.title!r}, "
            f"level={self.level}, children={len(self.children)})"
        )

    def _level_up(self, level: int) -> None:
        stack = [(self, level)]
        while stack:
            node, new_level = stack.pop()
            node.level = new_level
            for child in node.children:
                # 자식 레벨은 항상 (새) 부모 레벨보다 커야 함
                if child.level <= node.level:
                    stack.append((child, new_level + 1))

    def child(self, element: "TocElement") -> "TocElement":
        """
        자식 항목을 추가합니다.

        자식의 레벨이 부모 이하이면 부모 레벨 + 1로 조정하고, 그 하위 항목들도
        깊이가 계속 증가하도록 조정합니다. 따라서 이 메서드로 추가하는
        항목에는 레벨을 직접 지정할 필요가 없습니다.

        Args:
            element: 추가할 자식 항목 (트리로 이동되며 레벨이 바뀔 수 있음)

        Returns:
            self (체이닝용)
        """
        if element.level <= self.level:
            element._level_up(self.level + 1)
        self.children.append(element)
        return self

    def add(self, element: "TocElement") -> None:
        """레벨에 따라 자신 또는 마지막 자식 아래에 항목을 삽입합니다."""
        add_by_level(self.children, element)

    def walk(self) -> Iterator["TocElement"]:
        """전위 순회로 자신과 모든 하위 항목을 반환합니다."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def depth(self) -> int:
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            stack.extend((child, depth + 1) for child in node.children)
        return deepest

    def _fields(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "level": self.level,
            "link": self.link,
            "children": [],
        }

    def to_dict(self) -> Dict[str, Any]:
        root = self._fields()
        stack = [(self, root)]
        while stack:
            node, data = stack.pop()
            for child in node.children:
                child_data = child._fields()
                data["children"].append(child_data)
                stack.append((child, child_data))
        return root

    def render_epub(self, offset: int) -> Tuple[int, str]:
        """
        toc.ncx 형식의 navPoint로 렌더링합니다.

        Args:
            offset: 직전까지 부여된 마지막 navPoint 번호

        Returns:
            (이 하위 트리까지 부여된 마지막 번호, navPoint 마크업)
        """
        parts: List[str] = []
        # 스택에는 아직 방문하지 않은 항목 또는 닫는 태그 문자열이 들어감
        stack: List[Union["TocElement", str]] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue

            offset += 1
            title = escape_text(item.title).strip()
            parts.append(
                f'\n<navPoint id="navPoint-{offset}">\n'
                f"  <navLabel>\n"
                f"   <text>{title}</text>\n"
                f"  </navLabel>\n"
                f'  <content src="{item.link}" />\n'
            )
            stack.append("\n</navPoint>")
            stack.extend(reversed(item.children))

        return offset, "".join(parts)

    def render(self, numbered: bool) -> str:
        """
        목록 항목(<li>)으로 렌더링합니다.

        제목이 비어 있으면 빈 문자열을 반환하므로 하위 항목까지 모두 출력에서
        빠집니다. 기존 출력과의 호환을 위해 유지하는 동작입니다.
        """
        tag = list_tag(numbered)
        parts: List[str] = []
        stack: List[Union["TocElement", str]] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            if not item.title:
                continue

            parts.append(f'<li><a href="{item.link}">{escape_text(item.title)}</a>')
            if item.children:
                parts.append(f"\n<{tag}>")
                stack.append(f"\n</{tag}>\n</li>\n")
                stack.extend(reversed(item.children))
            else:
                parts.append("</li>\n")

        return "".join(parts)
