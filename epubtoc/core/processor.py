"""
목차 추출 모듈
기존 EPUB 파일의 TOC 또는 XHTML 챕터의 헤딩에서 계층적 Toc를 구성합니다.
"""

import logging
import re
from typing import List, Optional, Iterable
from pathlib import Path

from ebooklib import epub
from bs4 import BeautifulSoup
from tqdm import tqdm

from ..models.toc import TocElement
from .config import Config
from .toc import Toc

# 로깅 설정
logger = logging.getLogger(__name__)


class TocExtractor:
    """EPUB/XHTML에서 목차를 추출하는 클래스"""

    def __init__(
        self, heading_max_level: Optional[int] = None, base_level: int = 1
    ):
        """
        목차 추출기를 초기화합니다.

        Args:
            heading_max_level: 헤딩 추출에 사용할 가장 깊은 h 태그 (기본값: 설정값)
            base_level: EPUB TOC 최상위 항목의 레벨
        """
        self.heading_max_level = heading_max_level or Config.HEADING_MAX_LEVEL
        self.base_level = base_level
        self.heading_tags = [f"h{n}" for n in range(1, self.heading_max_level + 1)]

        logger.info(
            f"목차 추출기 초기화: 최대 헤딩=h{self.heading_max_level}, 기본 레벨={base_level}"
        )

    def extract_from_epub(self, epub_file_path: str) -> Toc:
        """
        EPUB 파일의 TOC를 Toc로 변환합니다.

        Args:
            epub_file_path: EPUB 파일 경로

        Returns:
            추출된 Toc

        Raises:
            FileNotFoundError: 파일이 없는 경우
        """
        logger.info(f"EPUB 파일에서 TOC를 추출하는 중: {epub_file_path}")

        if not Path(epub_file_path).exists():
            raise FileNotFoundError(f"EPUB 파일을 찾을 수 없습니다: {epub_file_path}")

        try:
            book = epub.read_epub(epub_file_path)
        except Exception as e:
            logger.error(f"EPUB 파일 읽기 중 오류 발생: {e}")
            raise

        toc = Toc()
        for toc_item in book.toc:
            element = self._convert_toc_item(toc_item)
            if element is not None:
                toc.add(element)

        logger.info(f"총 {len(toc)}개의 TOC 항목을 추출했습니다.")
        return toc

    def _convert_toc_item(self, item) -> Optional[TocElement]:
        """
        ebooklib TOC 항목을 재귀적으로 TocElement로 변환합니다.

        (Section, [NavPoint, ...]) 형태의 하위 항목은 child()로 붙이므로
        레벨이 구조에 맞게 자동으로 정해집니다.
        """
        if isinstance(item, (tuple, list)) and len(item) == 2:
            section, nav_points = item
            element = self._convert_toc_item(section)
            if element is None:
                element = TocElement("", str(section))
            for nav_point in nav_points:
                child = self._convert_toc_item(nav_point)
                if child is not None:
                    element.child(child)
            return element

        if isinstance(item, epub.EpubHtml):
            return TocElement(item.file_name, (item.title or "").strip()).set_level(
                self.base_level
            )

        if hasattr(item, "title"):
            # Link 또는 Section 객체
            href = getattr(item, "href", None) or ""
            title = (item.title or "").strip()
            logger.debug(f"TOC 항목 변환: {title} -> {href}")
            return TocElement(href, title).set_level(self.base_level)

        logger.warning(f"알 수 없는 TOC 항목을 건너뜁니다: {item!r}")
        return None

    def extract_from_html(
        self, html_content: str, file_name: str, toc: Optional[Toc] = None
    ) -> Toc:
        """
        XHTML 문서의 헤딩(h1..hN)으로 목차를 구성합니다.

        Args:
            html_content: XHTML 문자열
            file_name: 링크에 사용할 파일 이름
            toc: 이어서 채울 Toc (없으면 새로 생성)

        Returns:
            헤딩이 추가된 Toc
        """
        toc = toc if toc is not None else Toc()
        soup = BeautifulSoup(html_content, "html.parser")

        count = 0
        for heading in soup.find_all(self.heading_tags):
            title = self._clean_text(heading.get_text())
            level = int(heading.name[1:])
            anchor = self._find_anchor(heading)
            link = f"{file_name}#{anchor}" if anchor else file_name

            toc.add(TocElement(link, title).set_level(level))
            count += 1

        logger.debug(f"{file_name}: 헤딩 {count}개 추출")
        return toc

    def extract_from_html_files(self, file_paths: Iterable[str]) -> Toc:
        """
        여러 챕터 파일의 헤딩을 순서대로 하나의 목차로 합칩니다.

        Args:
            file_paths: XHTML 파일 경로들 (문서 순서)

        Returns:
            전체 Toc
        """
        toc = Toc()
        paths: List[Path] = [Path(p) for p in file_paths]

        for path in tqdm(paths, desc="헤딩 추출"):
            try:
                html_content = path.read_text(encoding="utf-8", errors="ignore")
            except OSError as e:
                logger.error(f"파일 읽기 중 오류 발생: {path}: {e}")
                raise
            self.extract_from_html(html_content, path.name, toc)

        logger.info(f"{len(paths)}개 파일에서 {len(toc)}개의 목차 항목을 추출했습니다.")
        return toc

    @staticmethod
    def _find_anchor(heading) -> Optional[str]:
        if heading.get("id"):
            return heading["id"]
        inner = heading.find(id=True)
        if inner is not None:
            return inner["id"]
        return None

    @staticmethod
    def _clean_text(text: str) -> str:
        return re.sub(r"\s+", " ", text).strip()
