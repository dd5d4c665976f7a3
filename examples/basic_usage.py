#!/usr/bin/env python3
"""
epubtoc 패키지 기본 사용 예제

이 예제는 epubtoc를 Python 라이브러리로 사용하는 방법을 보여줍니다.
"""

from pathlib import Path

# epubtoc 패키지 import
from epubtoc import (
    Toc,
    TocElement,
    TocExtractor,
    Config,
    validate_config,
    render_ncx,
    format_toc_tree,
)


def main():
    """기본 사용 예제"""
    print("📚 epubtoc 패키지 기본 사용 예제")
    print("=" * 50)

    # 1. 설정 로드
    try:
        config = Config()
        validate_config(config)
        print("✅ 설정 로드 완료")
    except ValueError as e:
        print(f"❌ 설정 오류: {e}")
        return

    # 2. 직접 목차 구성
    toc = Toc()
    toc.add(TocElement("intro.xhtml", "Introduction"))
    toc.add(
        TocElement("chapter_1.xhtml", "Chapter 1")
        .child(TocElement("chapter_1.xhtml#section1", "1.1: Some section"))
        .child(TocElement("chapter_1.xhtml#section2", "1.2: Another section"))
    )
    # 레벨 2 항목은 직전 레벨 1 항목(Chapter 1)에 붙습니다
    toc.add(TocElement("chapter_1.xhtml#section3", "1.3: Yet another section").set_level(2))

    print("\n" + format_toc_tree(toc))
    print("\n📝 HTML 목록:")
    print(toc.render(config.toc_numbered))
    print("📝 toc.ncx:")
    print(render_ncx(toc, uid=config.ncx_uid, title="Example Book"))

    # 3. EPUB 파일에서 목차 추출 (파일이 있는 경우)
    epub_file = "book/example.epub"
    if Path(epub_file).exists():
        print(f"\n📖 EPUB 목차 추출: {epub_file}")
        extractor = TocExtractor()
        book_toc = extractor.extract_from_epub(epub_file)
        print(format_toc_tree(book_toc))
    else:
        print(f"\n⚠️  EPUB 파일을 찾을 수 없습니다: {epub_file}")


if __name__ == "__main__":
    main()
