#!/usr/bin/env python3
"""
EPUB 목차 생성 통합 실행 스크립트
"""

import os
import sys
import argparse
import logging
from pathlib import Path

from epubtoc import (
    Config,
    Toc,
    TocExtractor,
    validate_config,
    render_ncx,
    render_nav,
    format_toc_tree,
    format_toc_json,
)

# 로깅 설정
logging.basicConfig(
    level=Config.logging_level(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["html", "ncx", "nav", "tree", "json"]


def render_output(toc: Toc, args, config: Config) -> str:
    """선택한 형식으로 목차를 렌더링합니다."""
    numbered = args.numbered or config.toc_numbered
    title = args.title or config.toc_title

    if args.format == "ncx":
        return render_ncx(toc, uid=args.uid or config.ncx_uid, title=title)
    elif args.format == "nav":
        return render_nav(toc, title=title)
    elif args.format == "tree":
        return format_toc_tree(toc) + "\n"
    elif args.format == "json":
        return format_toc_json(toc) + "\n"
    return toc.render(numbered)


def write_output(output: str, output_path) -> None:
    if output_path:
        Path(output_path).write_text(output, encoding="utf-8")
        print(f"✅ 목차를 저장했습니다: {output_path}")
    else:
        sys.stdout.write(output)


def extract_command(args):
    """EPUB 목차 추출 명령"""
    try:
        if not os.path.exists(args.epub_file):
            print(f"❌ EPUB 파일을 찾을 수 없습니다: {args.epub_file}")
            return 1

        config = Config()
        validate_config(config)

        extractor = TocExtractor(heading_max_level=config.heading_max_level)
        toc = extractor.extract_from_epub(args.epub_file)

        if toc.is_empty():
            logger.warning("목차 항목이 하나 이하입니다.")

        write_output(render_output(toc, args, config), args.output)

    except Exception as e:
        logger.error(f"목차 추출 중 오류 발생: {e}")
        return 1
    return 0


def headings_command(args):
    """XHTML 헤딩 기반 목차 생성 명령"""
    try:
        missing = [f for f in args.files if not os.path.exists(f)]
        if missing:
            print(f"❌ 파일을 찾을 수 없습니다: {', '.join(missing)}")
            return 1

        config = Config()
        validate_config(config)

        extractor = TocExtractor(
            heading_max_level=args.max_level or config.heading_max_level
        )
        toc = extractor.extract_from_html_files(args.files)

        write_output(render_output(toc, args, config), args.output)

    except Exception as e:
        logger.error(f"헤딩 목차 생성 중 오류 발생: {e}")
        return 1
    return 0


def config_command(args):
    """설정 출력 명령"""
    Config.print_config()
    errors = Config.validate()
    if errors:
        for error in errors:
            print(f"⚠️ {error}")
        return 1
    return 0


def add_render_arguments(parser):
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="html",
        help="출력 형식 (기본값: html)",
    )
    parser.add_argument(
        "--numbered", action="store_true", help="<ol> 번호 목록으로 렌더링"
    )
    parser.add_argument("--title", type=str, help="문서 제목 (ncx/nav 형식)")
    parser.add_argument("--uid", type=str, help="dtb:uid 값 (ncx 형식)")
    parser.add_argument("--output", "-o", type=str, help="출력 파일 경로")


def create_parser():
    """명령행 인수 파서 생성"""
    parser = argparse.ArgumentParser(
        description="EPUB 목차 생성기",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예제:
  # EPUB 목차를 HTML 목록으로 출력
  python main.py extract book.epub

  # toc.ncx 문서 생성
  python main.py extract book.epub --format ncx -o toc.ncx

  # 챕터 파일의 헤딩으로 번호 목차 생성
  python main.py headings ch1.xhtml ch2.xhtml --numbered
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="사용 가능한 명령어")

    # extract 명령
    extract_parser = subparsers.add_parser("extract", help="EPUB 목차 추출")
    extract_parser.add_argument("epub_file", help="처리할 EPUB 파일 경로")
    add_render_arguments(extract_parser)

    # headings 명령
    headings_parser = subparsers.add_parser(
        "headings", help="XHTML 헤딩으로 목차 생성"
    )
    headings_parser.add_argument("files", nargs="+", help="XHTML 파일 경로 (문서 순서)")
    headings_parser.add_argument(
        "--max-level", type=int, help="사용할 가장 깊은 헤딩 레벨 (1-6)"
    )
    add_render_arguments(headings_parser)

    # config 명령
    subparsers.add_parser("config", help="현재 설정 출력")

    return parser


def main():
    """메인 함수"""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    # 명령 실행
    if args.command == "extract":
        return extract_command(args)
    elif args.command == "headings":
        return headings_command(args)
    elif args.command == "config":
        return config_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
