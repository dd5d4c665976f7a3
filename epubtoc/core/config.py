"""
환경 설정 및 구성 관리
"""

import logging
import os
from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """애플리케이션 설정 클래스"""

    # 로깅 설정
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # 목차 렌더링 설정
    TOC_TITLE = os.getenv("TOC_TITLE", "Table of Contents")
    TOC_NUMBERED = _env_bool("TOC_NUMBERED", "false")
    NCX_UID = os.getenv("NCX_UID", "urn:uuid:epubtoc")

    # 헤딩 추출 설정
    HEADING_MAX_LEVEL = int(os.getenv("HEADING_MAX_LEVEL", "3"))

    @property
    def log_level(self):
        """로그 레벨"""
        return self.LOG_LEVEL

    @property
    def toc_title(self):
        """목차 문서 제목"""
        return self.TOC_TITLE

    @property
    def toc_numbered(self):
        """기본 목록 형식 (True: <ol>)"""
        return self.TOC_NUMBERED

    @property
    def ncx_uid(self):
        return self.NCX_UID

    @property
    def heading_max_level(self):
        """헤딩 추출에 사용할 가장 깊은 h 태그"""
        return self.HEADING_MAX_LEVEL

    @classmethod
    def validate(cls):
        """설정 유효성 검사"""
        errors = []

        if cls.LOG_LEVEL.upper() not in LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL은 {', '.join(LOG_LEVELS)} 중 하나여야 합니다."
            )

        if not cls.TOC_TITLE.strip():
            errors.append("TOC_TITLE이 설정되지 않았습니다.")

        if not cls.NCX_UID.strip():
            errors.append("NCX_UID가 설정되지 않았습니다.")

        if not (1 <= cls.HEADING_MAX_LEVEL <= 6):
            errors.append("HEADING_MAX_LEVEL은 1과 6 사이의 값이어야 합니다.")

        return errors

    @classmethod
    def logging_level(cls) -> int:
        return getattr(logging, cls.LOG_LEVEL.upper(), logging.INFO)

    @classmethod
    def print_config(cls):
        """현재 설정을 출력합니다."""
        print("현재 설정:")
        print(f"  로그 레벨: {cls.LOG_LEVEL}")
        print(f"  목차 제목: {cls.TOC_TITLE}")
        print(f"  번호 목록 사용: {'예' if cls.TOC_NUMBERED else '아니오'}")
        print(f"  NCX UID: {cls.NCX_UID}")
        print(f"  최대 헤딩 레벨: h{cls.HEADING_MAX_LEVEL}")


def validate_config(config: Config) -> None:
    """
    설정 유효성 검사 함수

    Args:
        config: Config 인스턴스

    Raises:
        ValueError: 설정이 유효하지 않은 경우
    """
    errors = config.validate()
    if errors:
        error_message = "설정 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)
