"""설정 관리 모듈"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .models import (
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_MAX_RESULTS,
    TraversalPolicy,
)

# .env 파일 로드
load_dotenv()


def _optional_int(value: str | None) -> int | None:
    """빈 값은 None, 그 외에는 정수로 변환"""
    if value is None or not value.strip():
        return None
    return int(value)


class Config:
    """환경 변수 기반 설정"""

    def __init__(self) -> None:
        # 비어있으면 현재 작업 디렉토리를 프로젝트 루트로 사용
        self.PROJECT_ROOT = os.getenv("SANDBOX_FS_PROJECT_ROOT", "")

        self.LOG_DIR = Path(os.getenv("SANDBOX_FS_LOG_DIR", "logs"))
        self.LOG_LEVEL = os.getenv("SANDBOX_FS_LOG_LEVEL", "INFO")

        # 검색/순회 제한
        self.MAX_RESULTS = int(
            os.getenv("SANDBOX_FS_MAX_RESULTS", str(DEFAULT_MAX_RESULTS))
        )
        self.MAX_FILE_SIZE = int(
            os.getenv("SANDBOX_FS_MAX_FILE_SIZE", str(DEFAULT_MAX_FILE_SIZE))
        )
        self.MAX_DEPTH = _optional_int(os.getenv("SANDBOX_FS_MAX_DEPTH"))

    def traversal_policy(self) -> TraversalPolicy:
        """설정값으로 순회 정책 생성"""
        return TraversalPolicy(
            excluded_dirs=DEFAULT_EXCLUDED_DIRS,
            max_depth=self.MAX_DEPTH,
            max_file_size=self.MAX_FILE_SIZE,
            max_results=self.MAX_RESULTS,
        )


config = Config()
