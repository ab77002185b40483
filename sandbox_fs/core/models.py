"""데이터 모델 정의"""

from dataclasses import dataclass

from pydantic import BaseModel, Field

# 목록/검색에서 절대 내려가지 않는 디렉토리 이름
DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset(
    {"node_modules", ".git", "target", "dist", ".nuxt", ".output"}
)

DEFAULT_MAX_FILE_SIZE = 1_000_000
DEFAULT_MAX_RESULTS = 100


@dataclass(frozen=True)
class TraversalPolicy:
    """디렉토리 순회 정책

    Attributes:
        excluded_dirs: 나열하지도, 내려가지도 않을 이름 집합
        max_depth: 재귀 하강 최대 깊이 (None이면 제한 없음)
        max_file_size: 검색 대상 파일 최대 크기 (바이트)
        max_results: 검색 결과 최대 개수
    """

    excluded_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    max_depth: int | None = None
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_results: int = DEFAULT_MAX_RESULTS


DEFAULT_POLICY = TraversalPolicy()


@dataclass
class FileEntry:
    """디렉토리 항목"""

    name: str
    path: str  # 프로젝트 루트 기준 상대 경로
    is_dir: bool
    size: int


@dataclass
class SearchResult:
    """검색 결과 한 줄"""

    file: str  # 프로젝트 루트 기준 상대 경로
    line: int  # 1부터 시작
    content: str


class ToolResult(BaseModel):
    """도구 실행 결과 (호출 UI에 그대로 전달)"""

    result: str = Field(description="도구 출력 또는 오류 메시지")
    is_error: bool = Field(default=False, description="실패 여부")
    error_kind: str | None = Field(
        default=None, description="FsErrorKind 값 (파일시스템 오류인 경우)"
    )
