"""핵심 모듈

공통으로 사용되는 설정, 모델, 오류, 경로 해석기를 제공합니다.
"""

from .config import Config, config
from .errors import FsError, FsErrorKind
from .log import setup_logging
from .models import (
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_POLICY,
    FileEntry,
    SearchResult,
    ToolResult,
    TraversalPolicy,
)
from .safe_path import SafePathResolver, resolve_project_root, resolve_safe_path

__all__ = [
    # config
    "Config",
    "config",
    # errors
    "FsError",
    "FsErrorKind",
    # log
    "setup_logging",
    # models
    "DEFAULT_EXCLUDED_DIRS",
    "DEFAULT_POLICY",
    "FileEntry",
    "SearchResult",
    "ToolResult",
    "TraversalPolicy",
    # safe_path
    "SafePathResolver",
    "resolve_project_root",
    "resolve_safe_path",
]
