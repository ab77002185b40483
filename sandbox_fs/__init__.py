"""Sandbox FS

프로젝트 루트 밖으로 벗어나지 않는 파일 읽기/쓰기/편집/목록/검색 계층.
"""

from .core.errors import FsError, FsErrorKind
from .core.models import (
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_POLICY,
    FileEntry,
    SearchResult,
    TraversalPolicy,
)
from .operations import (
    edit_file,
    get_project_root,
    list_directory,
    read_file,
    search_files,
    write_file,
)

__all__ = [
    "FsError",
    "FsErrorKind",
    "DEFAULT_EXCLUDED_DIRS",
    "DEFAULT_POLICY",
    "FileEntry",
    "SearchResult",
    "TraversalPolicy",
    "get_project_root",
    "read_file",
    "write_file",
    "edit_file",
    "list_directory",
    "search_files",
]
