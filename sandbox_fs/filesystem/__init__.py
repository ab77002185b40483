"""파일시스템 접근 계층

경로 검증 없이 해석된 경로에 대해서만 동작합니다.
검증은 sandbox_fs.core.safe_path, 조합은 sandbox_fs.operations에서 담당합니다.
"""

from .accessor import read_text, write_text
from .editor import replace_unique
from .search import compile_pattern, matches_glob, search_tree, split_lines
from .walker import list_entries, relative_path, scan_directory

__all__ = [
    "read_text",
    "write_text",
    "replace_unique",
    "compile_pattern",
    "matches_glob",
    "search_tree",
    "split_lines",
    "list_entries",
    "relative_path",
    "scan_directory",
]
