"""도구 모듈

AI 에이전트와 셸이 사용하는 파일시스템 도구를 제공합니다.
"""

from sandbox_fs.registry import ToolCategory, ToolRegistry, get_registry

from .filesystem import (
    edit_file,
    get_cached_project_root,
    list_directory,
    read_file,
    reset_project_root,
    search_files,
    set_project_root,
    write_file,
)


def register_all_tools(replace: bool = False):
    """모든 도구를 레지스트리에 등록"""
    registry = get_registry()

    # 파일시스템 도구
    registry.register(read_file, category=ToolCategory.FILESYSTEM, replace=replace)
    registry.register(write_file, category=ToolCategory.FILESYSTEM, replace=replace)
    registry.register(edit_file, category=ToolCategory.FILESYSTEM, replace=replace)
    registry.register(list_directory, category=ToolCategory.FILESYSTEM, replace=replace)

    # 검색 도구
    registry.register(search_files, category=ToolCategory.SEARCH, replace=replace)


__all__ = [
    # registry
    "ToolCategory",
    "ToolRegistry",
    "get_registry",
    # filesystem
    "read_file",
    "write_file",
    "edit_file",
    "list_directory",
    "search_files",
    "set_project_root",
    "get_cached_project_root",
    "reset_project_root",
    # helper
    "register_all_tools",
]

# 모듈 임포트 시 자동 등록
register_all_tools()
