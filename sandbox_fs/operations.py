"""공개 파일시스템 연산

모든 연산은 project_root를 기준점으로 받고, 가장 먼저 SafePathResolver를 거칩니다.
실패 시 FsError를 발생시키며 내부에서 재시도하지 않습니다.
"""

import os
from pathlib import Path

from loguru import logger

from .core.errors import FsError, FsErrorKind
from .core.models import DEFAULT_POLICY, FileEntry, SearchResult, TraversalPolicy
from .core.safe_path import SafePathResolver
from .filesystem import (
    compile_pattern,
    list_entries,
    read_text,
    relative_path,
    replace_unique,
    search_tree,
    write_text,
)


def get_project_root() -> str:
    """현재 작업 디렉토리를 프로젝트 루트로 반환"""
    try:
        return os.getcwd()
    except OSError as e:
        raise FsError(
            FsErrorKind.IO_ERROR, f"프로젝트 루트를 가져올 수 없습니다: {e}"
        ) from e


def read_file(project_root: str | Path, path: str) -> str:
    """파일 내용 읽기"""
    resolved = SafePathResolver(project_root).resolve(path)
    logger.debug("read_file: {}", resolved)
    return read_text(resolved)


def write_file(project_root: str | Path, path: str, content: str) -> None:
    """파일 생성 또는 덮어쓰기"""
    resolved = SafePathResolver(project_root).resolve(path)
    write_text(resolved, content)
    logger.info("파일 저장: {} ({} chars)", resolved, len(content))


def edit_file(project_root: str | Path, path: str, old_text: str, new_text: str) -> None:
    """old_text가 정확히 한 번 나올 때만 치환"""
    resolved = SafePathResolver(project_root).resolve(path)
    replace_unique(resolved, old_text, new_text)
    logger.info("파일 수정: {}", resolved)


def list_directory(
    project_root: str | Path,
    path: str,
    recursive: bool = False,
    *,
    policy: TraversalPolicy = DEFAULT_POLICY,
) -> list[FileEntry]:
    """디렉토리 항목 나열 (제외 목록 적용)"""
    resolver = SafePathResolver(project_root)
    resolved = resolver.resolve(path)
    logger.debug("list_directory: {} (recursive={})", resolved, recursive)
    return list_entries(resolved, resolver.root, recursive=recursive, policy=policy)


def search_files(
    project_root: str | Path,
    pattern: str,
    path: str | None = None,
    glob: str | None = None,
    *,
    policy: TraversalPolicy = DEFAULT_POLICY,
) -> list[SearchResult]:
    """정규식으로 파일 내용 검색

    Args:
        project_root: 프로젝트 루트
        pattern: 정규식 패턴
        path: 검색할 하위 디렉토리 (기본: 프로젝트 전체)
        glob: 파일명 접미사 필터 (예: "*.ts")
        policy: 제외 목록과 크기/개수 제한

    Returns:
        최대 policy.max_results개의 검색 결과
    """
    # 패턴 오류는 순회 시작 전에 실패
    regex = compile_pattern(pattern)

    resolver = SafePathResolver(project_root)
    search_dir = resolver.resolve(path) if path else resolver.root

    if not search_dir.is_dir():
        raise FsError(
            FsErrorKind.NOT_A_DIRECTORY,
            f"검색 경로가 디렉토리가 아닙니다: {relative_path(search_dir, resolver.root)}",
        )

    results = search_tree(search_dir, resolver.root, regex, glob=glob, policy=policy)
    logger.debug(
        "search_files: pattern={!r} path={} glob={} -> {}건",
        pattern,
        path,
        glob,
        len(results),
    )
    return results
