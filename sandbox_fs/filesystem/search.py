"""정규식 내용 검색

한 파일을 읽지 못해도 전체 검색은 중단하지 않습니다.
- 제외 디렉토리, '.'으로 시작하는 항목, symlink는 건너뜀
- 크기 제한을 넘는 파일, UTF-8이 아닌 파일은 조용히 건너뜀
- 결과가 최대 개수에 도달하는 즉시 순회 자체를 멈춤
"""

import os
import re
import stat
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from sandbox_fs.core.errors import FsError, FsErrorKind
from sandbox_fs.core.models import DEFAULT_POLICY, SearchResult, TraversalPolicy

from .accessor import read_text
from .walker import can_descend, relative_path, scan_directory


def compile_pattern(pattern: str) -> re.Pattern:
    """검색 패턴 컴파일

    Raises:
        FsError: INVALID_PATTERN - 정규식 문법 오류
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise FsError(FsErrorKind.INVALID_PATTERN, f"잘못된 정규식입니다: {e}") from e


def matches_glob(filename: str, glob: str | None) -> bool:
    """간단한 접미사 필터 ('*.ts' -> 파일명이 '.ts'로 끝나는지, 대소문자 무시)"""
    if not glob:
        return True
    suffix = glob.lstrip("*").lower()
    return filename.lower().endswith(suffix)


def split_lines(content: str) -> list[str]:
    """'\\n' 기준으로 줄 분리 (줄 끝 '\\r' 제거, 마지막 개행 뒤 빈 줄 없음)"""
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _scan_or_skip(directory: Path) -> list[os.DirEntry]:
    try:
        return scan_directory(directory)
    except FsError as e:
        logger.warning("검색 중 디렉토리 건너뜀: {} ({})", directory, e)
        return []


def _read_or_skip(path: Path) -> str | None:
    try:
        return read_text(path)
    except FsError as e:
        if e.kind is FsErrorKind.INVALID_UTF8:
            logger.debug("바이너리 파일 건너뜀: {}", path)
        else:
            logger.warning("검색 중 파일 건너뜀: {} ({})", path, e)
        return None


def search_tree(
    search_dir: Path,
    project_root: Path,
    regex: re.Pattern,
    glob: str | None = None,
    policy: TraversalPolicy = DEFAULT_POLICY,
) -> list[SearchResult]:
    """디렉토리 하위 파일에서 정규식과 일치하는 줄 검색

    Args:
        search_dir: 해석된 검색 시작 디렉토리
        project_root: 정규화된 프로젝트 루트 (결과 경로 기준)
        regex: 컴파일된 패턴 (줄 어디에서든 일치하면 결과)
        glob: 파일명 접미사 필터
        policy: 제외 목록, 최대 깊이, 파일 크기/결과 개수 제한

    Returns:
        발견 순서대로의 SearchResult 목록 (최대 policy.max_results개)
    """
    results: list[SearchResult] = []
    if policy.max_results <= 0:
        return results

    stack: list[tuple[Iterator[os.DirEntry], int]] = [
        (iter(_scan_or_skip(search_dir)), 0)
    ]

    while stack:
        children, depth = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            continue

        name = child.name
        if name in policy.excluded_dirs or name.startswith("."):
            continue

        try:
            if child.is_symlink():
                continue
            st = child.stat(follow_symlinks=False)
        except OSError as e:
            logger.warning("검색 중 항목 건너뜀: {} ({})", child.path, e)
            continue

        if stat.S_ISDIR(st.st_mode):
            if can_descend(depth, policy.max_depth):
                stack.append((iter(_scan_or_skip(Path(child.path))), depth + 1))
            continue

        # 일반 파일만 (FIFO, 소켓 등은 읽지 않음)
        if not stat.S_ISREG(st.st_mode):
            continue
        if not matches_glob(name, glob):
            continue
        if st.st_size > policy.max_file_size:
            continue

        content = _read_or_skip(Path(child.path))
        if content is None:
            continue

        rel_path = relative_path(child.path, project_root)
        for line_number, line in enumerate(split_lines(content), 1):
            if regex.search(line):
                results.append(
                    SearchResult(file=rel_path, line=line_number, content=line)
                )
                if len(results) >= policy.max_results:
                    return results

    return results
