"""디렉토리 목록 조회

재귀 호출 대신 명시적인 작업 스택으로 깊이 우선 순회합니다.
symlink는 항목으로만 기록하고 따라가지 않습니다.
"""

import os
import stat
from collections.abc import Iterator
from pathlib import Path

from sandbox_fs.core.errors import FsError, FsErrorKind
from sandbox_fs.core.models import DEFAULT_POLICY, FileEntry, TraversalPolicy


def scan_directory(directory: Path) -> list[os.DirEntry]:
    """디렉토리의 직계 항목을 파일시스템 순서 그대로 반환

    Raises:
        FsError: IO_ERROR - 디렉토리를 읽을 수 없는 경우
    """
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as e:
        raise FsError(FsErrorKind.IO_ERROR, f"디렉토리를 읽을 수 없습니다: {e}") from e


def relative_path(path: str | Path, project_root: Path) -> str:
    """프로젝트 루트 기준 상대 경로 ('/' 구분자)"""
    return Path(path).relative_to(project_root).as_posix()


def can_descend(depth: int, max_depth: int | None) -> bool:
    """현재 깊이에서 한 단계 더 내려갈 수 있는지 확인"""
    return max_depth is None or depth < max_depth


def list_entries(
    directory: Path,
    project_root: Path,
    recursive: bool = False,
    policy: TraversalPolicy = DEFAULT_POLICY,
) -> list[FileEntry]:
    """디렉토리 항목 목록

    Args:
        directory: 해석된 대상 디렉토리
        project_root: 정규화된 프로젝트 루트 (상대 경로 계산 기준)
        recursive: 하위 디렉토리까지 나열할지 여부
        policy: 제외 목록과 최대 깊이

    Returns:
        FileEntry 목록 (디렉토리 바로 뒤에 그 하위 항목이 오는 전위 순서)

    Raises:
        FsError: NOT_A_DIRECTORY - 대상이 디렉토리가 아닌 경우
        FsError: IO_ERROR - 항목 하나라도 읽기 실패 시 (부분 결과 없음)
    """
    if not directory.is_dir():
        raise FsError(
            FsErrorKind.NOT_A_DIRECTORY,
            f"디렉토리가 아닙니다: {relative_path(directory, project_root)}",
        )

    entries: list[FileEntry] = []
    stack: list[tuple[Iterator[os.DirEntry], int]] = [
        (iter(scan_directory(directory)), 0)
    ]

    while stack:
        children, depth = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            continue

        if child.name in policy.excluded_dirs:
            continue

        try:
            st = child.stat(follow_symlinks=False)
        except OSError as e:
            raise FsError(
                FsErrorKind.IO_ERROR, f"메타데이터를 읽을 수 없습니다: {e}"
            ) from e

        is_dir = stat.S_ISDIR(st.st_mode)
        entries.append(
            FileEntry(
                name=child.name,
                path=relative_path(child.path, project_root),
                is_dir=is_dir,
                size=0 if is_dir else st.st_size,
            )
        )

        if recursive and is_dir and can_descend(depth, policy.max_depth):
            stack.append((iter(scan_directory(Path(child.path))), depth + 1))

    return entries
