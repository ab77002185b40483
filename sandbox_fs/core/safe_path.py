"""안전한 파일 경로 해석 모듈

프로젝트 루트를 기준으로 상대 경로를 해석하고, 루트 밖으로 벗어나는 경로를 거부합니다.

해석 순서:
1. 루트를 정규화 (symlink, '..' 해석)
2. 루트 뒤에 상대 경로를 붙임 (절대 경로도 루트를 대체하지 않음)
3. 대상이 존재하면 그대로 정규화
4. 존재하지 않으면 (새 파일 쓰기) 상위 디렉토리를 정규화한 뒤 파일명을 다시 붙임
5. 최종 경로가 루트 하위인지 확인 (symlink 해석 이후에 검사)
"""

import os
from pathlib import Path

from loguru import logger

from .errors import FsError, FsErrorKind


def resolve_project_root(root: str | Path) -> Path:
    """프로젝트 루트를 절대 경로로 정규화

    Raises:
        FsError: INVALID_ROOT - 존재하지 않거나 디렉토리가 아닌 경우
    """
    if not str(root).strip():
        raise FsError(FsErrorKind.INVALID_ROOT, "프로젝트 루트가 지정되지 않았습니다")

    try:
        canonical = Path(root).resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as e:
        raise FsError(
            FsErrorKind.INVALID_ROOT, f"유효하지 않은 프로젝트 루트입니다: {root} ({e})"
        ) from e

    if not canonical.is_dir():
        raise FsError(
            FsErrorKind.INVALID_ROOT, f"프로젝트 루트가 디렉토리가 아닙니다: {root}"
        )

    return canonical


class SafePathResolver:
    """프로젝트 루트에 갇힌 경로 해석기

    사용 예시:
        resolver = SafePathResolver("/home/me/project")
        path = resolver.resolve("src/main.py")      # 정상
        resolver.resolve("../../etc/passwd")        # FsError(PATH_TRAVERSAL)
    """

    def __init__(self, root: str | Path):
        self.root = resolve_project_root(root)

    def resolve(self, relative: str | Path) -> Path:
        """상대 경로를 루트 하위의 정규화된 절대 경로로 해석

        Args:
            relative: 루트 기준 상대 경로 (신뢰할 수 없는 입력)

        Returns:
            정규화된 절대 경로

        Raises:
            FsError: INVALID_ROOT - 경로 또는 상위 디렉토리를 해석할 수 없는 경우
            FsError: PATH_TRAVERSAL - 루트 밖으로 벗어나는 경우
        """
        target = self.root / self._as_relative(relative)

        try:
            resolved = target.resolve(strict=True)
        except (FileNotFoundError, NotADirectoryError):
            resolved = self._resolve_missing(target, relative)
        except (OSError, RuntimeError, ValueError) as e:
            raise FsError(
                FsErrorKind.INVALID_ROOT, f"경로를 해석할 수 없습니다: {relative} ({e})"
            ) from e

        if not self._is_subpath(resolved, self.root):
            raise self._traversal_error(relative, resolved)

        return resolved

    def _resolve_missing(self, target: Path, relative: str | Path) -> Path:
        """아직 존재하지 않는 대상: 상위 디렉토리를 정규화하고 파일명을 다시 붙임"""
        if target.name in ("", ".."):
            raise FsError(
                FsErrorKind.INVALID_ROOT, f"유효하지 않은 파일 이름입니다: {relative}"
            )

        try:
            parent = target.parent.resolve(strict=True)
        except (OSError, RuntimeError, ValueError) as e:
            # 상위 디렉토리가 없어도 '..'로 루트를 벗어나려는 시도는 순회로 취급
            normalized = Path(os.path.normpath(target))
            if not self._is_subpath(normalized, self.root):
                raise self._traversal_error(relative, normalized) from e
            raise FsError(
                FsErrorKind.INVALID_ROOT,
                f"상위 디렉토리가 존재하지 않습니다: {relative}",
            ) from e

        candidate = parent / target.name

        # 끊어진 symlink는 대상 위치까지 따라가서 검사
        if candidate.is_symlink():
            try:
                candidate = candidate.resolve()
            except (OSError, RuntimeError) as e:
                raise FsError(
                    FsErrorKind.INVALID_ROOT,
                    f"경로를 해석할 수 없습니다: {relative} ({e})",
                ) from e

        return candidate

    def _traversal_error(self, relative: str | Path, resolved: Path) -> FsError:
        logger.warning("루트 밖 경로 접근 차단: {} -> {}", relative, resolved)
        return FsError(
            FsErrorKind.PATH_TRAVERSAL,
            f"프로젝트 루트 밖의 경로에는 접근할 수 없습니다: {relative}",
        )

    @staticmethod
    def _as_relative(relative: str | Path) -> Path:
        """절대 경로의 앵커를 제거하여 항상 루트 뒤에 붙도록 변환"""
        path = Path(relative)
        if path.anchor:
            path = Path(*path.parts[1:])
        return path

    @staticmethod
    def _is_subpath(path: Path, parent: Path) -> bool:
        """path가 parent 자신이거나 그 하위 경로인지 확인"""
        try:
            path.relative_to(parent)
            return True
        except ValueError:
            return False


def resolve_safe_path(root: str | Path, relative: str | Path) -> Path:
    """경로 해석 단축 함수"""
    return SafePathResolver(root).resolve(relative)
