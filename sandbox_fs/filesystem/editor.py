"""고유 문자열 치환 편집기"""

from pathlib import Path

from sandbox_fs.core.errors import FsError, FsErrorKind

from .accessor import read_text, write_text


def replace_unique(path: Path, old_text: str, new_text: str) -> None:
    """old_text가 정확히 한 번 나올 때만 new_text로 치환

    일치 횟수가 1이 아니면 파일을 건드리지 않습니다.

    Raises:
        FsError: EDIT_NOT_FOUND - old_text가 없거나 비어있는 경우
        FsError: AMBIGUOUS_EDIT - old_text가 두 번 이상 나오는 경우
        FsError: IO_ERROR, INVALID_UTF8 - 읽기/쓰기 실패
    """
    if not old_text:
        raise FsError(FsErrorKind.EDIT_NOT_FOUND, "old_text가 비어있습니다")

    content = read_text(path)

    count = content.count(old_text)
    if count == 0:
        raise FsError(FsErrorKind.EDIT_NOT_FOUND, "파일에서 old_text를 찾을 수 없습니다")
    if count > 1:
        raise FsError(
            FsErrorKind.AMBIGUOUS_EDIT,
            f"old_text가 {count}번 발견되었습니다. 고유해야 합니다. "
            "주변 문맥을 더 포함해 주세요.",
        )

    write_text(path, content.replace(old_text, new_text, 1))
