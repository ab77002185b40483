"""파일 읽기/쓰기

경로 검증은 하지 않습니다. 호출 전에 SafePathResolver로 해석된 경로만 넘겨야 합니다.
바이트를 그대로 보존하기 위해 개행 변환 없이 UTF-8로 인코딩/디코딩합니다.
"""

from pathlib import Path

from sandbox_fs.core.errors import FsError, FsErrorKind


def read_text(path: Path) -> str:
    """파일 전체를 텍스트로 읽기

    Raises:
        FsError: IO_ERROR - 권한/입출력 실패
        FsError: INVALID_UTF8 - UTF-8 텍스트가 아닌 경우
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FsError(FsErrorKind.IO_ERROR, f"파일을 읽을 수 없습니다: {e}") from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FsError(
            FsErrorKind.INVALID_UTF8, f"UTF-8 텍스트 파일이 아닙니다: {path.name}"
        ) from e


def write_text(path: Path, content: str) -> None:
    """상위 디렉토리를 만든 뒤 파일 내용을 통째로 교체

    Raises:
        FsError: IO_ERROR - 디렉토리 생성 또는 쓰기 실패
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FsError(FsErrorKind.IO_ERROR, f"디렉토리를 만들 수 없습니다: {e}") from e

    try:
        path.write_bytes(content.encode("utf-8"))
    except (OSError, UnicodeEncodeError) as e:
        raise FsError(FsErrorKind.IO_ERROR, f"파일을 쓸 수 없습니다: {e}") from e
