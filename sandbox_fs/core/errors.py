"""파일시스템 계층 오류 정의

모든 공개 연산은 실패 시 FsError를 발생시킵니다.
호출자는 메시지를 파싱하지 않고 kind로 분기할 수 있습니다.
"""

from enum import Enum


class FsErrorKind(Enum):
    """오류 유형"""

    INVALID_ROOT = "invalid_root"
    PATH_TRAVERSAL = "path_traversal"
    NOT_A_DIRECTORY = "not_a_directory"
    IO_ERROR = "io_error"
    INVALID_UTF8 = "invalid_utf8"
    EDIT_NOT_FOUND = "edit_not_found"
    AMBIGUOUS_EDIT = "ambiguous_edit"
    INVALID_PATTERN = "invalid_pattern"


class FsError(Exception):
    """파일시스템 연산 실패

    Attributes:
        kind: 오류 유형
        message: UI에 그대로 표시할 수 있는 메시지
    """

    def __init__(self, kind: FsErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"FsError({self.kind.name}, {self.message!r})"
