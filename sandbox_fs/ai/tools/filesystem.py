"""파일시스템 도구

LLM 에이전트가 호출하는 도구입니다. 결과를 텍스트로 포맷하며,
실패 시 FsError를 그대로 발생시킵니다 (ToolRegistry.execute에서 변환).
"""

from langchain_core.tools import tool

from sandbox_fs import operations
from sandbox_fs.core.config import config
from sandbox_fs.core.safe_path import resolve_project_root

# 모듈 레벨 상태 변수
_project_root: str | None = None


def set_project_root(root: str) -> str:
    """도구가 사용할 프로젝트 루트 지정 (검증 후 정규화된 경로 저장)"""
    global _project_root
    _project_root = str(resolve_project_root(root))
    return _project_root


def get_cached_project_root() -> str:
    """캐시된 프로젝트 루트 반환 (없으면 설정값 또는 현재 디렉토리)"""
    global _project_root
    if _project_root is None:
        _project_root = config.PROJECT_ROOT or operations.get_project_root()
    return _project_root


def reset_project_root() -> None:
    """프로젝트 루트 캐시 초기화 (테스트용)"""
    global _project_root
    _project_root = None


@tool
def read_file(path: str) -> str:
    """소스 파일 내용을 읽습니다. 경로는 프로젝트 루트 기준입니다.

    Args:
        path: 프로젝트 루트 기준 파일 경로 (예: "src/main.py")

    Returns:
        파일 내용
    """
    return operations.read_file(get_cached_project_root(), path)


@tool
def write_file(path: str, content: str) -> str:
    """새 파일을 만들거나 기존 파일을 덮어씁니다. 기존 파일 수정에는 edit_file을 사용하세요.

    Args:
        path: 프로젝트 루트 기준 파일 경로
        content: 저장할 전체 내용

    Returns:
        저장 확인 메시지
    """
    operations.write_file(get_cached_project_root(), path, content)
    return f"파일 저장 완료: {path}"


@tool
def edit_file(path: str, old_text: str, new_text: str) -> str:
    """파일에서 텍스트를 찾아 바꿉니다. old_text는 파일 안에서 정확히 한 번만 나와야 합니다.

    Args:
        path: 프로젝트 루트 기준 파일 경로
        old_text: 찾을 정확한 텍스트 (파일 내에서 고유해야 함)
        new_text: 바꿀 텍스트

    Returns:
        수정 확인 메시지
    """
    operations.edit_file(get_cached_project_root(), path, old_text, new_text)
    return f"파일 수정 완료: {path}"


@tool
def list_directory(path: str, recursive: bool = False) -> str:
    """파일과 하위 디렉토리를 나열합니다. 각 항목의 경로와 종류/크기를 반환합니다.

    Args:
        path: 프로젝트 루트 기준 디렉토리 경로 (예: "src")
        recursive: 재귀적으로 나열할지 여부 (기본: False)

    Returns:
        한 줄에 하나씩 "경로 [dir]" 또는 "경로 크기b"
    """
    entries = operations.list_directory(
        get_cached_project_root(),
        path,
        recursive=recursive,
        policy=config.traversal_policy(),
    )
    lines = [f"{e.path} [dir]" if e.is_dir else f"{e.path} {e.size}b" for e in entries]
    return "\n".join(lines) or "(빈 디렉토리)"


@tool
def search_files(pattern: str, path: str | None = None, glob: str | None = None) -> str:
    """정규식으로 파일 내용을 검색합니다. node_modules, .git, target, dist 등은 건너뜁니다.

    Args:
        pattern: 검색할 정규식 패턴
        path: 검색할 디렉토리 (프로젝트 루트 기준, 기본: 프로젝트 전체)
        glob: 파일 확장자 필터 (예: "*.py", "*.ts")

    Returns:
        "파일:줄번호: 내용" 형식의 검색 결과
    """
    policy = config.traversal_policy()
    results = operations.search_files(
        get_cached_project_root(), pattern, path=path, glob=glob, policy=policy
    )

    if not results:
        return "일치하는 결과가 없습니다"

    lines = [f"{r.file}:{r.line}: {r.content}" for r in results]
    if len(results) >= policy.max_results:
        lines.append(f"... (결과가 {policy.max_results}개로 제한되었습니다)")
    return "\n".join(lines)
