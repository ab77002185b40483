"""슬래시 명령어 처리

명령어는 ToolRegistry를 통해 파일시스템 도구를 실행합니다.
첫 줄이 명령어, 나머지 줄(Alt+Enter로 입력)은 본문으로 전달됩니다.
"""

import shlex
from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sandbox_fs.ai.tools import get_cached_project_root, set_project_root
from sandbox_fs.core.errors import FsError
from sandbox_fs.core.models import ToolResult
from sandbox_fs.registry import ToolRegistry, get_registry

# /edit 본문에서 old_text와 new_text를 나누는 줄
EDIT_SEPARATOR = "======="

# 모듈 레벨 명령어 레지스트리: {name: (handler, description)}
_commands: dict[str, tuple[Callable, str]] = {}


def get_command_names() -> list[str]:
    """등록된 명령어 목록 반환"""
    return sorted(_commands.keys())


def command(name: str, description: str = ""):
    """명령어 등록 데코레이터"""

    def decorator(func: Callable):
        _commands[name] = (func, description)
        return func

    return decorator


class CommandHandler:
    """슬래시 명령어를 처리하는 클래스"""

    def __init__(self, console: Console, registry: ToolRegistry | None = None):
        self.console = console
        self.registry = registry or get_registry()
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    def handle(self, command: str) -> bool:
        """명령어 처리. 알려진 명령어면 True 반환"""
        header, _, body = command[1:].partition("\n")  # '/' 제거
        parts = header.strip().split(maxsplit=1)
        cmd = parts[0].lower() if parts else ""
        arg = parts[1] if len(parts) > 1 else ""

        if cmd in _commands:
            handler, _ = _commands[cmd]
            handler(self, arg, body)
            return True

        self.console.print(f"[red]알 수 없는 명령어: {escape(cmd)}[/red]")
        self.console.print("[dim]/help 로 사용 가능한 명령어를 확인하세요[/dim]")
        return False

    def _run_tool(self, name: str, args: dict) -> ToolResult:
        """도구 실행 후 결과 출력"""
        result = self.registry.execute(name, args)
        if result.is_error:
            self.console.print(f"[red]오류: {escape(result.result)}[/red]")
        else:
            self.console.print(result.result, markup=False, highlight=False)
        return result

    def _split_args(self, arg: str) -> list[str] | None:
        """따옴표를 고려한 인자 분리 (실패 시 None)"""
        try:
            return shlex.split(arg)
        except ValueError as e:
            self.console.print(f"[red]인자를 해석할 수 없습니다: {escape(str(e))}[/red]")
            return None

    @command("help", "도움말 표시")
    def _show_help(self, _: str = "", __: str = "") -> None:
        """도움말 출력"""
        table = Table(title="사용 가능한 명령어")
        table.add_column("명령어", style="cyan")
        table.add_column("설명", style="green")

        for name, (_handler, desc) in sorted(_commands.items()):
            table.add_row(f"/{name}", desc)

        self.console.print(table)

    @command("root", "프로젝트 루트 표시 또는 변경 (/root [경로])")
    def _root(self, arg: str = "", _: str = "") -> None:
        """프로젝트 루트 확인/전환"""
        path = arg.strip()
        if not path:
            self.console.print(f"[cyan]프로젝트 루트:[/cyan] {escape(get_cached_project_root())}")
            return

        try:
            root = set_project_root(path)
        except FsError as e:
            self.console.print(f"[red]오류: {escape(e.message)}[/red]")
            return

        self.console.print(f"[green]프로젝트 루트를 변경했습니다: {escape(root)}[/green]")

    @command("read", "파일 읽기 (/read <경로>)")
    def _read(self, arg: str = "", _: str = "") -> None:
        path = arg.strip()
        if not path:
            self.console.print("[yellow]사용법: /read <경로>[/yellow]")
            return
        self._run_tool("read_file", {"path": path})

    @command("ls", "디렉토리 목록 (/ls [경로] [-r])")
    def _list(self, arg: str = "", _: str = "") -> None:
        tokens = self._split_args(arg)
        if tokens is None:
            return

        recursive = "-r" in tokens
        paths = [t for t in tokens if t != "-r"]
        self._run_tool(
            "list_directory",
            {"path": paths[0] if paths else ".", "recursive": recursive},
        )

    @command("search", "내용 검색 (/search <패턴> [경로] [--glob *.py])")
    def _search(self, arg: str = "", _: str = "") -> None:
        tokens = self._split_args(arg)
        if tokens is None:
            return

        glob = None
        if "--glob" in tokens:
            idx = tokens.index("--glob")
            if idx + 1 >= len(tokens):
                self.console.print("[yellow]--glob 뒤에 패턴이 필요합니다[/yellow]")
                return
            glob = tokens[idx + 1]
            del tokens[idx : idx + 2]

        if not tokens:
            self.console.print(
                "[yellow]사용법: /search <패턴> [경로] [--glob *.py][/yellow]"
            )
            return

        args = {"pattern": tokens[0], "glob": glob}
        if len(tokens) > 1:
            args["path"] = tokens[1]
        self._run_tool("search_files", args)

    @command("write", "파일 쓰기 (/write <경로> 다음 줄부터 내용)")
    def _write(self, arg: str = "", body: str = "") -> None:
        path = arg.strip()
        if not path:
            self.console.print("[yellow]사용법: /write <경로> (Alt+Enter 후 내용 입력)[/yellow]")
            return
        self._run_tool("write_file", {"path": path, "content": body})

    @command("edit", f"고유 텍스트 치환 (/edit <경로> 다음 줄부터 old, {EDIT_SEPARATOR}, new)")
    def _edit(self, arg: str = "", body: str = "") -> None:
        path = arg.strip()
        lines = body.split("\n")
        if not path or EDIT_SEPARATOR not in lines:
            self.console.print(
                f"[yellow]사용법: /edit <경로> 다음 줄부터 바꿀 텍스트, "
                f"'{EDIT_SEPARATOR}' 줄, 새 텍스트[/yellow]"
            )
            return

        idx = lines.index(EDIT_SEPARATOR)
        self._run_tool(
            "edit_file",
            {
                "path": path,
                "old_text": "\n".join(lines[:idx]),
                "new_text": "\n".join(lines[idx + 1 :]),
            },
        )

    @command("tools", "등록된 도구 목록")
    def _show_tools(self, _: str = "", __: str = "") -> None:
        table = Table(title="등록된 도구")
        table.add_column("카테고리", style="magenta")
        table.add_column("도구", style="cyan")

        for category in self.registry.list_categories():
            names = [t.name for t in self.registry.get_tools_by_category(category)]
            if names:
                table.add_row(category, ", ".join(names))

        self.console.print(table)

    @command("exit", "프로그램 종료")
    def _exit(self, _: str = "", __: str = "") -> None:
        """프로그램 종료"""
        self._running = False
        self.console.print("[blue]프로그램을 종료합니다[/blue]")
