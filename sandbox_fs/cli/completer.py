"""슬래시 명령어 자동완성 관련 모듈"""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion

from sandbox_fs import operations
from sandbox_fs.ai.tools import get_cached_project_root
from sandbox_fs.core.errors import FsError

from .commands import _commands

# 경로 인자를 받는 명령어
PATH_COMMANDS = {"read", "ls", "write", "edit"}


class SlashCompleter(Completer):
    """슬래시 명령어 자동완성

    - '/' 로 시작하는 입력만 자동완성 대상
    - 명령어 이름 뒤에서는 프로젝트 루트 기준 경로를 완성
    """

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor

        # '/'로 시작하는 한 줄 입력만 대상
        if not text.startswith("/") or "\n" in text:
            return

        cmd_text, sep, arg_text = text[1:].partition(" ")
        if not sep:
            yield from self._complete_command(cmd_text.lower())
        elif cmd_text.lower() in PATH_COMMANDS and " " not in arg_text:
            yield from self._complete_path(arg_text)

    def _complete_command(self, cmd_text: str) -> Iterable[Completion]:
        for cmd, (_, desc) in sorted(_commands.items()):
            if cmd.startswith(cmd_text):
                yield Completion(
                    cmd,
                    start_position=-len(cmd_text),
                    display=f"/{cmd}",
                    display_meta=desc,
                )

    def _complete_path(self, partial: str) -> Iterable[Completion]:
        dir_part, _, name_part = partial.rpartition("/")
        try:
            entries = operations.list_directory(get_cached_project_root(), dir_part or ".")
        except FsError:
            return

        for entry in sorted(entries, key=lambda e: e.name):
            if not entry.name.startswith(name_part):
                continue
            suffix = "/" if entry.is_dir else ""
            yield Completion(
                entry.name + suffix,
                start_position=-len(name_part),
                display_meta="dir" if entry.is_dir else f"{entry.size}b",
            )
