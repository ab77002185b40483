"""Sandbox FS - 프로젝트 루트에 갇힌 파일시스템 셸"""

from loguru import logger
from prompt_toolkit import PromptSession
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.markup import escape

from .ai.tools import get_cached_project_root, set_project_root
from .cli import CommandHandler, SlashCompleter, get_command_names
from .core.errors import FsError
from .core.log import setup_logging

# prompt_toolkit 스타일 정의
prompt_style = Style.from_dict(
    {
        "prompt": "bold green",
        "completion-menu.completion": "bg:#333333 #ffffff",
        "completion-menu.completion.current": "bg:#00aa00 #000000",
        "completion-menu.meta.completion": "bg:#333333 #888888",
        "completion-menu.meta.completion.current": "bg:#00aa00 #000000",
    }
)


def main():
    setup_logging()
    console = Console()

    console.print("[bold cyan]Sandbox FS[/bold cyan]")

    # 설정된 루트가 잘못되었으면 시작하지 않음
    try:
        root = set_project_root(get_cached_project_root())
    except FsError as e:
        console.print(f"[red]오류: {escape(e.message)}[/red]")
        return 1

    logger.info("셸 시작: 프로젝트 루트 {}", root)
    console.print(f"[dim]프로젝트 루트: {escape(root)}[/dim]")

    handler = CommandHandler(console)
    completer = SlashCompleter()

    console.print(
        "[dim]Ctrl+C: 현재 입력 취소 | Enter: 제출 | Alt+Enter: 줄바꿈 | /: 명령어 보기[/dim]\n"
    )

    # 키 바인딩 설정: Enter=제출, Alt+Enter=줄바꿈
    bindings = KeyBindings()

    @bindings.add("enter")
    def _(event):
        """Enter: 단일 매칭이면 자동완성 후 제출"""
        buffer = event.current_buffer
        text = buffer.text
        if text.startswith("/") and "\n" not in text:
            parts = text[1:].split(maxsplit=1)
            cmd_part = parts[0] if parts else ""
            rest = parts[1] if len(parts) > 1 else ""

            matches = [c for c in get_command_names() if c.startswith(cmd_part)]
            if len(matches) == 1 and matches[0] != cmd_part:
                new_text = "/" + matches[0]
                if rest:
                    new_text += " " + rest
                buffer.document = Document(
                    text=new_text, cursor_position=len(new_text)
                )
        buffer.validate_and_handle()

    @bindings.add("escape", "enter")
    def _(event):
        """Alt+Enter: 줄바꿈 삽입"""
        event.current_buffer.insert_text("\n")

    session = PromptSession(
        "> ",
        style=prompt_style,
        completer=completer,
        complete_while_typing=True,
        history=InMemoryHistory(),
        multiline=False,
        key_bindings=bindings,
    )

    while handler.running:
        try:
            # 방향키 ↑/↓로 이전·다음 입력 탐색 가능
            user_input = session.prompt()

            if user_input.startswith("/"):
                handler.handle(user_input)
            elif user_input.strip():
                console.print("[dim]명령어는 / 로 시작합니다 (/help)[/dim]")

        except KeyboardInterrupt:
            # Ctrl+C: 현재 입력 무시하고 계속
            console.print("\n[yellow]입력이 취소되었습니다[/yellow]")
            continue
        except EOFError:
            # Ctrl+D: 종료
            console.print("\n[blue]프로그램을 종료합니다[/blue]")
            break

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
