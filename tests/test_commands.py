from __future__ import annotations

from pathlib import Path

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
from rich.console import Console

from sandbox_fs.ai.tools import get_cached_project_root
from sandbox_fs.cli import CommandHandler, SlashCompleter, get_command_names
from sandbox_fs.cli.commands import EDIT_SEPARATOR


def _make_console() -> Console:
    return Console(record=True, width=120)


def _get_output(console: Console) -> str:
    return console.export_text()


def _completions(text: str) -> list[str]:
    document = Document(text=text, cursor_position=len(text))
    return [c.text for c in SlashCompleter().get_completions(document, CompleteEvent())]


def test_help_command(tool_root):
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/help")

    output = _get_output(console)
    for name in ("help", "root", "read", "ls", "search", "write", "edit", "tools", "exit"):
        assert f"/{name}" in output


def test_command_names():
    assert get_command_names() == sorted(
        ["help", "root", "read", "ls", "search", "write", "edit", "tools", "exit"]
    )


def test_unknown_command(tool_root):
    console = _make_console()
    handler = CommandHandler(console)

    assert handler.handle("/nope") is False
    assert "알 수 없는 명령어" in _get_output(console)


def test_read_command(tool_root: Path):
    (tool_root / "a.txt").write_text("[bold]not markup[/bold]\n")
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/read a.txt")

    assert "[bold]not markup[/bold]" in _get_output(console)


def test_read_without_path(tool_root):
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/read")

    assert "사용법" in _get_output(console)


def test_read_traversal_shows_error(tool_root):
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/read ../../etc/passwd")

    output = _get_output(console)
    assert "오류" in output
    assert "프로젝트 루트 밖" in output


def test_ls_recursive(tool_root: Path):
    (tool_root / "src").mkdir()
    (tool_root / "src" / "main.py").write_bytes(b"abc")
    (tool_root / "node_modules").mkdir()
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/ls -r")

    output = _get_output(console)
    assert "src [dir]" in output
    assert "src/main.py 3b" in output
    assert "node_modules" not in output


def test_search_with_glob(tool_root: Path):
    (tool_root / "a.py").write_text("# TODO python\n")
    (tool_root / "b.ts").write_text("// TODO ts\n")
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/search TODO --glob *.py")

    output = _get_output(console)
    assert "a.py:1: # TODO python" in output
    assert "b.ts" not in output


def test_search_quoted_pattern(tool_root: Path):
    (tool_root / "a.txt").write_text("hello world\n")
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle('/search "hello world"')

    assert "a.txt:1: hello world" in _get_output(console)


def test_search_invalid_pattern(tool_root):
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/search (")

    assert "잘못된 정규식" in _get_output(console)


def test_write_with_body(tool_root: Path):
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/write notes.md\n# 제목\n본문")

    assert (tool_root / "notes.md").read_text(encoding="utf-8") == "# 제목\n본문"
    assert "파일 저장 완료" in _get_output(console)


def test_edit_with_separator(tool_root: Path):
    (tool_root / "app.py").write_text("x = 1\ny = 2\n")
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle(f"/edit app.py\ny = 2\n{EDIT_SEPARATOR}\ny = 3")

    assert (tool_root / "app.py").read_text() == "x = 1\ny = 3\n"
    assert "파일 수정 완료" in _get_output(console)


def test_edit_ambiguous_leaves_file(tool_root: Path):
    (tool_root / "app.py").write_text("foo\nbar\nfoo\n")
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle(f"/edit app.py\nfoo\n{EDIT_SEPARATOR}\nbaz")

    assert "오류" in _get_output(console)
    assert (tool_root / "app.py").read_text() == "foo\nbar\nfoo\n"


def test_edit_without_separator(tool_root: Path):
    (tool_root / "app.py").write_text("foo\n")
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/edit app.py\nfoo")

    assert "사용법" in _get_output(console)
    assert (tool_root / "app.py").read_text() == "foo\n"


def test_root_show_and_change(tool_root: Path):
    other = tool_root / "nested"
    other.mkdir()
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/root")
    assert "프로젝트 루트" in _get_output(console)

    handler.handle(f"/root {other}")

    assert get_cached_project_root() == str(other)
    assert "변경했습니다" in _get_output(console)


def test_root_invalid_keeps_previous(tool_root: Path):
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle(f"/root {tool_root / 'missing'}")

    assert "오류" in _get_output(console)
    assert get_cached_project_root() == str(tool_root)


def test_tools_command(tool_root):
    console = _make_console()
    handler = CommandHandler(console)

    handler.handle("/tools")

    output = _get_output(console)
    assert "filesystem" in output
    assert "search_files" in output


def test_exit_command(tool_root):
    console = _make_console()
    handler = CommandHandler(console)

    assert handler.running is True
    handler.handle("/exit")

    assert handler.running is False
    assert "종료" in _get_output(console)


def test_complete_command_names(tool_root):
    assert _completions("/") == get_command_names()
    assert _completions("/se") == ["search"]
    assert _completions("hello") == []


def test_complete_paths(tool_root: Path):
    (tool_root / "src").mkdir()
    (tool_root / "src" / "main.py").write_text("x")
    (tool_root / "setup.cfg").write_text("x")
    (tool_root / "node_modules").mkdir()

    assert _completions("/read s") == ["setup.cfg", "src/"]
    assert _completions("/read src/m") == ["main.py"]
    assert _completions("/read n") == []
    assert _completions("/read ../") == []
    assert _completions("/search s") == []
