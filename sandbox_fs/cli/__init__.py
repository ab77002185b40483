"""CLI 계층 - 사용자 인터페이스 처리"""

from .commands import CommandHandler, command, get_command_names
from .completer import SlashCompleter

__all__ = [
    "CommandHandler",
    "command",
    "get_command_names",
    "SlashCompleter",
]
