"""Text protocol spoken between the chat server and its users."""

from __future__ import annotations

import ipaddress
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

MAX_BUFFER_LEN = 1024
MAX_FIELD_LENGTH = 63
DEFAULT_CHANNEL = "general"

SERVER_FULL = "\033[41m\033[[[[[SERVER FULL]]]\033[0m\n"
FAREWELL = "BYE\n"


class Command(Enum):
    """What a line received from a user asks for."""

    MESSAGE = "message"
    DISCONNECT = "disconnect"
    JOIN = "join"
    NICK = "nick"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Instruction:
    """A parsed line: the command and its argument."""

    command: Command
    argument: str = ""


def _strip_line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def parse_line(line: str) -> Instruction:
    """Parse one line of user input.

    Lines starting with ``/`` are commands: ``/disconnect``, ``/join CHANNEL``
    and ``/nick NAME``; any other command is ignored. Everything else is a
    chat message.
    """
    text = _strip_line_ending(line)
    if not text.startswith("/"):
        return Instruction(Command.MESSAGE, text)
    if text.startswith("/disconnect"):
        return Instruction(Command.DISCONNECT)
    if text.startswith("/join "):
        return Instruction(Command.JOIN, text[6:][:MAX_FIELD_LENGTH])
    if text.startswith("/nick "):
        return Instruction(Command.NICK, text[6:][:MAX_FIELD_LENGTH])
    return Instruction(Command.IGNORED, text)


def format_prompt(pending: Iterable[str], nickname: str, server_name: str, channel: str) -> str:
    """Build the prompt sent to a user, preceded by any pending messages."""
    messages = "".join(f"{message}\n" for message in pending)
    return (
        f"{messages}\033[01;32m{nickname}@{server_name} "
        f"\033[01;34m{channel}\033[0m > \033[0m"
    )


def banner(text: str) -> str:
    """Wrap an event description in the server's highlighted log style."""
    return f"\r\033[44m\033[[[[[{text}]]]\033[0m\n"


def format_address(host: int | str, port: int) -> str:
    """Render an IPv4 address (integer or dotted string) and port as ``a.b.c.d:port``."""
    return f"{ipaddress.ip_address(host)}:{port}"