"""Command-line options for the chat server."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_MAX_USERS = 8
DEFAULT_NAME = "chat"
MAX_NAME_LENGTH = 127

_FLAG_OPTIONS = {"p", "c", "n"}
_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


@dataclass
class ServerOptions:
    """Settings the chat server runs with."""

    port: int = DEFAULT_PORT
    max_users: int = DEFAULT_MAX_USERS
    name: str = DEFAULT_NAME


def _leading_integer(text: str) -> int:
    """Read the integer at the start of ``text``; 0 when there is none."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def parse_arguments(argv: Iterable[str]) -> ServerOptions:
    """Build server options from command-line arguments (without the program name).

    ``-p PORT`` sets the port, ``-c COUNT`` the maximum number of users and
    ``-n NAME`` the room name. Letters may be grouped (``-pc 4000 5``); each
    takes the next argument in turn. Arguments not starting with ``-`` and
    unknown letters are ignored.
    """
    options = ServerOptions()
    arguments = iter(argv)
    for argument in arguments:
        if not argument.startswith("-"):
            continue
        for flag in argument[1:]:
            if flag not in _FLAG_OPTIONS:
                continue
            try:
                value = next(arguments)
            except StopIteration:
                raise ValueError(f"option -{flag} requires a value") from None
            if flag == "p":
                options.port = _leading_integer(value) % 65536
                logger.info("[chat room] Using port %d", options.port)
            elif flag == "c":
                options.max_users = _leading_integer(value)
                logger.info("[chat room] Maximum users %d", options.max_users)
            else:
                options.name = value[:MAX_NAME_LENGTH]
                logger.info("[chat room] Name %s", options.name)
    return options