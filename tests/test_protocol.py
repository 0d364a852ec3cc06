import pytest

from chatroom.protocol import (
    SERVER_FULL,
    Command,
    Instruction,
    banner,
    format_address,
    format_prompt,
    parse_line,
)


def test_plain_text_is_a_message():
    assert parse_line("hello\n") == Instruction(Command.MESSAGE, "hello")


def test_empty_line_is_an_empty_message():
    assert parse_line("\n") == Instruction(Command.MESSAGE, "")


def test_disconnect_command():
    assert parse_line("/disconnect\n").command is Command.DISCONNECT


def test_disconnect_matches_by_prefix():
    assert parse_line("/disconnected").command is Command.DISCONNECT


def test_join_command_strips_newline():
    assert parse_line("/join dev\n") == Instruction(Command.JOIN, "dev")


def test_join_command_strips_crlf():
    assert parse_line("/join dev\r\n") == Instruction(Command.JOIN, "dev")


def test_nick_command():
    assert parse_line("/nick bob\n") == Instruction(Command.NICK, "bob")


def test_join_without_space_is_ignored():
    assert parse_line("/join\n").command is Command.IGNORED


def test_unknown_command_is_ignored():
    assert parse_line("/shout hi\n").command is Command.IGNORED


@pytest.mark.parametrize("prefix", ["/join ", "/nick "])
def test_long_arguments_are_truncated(prefix):
    argument = parse_line(prefix + "z" * 100 + "\n").argument
    assert len(argument) == 63
    assert set(argument) == {"z"}


def test_prompt_without_pending_messages():
    prompt = format_prompt([], "anon1", "chat", "general")
    assert prompt == "\033[01;32manon1@chat \033[01;34mgeneral\033[0m > \033[0m"


def test_prompt_lists_pending_messages_first():
    prompt = format_prompt(["alice", "bob"], "anon1", "chat", "general")
    assert prompt.startswith("alice\nbob\n")
    assert prompt.endswith(format_prompt([], "anon1", "chat", "general"))


def test_banner_wraps_text():
    assert banner("anon1 DISCONNECTED") == "\r\033[44m\033[[[[[anon1 DISCONNECTED]]]\033[0m\n"


def test_format_address_from_integer():
    assert format_address(0x7F000001, 3000) == "127.0.0.1:3000"


def test_format_address_from_string():
    assert format_address("10.0.0.1", 80) == "10.0.0.1:80"


def test_format_address_rejects_garbage():
    with pytest.raises(ValueError):
        format_address("not-an-address", 1)