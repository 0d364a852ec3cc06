import pytest

from chatroom.options import ServerOptions, parse_arguments


def test_defaults_without_arguments():
    options = parse_arguments([])
    assert options == ServerOptions(port=3000, max_users=8, name="chat")


def test_port_option():
    assert parse_arguments(["-p", "4000"]).port == 4000


def test_max_users_option():
    assert parse_arguments(["-c", "3"]).max_users == 3


def test_name_option():
    assert parse_arguments(["-n", "lobby"]).name == "lobby"


def test_all_options_together():
    options = parse_arguments(["-p", "4100", "-c", "2", "-n", "room"])
    assert (options.port, options.max_users, options.name) == (4100, 2, "room")


def test_grouped_flags_take_values_in_order():
    options = parse_arguments(["-pc", "4000", "5"])
    assert options.port == 4000
    assert options.max_users == 5


def test_non_flag_arguments_are_ignored():
    options = parse_arguments(["stray", "-p", "4001", "other"])
    assert options.port == 4001
    assert options.name == "chat"


def test_unknown_flag_is_ignored():
    assert parse_arguments(["-x"]) == ServerOptions()


def test_missing_value_raises():
    with pytest.raises(ValueError):
        parse_arguments(["-p"])


def test_non_numeric_port_reads_as_zero():
    assert parse_arguments(["-p", "abc"]).port == 0


def test_port_uses_leading_digits():
    assert parse_arguments(["-p", "12xyz"]).port == 12


def test_port_stays_in_unsigned_short_range():
    port = parse_arguments(["-p", "70000"]).port
    assert 0 <= port < 65536


def test_long_name_is_truncated():
    name = parse_arguments(["-n", "r" * 300]).name
    assert len(name) == 127
    assert set(name) == {"r"}