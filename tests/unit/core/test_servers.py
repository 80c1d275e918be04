import pytest

from osu_switcher.core.servers import (
    HOME_SERVER,
    endpoint_for_server,
    is_valid_server,
    known_servers,
    launch_argument,
    normalize_server,
    server_from_endpoint,
)


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_blank_means_home(raw: str | None) -> None:
    assert normalize_server(raw) == HOME_SERVER


def test_normalize_strips_whitespace() -> None:
    assert normalize_server("  akatsuki.gg \n") == "akatsuki.gg"


def test_home_server_uses_empty_endpoint() -> None:
    assert endpoint_for_server(HOME_SERVER) == ""
    assert server_from_endpoint("") == HOME_SERVER
    assert endpoint_for_server("ripple.moe") == "ripple.moe"
    assert server_from_endpoint("ripple.moe") == "ripple.moe"


def test_launch_argument_aliases() -> None:
    assert launch_argument("akatsuki.pw") == "akatsuki.gg"
    assert launch_argument(HOME_SERVER) == ""
    assert launch_argument("gatari.pw") == "gatari.pw"


@pytest.mark.parametrize(
    ("text", "valid"),
    [("akatsuki.gg", True), ("localhost", True), ("nodot", False), ("", False)],
)
def test_is_valid_server(text: str, valid: bool) -> None:
    assert is_valid_server(text) is valid


def test_known_servers_are_sorted_and_include_extras() -> None:
    servers = known_servers([" my.server ", "akatsuki.gg"])

    assert servers == sorted(servers)
    assert HOME_SERVER in servers
    assert "my.server" in servers
    assert servers.count("akatsuki.gg") == 1
