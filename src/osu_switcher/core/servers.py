"""Server identifiers and the conventions for mapping them onto osu!'s settings."""

HOME_SERVER = "osu.ppy.sh"

# Private servers with known shortcut icons. osuwtf.pw and nerose.click have
# no icon but work fine as custom entries.
PRIVATE_SERVERS: tuple[str, ...] = (
    "akatsuki.gg",
    "akatsuki.pw",
    "ez-pp.farm",
    "fuquila.net",
    "gatari.pw",
    "halcyon.moe",
    "kawata.pw",
    "kokisu.moe",
    "lemres.de",
    "mamesosu.net",
    "osunolimits.dev",
    "osuokayu.moe",
    "redstar.moe",
    "ripple.moe",
    "scosu.net",
    "seventwentyseven.xyz",
    "ussr.pl",
)

# Servers whose -devserver argument differs from the identifier users know them by
_LAUNCH_ALIASES: dict[str, str] = {
    "akatsuki.pw": "akatsuki.gg",
    HOME_SERVER: "",
}


def normalize_server(server: str | None) -> str:
    """Canonicalize a server identifier; empty means the home server."""
    if server is None:
        return HOME_SERVER
    server = server.strip()
    if not server:
        return HOME_SERVER
    return server


def server_from_endpoint(endpoint: str) -> str:
    """Map a CredentialEndpoint value to a server identifier."""
    return normalize_server(endpoint)


def endpoint_for_server(server: str) -> str:
    """Map a server identifier to the CredentialEndpoint value osu! expects.

    The home server is stored as an empty endpoint, which is osu!'s own
    convention for Bancho.
    """
    if server == HOME_SERVER:
        return ""
    return server


def launch_argument(server: str) -> str:
    """Return the value passed to osu! via -devserver."""
    return _LAUNCH_ALIASES.get(server, server)


def is_valid_server(text: str) -> bool:
    """Check whether free text looks like a server address."""
    return "." in text or text == "localhost"


def known_servers(extra: list[str] | None = None) -> list[str]:
    """Return all known servers, sorted, including configured extras."""
    servers = {HOME_SERVER, *PRIVATE_SERVERS}
    if extra:
        servers.update(normalize_server(s) for s in extra)
    return sorted(servers)
