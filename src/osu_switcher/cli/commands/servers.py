"""Servers command implementation - lists known server identifiers."""

import click

from osu_switcher.cli.output import machine_output
from osu_switcher.core.context import SwitcherContext
from osu_switcher.core.servers import known_servers


@click.command("servers")
@click.pass_obj
def servers_cmd(ctx: SwitcherContext) -> None:
    """List known osu! servers (built-in plus extra_servers from config)."""
    for server in known_servers(list(ctx.global_config.extra_servers)):
        machine_output(server)
