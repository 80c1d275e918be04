import logging

import click

from osu_switcher.cli.commands.configure import configure_cmd, launch_wizard
from osu_switcher.cli.commands.servers import servers_cmd
from osu_switcher.cli.commands.status import status_cmd
from osu_switcher.cli.commands.switch import switch_cmd
from osu_switcher.cli.ensure import fail
from osu_switcher.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="osu-switcher")
@click.option("--debug", is_flag=True, help="Log every step to stderr.")
@click.option("--quiet", "-q", is_flag=True, help="Only show warnings and errors.")
@click.pass_context
def cli(ctx: click.Context, debug: bool, quiet: bool) -> None:
    """osu!stable server+account switcher to automate re-signing in.

    Run without a command to start the shortcut wizard.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(quiet=quiet)
        except ValueError as e:
            fail(str(e))

    if ctx.invoked_subcommand is None:
        launch_wizard(ctx.obj)


cli.add_command(configure_cmd)
cli.add_command(servers_cmd)
cli.add_command(status_cmd)
cli.add_command(switch_cmd)


def main() -> None:
    """CLI entry point used by the `osu-switcher` console script."""
    cli()
