"""Configure command implementation - interactive shortcut wizard."""

import click

from osu_switcher.cli.ensure import report_switch_error
from osu_switcher.core.context import SwitcherContext
from osu_switcher.core.errors import SwitchError
from osu_switcher.wizard.runner import run_wizard


def launch_wizard(ctx: SwitcherContext) -> None:
    try:
        result = run_wizard(ctx)
    except SwitchError as e:
        report_switch_error(e)

    if result.cancelled:
        ctx.feedback.info("Cancelled, no shortcuts were created.")
        return
    for shortcut in result.shortcuts:
        ctx.feedback.info(f"Created {shortcut}")


@click.command("configure")
@click.pass_obj
def configure_cmd(ctx: SwitcherContext) -> None:
    """Create desktop shortcuts for servers."""
    launch_wizard(ctx)
