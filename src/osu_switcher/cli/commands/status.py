"""Status command implementation - shows the active and archived servers."""

from pathlib import Path

import click

from osu_switcher.cli.ensure import Ensure, report_switch_error
from osu_switcher.cli.json_output import emit_json
from osu_switcher.cli.json_schemas import StashedServerInfo, StatusCommandResponse
from osu_switcher.cli.output import user_output
from osu_switcher.core.context import SwitcherContext
from osu_switcher.core.errors import SwitchError
from osu_switcher.core.switcher import read_status


@click.command("status")
@click.option(
    "--osu",
    "osu_dir",
    type=click.Path(path_type=Path),
    default=None,
    help="osu! game directory path (defaults to osu_dir from config).",
)
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def status_cmd(ctx: SwitcherContext, osu_dir: Path | None, output_json: bool) -> None:
    """Show which server is active and which accounts are saved."""
    osu_dir = Ensure.not_none(
        osu_dir if osu_dir is not None else ctx.global_config.osu_dir,
        "The --osu flag is required (or set osu_dir in config)",
    )
    osu_dir = Ensure.installation(osu_dir)

    try:
        status = read_status(ctx, osu_dir)
    except SwitchError as e:
        report_switch_error(e)

    if output_json:
        response = StatusCommandResponse(
            osu_dir=str(osu_dir),
            active_server=status.active.server if status.active else None,
            active_username=status.active.identity.username if status.active else None,
            stash_file=str(status.stash_path),
            stashed=[
                StashedServerInfo(
                    server=server,
                    username=identity.username,
                    has_password=bool(identity.password),
                )
                for server, identity in sorted(status.stash.items())
            ],
        )
        emit_json(response.model_dump(mode="json"))
        return

    if status.active is None:
        user_output("Active: (no osu! user config yet)")
    else:
        username = status.active.identity.username or "(not signed in)"
        user_output(f"Active: {click.style(status.active.server, bold=True)} as {username}")

    if not status.stash:
        user_output("No saved accounts.")
        return

    user_output("Saved accounts:")
    for server, identity in sorted(status.stash.items()):
        username = identity.username or click.style("(empty)", dim=True)
        user_output(f"  {server}: {username}")
