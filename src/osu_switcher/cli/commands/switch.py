"""Switch command implementation - swaps credentials and relaunches osu!."""

from pathlib import Path

import click

from osu_switcher.cli.ensure import Ensure, report_switch_error
from osu_switcher.cli.json_output import emit_json
from osu_switcher.cli.json_schemas import SwitchCommandResponse
from osu_switcher.core.context import SwitcherContext
from osu_switcher.core.errors import SwitchError
from osu_switcher.core.servers import HOME_SERVER
from osu_switcher.core.switcher import switch_servers


@click.command("switch")
@click.option(
    "--osu",
    "osu_dir",
    type=click.Path(path_type=Path, file_okay=True, dir_okay=True),
    default=None,
    help="osu! game directory path (defaults to osu_dir from config).",
)
@click.option(
    "--server",
    default=HOME_SERVER,
    show_default=True,
    help="The target server address, ex: --server akatsuki.pw",
)
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def switch_cmd(ctx: SwitcherContext, osu_dir: Path | None, server: str, output_json: bool) -> None:
    """Switch to a different server account."""
    osu_dir = Ensure.not_none(
        osu_dir if osu_dir is not None else ctx.global_config.osu_dir,
        "The --osu flag is required in order to start osu! "
        f"(or set osu_dir in {ctx.config_store.path()})",
    )
    osu_dir = Ensure.installation(osu_dir)

    try:
        result = switch_servers(ctx, osu_dir, server)
    except SwitchError as e:
        report_switch_error(e)

    if output_json:
        response = SwitchCommandResponse(
            outcome=result.outcome.value,
            previous_server=result.previous_server,
            target_server=result.target_server,
            swapped=result.swapped,
            warnings=[str(w) for w in result.warnings],
        )
        emit_json(response.model_dump(mode="json"))
