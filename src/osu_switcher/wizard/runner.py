"""Drives the wizard: render, read a key, step, perform effects."""

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from osu_switcher.core.context import SwitcherContext
from osu_switcher.core.installation import is_osu_installation
from osu_switcher.core.servers import known_servers
from osu_switcher.wizard.state import Exited, Finished, WizardState
from osu_switcher.wizard.transitions import initial_state, resolve_started, step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WizardResult:
    cancelled: bool
    install_dir: Path | None
    shortcuts: tuple[Path, ...]


def detect_installation(ctx: SwitcherContext) -> Path | None:
    """Prefer the remembered installation, then ask the locator."""
    remembered = ctx.global_config.osu_dir
    if remembered is not None and is_osu_installation(remembered):
        return remembered
    return ctx.installation_locator.find_installation()


def run_wizard(ctx: SwitcherContext) -> WizardResult:
    """Run the interactive flow until the user exits.

    Raises:
        ShortcutCreationError: If a shortcut could not be written
    """
    servers = known_servers(list(ctx.global_config.extra_servers))
    state: WizardState = resolve_started(initial_state(servers), detect_installation(ctx))
    logger.debug("Wizard starting in %s", type(state).__name__)

    finished: Finished | None = None
    shortcuts: list[Path] = []

    while not isinstance(state, Exited):
        ctx.wizard_view.render(state)
        event = ctx.key_source.read_key()
        next_state = step(state, event, is_installation=is_osu_installation)

        if isinstance(next_state, Finished) and not isinstance(state, Finished):
            finished = next_state
            for server in next_state.servers:
                shortcut = ctx.shortcut_installer.create_shortcut(next_state.install_dir, server)
                shortcuts.append(shortcut)
            _remember_install_dir(ctx, next_state.install_dir)

        state = next_state

    return WizardResult(
        cancelled=state.cancelled,
        install_dir=finished.install_dir if finished is not None else None,
        shortcuts=tuple(shortcuts),
    )


def _remember_install_dir(ctx: SwitcherContext, install_dir: Path) -> None:
    if ctx.global_config.osu_dir == install_dir:
        return
    try:
        ctx.config_store.save(replace(ctx.global_config, osu_dir=install_dir))
    except OSError as e:
        ctx.feedback.warning(f"Warning: could not save {ctx.config_store.path()}: {e}")
