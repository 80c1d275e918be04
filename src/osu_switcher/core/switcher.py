"""Credential switching between osu! servers.

The active identity lives in osu!'s per-user config; identities for every
other server are parked in osu!switcher.ini. A switch archives the outgoing
identity under its server, installs the archived (or blank) identity for the
target server, then relaunches osu! with -devserver.

Write ordering: the stash is persisted before the active slot. If the stash
write fails nothing has changed yet; if the active-slot write fails afterwards
the old identity is both still active and archived. Either way no credentials
are lost. Each store is written via temp file + rename.

Concurrent invocations against the same installation are unsupported.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from osu_switcher.core.context import SwitcherContext
from osu_switcher.core.credentials import ActiveSlot, ActiveSlotStore, Identity, StashStore
from osu_switcher.core.errors import (
    ConfigWriteError,
    DatabaseEditError,
    InstallationNotFoundError,
    SwitchError,
)
from osu_switcher.core.installation import OsuPaths, is_osu_installation
from osu_switcher.core.osu_db import edit_player_name
from osu_switcher.core.repair_prompt import RepairDecision
from osu_switcher.core.servers import normalize_server

logger = logging.getLogger(__name__)


class SwitchOutcome(Enum):
    RELAUNCHED = "relaunched"
    NO_MANAGED_CONFIG = "no_managed_config"  # no per-user cfg yet; launched without swapping
    DEFERRED_TO_REPAIR = "deferred_to_repair"  # user let osu! repair itself; not relaunched


@dataclass(frozen=True)
class SwitchResult:
    """What a switch did.

    Attributes:
        outcome: How the run ended
        previous_server: Server that was active before, None without a user config
        target_server: Normalized server that is now active
        swapped: Whether credentials were actually exchanged
        warnings: Non-fatal errors (e.g. osu!.db could not be edited)
    """

    outcome: SwitchOutcome
    previous_server: str | None
    target_server: str
    swapped: bool
    warnings: list[SwitchError] = field(default_factory=list)


@dataclass(frozen=True)
class SwitchStatus:
    """Read-only snapshot of both stores for one installation."""

    active: ActiveSlot | None
    stash: dict[str, Identity]
    stash_path: Path


def switch_servers(ctx: SwitcherContext, osu_dir: Path, server: str) -> SwitchResult:
    """Make `server` the active osu! server, swapping credentials, then relaunch.

    Args:
        ctx: Context providing the game process, repair prompt and feedback
        osu_dir: osu!stable installation directory
        server: Target server; empty means the home server

    Raises:
        InstallationNotFoundError: If `osu_dir` is not an osu!stable install
        ConfigCorruptedError: If either store cannot be parsed
        ConfigWriteError: If either store cannot be written (nothing is lost)
        UserCancelledError: If the user aborts the pending-repair prompt
        RelaunchError: If osu! could not be restarted
    """
    server = normalize_server(server)
    if not is_osu_installation(osu_dir):
        raise InstallationNotFoundError(osu_dir)

    paths = OsuPaths.for_installation(osu_dir, ctx.system_username)
    ctx.feedback.info(f"Using '{osu_dir}' as the target osu! installation")
    ctx.feedback.info(f"Switching to '{server}'")

    if not paths.user_config.exists():
        ctx.feedback.info(f"Missing {paths.user_config.name}, launching the game normally...")
        clear_auth_log(paths)
        ctx.game_process.restart(paths.executable, server)
        return SwitchResult(
            outcome=SwitchOutcome.NO_MANAGED_CONFIG,
            previous_server=None,
            target_server=server,
            swapped=False,
        )

    migrate_legacy_stash(paths)
    ensure_stash_exists(paths)

    stash_store = StashStore(paths.stash)
    active_store = ActiveSlotStore(paths.user_config)
    stash = stash_store.load()
    active = active_store.load()

    warnings: list[SwitchError] = []
    swapped = active.server != server
    if swapped:
        warnings.extend(_swap(ctx, paths, active, server, stash, stash_store, active_store))
    else:
        logger.debug("'%s' is already active, leaving both stores untouched", server)

    clear_auth_log(paths)

    if not resolve_pending_repair(ctx, paths):
        return SwitchResult(
            outcome=SwitchOutcome.DEFERRED_TO_REPAIR,
            previous_server=active.server,
            target_server=server,
            swapped=swapped,
            warnings=warnings,
        )

    ctx.game_process.restart(paths.executable, server)
    ctx.feedback.success(f"Launched osu! on '{server}'")
    return SwitchResult(
        outcome=SwitchOutcome.RELAUNCHED,
        previous_server=active.server,
        target_server=server,
        swapped=swapped,
        warnings=warnings,
    )


def _swap(
    ctx: SwitcherContext,
    paths: OsuPaths,
    active: ActiveSlot,
    server: str,
    stash: dict[str, Identity],
    stash_store: StashStore,
    active_store: ActiveSlotStore,
) -> list[SwitchError]:
    incoming = stash.get(server)
    if incoming is None:
        logger.debug("No saved credentials for '%s', switching to a blank login", server)
        incoming = Identity.empty()

    # Archive the outgoing identity even when blank, so the server keeps an explicit entry
    stash_store.put(active.server, active.identity)
    active_store.replace(ActiveSlot(server=server, identity=incoming))

    stash_store.save()
    active_store.save()
    logger.debug("Archived '%s' and activated '%s'", active.server, server)

    warnings: list[SwitchError] = []
    try:
        edit_player_name(paths.database, incoming.username)
    except DatabaseEditError as e:
        ctx.feedback.warning(f"Warning: {e} (osu! will rebuild it)")
        warnings.append(e)
    return warnings


def migrate_legacy_stash(paths: OsuPaths) -> None:
    """Rename the pre-rename stash file, never clobbering a current one."""
    if not paths.legacy_stash.exists() or paths.stash.exists():
        return
    logger.debug("Migrating %s to %s", paths.legacy_stash, paths.stash)
    try:
        paths.legacy_stash.rename(paths.stash)
    except OSError as e:
        raise ConfigWriteError("migrate old switcher config", paths.legacy_stash, str(e)) from e


def ensure_stash_exists(paths: OsuPaths) -> None:
    if paths.stash.exists():
        return
    try:
        paths.stash.touch()
    except OSError as e:
        raise ConfigWriteError("create switcher config", paths.stash, str(e)) from e


def clear_auth_log(paths: OsuPaths) -> None:
    """Delete osu!auth.log, which may carry multi-account tracking data. Best-effort."""
    try:
        paths.auth_log.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not delete %s: %s", paths.auth_log, e)


def resolve_pending_repair(ctx: SwitcherContext, paths: OsuPaths) -> bool:
    """Handle a scheduled self-repair. Returns whether osu! should be relaunched."""
    if not paths.repair_marker.exists():
        return True

    decision = ctx.repair_prompt.ask()
    if decision is RepairDecision.REPAIR:
        ctx.feedback.info("Allowing osu! updater repair to continue...")
        return False

    ctx.feedback.info("Cancelling scheduled osu! updater repair...")
    try:
        paths.repair_marker.unlink(missing_ok=True)
    except OSError as e:
        raise ConfigWriteError("delete osu! repair marker", paths.repair_marker, str(e)) from e
    return True


def read_status(ctx: SwitcherContext, osu_dir: Path) -> SwitchStatus:
    """Read both stores without modifying anything.

    Raises:
        InstallationNotFoundError: If `osu_dir` is not an osu!stable install
        ConfigCorruptedError: If either store cannot be parsed
    """
    if not is_osu_installation(osu_dir):
        raise InstallationNotFoundError(osu_dir)

    paths = OsuPaths.for_installation(osu_dir, ctx.system_username)

    active = None
    if paths.user_config.exists():
        active = ActiveSlotStore(paths.user_config).load()

    stash_path = paths.stash
    if not stash_path.exists() and paths.legacy_stash.exists():
        stash_path = paths.legacy_stash

    stash: dict[str, Identity] = {}
    if stash_path.exists():
        stash = StashStore(stash_path).load()

    return SwitchStatus(active=active, stash=stash, stash_path=stash_path)
