"""Shortcut icon lookup for servers.

Windows shortcuts need their icon on disk, so icons shipped inside the package
(`osu_switcher/assets/<server>.ico`) are copied into `<osu_dir>/icons/` the
first time a shortcut for that server is created.
"""

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from osu_switcher.core.errors import ShortcutCreationError
from osu_switcher.core.installation import OSU_EXE
from osu_switcher.core.servers import HOME_SERVER

logger = logging.getLogger(__name__)

INSTALLATION_ICONS_DIR = "icons"
BUNDLED_ICONS: Traversable = resources.files("osu_switcher") / "assets"


def install_bundled_icon(
    osu_dir: Path, server: str, bundle: Traversable = BUNDLED_ICONS
) -> Path | None:
    """Copy the packaged icon for `server` into the installation.

    Returns:
        Path of the written icon, or None if no icon ships for `server`

    Raises:
        ShortcutCreationError: If the icon could not be written
    """
    source = bundle / f"{server}.ico"
    if not source.is_file():
        return None

    target = osu_dir / INSTALLATION_ICONS_DIR / f"{server}.ico"
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(source.read_bytes())
    except OSError as e:
        raise ShortcutCreationError("write server icon", target, str(e)) from e
    logger.debug("Installed bundled icon %s", target)
    return target


def find_server_icon(
    osu_dir: Path,
    server: str,
    icons_dir: Path | None = None,
    bundle: Traversable = BUNDLED_ICONS,
) -> Path | None:
    """Return an on-disk .ico for `server`, or None if there is none.

    Lookup order: the user-configured icons directory, the packaged icon
    (installed into `<osu_dir>/icons/`), then whatever already sits in
    `<osu_dir>/icons/`.
    """
    if server == HOME_SERVER:
        return None

    if icons_dir is not None:
        configured = icons_dir / f"{server}.ico"
        if configured.is_file():
            return configured

    installed = install_bundled_icon(osu_dir, server, bundle)
    if installed is not None:
        return installed

    existing = osu_dir / INSTALLATION_ICONS_DIR / f"{server}.ico"
    if existing.is_file():
        return existing
    return None


def shortcut_icon(
    osu_dir: Path,
    server: str,
    icons_dir: Path | None = None,
    bundle: Traversable = BUNDLED_ICONS,
) -> Path:
    """Icon to use for a shortcut; falls back to the osu! logo embedded in osu!.exe."""
    icon = find_server_icon(osu_dir, server, icons_dir, bundle)
    if icon is None:
        return osu_dir / OSU_EXE
    return icon
