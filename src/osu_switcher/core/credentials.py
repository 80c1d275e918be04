"""Credential types and the two on-disk stores that hold them.

ActiveSlot lives in osu!'s own per-user config (unnamed section, fields
Username/Password/CredentialEndpoint). The Stash lives in osu!switcher.ini,
one section per server that is *not* currently active.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from osu_switcher.core.errors import ConfigCorruptedError, ConfigWriteError
from osu_switcher.core.ini_store import IniDocument, IniParseError
from osu_switcher.core.servers import endpoint_for_server, server_from_endpoint

logger = logging.getLogger(__name__)

USERNAME_KEY = "Username"
PASSWORD_KEY = "Password"
ENDPOINT_KEY = "CredentialEndpoint"


@dataclass(frozen=True)
class Identity:
    """One login credential pair. The password is osu!'s encrypted form, never plaintext."""

    username: str
    password: str

    @staticmethod
    def empty() -> "Identity":
        return Identity(username="", password="")


@dataclass(frozen=True)
class ActiveSlot:
    """The identity osu! will log in with, and the server it logs in to."""

    server: str
    identity: Identity


class ActiveSlotStore:
    """Read/write access to osu!.<user>.cfg."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._doc: IniDocument | None = None

    def load(self) -> ActiveSlot:
        try:
            self._doc = IniDocument.load(self.path, separator=" = ")
        except (IniParseError, UnicodeDecodeError) as e:
            raise ConfigCorruptedError("parse osu! user config", self.path, str(e)) from e
        except OSError as e:
            raise ConfigCorruptedError("read osu! user config", self.path, str(e)) from e

        slot = ActiveSlot(
            server=server_from_endpoint(self._doc.get(None, ENDPOINT_KEY) or ""),
            identity=Identity(
                username=self._doc.get(None, USERNAME_KEY) or "",
                password=self._doc.get(None, PASSWORD_KEY) or "",
            ),
        )
        logger.debug("Active slot: server=%s username=%s", slot.server, slot.identity.username)
        return slot

    def replace(self, slot: ActiveSlot) -> None:
        """Stage a new active slot; nothing is written until save()."""
        doc = self._require_loaded()
        doc.set(None, USERNAME_KEY, slot.identity.username)
        doc.set(None, PASSWORD_KEY, slot.identity.password)
        doc.set(None, ENDPOINT_KEY, endpoint_for_server(slot.server))

    def save(self) -> None:
        doc = self._require_loaded()
        try:
            doc.write(self.path)
        except OSError as e:
            raise ConfigWriteError("write osu! user config", self.path, str(e)) from e

    def _require_loaded(self) -> IniDocument:
        if self._doc is None:
            raise RuntimeError(f"{self.path} must be loaded before it is modified")
        return self._doc


class StashStore:
    """Read/write access to osu!switcher.ini."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._doc: IniDocument | None = None

    def load(self) -> dict[str, Identity]:
        try:
            self._doc = IniDocument.load(self.path)
        except (IniParseError, UnicodeDecodeError) as e:
            raise ConfigCorruptedError("parse switcher config", self.path, str(e)) from e
        except OSError as e:
            raise ConfigCorruptedError("read switcher config", self.path, str(e)) from e

        stash = {
            server: Identity(
                username=self._doc.get(server, USERNAME_KEY) or "",
                password=self._doc.get(server, PASSWORD_KEY) or "",
            )
            for server in self._doc.section_names()
        }
        logger.debug("Stash holds %d server(s): %s", len(stash), ", ".join(stash))
        return stash

    def put(self, server: str, identity: Identity) -> None:
        """Stage an entry for `server`, overwriting any previous one."""
        doc = self._require_loaded()
        doc.set(server, USERNAME_KEY, identity.username)
        doc.set(server, PASSWORD_KEY, identity.password)

    def save(self) -> None:
        doc = self._require_loaded()
        try:
            doc.write(self.path)
        except OSError as e:
            raise ConfigWriteError("write switcher config", self.path, str(e)) from e

    def _require_loaded(self) -> IniDocument:
        if self._doc is None:
            raise RuntimeError(f"{self.path} must be loaded before it is modified")
        return self._doc
