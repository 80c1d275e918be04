"""Global configuration data structures and loading.

Provides immutable config data loaded from ~/.osu-switcher/config.toml (or
the file named by $OSU_SWITCHER_CONFIG). The file is optional; every field
has a default.

Example config:
    osu_dir = "D:\\osu!"
    extra_servers = ["my.private.server"]
    icons_dir = "D:\\icons"
    shortcut_dir = "C:\\Users\\me\\Desktop"
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

import tomlkit

CONFIG_ENV_VAR = "OSU_SWITCHER_CONFIG"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in SwitcherContext.
    """

    osu_dir: Path | None = None
    extra_servers: tuple[str, ...] = field(default_factory=tuple)
    icons_dir: Path | None = None
    shortcut_dir: Path | None = None


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".osu-switcher" / "config.toml"


def _optional_path(data: dict, key: str, config_path: Path) -> Path | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string in {config_path}")
    return Path(value).expanduser()


def parse_global_config(text: str, config_path: Path) -> GlobalConfig:
    """Parse TOML text into a GlobalConfig.

    Raises:
        ValueError: If the TOML is malformed or a field has the wrong type
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed config {config_path}: {e}") from e

    extra = data.get("extra_servers", [])
    if not isinstance(extra, list) or not all(isinstance(s, str) for s in extra):
        raise ValueError(f"'extra_servers' must be a list of strings in {config_path}")

    return GlobalConfig(
        osu_dir=_optional_path(data, "osu_dir", config_path),
        extra_servers=tuple(extra),
        icons_dir=_optional_path(data, "icons_dir", config_path),
        shortcut_dir=_optional_path(data, "shortcut_dir", config_path),
    )


class ConfigStore(ABC):
    """Abstract interface for global config persistence.

    Enables in-memory implementations for tests without touching the
    filesystem.
    """

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load the config, returning defaults if none exists.

        Raises:
            ValueError: If the config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Persist the config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Location of the config (for messages and debugging)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation backed by a TOML file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._path = config_path if config_path is not None else default_config_path()

    def path(self) -> Path:
        return self._path

    def load(self) -> GlobalConfig:
        if not self._path.exists():
            return GlobalConfig()
        return parse_global_config(self._path.read_text(encoding="utf-8"), self._path)

    def save(self, config: GlobalConfig) -> None:
        """Write config.toml, preserving comments and unrelated keys via tomlkit."""
        self._path.parent.mkdir(parents=True, exist_ok=True)

        if self._path.exists():
            doc = tomlkit.parse(self._path.read_text(encoding="utf-8"))
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("osu-switcher configuration"))

        _set_or_remove(doc, "osu_dir", str(config.osu_dir) if config.osu_dir else None)
        if config.extra_servers:
            doc["extra_servers"] = list(config.extra_servers)
        elif "extra_servers" in doc:
            del doc["extra_servers"]
        _set_or_remove(doc, "icons_dir", str(config.icons_dir) if config.icons_dir else None)
        _set_or_remove(
            doc, "shortcut_dir", str(config.shortcut_dir) if config.shortcut_dir else None
        )

        self._path.write_text(tomlkit.dumps(doc), encoding="utf-8")


def _set_or_remove(doc: tomlkit.TOMLDocument, key: str, value: str | None) -> None:
    if value is None:
        if key in doc:
            del doc[key]
    else:
        doc[key] = value
