"""Pydantic models for JSON output schemas.

These models validate the structures emitted by `--json` so scripts (and
shortcut launchers) get a stable shape.
"""

from pydantic import BaseModel, ConfigDict, Field


class StashedServerInfo(BaseModel):
    """One archived identity. Passwords are never included."""

    model_config = ConfigDict(strict=True)

    server: str
    username: str
    has_password: bool


class StatusCommandResponse(BaseModel):
    """JSON response schema for `osu-switcher status`."""

    model_config = ConfigDict(strict=True)

    osu_dir: str
    active_server: str | None
    active_username: str | None
    stash_file: str
    stashed: list[StashedServerInfo]


class SwitchCommandResponse(BaseModel):
    """JSON response schema for `osu-switcher switch --json`."""

    model_config = ConfigDict(strict=True)

    outcome: str = Field(..., pattern="^(relaunched|no_managed_config|deferred_to_repair)$")
    previous_server: str | None
    target_server: str
    swapped: bool
    warnings: list[str]
