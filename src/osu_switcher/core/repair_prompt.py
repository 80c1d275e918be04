"""Decision point for a pending osu! self-repair.

When osu! has scheduled a repair (.require_update exists) it relaunches itself
on the next start and drops the -devserver argument, so the switch would land
on the wrong server. The user decides whether to cancel the repair or let it
run and skip the relaunch.
"""

from abc import ABC, abstractmethod
from enum import Enum

import click

from osu_switcher.cli.output import user_output
from osu_switcher.core.errors import UserCancelledError


class RepairDecision(Enum):
    """Outcome of the pending-repair prompt."""

    LAUNCH = "launch"  # delete the marker and relaunch on the target server
    REPAIR = "repair"  # leave the marker, skip the relaunch


class RepairPrompt(ABC):
    """Blocking yes/no capability injected into the switch engine."""

    @abstractmethod
    def ask(self) -> RepairDecision:
        """Ask whether to launch now or allow the repair.

        Raises:
            UserCancelledError: If the user answers with anything else
        """
        ...


class RealRepairPrompt(RepairPrompt):
    """Single-keypress prompt on the terminal."""

    def ask(self) -> RepairDecision:
        user_output(
            "Detected a pending osu! repair. Continue [L]aunching or allow [R]epair? ",
            nl=False,
        )
        key = click.getchar().lower()
        user_output("")

        if key == "l":
            return RepairDecision.LAUNCH
        if key == "r":
            return RepairDecision.REPAIR
        raise UserCancelledError("choose between launching and repairing osu!")
