"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from osu_switcher.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing progress output that's mode-aware.

    Functions call ctx.feedback methods instead of printing directly, so
    `--quiet` can silence progress without threading flags through every
    signature.

    Mode behavior:
        Interactive mode:
            - info() → stderr
            - success() → stderr, green
            - warning() → stderr, yellow

        Quiet mode:
            - info() / success() → suppressed
            - warning() → still shown
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet: only warnings are shown."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))
