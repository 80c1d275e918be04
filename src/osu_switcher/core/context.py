"""Application context with dependency injection."""

from dataclasses import dataclass

from osu_switcher.core.game_process import GameProcess, RealGameProcess
from osu_switcher.core.global_config import ConfigStore, FilesystemConfigStore, GlobalConfig
from osu_switcher.core.installation import InstallationLocator, RealInstallationLocator
from osu_switcher.core.repair_prompt import RealRepairPrompt, RepairPrompt
from osu_switcher.core.shortcuts import RealShortcutInstaller, ShortcutInstaller
from osu_switcher.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback
from osu_switcher.wizard.keys import KeySource, TerminalKeySource
from osu_switcher.wizard.render import RichWizardView, WizardView


@dataclass(frozen=True)
class SwitcherContext:
    """Immutable context holding all dependencies for switcher operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    Note: system_username is None in production, meaning "ask the OS". Tests
    pin it so the per-user config file name is predictable.
    """

    game_process: GameProcess
    repair_prompt: RepairPrompt
    shortcut_installer: ShortcutInstaller
    installation_locator: InstallationLocator
    config_store: ConfigStore
    feedback: UserFeedback
    key_source: KeySource
    wizard_view: WizardView
    global_config: GlobalConfig
    system_username: str | None = None


def create_context(*, quiet: bool = False) -> SwitcherContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Raises:
        ValueError: If the global config exists but is malformed
    """
    config_store = FilesystemConfigStore()
    global_config = config_store.load()

    feedback: UserFeedback = SuppressedFeedback() if quiet else InteractiveFeedback()

    return SwitcherContext(
        game_process=RealGameProcess(),
        repair_prompt=RealRepairPrompt(),
        shortcut_installer=RealShortcutInstaller(
            shortcut_dir=global_config.shortcut_dir,
            icons_dir=global_config.icons_dir,
        ),
        installation_locator=RealInstallationLocator(),
        config_store=config_store,
        feedback=feedback,
        key_source=TerminalKeySource(),
        wizard_view=RichWizardView(),
        global_config=global_config,
    )
