"""Découverte des entrées GRUB et redémarrage ponctuel vers un autre système."""

from grub_reboot.config.core_settings import GrubRebootSettings, load_settings
from grub_reboot.core_exceptions import (
    GrubCommandError,
    GrubConfigNotFoundError,
    GrubConfigReadError,
    GrubNoEntriesError,
    GrubRebootError,
)
from grub_reboot.core_grub_bootloader import GrubBootloader
from grub_reboot.models.core_boot_menu import BootMenu, OperationResult
from grub_reboot.system.core_command_runner import CommandResult, run_command

__all__ = [
    "BootMenu",
    "CommandResult",
    "GrubBootloader",
    "GrubCommandError",
    "GrubConfigNotFoundError",
    "GrubConfigReadError",
    "GrubNoEntriesError",
    "GrubRebootError",
    "GrubRebootSettings",
    "OperationResult",
    "load_settings",
    "run_command",
]
