"""Façade GRUB pour l'application hôte.

Regroupe les services sous l'interface « bootloader » attendue par
l'extension: lister les entrées, programmer le prochain démarrage et gérer le
script quick reboot. Aucune exception ne sort de cette classe.
"""

from __future__ import annotations

from loguru import logger

from .config.core_settings import GrubRebootSettings, load_settings
from .models.core_boot_menu import BootMenu
from .services.core_boot_options_service import BootOptionsService, ConfigReader
from .services.core_next_boot_service import NextBootService
from .services.core_quick_reboot_service import QuickRebootService
from .system.core_command_runner import CommandRunner, run_command


class GrubBootloader:
    """Bootloader GRUB: découverte des entrées et redémarrage ciblé."""

    name = "grub"

    def __init__(
        self,
        settings: GrubRebootSettings | None = None,
        runner: CommandRunner | None = None,
        reader: ConfigReader | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        runner = runner or run_command
        self.boot_options = BootOptionsService(self.settings, reader=reader)
        self.next_boot = NextBootService(self.settings, runner)
        self.quick_reboot = QuickRebootService(self.settings, runner)
        logger.debug(f"[GrubBootloader] Initialisé (extension_path={self.settings.extension_path})")

    def get_config(self) -> str | None:
        return self.boot_options.get_config()

    def is_usable(self) -> bool:
        return self.boot_options.is_usable()

    def get_boot_options(self) -> BootMenu | None:
        return self.boot_options.get_boot_options()

    def set_boot_option(self, identifier: str) -> bool:
        return self.next_boot.set_next_boot(identifier)

    def reboot_now(self) -> bool:
        return self.next_boot.reboot_now()

    def enable_quick_reboot(self) -> bool:
        return self.quick_reboot.enable()

    def disable_quick_reboot(self) -> bool:
        return self.quick_reboot.disable()

    def quick_reboot_enabled(self) -> bool:
        return self.quick_reboot.is_enabled()

    def can_quick_reboot(self) -> bool:
        return self.quick_reboot.can_quick_reboot()
