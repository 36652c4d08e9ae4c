"""Sélection de l'entrée GRUB du prochain démarrage (grub-reboot)."""

from __future__ import annotations

from loguru import logger

from ..config.core_settings import GrubRebootSettings
from ..core_exceptions import GrubRebootError
from ..models.core_boot_menu import OperationResult
from ..system.core_command_runner import CommandRunner, check_result, run_checked, run_command


class NextBootService:
    """Service d'appel à `pkexec grub-reboot <titre>`."""

    def __init__(self, settings: GrubRebootSettings | None = None, runner: CommandRunner | None = None) -> None:
        self.settings = settings or GrubRebootSettings()
        self._runner = runner or run_command

    def build_set_next_boot_command(self, identifier: str) -> list[str]:
        """argv: élévation, grub-reboot, identifiant."""
        return [self.settings.pkexec_bin, self.settings.grub_reboot_bin, identifier]

    def try_set_next_boot(self, identifier: str) -> OperationResult:
        """Comme `set_next_boot`, mais renvoie la raison d'un échec."""
        argv = self.build_set_next_boot_command(identifier)
        try:
            result = self._runner(argv, timeout=self.settings.command_timeout)
            logger.info(
                f"[NextBootService] Prochain démarrage sur {identifier}: {result.returncode}\n"
                f"{result.stdout}\n{result.stderr}"
            )
            check_result(result, argv)
        except GrubRebootError as e:
            return OperationResult.failure(e)
        return OperationResult.success(identifier)

    def set_next_boot(self, identifier: str) -> bool:
        """Programme `identifier` pour le prochain démarrage uniquement.

        Returns:
            True si grub-reboot a réussi (code 0), False sinon
        """
        outcome = self.try_set_next_boot(identifier)
        if not outcome:
            logger.warning(f"[NextBootService] {outcome.reason}")
        return outcome.ok

    def try_reboot_now(self) -> OperationResult:
        argv = [self.settings.systemctl_bin, "reboot"]
        try:
            run_checked(self._runner, argv, timeout=self.settings.command_timeout)
        except GrubRebootError as e:
            return OperationResult.failure(e)
        return OperationResult.success()

    def reboot_now(self) -> bool:
        """Redémarre la machine via systemd."""
        outcome = self.try_reboot_now()
        if not outcome:
            logger.warning(f"[NextBootService] Redémarrage impossible: {outcome.reason}")
        return outcome.ok
