"""Service de gestion du script « quick reboot » (/etc/grub.d/42_custom_reboot).

Le script masque le menu GRUB (timeout=0) lorsque le démarrage a été
programmé par grub-reboot. L'installation et la suppression enchaînent la
modification de grub.d et update-grub dans une seule commande shell afin de
ne demander l'élévation qu'une fois.
"""

from __future__ import annotations

import shlex

from loguru import logger

from ..config.core_settings import GrubRebootSettings
from ..core_exceptions import GrubRebootError
from ..models.core_boot_menu import OperationResult
from ..system.core_command_runner import CommandRunner, run_checked, run_command


class QuickRebootService:
    """Installe, supprime et détecte le script quick reboot."""

    def __init__(self, settings: GrubRebootSettings | None = None, runner: CommandRunner | None = None) -> None:
        self.settings = settings or GrubRebootSettings()
        self._runner = runner or run_command
        logger.debug(f"[QuickRebootService] Initialisé avec script: {self.settings.script_path}")

    def _privileged_shell(self, script: str) -> list[str]:
        return [self.settings.pkexec_shell_bin, self.settings.shell_bin, "-c", script]

    def build_enable_command(self) -> list[str]:
        """argv: pkexec sh -c "cp ... && chmod 755 ... && update-grub"."""
        s = self.settings
        target = shlex.quote(s.script_path)
        script = " && ".join(
            [
                f"{s.cp_bin} {shlex.quote(str(s.bundled_script_path))} {target}",
                f"{s.chmod_bin} {s.script_mode} {target}",
                s.update_grub_bin,
            ]
        )
        return self._privileged_shell(script)

    def build_disable_command(self) -> list[str]:
        """argv: pkexec sh -c "rm ... && update-grub"."""
        s = self.settings
        script = f"{s.rm_bin} {shlex.quote(s.script_path)} && {s.update_grub_bin}"
        return self._privileged_shell(script)

    def build_status_command(self) -> list[str]:
        return [self.settings.cat_bin, self.settings.script_path]

    def _run(self, argv: list[str]) -> OperationResult:
        try:
            run_checked(self._runner, argv, timeout=self.settings.command_timeout)
        except GrubRebootError as e:
            return OperationResult.failure(e)
        return OperationResult.success()

    def try_enable(self) -> OperationResult:
        logger.info(f"[QuickRebootService] Installation de {self.settings.script_path}")
        return self._run(self.build_enable_command())

    def try_disable(self) -> OperationResult:
        logger.info(f"[QuickRebootService] Suppression de {self.settings.script_path}")
        return self._run(self.build_disable_command())

    def try_is_enabled(self) -> OperationResult:
        return self._run(self.build_status_command())

    def enable(self) -> bool:
        """Copie le script dans grub.d, le rend exécutable et régénère grub.cfg.

        Returns:
            True si la commande s'est terminée avec le code 0
        """
        outcome = self.try_enable()
        if outcome:
            logger.success(f"[QuickRebootService] Script installé: {self.settings.script_name}")
        else:
            logger.warning(f"[QuickRebootService] Installation échouée: {outcome.reason}")
        return outcome.ok

    def disable(self) -> bool:
        """Supprime le script de grub.d et régénère grub.cfg."""
        outcome = self.try_disable()
        if outcome:
            logger.success(f"[QuickRebootService] Script supprimé: {self.settings.script_name}")
        else:
            logger.warning(f"[QuickRebootService] Suppression échouée: {outcome.reason}")
        return outcome.ok

    def is_enabled(self) -> bool:
        """True si le script est présent dans grub.d.

        Une lecture en échec est le signal normal « non installé ».
        """
        outcome = self.try_is_enabled()
        if outcome:
            logger.info(f"{self.settings.script_path} found")
        else:
            logger.warning(f"{self.settings.script_path} not found ({outcome.reason})")
        return outcome.ok

    @staticmethod
    def can_quick_reboot() -> bool:
        """GRUB supporte toujours le mécanisme de script grub.d."""
        return True
