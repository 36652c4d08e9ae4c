"""Module d'exceptions personnalisées pour GRUB Reboot Manager.

Fournit une hiérarchie d'exceptions utilisée en interne par les services.
Aucune de ces exceptions ne traverse l'API publique: chaque opération les
capture à sa frontière et renvoie un résultat négatif (False / None).
"""

from __future__ import annotations


class GrubRebootError(Exception):
    """Exception de base pour toutes les erreurs de GRUB Reboot Manager.

    Example:
        try:
            service.load_boot_menu()
        except GrubRebootError as e:
            logger.warning(f"GRUB indisponible: {e}")
    """


class GrubConfigNotFoundError(GrubRebootError):
    """Aucun grub.cfg trouvé parmi les chemins candidats.

    Example:
        if locate_grub_cfg() is None:
            raise GrubConfigNotFoundError("grub.cfg introuvable")
    """


class GrubConfigReadError(GrubRebootError):
    """grub.cfg existe mais ne peut pas être lu ou décodé."""


class GrubNoEntriesError(GrubRebootError):
    """grub.cfg ne déclare aucune entrée `menuentry` exploitable."""


class GrubCommandError(GrubRebootError):
    """Erreur lors de l'exécution d'une commande système.

    Levée lorsqu'une commande (pkexec, grub-reboot, update-grub, cat)
    ne peut pas être lancée, dépasse le délai imparti ou échoue.

    Attributes:
        command: La commande qui a échoué
        returncode: Code de retour
        stderr: Sortie d'erreur
    """

    def __init__(
        self,
        message: str,
        command: str | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ):
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        """Représentation textuelle enrichie de l'erreur."""
        parts = [super().__str__()]
        if self.command:
            parts.append(f"Commande: {self.command}")
        if self.returncode is not None:
            parts.append(f"Code retour: {self.returncode}")
        if self.stderr:
            parts.append(f"Stderr: {self.stderr[:200]}")  # Limiter la taille
        return " | ".join(parts)
