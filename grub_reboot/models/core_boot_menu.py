"""Modèles exposés à l'application hôte."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core_exceptions import GrubNoEntriesError, GrubRebootError


@dataclass(frozen=True)
class BootMenu:
    """Menu GRUB reconstruit à chaque lecture de grub.cfg.

    entries: titre -> titre, dans l'ordre de grub.cfg
    default_identifier: titre de l'entrée par défaut, toujours présent dans `entries`
    """

    entries: dict[str, str]
    default_identifier: str

    def __post_init__(self) -> None:
        if not self.entries:
            raise GrubNoEntriesError("Menu GRUB vide")
        if self.default_identifier not in self.entries:
            raise ValueError(f"Entrée par défaut inconnue: {self.default_identifier!r}")

    @property
    def titles(self) -> list[str]:
        """Titres dans l'ordre de découverte."""
        return list(self.entries)

    def as_tuple(self) -> tuple[dict[str, str], str]:
        """Forme historique `(entrées, défaut)` attendue par l'extension."""
        return dict(self.entries), self.default_identifier


@dataclass(frozen=True)
class OperationResult:
    """Succès/échec d'une opération, avec la raison.

    Les services produisent ce résultat en interne et ne le convertissent en
    booléen qu'à la frontière publique.
    """

    ok: bool
    reason: str = ""
    error: GrubRebootError | None = field(default=None, compare=False)

    @classmethod
    def success(cls, reason: str = "") -> OperationResult:
        return cls(True, reason)

    @classmethod
    def failure(cls, error: GrubRebootError) -> OperationResult:
        return cls(False, str(error), error)

    def __bool__(self) -> bool:
        return self.ok
