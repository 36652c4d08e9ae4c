"""Service de lecture des options de démarrage GRUB.

Compose la localisation de grub.cfg, sa lecture, son décodage et son parsing
pour produire un `BootMenu`. Le menu est relu depuis le disque à chaque appel.
"""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from ..config.core_settings import GrubRebootSettings
from ..core_exceptions import (
    GrubConfigNotFoundError,
    GrubConfigReadError,
    GrubNoEntriesError,
    GrubRebootError,
)
from ..io.core_grub_cfg_locator import locate_grub_cfg
from ..io.core_grub_cfg_parser import ParsedGrubCfg, decode_grub_cfg, parse_grub_cfg
from ..models.core_boot_menu import BootMenu

ConfigReader = Callable[[str], bytes | str]


def read_config_bytes(path: str) -> bytes:
    """Lit grub.cfg en binaire."""
    with open(path, "rb") as f:
        return f.read()


def resolve_default(parsed: ParsedGrubCfg) -> str:
    """Choisit l'entrée par défaut parmi les entrées découvertes.

    Ordre de résolution:
    1. défaut déclaré égal à un titre;
    2. défaut déclaré numérique (forme native de GRUB, ex: "0"): index dans
       les éléments de premier niveau, `submenu` compris;
    3. première entrée découverte (aussi pour un défaut vide ou un index
       qui désigne un `submenu`).

    Raises:
        GrubNoEntriesError: si aucune entrée n'a été trouvée.
    """
    titles = list(parsed.entries)
    if not titles:
        raise GrubNoEntriesError("Aucune entrée menuentry dans grub.cfg")

    declared = parsed.declared_default
    if not declared:
        return titles[0]
    if declared in parsed.entries:
        return declared
    if declared.isdigit():
        index = int(declared)
        if index < len(parsed.top_level) and parsed.top_level[index] is not None:
            return parsed.top_level[index]

    logger.warning(f"[resolve_default] Défaut déclaré inconnu: {declared!r}, repli sur {titles[0]!r}")
    return titles[0]


class BootOptionsService:
    """Service de découverte des entrées du menu GRUB."""

    def __init__(
        self,
        settings: GrubRebootSettings | None = None,
        reader: ConfigReader | None = None,
    ) -> None:
        self.settings = settings or GrubRebootSettings()
        self._reader = reader or read_config_bytes

    def get_config(self) -> str | None:
        """Chemin du grub.cfg utilisé, ou None."""
        return locate_grub_cfg(self.settings.cfg_paths)

    def is_usable(self) -> bool:
        """True si un grub.cfg est présent."""
        return self.get_config() is not None

    def load_boot_menu(self) -> BootMenu:
        """Construit le menu GRUB.

        Raises:
            GrubConfigNotFoundError: aucun grub.cfg
            GrubConfigReadError: grub.cfg illisible ou mal encodé
            GrubNoEntriesError: aucune entrée
        """
        path = self.get_config()
        if path is None:
            raise GrubConfigNotFoundError(
                f"grub.cfg introuvable (candidats: {', '.join(self.settings.cfg_paths)})"
            )

        logger.debug(f"[BootOptionsService] Lecture {path}")
        try:
            content = self._reader(path)
        except OSError as e:
            raise GrubConfigReadError(f"Impossible de lire {path}: {e}") from e

        parsed = parse_grub_cfg(decode_grub_cfg(content))
        default = resolve_default(parsed)

        for key, value in parsed.entries.items():
            logger.info(f"{key} = {value}")

        return BootMenu(entries=parsed.entries, default_identifier=default)

    def get_boot_options(self) -> BootMenu | None:
        """Retourne le menu GRUB, ou None si la fonctionnalité est indisponible."""
        try:
            menu = self.load_boot_menu()
        except GrubRebootError as e:
            logger.warning(f"[BootOptionsService] {e}")
            return None
        logger.success(
            f"[BootOptionsService] {len(menu.entries)} entrée(s), défaut={menu.default_identifier!r}"
        )
        return menu
