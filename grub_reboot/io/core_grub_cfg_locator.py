"""Localisation de grub.cfg parmi des chemins candidats."""

from __future__ import annotations

import os
from collections.abc import Iterable

from loguru import logger

from ..config.core_paths import GRUB_CFG_PATHS


def locate_grub_cfg(candidates: Iterable[str] = GRUB_CFG_PATHS) -> str | None:
    """Retourne le premier chemin candidat existant, ou None.

    L'absence de grub.cfg est un résultat normal (autre bootloader), pas une erreur.
    """
    ordered = list(candidates)
    for candidate in ordered:
        if os.path.exists(candidate):
            logger.debug(f"[locate_grub_cfg] Trouvé: {candidate}")
            return candidate
    logger.debug(f"[locate_grub_cfg] grub.cfg introuvable (candidats: {', '.join(ordered)})")
    return None
