"""Réglages d'exécution injectés dans les services.

Remplace le contexte implicite de l'extension hôte (chemin d'installation,
binaires) par une dataclass explicite passée à chaque service.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from .core_paths import (
    BUNDLED_DATA_DIR,
    CAT_BIN,
    CHMOD_BIN,
    CP_BIN,
    DEFAULT_COMMAND_TIMEOUT,
    GRUB_CFG_PATHS,
    GRUB_REBOOT_BIN,
    GRUB_SCRIPT_DIR,
    PKEXEC_BIN,
    PKEXEC_SHELL_BIN,
    QUICK_REBOOT_SCRIPT_MODE,
    QUICK_REBOOT_SCRIPT_NAME,
    RM_BIN,
    SHELL_BIN,
    SYSTEMCTL_BIN,
    UPDATE_GRUB_BIN,
)

ENV_EXTENSION_PATH = "GRUB_REBOOT_EXTENSION_PATH"
ENV_COMMAND_TIMEOUT = "GRUB_REBOOT_COMMAND_TIMEOUT"


@dataclass(frozen=True)
class GrubRebootSettings:  # pylint: disable=too-many-instance-attributes
    """Configuration des chemins, binaires et délais."""

    cfg_paths: tuple[str, ...] = GRUB_CFG_PATHS
    script_dir: str = GRUB_SCRIPT_DIR
    script_name: str = QUICK_REBOOT_SCRIPT_NAME
    script_mode: str = QUICK_REBOOT_SCRIPT_MODE
    extension_path: Path = field(default=BUNDLED_DATA_DIR)
    pkexec_bin: str = PKEXEC_BIN
    pkexec_shell_bin: str = PKEXEC_SHELL_BIN
    grub_reboot_bin: str = GRUB_REBOOT_BIN
    update_grub_bin: str = UPDATE_GRUB_BIN
    shell_bin: str = SHELL_BIN
    cat_bin: str = CAT_BIN
    cp_bin: str = CP_BIN
    chmod_bin: str = CHMOD_BIN
    rm_bin: str = RM_BIN
    systemctl_bin: str = SYSTEMCTL_BIN
    command_timeout: float | None = DEFAULT_COMMAND_TIMEOUT

    @property
    def script_path(self) -> str:
        """Chemin du script installé dans grub.d."""
        return f"{self.script_dir}/{self.script_name}"

    @property
    def bundled_script_path(self) -> Path:
        """Chemin de la copie embarquée du script."""
        return Path(self.extension_path) / self.script_name


def _parse_timeout(raw: str) -> float | None:
    """Convertit la valeur d'environnement en délai (<= 0 désactive le délai)."""
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"délai non fini: {raw!r}")
    if value <= 0:
        return None
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> GrubRebootSettings:
    """Construit les réglages à partir de l'environnement.

    Variables reconnues:
        GRUB_REBOOT_EXTENSION_PATH: répertoire contenant `42_custom_reboot`
        GRUB_REBOOT_COMMAND_TIMEOUT: délai en secondes (0 = pas de délai)

    Une valeur invalide est ignorée (avertissement) et la valeur par défaut conservée.
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, object] = {}

    extension_path = env.get(ENV_EXTENSION_PATH, "").strip()
    if extension_path:
        overrides["extension_path"] = Path(extension_path)
        logger.debug(f"[load_settings] extension_path={extension_path}")

    raw_timeout = env.get(ENV_COMMAND_TIMEOUT, "").strip()
    if raw_timeout:
        try:
            overrides["command_timeout"] = _parse_timeout(raw_timeout)
            logger.debug(f"[load_settings] command_timeout={overrides['command_timeout']}")
        except ValueError:
            logger.warning(f"[load_settings] {ENV_COMMAND_TIMEOUT} invalide: {raw_timeout!r}, valeur par défaut conservée")

    return GrubRebootSettings(**overrides)  # type: ignore[arg-type]
