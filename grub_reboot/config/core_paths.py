"""Chemins système GRUB et binaires utilisés.

Module séparé pour éviter les dépendances circulaires et clarifier les responsabilités.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

# Certains systèmes utilisent /boot/grub2/grub.cfg.
GRUB_CFG_PATHS: Final[tuple[str, ...]] = ("/boot/grub/grub.cfg", "/boot/grub2/grub.cfg")

# Répertoire des générateurs lus par update-grub
GRUB_SCRIPT_DIR: Final[str] = "/etc/grub.d"

QUICK_REBOOT_SCRIPT_NAME: Final[str] = "42_custom_reboot"
QUICK_REBOOT_SCRIPT_PATH: Final[str] = f"{GRUB_SCRIPT_DIR}/{QUICK_REBOOT_SCRIPT_NAME}"
QUICK_REBOOT_SCRIPT_MODE: Final[str] = "755"

# Copie embarquée du script (remplaçable via GRUB_REBOOT_EXTENSION_PATH)
BUNDLED_DATA_DIR: Final[Path] = Path(__file__).resolve().parent.parent / "data"

# Binaires. Sous pkexec le PATH est restreint: on garde des chemins absolus.
PKEXEC_BIN: Final[str] = "/usr/bin/pkexec"
# `pkexec sh -c ...` est résolu via le PATH de l'utilisateur.
PKEXEC_SHELL_BIN: Final[str] = "pkexec"
GRUB_REBOOT_BIN: Final[str] = "/usr/sbin/grub-reboot"
UPDATE_GRUB_BIN: Final[str] = "/usr/sbin/update-grub"
SHELL_BIN: Final[str] = "sh"
CAT_BIN: Final[str] = "/usr/bin/cat"
CP_BIN: Final[str] = "/usr/bin/cp"
CHMOD_BIN: Final[str] = "/usr/bin/chmod"
RM_BIN: Final[str] = "/usr/bin/rm"
SYSTEMCTL_BIN: Final[str] = "systemctl"

# Un prompt PolicyKit peut rester ouvert indéfiniment.
DEFAULT_COMMAND_TIMEOUT: Final[float] = 120.0
