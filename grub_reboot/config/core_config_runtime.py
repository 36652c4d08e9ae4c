"""Utilities for CLI entry points.

This module centralizes shared runtime helpers used by `main.py`
(logging and minimal argument parsing).
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Final

from loguru import logger

# Répertoire des logs fichier (--log-file)
LOG_DIR: Final[Path] = Path.home() / ".config" / "grub_reboot" / "logs"


def configure_logging(*, debug: bool, verbose: bool = False, log_dir: Path | None = None) -> None:
    """Configure Loguru for the whole process.

    Politique:
    - Sans flag: aucun handler -> pas de logs.
    - --verbose: INFO.
    - --debug: DEBUG (+ backtrace/diagnose).
    - log_dir: ajoute un fichier rotatif, quel que soit le niveau console.
    """
    logger.remove()

    level = "DEBUG" if debug else "INFO"

    if debug or verbose:
        logger.add(
            sys.stderr,
            level=level,
            backtrace=debug,
            diagnose=debug,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> " "<level>{level: <8}</level> " "<level>{message}</level>"
            ),
        )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "grub_reboot_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
            level=level,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            encoding="utf-8",
        )
        logger.debug(f"[Logging] Fichier de log: {log_dir}")


def parse_verbosity_flags(argv: list[str]) -> tuple[bool, bool, list[str]]:
    """Parse argv et extrait `--verbose` et `--debug`.

    Returns:
        (debug_enabled, verbose_enabled, remaining_argv)
    """
    debug = False
    verbose = False
    remaining: list[str] = []
    for arg in argv:
        if arg == "--debug":
            debug = True
        elif arg == "--verbose":
            verbose = True
        else:
            remaining.append(arg)
    return debug, verbose, remaining
