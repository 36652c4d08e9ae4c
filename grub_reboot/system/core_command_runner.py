"""Exécution des commandes système (pkexec, grub-reboot, update-grub, cat).

DEV: Les services ne dépendent que du protocole `CommandRunner`; les tests
injectent un faux runner et aucune commande réelle n'est lancée.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from ..core_exceptions import GrubCommandError


@dataclass(frozen=True)
class CommandResult:
    """Résultat d'une commande système lancée par le core."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        """True si la commande s'est terminée avec le code 0."""
        return self.returncode == 0


class CommandRunner(Protocol):
    """Lance une commande et renvoie son code retour et ses sorties.

    Lève GrubCommandError si la commande ne peut pas être lancée.
    """

    def __call__(self, argv: Sequence[str], *, timeout: float | None = None) -> CommandResult: ...


def format_command(argv: Sequence[str]) -> str:
    """Représentation shell d'une commande, pour les logs et les erreurs."""
    return shlex.join(list(argv))


def run_command(argv: Sequence[str], *, timeout: float | None = None) -> CommandResult:
    """Exécute `argv` et renvoie stdout/stderr + code retour.

    Un code retour non nul n'est pas une erreur ici: c'est à l'appelant de
    l'interpréter. En revanche un binaire introuvable, un refus d'exécution ou
    un dépassement de délai lèvent GrubCommandError.
    """
    command = format_command(argv)
    logger.debug(f"[run_command] Exécution: {command} (timeout={timeout})")
    try:
        res = subprocess.run(list(argv), capture_output=True, text=True, check=False, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        logger.error(f"[run_command] ERREUR: délai dépassé ({timeout}s) pour {command}")
        raise GrubCommandError(f"Délai dépassé après {timeout}s", command=command) from e
    except OSError as e:
        # FileNotFoundError / PermissionError: binaire absent ou non exécutable
        logger.error(f"[run_command] ERREUR: impossible de lancer {command} - {e}")
        raise GrubCommandError(f"Impossible de lancer la commande: {e}", command=command) from e

    logger.debug(
        f"[run_command] Résultat: returncode={res.returncode}, "
        f"stdout_len={len(res.stdout)}, stderr_len={len(res.stderr)}"
    )
    return CommandResult(res.returncode, res.stdout, res.stderr)


def check_result(result: CommandResult, argv: Sequence[str]) -> CommandResult:
    """Lève GrubCommandError si le code retour de `argv` est non nul."""
    if not result.ok:
        raise GrubCommandError(
            "La commande a échoué",
            command=format_command(argv),
            returncode=result.returncode,
            stderr=result.stderr,
        )
    return result


def run_checked(
    runner: CommandRunner, argv: Sequence[str], *, timeout: float | None = None
) -> CommandResult:
    """Comme `runner(argv)`, mais lève GrubCommandError si le code retour est non nul."""
    return check_result(runner(argv, timeout=timeout), argv)
