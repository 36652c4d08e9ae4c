"""Extraction des entrées GRUB depuis grub.cfg (lecture seule).

Deux règles indépendantes sont appliquées à chaque ligne:
- `menuentry '<titre>'` / `menuentry "<titre>"` en début de ligne;
- `set default="<valeur>"`, la dernière occurrence du fichier gagnant.

Le titre sert à la fois de libellé et d'identifiant transmis à grub-reboot.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

from loguru import logger

from ..core_exceptions import GrubConfigReadError

# Le titre s'arrête à la première quote, simple ou double.
_MENUENTRY_RE: Final = re.compile(r"^menuentry ['\"]([^'\"]+)")
_SUBMENU_RE: Final = re.compile(r"^submenu ['\"]([^'\"]+)")
# Jeu de caractères conservé tel quel pour rester compatible avec les grub.cfg existants.
_DEFAULT_RE: Final = re.compile(r"(?<=set default=\")([A-Za-z\- ()/0-9]*)(?=\")")


@dataclass
class ParsedGrubCfg:
    """Résultat brut du parsing de grub.cfg.

    entries: titre -> titre, dans l'ordre de découverte
    declared_default: valeur de `set default="..."`, ou None
    top_level: éléments de premier niveau dans l'ordre du fichier, tels que
        GRUB les numérote (titre d'entrée, ou None pour un `submenu`)
    """

    entries: dict[str, str] = field(default_factory=dict)
    declared_default: str | None = None
    top_level: list[str | None] = field(default_factory=list)


def extract_menuentry_title(line: str) -> str | None:
    """Extrait le titre d'une ligne `menuentry`, ou None."""
    m = _MENUENTRY_RE.match(line)
    if m:
        return m.group(1)
    return None


def is_submenu(line: str) -> bool:
    """True si la ligne ouvre un `submenu` de premier niveau."""
    return _SUBMENU_RE.match(line) is not None


def extract_default(line: str) -> str | None:
    """Extrait la valeur de `set default="..."`, ou None."""
    m = _DEFAULT_RE.search(line)
    if m:
        return m.group(1)
    return None


def parse_grub_cfg(text: str) -> ParsedGrubCfg:
    """Parse le texte de grub.cfg en entrées + défaut déclaré."""
    parsed = ParsedGrubCfg()
    lines = text.split("\n")
    logger.debug(f"[parse_grub_cfg] Parsing {len(lines)} lignes")

    for line in lines:
        title = extract_menuentry_title(line)
        if title is not None:
            parsed.entries[title] = title
            parsed.top_level.append(title)
        elif is_submenu(line):
            parsed.top_level.append(None)

        default = extract_default(line)
        if default is not None:
            parsed.declared_default = default

    logger.debug(
        f"[parse_grub_cfg] {len(parsed.entries)} entrée(s), défaut déclaré={parsed.declared_default!r}"
    )
    return parsed


def decode_grub_cfg(content: bytes | bytearray | memoryview | str) -> str:
    """Décode le contenu brut de grub.cfg.

    Accepte indifféremment des octets ou un texte déjà décodé.

    Raises:
        GrubConfigReadError: si les octets ne sont pas de l'UTF-8 valide.
    """
    if isinstance(content, str):
        return content
    try:
        return bytes(content).decode("utf-8")
    except UnicodeDecodeError as e:
        raise GrubConfigReadError(f"grub.cfg illisible (encodage invalide): {e}") from e
