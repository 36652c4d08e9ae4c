"""Point d'entrée en ligne de commande.

Ce lanceur configure le logging puis exécute une sous-commande sur le
bootloader GRUB. L'élévation (pkexec) est demandée commande par commande,
uniquement pour les opérations qui modifient le système.
"""

from __future__ import annotations

import argparse
import json
import sys

from loguru import logger

from grub_reboot.config.core_config_runtime import LOG_DIR, configure_logging, parse_verbosity_flags
from grub_reboot.core_grub_bootloader import GrubBootloader
from grub_reboot.models.core_boot_menu import BootMenu

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_UNUSABLE = 2

# Loguru installe un handler par défaut (niveau DEBUG) dès l'import.
try:
    logger.remove()
except (TypeError, ValueError):
    pass


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="grub-reboot-manager",
        description="Liste les entrées GRUB et redémarre une fois vers l'une d'elles",
        epilog="Options globales: --verbose (INFO), --debug (DEBUG)",
    )
    p.add_argument("--log-file", action="store_true", help=f"Écrire aussi les logs dans {LOG_DIR}")
    sub = p.add_subparsers(dest="cmd")

    list_p = sub.add_parser("list", help="Lister les entrées du menu GRUB")
    list_p.add_argument("-o", "--output", choices=["text", "json"], default="text")

    set_p = sub.add_parser("set", help="Choisir l'entrée du prochain démarrage (une fois)")
    set_p.add_argument("title", help="Titre exact de l'entrée (voir `list`)")
    set_p.add_argument("--reboot", action="store_true", help="Redémarrer immédiatement")

    sub.add_parser("status", help="État de GRUB et du script quick reboot")
    sub.add_parser("enable-quick-reboot", help="Installer /etc/grub.d/42_custom_reboot")
    sub.add_parser("disable-quick-reboot", help="Supprimer /etc/grub.d/42_custom_reboot")
    return p


def format_menu(menu: BootMenu, output: str) -> str:
    if output == "json":
        return json.dumps(
            {"entries": menu.titles, "default": menu.default_identifier},
            ensure_ascii=False,
            indent=2,
        )
    lines = []
    for title in menu.titles:
        marker = "*" if title == menu.default_identifier else " "
        lines.append(f"{marker} {title}")
    return "\n".join(lines)


def run_cli(args: argparse.Namespace, bootloader: GrubBootloader | None = None) -> int:
    """Exécute la sous-commande et retourne un code de sortie."""
    grub = bootloader or GrubBootloader()
    cmd = args.cmd or "list"
    logger.debug(f"[run_cli] Sous-commande: {cmd}")

    if cmd == "status":
        print(f"grub.cfg: {grub.get_config() or 'introuvable'}")
        print(f"quick reboot: {'actif' if grub.quick_reboot_enabled() else 'inactif'}")
        return EXIT_OK if grub.is_usable() else EXIT_UNUSABLE

    if cmd == "enable-quick-reboot":
        return EXIT_OK if grub.enable_quick_reboot() else EXIT_FAILED

    if cmd == "disable-quick-reboot":
        return EXIT_OK if grub.disable_quick_reboot() else EXIT_FAILED

    if not grub.is_usable():
        print("GRUB introuvable: aucun grub.cfg sur ce système.", file=sys.stderr)
        return EXIT_UNUSABLE

    menu = grub.get_boot_options()
    if menu is None:
        print("Impossible de lire les entrées GRUB.", file=sys.stderr)
        return EXIT_FAILED

    if cmd == "list":
        print(format_menu(menu, getattr(args, "output", "text")))
        return EXIT_OK

    # cmd == "set"
    if args.title not in menu.entries:
        print(f"Entrée inconnue: {args.title}", file=sys.stderr)
        return EXIT_FAILED
    if not grub.set_boot_option(args.title):
        print(f"Échec de grub-reboot pour {args.title}", file=sys.stderr)
        return EXIT_FAILED
    print(f"Prochain démarrage: {args.title}")
    if args.reboot and not grub.reboot_now():
        return EXIT_FAILED
    return EXIT_OK


def _run_main(argv: list[str] | None = None) -> int:
    """Exécute l'application et retourne un code de sortie."""
    debug, verbose, remaining_argv = parse_verbosity_flags(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(remaining_argv)

    configure_logging(debug=debug, verbose=verbose, log_dir=LOG_DIR if args.log_file else None)
    logger.debug(f"[main] Debug mode: {debug}, verbose: {verbose}, args: {remaining_argv}")

    exit_code = run_cli(args)
    logger.info(f"[main] Terminé avec le code {exit_code}")
    return exit_code


def main() -> None:
    """Point d'entrée Python (script `grub-reboot-manager`)."""
    raise SystemExit(_main_entry())


def _main_entry() -> int:
    try:
        return _run_main()
    except SystemExit as exc:
        return int(getattr(exc, "code", 1) or 0)
    except (OSError, RuntimeError, ValueError) as exc:
        logger.error(f"[main] Erreur critique: {exc}")
        return EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(_main_entry())
