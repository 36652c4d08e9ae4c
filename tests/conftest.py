"""Configuration pytest: harnais de tests avec sécurité.

Active:
- Blocage subprocess (aucune commande pkexec/update-grub réelle)
- Loguru sans enqueue
- Faux runner de commandes modélisant /etc/grub.d
"""

import shlex
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path

# Ajouter le dossier racine du projet au PYTHONPATH
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from loguru import logger

from grub_reboot.config.core_settings import GrubRebootSettings
from grub_reboot.core_exceptions import GrubCommandError
from grub_reboot.system.core_command_runner import CommandResult


def pytest_configure(config):
    """Configuration globale de pytest."""
    del config
    # Stabiliser Loguru pendant les tests: pas d'enqueue (thread/queue).
    try:
        logger.remove()
        logger.add(sys.stderr, enqueue=False)
    except Exception:
        pass


@pytest.fixture(autouse=True)
def secure_subprocess(monkeypatch):
    """Empêche les appels subprocess réels pendant les tests."""

    def mocked_run(*args, **kwargs):
        cmd = args[0] if args else kwargs.get("args")
        raise RuntimeError(f"SÉCURITÉ : Appel subprocess non autorisé dans les tests : {cmd}")

    monkeypatch.setattr(subprocess, "run", mocked_run)
    monkeypatch.setattr(subprocess, "Popen", mocked_run)
    monkeypatch.setattr(subprocess, "call", mocked_run)
    monkeypatch.setattr(subprocess, "check_call", mocked_run)
    monkeypatch.setattr(subprocess, "check_output", mocked_run)

    yield


@dataclass
class RecordingRunner:
    """Runner qui enregistre les argv et renvoie un résultat fixe (ou lève)."""

    result: CommandResult = field(default_factory=lambda: CommandResult(0, "", ""))
    error: Exception | None = None
    calls: list[list[str]] = field(default_factory=list)
    timeouts: list[float | None] = field(default_factory=list)

    def __call__(self, argv, *, timeout=None):
        self.calls.append(list(argv))
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.result


@dataclass
class FakeGrubFilesystem:
    """Runner qui interprète les commandes quick reboot sur un /etc/grub.d simulé."""

    bundled: dict[str, str]
    grub_d: dict[str, str] = field(default_factory=dict)
    update_grub_calls: int = 0
    update_grub_fails: bool = False

    def _update_grub(self) -> bool:
        self.update_grub_calls += 1
        return not self.update_grub_fails

    def _run_shell(self, script: str) -> int:
        for step in script.split(" && "):
            parts = shlex.split(step)
            name = Path(parts[0]).name
            if name == "cp":
                src, dst = parts[1], parts[2]
                if src not in self.bundled:
                    return 1
                self.grub_d[dst] = self.bundled[src]
            elif name == "chmod":
                if parts[2] not in self.grub_d:
                    return 1
            elif name == "rm":
                if self.grub_d.pop(parts[1], None) is None:
                    return 1
            elif name == "update-grub":
                if not self._update_grub():
                    return 1
            else:
                return 127
        return 0

    def __call__(self, argv, *, timeout=None):
        del timeout
        argv = list(argv)
        if Path(argv[0]).name == "pkexec" and argv[1:3] == ["sh", "-c"]:
            return CommandResult(self._run_shell(argv[3]), "", "")
        if Path(argv[0]).name == "cat":
            content = self.grub_d.get(argv[1])
            if content is None:
                return CommandResult(1, "", f"cat: {argv[1]}: No such file or directory")
            return CommandResult(0, content, "")
        raise GrubCommandError("commande inattendue", command=shlex.join(argv))


@pytest.fixture
def settings(tmp_path) -> GrubRebootSettings:
    """Réglages pointant vers des grub.cfg temporaires."""
    return GrubRebootSettings(
        cfg_paths=(str(tmp_path / "grub" / "grub.cfg"), str(tmp_path / "grub2" / "grub.cfg")),
        extension_path=Path("/opt/ext"),
        command_timeout=5.0,
    )


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def fake_grub_fs(settings) -> FakeGrubFilesystem:
    return FakeGrubFilesystem(bundled={str(settings.bundled_script_path): "#!/bin/sh\n"})


def pytest_sessionfinish(session, exitstatus):
    """Important pour Loguru: arrêter proprement les handlers en fin de session."""
    del session, exitstatus
    try:
        logger.complete()
    except Exception:
        pass
    try:
        logger.remove()
    except Exception:
        pass
