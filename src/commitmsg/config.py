"""Configuration loading for the commit message verifier."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

import yaml

from commitmsg.verbs import default_verbs_path

logger = logging.getLogger("commitmsg")

CONFIG_FILENAMES = ["commitmsg.yml", "commitmsg.yaml", ".commitmsg.yml"]

KNOWN_KEYS = {"verbs_file"}


@dataclass
class VerifierConfig:
    """Inputs of a verification run that would otherwise come from the process environment."""
    verbs_path: Path = field(default_factory=default_verbs_path)
    stream: TextIO | None = None
    config_path: Path | None = None
    problems: list[str] = field(default_factory=list)


def find_config_file(project_dir: str) -> Path | None:
    root = Path(project_dir)
    for filename in CONFIG_FILENAMES:
        config_path = root / filename
        if config_path.is_file():
            return config_path
    return None


def _fallback(stream: TextIO | None, config_path: Path, problem: str) -> VerifierConfig:
    logger.debug("Ignoring config %s: %s", config_path, problem)
    return VerifierConfig(stream=stream, config_path=config_path, problems=[problem])


def load_config(project_dir: str, stream: TextIO | None = None) -> VerifierConfig:
    """Load config from commitmsg.yml in the project directory, or use defaults.

    Problems with the file are logged at DEBUG and kept on the returned
    config so the hook stays silent; `doctor` reports them.
    """
    config_path = find_config_file(project_dir)
    if config_path is None:
        return VerifierConfig(stream=stream)

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
        return _fallback(stream, config_path, f"cannot be parsed ({exc})")

    if not isinstance(raw, dict):
        return _fallback(stream, config_path, "expected a mapping")

    problems = [f"unknown key '{key}'" for key in sorted(str(k) for k in set(raw) - KNOWN_KEYS)]
    for problem in problems:
        logger.debug("%s: %s", config_path, problem)

    verbs_path = default_verbs_path()
    verbs_file = raw.get("verbs_file")
    if verbs_file:
        verbs_path = Path(str(verbs_file)).expanduser()
        if not verbs_path.is_absolute():
            verbs_path = Path(project_dir) / verbs_path

    return VerifierConfig(
        verbs_path=verbs_path,
        stream=stream,
        config_path=config_path,
        problems=problems,
    )
