"""Reading and writing metadata.json, including the config.json migration."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from beadsconfig.models import CONFIG_FILE_NAME, LEGACY_CONFIG_FILE_NAME, Config

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# Owner read/write only; metadata.json may sit next to credentials.
CONFIG_FILE_MODE = 0o600


class ConfigError(Exception):
    """Base class for configuration file failures.

    ``path`` is the file involved and ``phase`` one of ``"read"``,
    ``"parse"``, ``"write"`` or ``"migrate"``.
    """

    phase = ""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ConfigReadError(ConfigError):
    phase = "read"


class ConfigParseError(ConfigError):
    phase = "parse"


class ConfigWriteError(ConfigError):
    phase = "write"


class ConfigMigrationError(ConfigError):
    phase = "migrate"


def config_path(beads_dir: PathLike) -> Path:
    return Path(beads_dir) / CONFIG_FILE_NAME


def _read(path: Path, what: str) -> Optional[bytes]:
    """Return the file contents, or None if it does not exist."""
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ConfigReadError(f"reading {what} {path}: {exc}", path) from exc


def _parse(data: bytes, path: Path, what: str) -> Config:
    try:
        return Config.model_validate_json(data)
    except ValidationError as exc:
        raise ConfigParseError(f"parsing {what} {path}: {exc}", path) from exc


def load(beads_dir: PathLike) -> Optional[Config]:
    """Load metadata.json from *beads_dir*.

    Falls back to the legacy config.json, which is rewritten as
    metadata.json and then removed. Returns None when neither file
    exists.
    """
    path = config_path(beads_dir)
    data = _read(path, "config")
    if data is not None:
        return _parse(data, path, "config")

    legacy_path = Path(beads_dir) / LEGACY_CONFIG_FILE_NAME
    data = _read(legacy_path, "legacy config")
    if data is None:
        return None

    cfg = _parse(data, legacy_path, "legacy config")
    try:
        save(beads_dir, cfg)
    except ConfigWriteError as exc:
        raise ConfigMigrationError(
            f"migrating {legacy_path} to {CONFIG_FILE_NAME}: {exc}", exc.path
        ) from exc
    logger.info("Migrated %s to %s", legacy_path, path)

    try:
        legacy_path.unlink()
    except OSError as exc:
        logger.warning("Could not remove legacy config %s: %s", legacy_path, exc)

    return cfg


def save(beads_dir: PathLike, cfg: Config) -> None:
    """Write *cfg* to metadata.json with owner-only permissions."""
    path = config_path(beads_dir)
    text = json.dumps(cfg.to_json_dict(), indent=2)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, CONFIG_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        # os.open only applies the mode when it creates the file.
        os.chmod(path, CONFIG_FILE_MODE)
    except OSError as exc:
        raise ConfigWriteError(f"writing config {path}: {exc}", path) from exc
