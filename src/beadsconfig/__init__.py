"""beadsconfig — metadata.json loading, migration and path resolution."""

from __future__ import annotations

__version__ = "0.1.0"

from beadsconfig.configfile import (
    ConfigError,
    ConfigMigrationError,
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
    config_path,
    load,
    save,
)
from beadsconfig.layout import database_path, jsonl_path
from beadsconfig.models import Config

__all__ = [
    "__version__",
    "Config",
    "ConfigError",
    "ConfigMigrationError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigWriteError",
    "config_path",
    "database_path",
    "jsonl_path",
    "load",
    "save",
]
