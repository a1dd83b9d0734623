"""Runtime configuration — override via environment variables.

Read these once at the command boundary and pass the results down;
nothing below the CLI consults ``os.environ`` itself.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

# Set BD_LEGACY_LAYOUT=1 to force the flat layout for the database file,
# whatever the config or the directory contents say.
LEGACY_LAYOUT_ENV = "BD_LEGACY_LAYOUT"

# Base directory holding metadata.json when none is given on the command line.
# Override with BEADS_DIR=/path/to/.beads
BEADS_DIR_ENV = "BEADS_DIR"
DEFAULT_BEADS_DIR = ".beads"


def legacy_layout_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True only when the override is set to the literal ``"1"``."""
    env = os.environ if environ is None else environ
    return env.get(LEGACY_LAYOUT_ENV) == "1"


def default_beads_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    return Path(env.get(BEADS_DIR_ENV) or DEFAULT_BEADS_DIR)
