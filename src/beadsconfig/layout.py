"""Where the database and export files live inside the base directory.

Two layouts exist on disk: flat (``<dir>/beads.db``) and nested
(``<dir>/var/beads.db``). Reads look in both places, nested first, so a
half-finished move between layouts keeps working. Only a database that
does not exist yet is placed by layout preference.

None of these functions read the environment; the CLI resolves
``BD_LEGACY_LAYOUT`` once and passes ``legacy_layout`` in.
"""

from __future__ import annotations

import os
from pathlib import Path

from beadsconfig.configfile import PathLike
from beadsconfig.models import DEFAULT_JSONL_EXPORT, LAYOUT_V2, Config

VAR_DIR_NAME = "var"


def database_path(
    beads_dir: PathLike, cfg: Config, *, legacy_layout: bool = False
) -> Path:
    """Return the database file path for *cfg*.

    Existing files win, nested before flat, even when ``cfg.layout``
    asks for flat. ``legacy_layout`` skips all of that and returns the
    flat path.
    """
    root_path = Path(beads_dir) / cfg.database
    if legacy_layout:
        return root_path

    var_path = Path(beads_dir) / VAR_DIR_NAME / cfg.database
    if os.path.exists(var_path):
        return var_path
    if os.path.exists(root_path):
        return root_path

    if use_var_layout(beads_dir, cfg, legacy_layout=legacy_layout):
        return var_path
    return root_path


def use_var_layout(
    beads_dir: PathLike, cfg: Config, *, legacy_layout: bool = False
) -> bool:
    """Return True if new files should go under var/.

    An explicit ``layout`` decides; without one an existing var/
    directory counts as intent to use the nested layout.
    """
    if legacy_layout:
        return False
    if cfg.layout == LAYOUT_V2:
        return True
    if cfg.layout:
        return False
    return os.path.isdir(Path(beads_dir) / VAR_DIR_NAME)


def jsonl_path(beads_dir: PathLike, cfg: Config) -> Path:
    # No layout awareness: the export always sits next to metadata.json.
    return Path(beads_dir) / (cfg.jsonl_export or DEFAULT_JSONL_EXPORT)
