"""bd-config — inspect and migrate a beads metadata.json from the shell."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from beadsconfig import __version__
from beadsconfig.config import default_beads_dir, legacy_layout_enabled
from beadsconfig.configfile import ConfigError, config_path, load, save
from beadsconfig.layout import database_path, jsonl_path
from beadsconfig.models import (
    BACKEND_DOLT,
    BACKEND_SQLITE,
    LAYOUT_V1,
    LAYOUT_V2,
    LEGACY_CONFIG_FILE_NAME,
    Config,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the root argparse parser."""

    parser = argparse.ArgumentParser(prog="bd-config")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-v", "--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("show", help="Show resolved paths and settings")
    p.add_argument("dir", nargs="?", type=Path)
    p.set_defaults(func=_cmd_show)

    p = subparsers.add_parser("init", help="Write a default metadata.json")
    p.add_argument("dir", nargs="?", type=Path)
    p.add_argument("--layout", choices=[LAYOUT_V1, LAYOUT_V2])
    p.add_argument("--backend", choices=[BACKEND_SQLITE, BACKEND_DOLT])
    p.set_defaults(func=_cmd_init)

    p = subparsers.add_parser("migrate", help="Migrate a legacy config.json")
    p.add_argument("dir", nargs="?", type=Path)
    p.set_defaults(func=_cmd_migrate)

    return parser


def _cmd_show(args: argparse.Namespace) -> int:
    cfg = load(args.dir)
    if cfg is None:
        print(f"No {config_path(args.dir)}; showing defaults")
        cfg = Config.default()

    print(f"backend:          {cfg.get_backend()}")
    print(f"layout:           {cfg.layout or '(unset)'}")
    print(f"database:         {database_path(args.dir, cfg, legacy_layout=args.legacy_layout)}")
    print(f"jsonl export:     {jsonl_path(args.dir, cfg)}")
    print(f"retention (days): {cfg.get_deletions_retention_days()}")
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    if load(args.dir) is not None:
        print(f"{config_path(args.dir)} already exists")
        return 0

    cfg = Config.default()
    if args.layout:
        cfg.layout = args.layout
    if args.backend:
        cfg.backend = args.backend

    args.dir.mkdir(parents=True, exist_ok=True)
    save(args.dir, cfg)
    print(f"Wrote {config_path(args.dir)}")
    return 0


def _cmd_migrate(args: argparse.Namespace) -> int:
    legacy = args.dir / LEGACY_CONFIG_FILE_NAME
    had_legacy = legacy.exists() and not config_path(args.dir).exists()

    cfg = load(args.dir)
    if cfg is None:
        print(f"No config found in {args.dir}")
    elif had_legacy:
        print(f"Migrated {legacy} -> {config_path(args.dir)}")
    else:
        print(f"{config_path(args.dir)} is up to date")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Parse *argv*, resolve environment overrides and run the command."""

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.dir is None:
        args.dir = default_beads_dir()
    args.legacy_layout = legacy_layout_enabled()
    if args.legacy_layout:
        logger.debug("BD_LEGACY_LAYOUT=1: forcing flat layout")

    try:
        return args.func(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
