from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from retromediaindex.config.settings import default_cache_path
from retromediaindex.core.collection import build_scan_context, games_of
from retromediaindex.core.media_scanner import MediaScanner


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="retromediaindex",
        description="Index per-game media files (box art, videos, screenshots) of game collections.",
    )
    parser.add_argument("dirs", nargs="*", type=Path, help="Collection directories holding game files and a media/ folder.")
    parser.add_argument("--cache", type=Path, default=None, help="Media cache file (defaults to the config directory).")
    parser.add_argument("--portable", action="store_true", help="Keep the cache under ./config.")
    parser.add_argument("--force", action="store_true", help="Ignore cached directories and rescan everything.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cache_path = args.cache if args.cache is not None else default_cache_path(portable=args.portable)
    context = build_scan_context(args.dirs)
    result = MediaScanner(cache_path=cache_path).run(
        context,
        progress_callback=lambda message: print(f"  {message}"),
        force_rescan=args.force,
    )

    for game in games_of(context):
        if not game.assets:
            continue
        print(game.title)
        for asset in game.assets:
            print(f"    {asset.asset_type.value:<14} {asset.file_path}")
    for warning in result.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
