from __future__ import annotations

import contextlib
import io
import os
from pathlib import Path
import sys
import tempfile
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from retromediaindex.app import main
from retromediaindex.config.settings import CACHE_FILENAME, HOME_ENV_VAR, default_cache_path, writable_config_dir
from retromediaindex.core.collection import build_scan_context, games_of
from retromediaindex.core.models import AssetType, Game, GameFile


class CollectionTests(unittest.TestCase):
    def test_build_scan_context_collects_rom_files(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir) / "snes"
            (root / "media" / "Zelda").mkdir(parents=True)
            (root / "Zelda.sfc").write_bytes(b"rom")
            (root / "Mario.SMC").write_bytes(b"rom")
            (root / "readme.txt").write_text("notes", encoding="utf-8")

            context = build_scan_context([root, Path(temp_dir) / "missing"])

            self.assertEqual(context.game_dirs, [str(root.absolute())])
            titles = sorted(game.title for game in games_of(context))
            self.assertEqual(titles, ["Mario", "Zelda"])
            self.assertIn(str((root / "Zelda.sfc").absolute()), context.game_files)

    def test_rom_extensions_include_legacy_dump_formats(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            for name in ("Chrono.fig", "Alex Kidd.sg", "Wario.unf", "Doom.mdf", "Foo.rom"):
                (root / name).write_bytes(b"rom")
            context = build_scan_context([root])
            self.assertEqual(
                sorted(game.title for game in games_of(context)),
                ["Alex Kidd", "Chrono", "Doom", "Foo", "Wario"],
            )

    def test_games_of_deduplicates_multi_file_games(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            game = Game(title="Final Fantasy VII")
            context = build_scan_context([])
            context.add_game_file(GameFile(path=root / "ff7-disc1.chd", game=game))
            context.add_game_file(GameFile(path=root / "ff7-disc2.chd", game=game))
            self.assertEqual(games_of(context), [game])


class GameModelTests(unittest.TestCase):
    def test_append_asset_is_idempotent(self) -> None:
        game = Game(title="Foo")
        self.assertTrue(game.append_asset(AssetType.LOGO, "/games/media/foo/logo.png"))
        self.assertFalse(game.append_asset(AssetType.LOGO, Path("/games/media/foo/logo.png")))
        self.assertTrue(game.append_asset(AssetType.UI_TILE, "/games/media/foo/logo.png"))
        self.assertEqual(len(game.assets), 2)


class SettingsTests(unittest.TestCase):
    def test_home_override_is_created_and_used(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            target = Path(temp_dir) / "custom-home"
            with mock.patch.dict(os.environ, {HOME_ENV_VAR: str(target)}):
                self.assertEqual(writable_config_dir(), target)
                self.assertTrue(target.is_dir())
                self.assertEqual(default_cache_path(), target / CACHE_FILENAME)

    def test_xdg_config_home_is_respected(self) -> None:
        if sys.platform in ("win32", "darwin"):
            self.skipTest("XDG lookup only applies to other platforms")
        with tempfile.TemporaryDirectory() as temp_dir:
            env = {HOME_ENV_VAR: "", "XDG_CONFIG_HOME": temp_dir}
            with mock.patch.dict(os.environ, env):
                self.assertEqual(writable_config_dir(), Path(temp_dir) / "retromediaindex")


class AppTests(unittest.TestCase):
    def test_main_indexes_media_and_writes_cache(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir) / "games"
            (root / "media" / "foo").mkdir(parents=True)
            (root / "foo.rom").write_bytes(b"rom")
            (root / "media" / "foo" / "boxfront.png").write_bytes(b"img")
            cache_path = Path(temp_dir) / "cache" / "media_cache.json"

            stdout = io.StringIO()
            with contextlib.redirect_stdout(stdout):
                code = main([str(root), "--cache", str(cache_path)])

            self.assertEqual(code, 0)
            self.assertTrue(cache_path.exists())
            output = stdout.getvalue()
            self.assertIn("foo", output)
            self.assertIn("box_front", output)


if __name__ == "__main__":
    unittest.main()
