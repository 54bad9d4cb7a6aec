"""Tests for the platform table models and loader."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import yaml
from pydantic import ValidationError

from mobile_assets.errors import PlatformsConfigError
from mobile_assets.models.platforms_config import IconSpec, PlatformsConfig, SplashSpec
from mobile_assets.platforms_loader import BUILTIN_PLATFORMS_CONFIG, load_platforms, load_platforms_file

_CUSTOM = {
    "platforms": [
        {
            "name": "android",
            "root": "platforms/android",
            "icon_path": "res",
            "icon_assets": [{"name": "icon.png", "size": 48}],
        }
    ]
}


class TestModels(unittest.TestCase):
    def test_dimensions(self) -> None:
        self.assertEqual(IconSpec(name="i.png", size=48).dimensions, (48, 48))
        self.assertEqual(SplashSpec(name="s.png", width=320, height=480).dimensions, (320, 480))

    def test_non_positive_sizes_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            IconSpec(name="i.png", size=0)
        with self.assertRaises(ValidationError):
            SplashSpec(name="s.png", width=320, height=-1)

    def test_unknown_keys_rejected(self) -> None:
        raw = {"platforms": [{"name": "x", "root": "platforms/x", "icons": []}]}
        with self.assertRaises(ValidationError):
            PlatformsConfig.model_validate(raw)

    def test_defaults(self) -> None:
        config = PlatformsConfig.model_validate({"platforms": [{"name": "x", "root": "platforms/x"}]})
        platform = config.platforms[0]
        self.assertEqual(platform.icon_path, "")
        self.assertEqual(platform.icon_assets, ())
        self.assertEqual(platform.splash_assets, ())


class TestBuiltinTable(unittest.TestCase):
    def test_ios_and_android(self) -> None:
        platforms = load_platforms_file(BUILTIN_PLATFORMS_CONFIG)
        self.assertEqual([p.name for p in platforms], ["ios", "android"])
        for platform in platforms:
            self.assertTrue(platform.icon_assets)
            self.assertTrue(platform.splash_assets)

    def test_ios_paths_use_project_name(self) -> None:
        ios = load_platforms_file(BUILTIN_PLATFORMS_CONFIG)[0]
        self.assertTrue(ios.icon_path.startswith("$PROJECT_NAME/"))
        self.assertEqual(ios.icon_path.count("$PROJECT_NAME"), 1)


class TestLoadPlatforms(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self._cwd = os.getcwd()
        os.chdir(self.root)
        # keep the real user config out of the search path
        self._user = mock.patch(
            "mobile_assets.platforms_loader._USER_PLATFORMS_CONFIG", self.root / "no-user-config.yaml"
        )
        self._user.start()

    def tearDown(self) -> None:
        self._user.stop()
        os.chdir(self._cwd)
        self._tmp.cleanup()

    def test_falls_back_to_builtin(self) -> None:
        self.assertEqual([p.name for p in load_platforms()], ["ios", "android"])

    def test_explicit_path(self) -> None:
        path = self.root / "custom.yaml"
        path.write_text(yaml.dump(_CUSTOM))
        platforms = load_platforms(path)
        self.assertEqual([p.name for p in platforms], ["android"])
        self.assertEqual(platforms[0].icon_assets[0].size, 48)

    def test_cwd_platforms_yaml(self) -> None:
        (self.root / "platforms.yaml").write_text(yaml.dump(_CUSTOM))
        self.assertEqual([p.name for p in load_platforms()], ["android"])

    def test_broken_cwd_file_falls_back_with_warning(self) -> None:
        (self.root / "platforms.yaml").write_text("- just\n- a list\n")
        with self.assertLogs("mobile_assets.platforms_loader", level="WARNING"):
            platforms = load_platforms()
        self.assertEqual([p.name for p in platforms], ["ios", "android"])

    def test_broken_explicit_file_is_fatal(self) -> None:
        path = self.root / "bad.yaml"
        path.write_text("platforms: [{name: x}]\n")
        with self.assertRaises(PlatformsConfigError):
            load_platforms(path)

    def test_missing_explicit_file_is_fatal(self) -> None:
        with self.assertRaises(PlatformsConfigError):
            load_platforms(self.root / "missing.yaml")
