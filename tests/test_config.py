import json
import os
import tempfile
import unittest
from unittest import mock

from launcher import config


class EnsureConfigTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _read(self) -> bytes:
        with open(os.path.join(self.root, "launcher.json"), "rb") as f:
            return f.read()

    def test_creates_default_config(self) -> None:
        self.assertTrue(config.ensure_config(self.root))
        data = json.loads(self._read())
        self.assertEqual(data, {
            "ios": {"icon": "app/assets/icons/logo.png"},
            "android": {"icon": "app/assets/icons/logo.png"},
        })
        self.assertIn(b'\n  "ios"', self._read())

    def test_second_call_is_a_no_op(self) -> None:
        config.ensure_config(self.root)
        first = self._read()
        self.assertFalse(config.ensure_config(self.root))
        self.assertEqual(self._read(), first)

    def test_user_edits_are_kept(self) -> None:
        edited = '{"ios": {"icon": "a.png"}, "android": {"icon": "b.png"}}'
        with open(os.path.join(self.root, "launcher.json"), "w", encoding="utf-8") as f:
            f.write(edited)
        self.assertFalse(config.ensure_config(self.root))
        self.assertEqual(self._read().decode("utf-8"), edited)
        self.assertEqual(config.load_config(self.root)["android"]["icon"], "b.png")

    def test_project_dir_from_environment(self) -> None:
        with mock.patch.dict(os.environ, {"LAUNCHER_PROJECT_DIR": self.root}):
            self.assertEqual(config.project_dir(), self.root)
            config.ensure_config()
        self.assertTrue(os.path.exists(os.path.join(self.root, "launcher.json")))

    def test_write_error_propagates(self) -> None:
        missing = os.path.join(self.root, "does", "not", "exist")
        with self.assertRaises(OSError):
            config.ensure_config(missing)


class ProjectFilesTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_app_name_and_paths(self) -> None:
        with open(os.path.join(self.root, "package.json"), "w", encoding="utf-8") as f:
            json.dump({"name": "DemoApp", "version": "0.0.1"}, f)
        name = config.read_app_name(self.root)
        self.assertEqual(name, "DemoApp")

        paths = config.project_paths(self.root, name)
        self.assertEqual(
            paths["ios_icons"],
            os.path.join(self.root, "ios", "DemoApp", "Images.xcassets", "AppIcon.appiconset"),
        )
        self.assertEqual(paths["android_res"], os.path.join(self.root, "android", "app", "src", "main", "res"))
        self.assertTrue(paths["android_manifest"].endswith("AndroidManifest.xml"))

    def test_load_config_requires_both_platforms(self) -> None:
        with open(os.path.join(self.root, "launcher.json"), "w", encoding="utf-8") as f:
            json.dump({"ios": {"icon": "a.png"}}, f)
        with self.assertRaises(ValueError):
            config.load_config(self.root)

    def test_env_flag(self) -> None:
        with mock.patch.dict(os.environ, {"LAUNCHER_STRICT": "1"}):
            self.assertTrue(config.env_flag("LAUNCHER_STRICT"))
        with mock.patch.dict(os.environ, {"LAUNCHER_STRICT": "0"}):
            self.assertFalse(config.env_flag("LAUNCHER_STRICT"))


if __name__ == "__main__":
    unittest.main()
