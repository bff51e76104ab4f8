from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from shotpick import config
from shotpick.picker import RefetchPolicy


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "shotpick.json"
        env = {key: value for key, value in os.environ.items() if key not in {"SHOTPICK_LOG", "SHOTPICK_CONFIG"}}
        self._env = mock.patch.dict(os.environ, env, clear=True)
        self._env.start()

    def tearDown(self) -> None:
        self._env.stop()
        self._tmp.cleanup()

    def _write(self, data: object) -> None:
        self.config_path.write_text(json.dumps(data), encoding="utf-8")

    def test_missing_file_yields_defaults(self) -> None:
        loaded = config.load_picker_config(self.config_path)

        self.assertEqual(loaded, config.PickerConfig())
        self.assertEqual(loaded.quit_keys, ("ESC", "CTRL_C"))

    def test_malformed_or_non_object_config_is_ignored(self) -> None:
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(self.config_path), {})

        self._write(["a", "b"])
        self.assertEqual(config.load_config(self.config_path), {})

    def test_valid_values_are_loaded(self) -> None:
        self._write(
            {
                "quit_keys": ["Q"],
                "refetch_policy": "on_empty_query_only",
                "theme": "Ocean",
                "log_level": "debug",
                "candidates_file": "~/projects.txt",
            }
        )

        loaded = config.load_picker_config(self.config_path)

        self.assertEqual(loaded.quit_keys, ("Q",))
        self.assertIs(loaded.refetch_policy, RefetchPolicy.ON_EMPTY_QUERY_ONLY)
        self.assertEqual(loaded.theme, "ocean")
        self.assertEqual(loaded.log_level, "DEBUG")
        self.assertEqual(loaded.candidates_file, Path("~/projects.txt").expanduser())

    def test_invalid_values_fall_back_per_key(self) -> None:
        self._write(
            {
                "quit_keys": [],
                "refetch_policy": "sometimes",
                "theme": 3,
                "log_level": "chatty",
                "candidates_file": "",
            }
        )

        self.assertEqual(config.load_picker_config(self.config_path), config.PickerConfig())

    def test_log_level_env_var_overrides_file(self) -> None:
        self._write({"log_level": "error"})

        with mock.patch.dict(os.environ, {"SHOTPICK_LOG": "warn"}):
            loaded = config.load_picker_config(self.config_path)

        self.assertEqual(loaded.log_level, "WARNING")

    def test_config_path_env_override(self) -> None:
        self._write({"theme": "ocean"})

        with mock.patch.dict(os.environ, {"SHOTPICK_CONFIG": str(self.config_path)}):
            self.assertEqual(config.config_path(), self.config_path)
            self.assertEqual(config.load_picker_config().theme, "ocean")


if __name__ == "__main__":
    unittest.main()
