"""Tests for JSON settings persistence."""

import json

from boxingtimer.settings import Settings, load_settings, save_settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.work_duration == 180
        assert settings.rest_duration == 60
        assert settings.default_rounds == 3

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "absent.json") == Settings()

    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        settings = Settings(work_duration=120, rest_duration=30, log_file=None)
        save_settings(settings, path)
        assert load_settings(path) == settings

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"rest_duration": 45, "theme": "neon"}), encoding="utf-8")
        settings = load_settings(path)
        assert settings.rest_duration == 45
        assert settings.work_duration == 180

    def test_corrupt_file_falls_back(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == Settings()
