"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from overlapfinder.config import AppConfig


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert [p.timezone for p in config.people] == ["Europe/Stockholm", "America/Chicago"]
        assert config.people[0].start == "09:00"
        assert config.slot_durations == [30, 60]
        assert config.log_level == "WARNING"

    def test_load_from_yaml(self, tmp_path: Path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "people:\n"
            "  - name: Ada\n"
            "    timezone: Europe/London\n"
            "    start: '08:30'\n"
            "    end: '16:30'\n"
            "  - name: Grace\n"
            "    timezone: Asia/Tokyo\n"
            "slot_durations: [60, 60, 30]\n"
            "log_level: debug\n",
            encoding="utf-8",
        )

        config = AppConfig.load_from_yaml(config_path)

        assert config.people[0].name == "Ada"
        assert config.people[0].start == "08:30"
        assert config.people[1].end == "17:00"
        assert config.slot_durations == [60, 30]
        assert config.log_level == "DEBUG"

    def test_missing_file_raises_error(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_load_without_file_uses_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr("overlapfinder.config.get_default_config_path", lambda: tmp_path / "config.yaml")

        assert AppConfig.load() == AppConfig()

    def test_invalid_yaml_raises_value_error(self, tmp_path: Path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("people: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(config_path)

    @pytest.mark.parametrize("data", [
        {"people": [{"name": "Solo", "timezone": "UTC"}]},
        {"slot_durations": [45]},
        {"slot_durations": []},
        {"log_level": "LOUD"},
        {"people": [
            {"name": "A", "timezone": "UTC", "start": "25:00"},
            {"name": "B", "timezone": "UTC"},
        ]},
    ])
    def test_invalid_values_are_rejected(self, data):
        with pytest.raises(ValidationError):
            AppConfig(**data)
