"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from schwimmen.config import Config, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        config = load_config()
        assert config.game.card_slots == 3
        assert config.game.seed is None
        assert config.logging.level == "INFO"
        assert not config.game_log.enabled

    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_yaml_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  card_slots: 4\n"
            "  seed: 7\n"
            "logging:\n"
            "  level: DEBUG\n"
            "game_log:\n"
            "  enabled: true\n"
            "  output_path: logs/out.jsonl\n"
        )

        config = load_config(str(path))

        assert config.game.card_slots == 4
        assert config.game.seed == 7
        assert config.logging.level == "DEBUG"
        assert config.logging.show_hands is False
        assert config.game_log.output_path == "logs/out.jsonl"

    def test_rejects_zero_slots(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  card_slots: 0\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("game_log:\n  enabled: true\n")

        config = load_config(path)

        assert config.game_log.enabled
        assert config.game_log.output_path == "game_log.jsonl"
        assert config.game == Config().game
