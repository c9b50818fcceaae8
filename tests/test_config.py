"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from klondike.config import Config, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Test default configuration."""
        config = load_config()
        assert config == Config()
        assert config.game.seed is None
        assert config.game.num_games == 1
        assert config.game.max_redeals is None
        assert config.logging.level == "INFO"
        assert not config.logging.show_board

    def test_missing_file(self, tmp_path):
        """Test that a missing file yields defaults."""
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file(self, tmp_path):
        """Test that an empty file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_load_yaml(self, tmp_path):
        """Test loading values from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  seed: 7\n"
            "  num_games: 3\n"
            "  max_redeals: 2\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  show_board: true\n"
        )
        config = load_config(str(path))
        assert config.game.seed == 7
        assert config.game.num_games == 3
        assert config.game.max_redeals == 2
        assert config.logging.level == "DEBUG"
        assert config.logging.show_board

    def test_non_mapping_rejected(self, tmp_path):
        """Test that a YAML list at the top level is reported clearly."""
        path = tmp_path / "list.yaml"
        path.write_text("- seed: 7\n- num_games: 3\n")
        with pytest.raises(ValueError, match="must contain a mapping, got list"):
            load_config(path)

    def test_unknown_value_type_rejected(self, tmp_path):
        """Test that a bad field value fails validation."""
        path = tmp_path / "bad.yaml"
        path.write_text("game:\n  num_games: many\n")
        with pytest.raises(ValidationError):
            load_config(path)
