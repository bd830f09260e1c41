"""
Tests for YAML configuration loading.
"""

import pytest
import yaml

from werwolf.config import GameConfig, load_config, load_config_from_yaml, config_from_dict
from werwolf.core import ConfigurationError, RosterConfig


def test_load_config_default():
    config = load_config()
    assert config == GameConfig()
    assert config.name_prefix == "Player"
    assert config.initial_player_count == 2
    assert config.min_players == 2


def test_load_config_returns_fresh_instance():
    first = load_config()
    first.random_seed = 5
    assert load_config().random_seed is None


def test_load_config_from_yaml(tmp_path):
    config_file = tmp_path / "game.yaml"
    config_file.write_text(
        "player_names: [Anna, Ben, Clara]\n"
        "role_counts:\n"
        "  werewolf: 1\n"
        "random_seed: 12\n"
        "echo_events: true\n"
    )

    config = load_config(str(config_file))

    assert config.player_names == ["Anna", "Ben", "Clara"]
    assert config.role_counts == {"werewolf": 1}
    assert config.random_seed == 12
    assert config.echo_events is True
    assert config.initial_player_count == 2


def test_empty_yaml_gives_defaults(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")
    assert load_config_from_yaml(str(config_file)) == GameConfig()


def test_unknown_key_warns(tmp_path, capsys):
    config_file = tmp_path / "game.yaml"
    config_file.write_text("max_rounds: 3\nname_prefix: Spieler\n")

    config = load_config_from_yaml(str(config_file))

    assert config.name_prefix == "Spieler"
    assert not hasattr(config, "max_rounds")
    assert "Unknown config key 'max_rounds'" in capsys.readouterr().out


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_config_from_yaml("does/not/exist.yaml")


def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("role_counts: [werewolf: 1\n")
    with pytest.raises(yaml.YAMLError):
        load_config_from_yaml(str(config_file))


def test_non_mapping_yaml(tmp_path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- werewolf\n- witch\n")
    with pytest.raises(ConfigurationError):
        load_config_from_yaml(str(config_file))


def test_config_from_dict_keeps_defaults():
    config = config_from_dict({"name_prefix": "Spieler", "min_players": 3})
    assert config.name_prefix == "Spieler"
    assert config.min_players == 3
    assert config.initial_player_count == 2
    assert config.role_counts is None


def test_bad_role_count_in_yaml_reaches_roster_as_configuration_error(tmp_path):
    config_file = tmp_path / "game.yaml"
    config_file.write_text("role_counts:\n  werewolf: two\n")
    config = load_config_from_yaml(str(config_file))
    with pytest.raises(ConfigurationError):
        RosterConfig.from_config(config)
