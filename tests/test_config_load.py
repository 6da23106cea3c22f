from pathlib import Path

import pytest
import yaml

from aclparser.config import Settings, load_config
from aclparser.exceptions import ConfigError


def test_load_defaults(tmp_path):
    """Test that default settings are loaded correctly."""
    p = tmp_path / "aclparser.yaml"
    p.write_text("{}")
    loaded = load_config(p)
    assert loaded.output.format == "json"
    assert loaded.output.indent == 2
    assert loaded.output.output_file is None
    assert loaded.logging.level == "INFO"
    assert loaded.logging.mask_tokens is True


def test_load_custom_values(tmp_path):
    """Test that custom values from a YAML file override defaults."""
    p = tmp_path / "aclparser.yaml"
    p.write_text(
        yaml.safe_dump(
            {
                "output": {"format": "yaml", "indent": 4, "output_file": "out/result.yaml"},
                "logging": {"level": "debug", "log_file": "aclparser.log"},
            }
        )
    )
    loaded = load_config(p)
    assert loaded.output.format == "yaml"
    assert loaded.output.indent == 4
    assert loaded.output.output_file == Path("out/result.yaml")
    assert loaded.logging.level == "DEBUG"
    assert loaded.logging.log_file == Path("aclparser.log")


def test_load_invalid_yaml_uses_defaults(tmp_path):
    """Test that an invalid YAML file results in default settings."""
    p = tmp_path / "bad.yaml"
    p.write_text(": { invalid }")
    settings = load_config(p)
    assert settings.output.format == "json"


def test_non_mapping_yaml_uses_defaults(tmp_path):
    """Test that a YAML document that is not a mapping is ignored."""
    p = tmp_path / "list.yaml"
    p.write_text("- one\n- two\n")
    settings = load_config(p)
    assert settings.output.indent == 2


def test_file_not_found_uses_defaults():
    """Test that a missing config file results in default settings."""
    missing = Path("non_existent_config.yaml")
    settings = load_config(missing)
    assert settings.logging.level == "INFO"


def test_env_variable_override(tmp_path, monkeypatch):
    """Test that environment variables override YAML settings."""
    p = tmp_path / "aclparser.yaml"
    p.write_text(yaml.safe_dump({"output": {"format": "json", "indent": 4}}))
    monkeypatch.setenv("output__format", "yaml")

    loaded = load_config(p)
    assert loaded.output.format == "yaml"
    assert loaded.output.indent == 4


def test_invalid_value_raises_config_error(tmp_path):
    """Test that values failing validation raise ConfigError."""
    p = tmp_path / "aclparser.yaml"
    p.write_text(yaml.safe_dump({"output": {"format": "toml"}}))
    with pytest.raises(ConfigError):
        load_config(p)


def test_unknown_keys_rejected(tmp_path):
    """Test that unknown keys inside a section are rejected."""
    p = tmp_path / "aclparser.yaml"
    p.write_text(yaml.safe_dump({"output": {"colour": "red"}}))
    with pytest.raises(ConfigError):
        load_config(p)


def test_assignment_is_validated():
    """Test that settings sections validate on assignment."""
    settings = Settings()
    settings.output.indent = 3
    assert settings.output.indent == 3
    with pytest.raises(ValueError):
        settings.output.indent = -1
