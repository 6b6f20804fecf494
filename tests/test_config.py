"""Tests for converter configuration."""

from pathlib import Path

import pytest

from enocodec.codec.options import SerializeOptions
from enocodec.convert.config import (
    ConfigError,
    ConverterConfig,
    load_config,
    save_config,
    split_fields,
)


class TestLoadConfig:
    """Tests for loading configuration files."""

    def test_load_config(self, config_file: Path) -> None:
        """Test loading settings from YAML."""
        config = load_config(config_file)

        assert config.skip_fields == ["artist"]
        assert config.use_flags is True
        assert config.ignore_empty is True
        assert config.output is None

    def test_load_config_no_file(self, temp_dir: Path) -> None:
        """Test defaults when no config exists."""
        assert load_config(temp_dir / "missing.yaml") == ConverterConfig()

    def test_load_config_empty_file(self, temp_dir: Path) -> None:
        """Test defaults for an empty document."""
        path = temp_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == ConverterConfig()

    def test_load_config_invalid_yaml(self, temp_dir: Path) -> None:
        """Test that unparseable YAML falls back to defaults."""
        path = temp_dir / "bad.yaml"
        path.write_text("skip_fields: [unclosed\n", encoding="utf-8")
        assert load_config(path) == ConverterConfig()

    def test_load_config_not_a_mapping(self, temp_dir: Path) -> None:
        """Test that a non-mapping document is rejected."""
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_comma_separated_fields(self, temp_dir: Path) -> None:
        """Test field lists written as a single string."""
        path = temp_dir / "fields.yaml"
        path.write_text("force_multiline: description, notes\n", encoding="utf-8")
        assert load_config(path).force_multiline == ["description", "notes"]

    def test_save_config(self, temp_dir: Path) -> None:
        """Test saving and reloading a config."""
        config = ConverterConfig(output="out", pattern="^release", skip_fields=["id"], use_flags=True)
        path = temp_dir / "nested" / "config.yaml"
        save_config(config, path)

        assert load_config(path) == config


class TestConverterConfig:
    """Tests for ConverterConfig helpers."""

    def test_serialize_options(self) -> None:
        """Test conversion to serializer options."""
        config = ConverterConfig(ignore_empty=False, skip_fields=["a"], force_multiline=["b"])
        assert config.serialize_options == SerializeOptions.build(
            ignore_empty=False, skip_fields=["a"], force_multiline=["b"]
        )

    def test_merged_ignores_none(self) -> None:
        """Test that None overrides keep the configured value."""
        config = ConverterConfig(pattern="x", use_flags=True)
        merged = config.merged(pattern=None, use_flags=None, output="out")

        assert merged.pattern == "x"
        assert merged.use_flags is True
        assert merged.output == "out"
        assert config.output is None

    def test_merged_applies_false(self) -> None:
        """Test that False is an override, not a missing value."""
        assert ConverterConfig().merged(ignore_empty=False).ignore_empty is False

    def test_dict_round_trip(self) -> None:
        """Test to_dict and from_dict."""
        config = ConverterConfig(output="o", skip_fields=["a", "b"])
        assert ConverterConfig.from_dict(config.to_dict()) == config


class TestSplitFields:
    """Tests for field list parsing."""

    def test_split_string(self) -> None:
        """Test comma-separated strings."""
        assert split_fields("a, b ,c") == ["a", "b", "c"]

    def test_blank_entries_dropped(self) -> None:
        """Test that empty names are removed."""
        assert split_fields("a,,  ,b") == ["a", "b"]
        assert split_fields("") == []

    def test_list_normalized(self) -> None:
        """Test lists of names."""
        assert split_fields([" a ", "b"]) == ["a", "b"]
        assert split_fields(None) == []
