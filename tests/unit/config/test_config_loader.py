"""
test_config_loader.py
---------------------
Unit tests for markup_validator.config.loader.

Tests YAML fragment loading, root-key unwrapping, layered loading and the
default config path fallback.
"""
import pytest
from unittest.mock import MagicMock

from markup_validator.config.loader import (
    load_config,
    load_fragment,
    load_fragments,
    resolve_config_paths,
)
from markup_validator.core.exceptions import ConfigLoadError
from markup_validator.core.logging_manager import MarkupValidatorLogger


class TestLoadFragment:
    """Tests for load_fragment."""

    def test_plain_fragment(self, write_yaml, base_fragment):
        """A top-level fragment is returned as-is."""
        path = write_yaml("base.yaml", base_fragment)
        assert load_fragment(path) == base_fragment

    def test_root_key_unwrapped(self, write_yaml, base_fragment):
        """A fragment nested under `markup_validator` is unwrapped."""
        path = write_yaml("app.yaml", {"markup_validator": base_fragment, "other": 1})
        assert load_fragment(path) == base_fragment

    def test_empty_root_key(self, write_yaml):
        """`markup_validator:` with nothing under it is an empty fragment."""
        path = write_yaml("app.yaml", {"markup_validator": None})
        assert load_fragment(path) == {}

    def test_empty_document(self, tmp_path):
        """An empty file is an empty fragment."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_fragment(path) == {}

    def test_hyphenated_key_kept(self, tmp_path):
        """Key spellings are left for the merger to interpret."""
        path = tmp_path / "c.yaml"
        path.write_text("default-validator: w3c\n", encoding="utf-8")
        assert load_fragment(path) == {"default-validator": "w3c"}

    def test_missing_file(self, tmp_path):
        """A missing file raises ConfigLoadError."""
        with pytest.raises(ConfigLoadError, match="not found"):
            load_fragment(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Syntax errors raise ConfigLoadError."""
        path = tmp_path / "bad.yaml"
        path.write_text("validators: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_fragment(path)

    def test_non_mapping_document(self, tmp_path):
        """A list document is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- tidy\n- w3c\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="mapping"):
            load_fragment(path)


class TestLoadConfig:
    """Tests for layered loading."""

    def test_files_merged_in_order(self, write_yaml, base_fragment):
        """Later files override earlier ones."""
        base = write_yaml("base.yaml", base_fragment)
        local = write_yaml("local.yaml", {
            "default-validator": "w3c",
            "validators": {"w3c": {"timeout": 30}},
        })
        config = load_config([base, local])
        assert config.default_validator == "w3c"
        assert config.validators["w3c"] == {"processor": "w3c", "timeout": 30}
        assert list(config.validators) == ["tidy", "w3c"]

    def test_load_fragments_keeps_order(self, write_yaml):
        """load_fragments returns one fragment per file, in order."""
        a = write_yaml("a.yaml", {"default_validator": "a"})
        b = write_yaml("b.yaml", {"default_validator": "b"})
        assert load_fragments([a, b]) == [{"default_validator": "a"}, {"default_validator": "b"}]

    def test_no_files(self):
        """No files yields an empty configuration."""
        config = load_config([])
        assert config.default_validator is None
        assert config.validators == {}

    def test_logs_operation(self, write_yaml, base_fragment):
        """Loading records an operation on the logger."""
        logger = MagicMock(spec=MarkupValidatorLogger)
        load_config([write_yaml("base.yaml", base_fragment)], logger=logger)
        logger.log_operation.assert_called_once()
        operation, details = logger.log_operation.call_args[0]
        assert operation == "load_config"
        assert details["validators"] == ["tidy", "w3c"]


class TestResolveConfigPaths:
    """Tests for resolve_config_paths."""

    def test_explicit_files_win(self, tmp_path):
        """Explicit files are used even when a default exists."""
        default = tmp_path / "default.yaml"
        default.write_text("{}", encoding="utf-8")
        paths = resolve_config_paths(["a.yaml"], default_path=default)
        assert [p.name for p in paths] == ["a.yaml"]

    def test_default_used_when_present(self, tmp_path):
        """The default file is used when no file is given."""
        default = tmp_path / "default.yaml"
        default.write_text("{}", encoding="utf-8")
        assert resolve_config_paths([], default_path=default) == [default]

    def test_nothing_when_default_missing(self, tmp_path):
        """No explicit file and no default means no files."""
        assert resolve_config_paths([], default_path=tmp_path / "none.yaml") == []
