#!/usr/bin/env python3
"""
Integration tests for the markup-validator CLI.

Runs the click commands against YAML files on disk with an injected
processor catalog.
"""
import sys

import pytest
import yaml
from click.testing import CliRunner

from markup_validator.cli import cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, tmp_path, catalog):
    """Invoke the CLI with logs under tmp_path and the test catalog."""
    def _invoke(*args, **kwargs):
        return runner.invoke(
            cli,
            ["--log-dir", str(tmp_path / "logs"), *args],
            obj={"catalog": catalog},
            **kwargs,
        )
    return _invoke


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "markup-validator" in result.output

    @pytest.mark.parametrize("command", ["show", "check", "services", "processors"])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0


class TestShow:
    """Tests for the show command."""

    def test_layered_files_merged(self, invoke, write_yaml, base_fragment):
        """Later files override earlier ones in the printed config."""
        base = write_yaml("base.yaml", {"markup_validator": base_fragment})
        local = write_yaml("local.yaml", {"validators": {"tidy": {"indent": True}}})

        result = invoke("show", "-c", str(base), "-c", str(local))

        assert result.exit_code == 0, result.output
        data = yaml.safe_load(result.output)
        assert data["default_validator"] == "tidy"
        assert data["validators"]["tidy"] == {"processor": "tidy", "indent": True}

    def test_config_from_env(self, invoke, write_yaml, base_fragment):
        """Config files can come from MARKUP_VALIDATOR_CONFIG."""
        path = write_yaml("env.yaml", base_fragment)
        result = invoke("show", env={"MARKUP_VALIDATOR_CONFIG": str(path)})
        assert result.exit_code == 0, result.output
        assert yaml.safe_load(result.output)["default_validator"] == "tidy"

    def test_missing_file(self, invoke, tmp_path):
        """A missing file exits 1 with a ConfigLoadError message."""
        result = invoke("show", "-c", str(tmp_path / "missing.yaml"))
        assert result.exit_code == 1
        assert "ConfigLoadError" in result.output


class TestCheck:
    """Tests for the check command."""

    def test_valid_config(self, invoke, write_yaml, base_fragment):
        """Validators are listed with the default marked."""
        result = invoke("check", "-c", str(write_yaml("base.yaml", base_fragment)))
        assert result.exit_code == 0, result.output
        assert "2 validator(s) configured" in result.output
        assert "tidy → tidy (default)" in result.output
        assert "w3c → w3c" in result.output

    def test_missing_processor(self, invoke, write_yaml):
        result = invoke("check", "-c", str(write_yaml("c.yaml", {"validators": {"x": {}}})))
        assert result.exit_code == 1
        assert "MissingProcessorError" in result.output

    def test_unknown_processor(self, invoke, write_yaml):
        path = write_yaml("c.yaml", {"validators": {"x": {"processor": "ghost"}}})
        result = invoke("check", "-c", str(path))
        assert result.exit_code == 1
        assert "UnknownProcessorError" in result.output
        assert "ghost" in result.output

    def test_unknown_default(self, invoke, write_yaml):
        path = write_yaml("c.yaml", {
            "default_validator": "z",
            "validators": {"x": {"processor": "tidy"}},
        })
        result = invoke("check", "-c", str(path))
        assert result.exit_code == 1
        assert "UnknownDefaultValidatorError" in result.output

    def test_no_default(self, invoke, write_yaml):
        path = write_yaml("c.yaml", {"validators": {"x": {"processor": "tidy"}}})
        result = invoke("check", "-c", str(path))
        assert result.exit_code == 0, result.output
        assert "No default validator" in result.output

    def test_error_written_to_log(self, invoke, write_yaml, tmp_path):
        """Failures are recorded in errors.log."""
        invoke("check", "-c", str(write_yaml("c.yaml", {"validators": {"x": {}}})))
        errors_log = tmp_path / "logs" / "operations" / "errors.log"
        assert "MissingProcessorError" in errors_log.read_text(encoding="utf-8")


class TestServices:
    """Tests for the services command."""

    def test_manifest_printed(self, invoke, write_yaml, base_fragment):
        path = write_yaml("base.yaml", base_fragment)
        result = invoke("services", "-c", str(path), "--namespace", "app")
        assert result.exit_code == 0, result.output
        data = yaml.safe_load(result.output)
        assert list(data["services"]) == ["app.tidy_validator", "app.w3c_validator"]
        assert data["services"]["app.w3c_validator"]["processor"] == "app.w3c_processor"
        assert data["aliases"] == {"default_validator": "app.tidy_validator"}


class TestProcessors:
    """Tests for the processors command."""

    def test_lists_aliases(self, invoke):
        result = invoke("processors")
        assert result.exit_code == 0
        assert result.output.split() == ["tidy", "w3c"]

    def test_processor_module_loaded(self, runner, tmp_path, monkeypatch, restore_default_catalog):
        """-p imports a module that registers on the default catalog."""
        (tmp_path / "cli_sample_processors.py").write_text(
            "from markup_validator.registry.processors import register_processor\n"
            "from markup_validator.validation.base import Processor, ValidationResult\n"
            "\n"
            "@register_processor('cli-sample')\n"
            "class CliSampleProcessor(Processor):\n"
            "    def process(self, markup):\n"
            "        return ValidationResult()\n",
            encoding="utf-8",
        )
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, "cli_sample_processors", raising=False)

        result = runner.invoke(
            cli, ["--log-dir", str(tmp_path / "logs"), "processors", "-p", "cli_sample_processors"]
        )

        assert result.exit_code == 0, result.output
        assert "cli-sample" in result.output.split()

    def test_bad_module(self, invoke):
        result = invoke("processors", "-p", "no_such_processor_module")
        assert result.exit_code == 1
        assert "ProcessorRegistrationError" in result.output


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
