"""
Tests for CLI commands — genconfig, checkconfig, showconfig, and global options.
"""

import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from pubnode.main import cli


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "pub/sub server node" in result.output
        for command in ("genconfig", "checkconfig", "showconfig"):
            assert command in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestGenconfigCommand:
    def test_creates_file(self, tmp_path: Path):
        target = tmp_path / "config.yaml"
        runner = CliRunner()
        result = runner.invoke(cli, ["genconfig", str(target)], input="  chat  \n")
        assert result.exit_code == 0, result.output
        assert "Enter your project name: " in result.output
        assert "Config written" in result.output
        data = yaml.safe_load(target.read_text())
        assert data["projects"][0]["name"] == "chat"

    def test_existing_file(self, tmp_path: Path):
        target = tmp_path / "config.json"
        target.write_text("{}")
        runner = CliRunner()
        result = runner.invoke(cli, ["genconfig", str(target)], input="chat\n")
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert "Enter your project name" not in result.output
        assert target.read_text() == "{}"
        assert result.output.startswith("❌")

    def test_unsupported_extension(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["genconfig", str(tmp_path / "config.txt")], input="chat\n")
        assert result.exit_code == 1
        assert "json, toml, yaml, yml" in result.output
        assert result.output.startswith("❌")

    def test_validation_failure_removes_file(self, tmp_path: Path):
        target = tmp_path / "config.toml"
        runner = CliRunner()
        result = runner.invoke(cli, ["genconfig", str(target)], input="x\n")
        assert result.exit_code == 1
        assert "wrong project name" in result.output
        assert not target.exists()

    def test_no_input(self, tmp_path: Path):
        target = tmp_path / "config.json"
        runner = CliRunner()
        result = runner.invoke(cli, ["genconfig", str(target)], input="")
        assert result.exit_code == 1
        assert "end of input" in result.output
        assert result.output.startswith("Enter your project name: \n")
        assert not target.exists()


class TestCheckconfigCommand:
    def test_valid(self, valid_config_yaml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["checkconfig", str(valid_config_yaml)])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "chat (2 namespaces)" in result.output

    def test_uses_global_config_option(self, valid_config_yaml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(valid_config_yaml), "checkconfig", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["projects"] == ["chat", "feeds"]

    def test_invalid(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"projects": []}))
        runner = CliRunner()
        result = runner.invoke(cli, ["checkconfig", str(path)])
        assert result.exit_code == 1
        assert "no projects found" in result.output

    def test_invalid_json_output(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"projects": []}))
        runner = CliRunner()
        result = runner.invoke(cli, ["checkconfig", str(path), "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output)["valid"] is False

    def test_roundtrip_with_genconfig(self, tmp_path: Path):
        runner = CliRunner()
        for ext in ("json", "toml", "yaml", "yml"):
            target = tmp_path / f"node.{ext}"
            gen = runner.invoke(cli, ["genconfig", str(target)], input="chat\n")
            assert gen.exit_code == 0, gen.output
            check = runner.invoke(cli, ["checkconfig", str(target)])
            assert check.exit_code == 0, check.output


class TestShowconfigCommand:
    def test_json(self, valid_config_yaml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(valid_config_yaml), "showconfig", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["config"]["name"] == "node-1"
        assert data["config"]["admin_channel"] == "relay.admin"
        assert data["config"]["secret"] == "********"

    def test_env_override(self, valid_config_yaml: Path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["--config", str(valid_config_yaml), "showconfig", "--json"],
            env={"PUBNODE_CHANNEL_PREFIX": "env"},
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["config"]["control_channel"] == "env.control"

    def test_pretty(self, valid_config_yaml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(valid_config_yaml), "showconfig"])
        assert result.exit_code == 0
        assert "node-1" in result.output
        assert "hunter2" not in result.output

    def test_bad_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(path), "showconfig"])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output
