"""Tests for CLI."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from pageshim.cli.main import cli
from pageshim.config.defaults import default_shim_config
from pageshim.core.snippet import render_shim_for
from pageshim.io.serialize import dump_config


class TestCLI:
    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_render_stdout(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render", "--instant", "1700000000000"])
        assert result.exit_code == 0
        assert result.output == render_shim_for(1_700_000_000_000)

    def test_render_output_file(self, tmp_path: Path) -> None:
        output_file = tmp_path / "shim.js"
        runner = CliRunner()
        result = runner.invoke(
            cli, ["render", "--instant", "1000", "--output", str(output_file)]
        )
        assert result.exit_code == 0
        assert output_file.read_text() == render_shim_for(1000)

    def test_render_with_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "shim.json"
        config_file.write_text(dump_config(default_shim_config(1000)))
        runner = CliRunner()
        result = runner.invoke(cli, ["render", "--config", str(config_file)])
        assert result.exit_code == 0
        assert "var seed = 1000;" in result.output

    def test_instant_overrides_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "shim.json"
        config_file.write_text(dump_config(default_shim_config(1000)))
        runner = CliRunner()
        result = runner.invoke(
            cli, ["render", "--config", str(config_file), "--instant", "2000"]
        )
        assert result.exit_code == 0
        assert "var seed = 2000;" in result.output

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "shim.json"
        config_file.write_text('{"reference_instant": 1, "lcg": {"increment": 0}}')
        runner = CliRunner()
        result = runner.invoke(cli, ["render", "--config", str(config_file)])
        assert result.exit_code != 0
        assert "--config" in result.output

    def test_out_of_range_instant(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render", "--instant", "300000000000000"])
        assert result.exit_code != 0
        assert "--instant" in result.output

    def test_missing_instant(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render"])
        assert result.exit_code != 0
        assert "--instant" in result.output

    def test_sample(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["sample", "--instant", "1000", "--count", "2"])
        assert result.exit_code == 0
        lines = result.output.split()
        assert float(lines[0]) == 19097 / 233280
        assert float(lines[1]) == 144414 / 233280

    def test_sample_output_file(self, tmp_path: Path) -> None:
        output_file = tmp_path / "seq.json"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["sample", "--instant", "1000", "--count", "3", "--output", str(output_file)],
        )
        assert result.exit_code == 0
        data = json.loads(output_file.read_text())
        assert len(data["values"]) == 3
        assert data["values"][0] == 19097 / 233280

    def test_inspect(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", "--instant", "1000", "--count", "100"])
        assert result.exit_code == 0
        assert "Period: 233280 (tail 0)" in result.output
        assert "All in [0, 1): yes" in result.output
