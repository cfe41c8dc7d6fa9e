"""
Unit tests for the hashbench CLI commands.

Drives the click group in-process with CliRunner.
"""

import json

import pytest
import yaml
from click.testing import CliRunner

from hashbench.cli import cli
from hashbench.hashing import build_default_registry


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def algorithm_names() -> list[str]:
    return build_default_registry().available_algorithms


class TestGroup:
    def test_no_subcommand_shows_help(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "run" in result.output
        assert "algorithms" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "hashbench" in result.output


class TestRunCommand:
    """Tests for `hashbench run`."""

    def test_json_over_empty_file(self, runner, empty_file, algorithm_names):
        result = runner.invoke(
            cli, ["run", "--file", str(empty_file), "--format", "json", "--unit", "ns"]
        )
        assert result.exit_code == 0, result.output

        records = json.loads(result.output)
        assert [r["alg"] for r in records] == algorithm_names
        for record in records:
            assert set(record) == {"alg", "bytes", "file"}
            assert record["bytes"] >= 0
            assert record["file"] >= 0

    def test_default_format_is_yaml(self, runner, sample_file, algorithm_names):
        result = runner.invoke(cli, ["run", "--file", str(sample_file)])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("- alg: md4\n")
        assert [r["alg"] for r in yaml.safe_load(result.output)] == algorithm_names

    def test_escape_quote(self, runner, empty_file):
        result = runner.invoke(
            cli, ["run", "--file", str(empty_file), "--format", "json", "--escape-quote"]
        )
        assert result.exit_code == 0, result.output
        assert result.output.startswith('[{\\"alg\\":\\"md4\\"')
        assert '"alg"' not in result.output

    def test_user_format(self, runner, sample_file):
        result = runner.invoke(
            cli,
            ["run", "--file", str(sample_file), "--format", "user", "--alg", "sha3_256"],
        )
        assert result.exit_code == 0, result.output

        digest_line, stats_line = result.output.strip().splitlines()
        digest_hex, path = digest_line.split(" ", 1)
        assert len(digest_hex) == 64
        assert path == str(sample_file)
        assert stats_line.startswith("time: ")
        assert stats_line.endswith(" MB/s")

    def test_random_input_with_size(self, runner, algorithm_names):
        result = runner.invoke(cli, ["run", "--size", "1", "--format", "json"])
        assert result.exit_code == 0, result.output
        assert len(json.loads(result.output)) == len(algorithm_names)

    def test_invalid_unit(self, runner, empty_file):
        result = runner.invoke(cli, ["run", "--file", str(empty_file), "--unit", "bogus"])
        assert result.exit_code == 1
        lines = result.output.splitlines()
        assert len(lines) == 1
        assert lines[0].startswith("Error: ")
        assert "bogus" in lines[0]

    def test_invalid_format(self, runner, empty_file):
        result = runner.invoke(cli, ["run", "--file", str(empty_file), "--format", "xml"])
        assert result.exit_code == 1
        assert "xml" in result.output

    def test_missing_file(self, runner, tmp_path):
        missing = tmp_path / "does-not-exist.bin"
        result = runner.invoke(cli, ["run", "--file", str(missing)])
        assert result.exit_code == 1
        assert result.output.splitlines() == [f"Error: file {missing} doesn't exist"]

    def test_unknown_algorithm(self, runner, sample_file):
        result = runner.invoke(
            cli, ["run", "--file", str(sample_file), "--format", "user", "--alg", "crc32"]
        )
        assert result.exit_code == 1
        assert "crc32" in result.output

    def test_size_beyond_addressable_memory(self, runner):
        result = runner.invoke(cli, ["run", "--size", "10000000000000", "--format", "user"])
        assert result.exit_code == 1
        assert result.output.splitlines() == [
            "Error: cannot generate 10485760000000000000 random bytes: not enough memory"
        ]

    def test_random_disabled_without_file(self, runner):
        result = runner.invoke(cli, ["run", "--no-random"])
        assert result.exit_code == 1
        assert "random input generation is disabled" in result.output

    def test_config_file_supplies_defaults(self, runner, tmp_path, empty_file):
        (tmp_path / ".hashbench.toml").write_text('[benchmark]\nformat = "json"\nunit = "s"\n')
        result = runner.invoke(cli, ["run", "--file", str(empty_file)])
        assert result.exit_code == 0, result.output
        records = json.loads(result.output)
        assert all(r["file"] == 0 for r in records)

    def test_environment_supplies_defaults(self, runner, empty_file, monkeypatch):
        monkeypatch.setenv("HASHBENCH_BENCHMARK__FORMAT", "json")
        result = runner.invoke(cli, ["run", "--file", str(empty_file)])
        assert result.exit_code == 0, result.output
        assert result.output.startswith('[{"alg":"md4"')

    def test_command_line_beats_config_file(self, runner, tmp_path, empty_file):
        (tmp_path / ".hashbench.toml").write_text('[benchmark]\nformat = "json"\n')
        result = runner.invoke(cli, ["run", "--file", str(empty_file), "--format", "yaml"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("- alg: md4")

    def test_invalid_config_value(self, runner, tmp_path):
        (tmp_path / ".hashbench.toml").write_text('[logging]\nlevel = "loud"\n')
        result = runner.invoke(cli, ["run"])
        assert result.exit_code == 1
        assert "logging.level" in result.output


class TestAlgorithmsCommand:
    def test_lists_in_run_order(self, runner, algorithm_names):
        result = runner.invoke(cli, ["algorithms"])
        assert result.exit_code == 0, result.output

        lines = result.output.strip().splitlines()
        assert lines[0].split() == ["Algorithm", "Bits", "Strategy"]
        assert [line.split()[0] for line in lines[2:]] == algorithm_names

    def test_reports_digest_bits(self, runner):
        result = runner.invoke(cli, ["algorithms"])
        rows = {line.split()[0]: line.split() for line in result.output.strip().splitlines()[2:]}
        assert rows["sha3_512"][1] == "512"
        assert rows["md5"][1] == "128"
        assert rows["ripemd160"][2] == "RIPEMD160Strategy"


class TestConfigCommand:
    def test_list_shows_every_key(self, runner):
        result = runner.invoke(cli, ["config", "list"])
        assert result.exit_code == 0
        assert "benchmark.unit" in result.output
        assert "logging.level" in result.output

    def test_get_default(self, runner):
        result = runner.invoke(cli, ["config", "get", "benchmark.format"])
        assert result.exit_code == 0
        assert result.output.strip() == "benchmark.format: yaml"

    def test_get_from_config_file(self, runner, tmp_path):
        config_path = tmp_path / ".hashbench.toml"
        config_path.write_text('[benchmark]\nunit = "ms"\n')
        result = runner.invoke(cli, ["config", "get", "benchmark.unit"])
        assert result.exit_code == 0
        assert "benchmark.unit: ms" in result.output
        assert config_path.name in result.output

    def test_get_unknown_key(self, runner):
        result = runner.invoke(cli, ["config", "get", "benchmark.colour"])
        assert result.exit_code == 0
        assert "(not set)" in result.output

    def test_get_reports_unparseable_config_file(self, runner, tmp_path):
        (tmp_path / ".hashbench.toml").write_text("[benchmark\n")
        result = runner.invoke(cli, ["config", "get", "benchmark.unit"])
        assert result.exit_code == 0
        assert "benchmark.unit: ns" in result.output
        assert "(config file ignored: " in result.output
