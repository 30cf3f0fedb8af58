"""
CLI and Configuration Tests
===========================

Tests for the ``ihex`` command-line tool and environment configuration.
"""

import pytest
from click.testing import CliRunner

from ihexkit.cli.ihex import main
from ihexkit.cli.errors import ExitCode
from ihexkit.config import CodecConfig, get_default_config, set_default_config


# =============================================================================
# Configuration Tests
# =============================================================================

class TestCodecConfig:
    """Tests for CodecConfig and the module default."""

    def test_defaults(self):
        config = CodecConfig()
        assert config.encoding == "ascii"
        assert config.info_records == 5
        assert config.verbose is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("IHEXKIT_ENCODING", "latin-1")
        monkeypatch.setenv("IHEXKIT_INFO_RECORDS", "12")
        monkeypatch.setenv("IHEXKIT_VERBOSE", "yes")

        config = CodecConfig.from_env()
        assert config.encoding == "latin-1"
        assert config.info_records == 12
        assert config.verbose is True

    def test_from_env_invalid_int_ignored(self, monkeypatch):
        monkeypatch.setenv("IHEXKIT_INFO_RECORDS", "many")
        assert CodecConfig.from_env().info_records == 5

    def test_default_config_cached(self, monkeypatch):
        monkeypatch.delenv("IHEXKIT_INFO_RECORDS", raising=False)
        first = get_default_config()
        assert get_default_config() is first

    def test_set_default_config(self):
        config = CodecConfig(info_records=1)
        set_default_config(config)
        assert get_default_config() is config


# =============================================================================
# CLI Tests
# =============================================================================

class TestIhexCLI:
    """Tests for the ihex CLI tool."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Intel HEX file tool" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_info(self, example_hex_file):
        runner = CliRunner()
        result = runner.invoke(main, ["info", str(example_hex_file)])

        assert result.exit_code == 0
        assert f"File:     {example_hex_file}" in result.output
        assert "Records:  5" in result.output
        assert "Index:    4" in result.output

    def test_info_record_limit(self, example_hex_file):
        runner = CliRunner()
        result = runner.invoke(main, ["info", "-n", "1", str(example_hex_file)])

        assert result.exit_code == 0
        assert "Index:    0" in result.output
        assert "Index:    1" not in result.output

    def test_info_record_limit_from_env(self, monkeypatch, example_hex_file):
        monkeypatch.setenv("IHEXKIT_INFO_RECORDS", "2")
        runner = CliRunner()
        result = runner.invoke(main, ["info", str(example_hex_file)])

        assert result.exit_code == 0
        assert "Index:    1" in result.output
        assert "Index:    2" not in result.output

    def test_info_bad_file(self, tmp_path):
        path = tmp_path / "bad.hex"
        path.write_text(":00000003FD\n")

        runner = CliRunner()
        result = runner.invoke(main, ["info", str(path)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "line 1" in result.output
        assert "InvalidType" in result.output

    def test_validate_ok(self, example_hex_file):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(example_hex_file)])

        assert result.exit_code == 0
        assert "OK:" in result.output
        assert "5 records" in result.output
        assert "89 bytes binary" in result.output

    def test_validate_bad_checksum(self, tmp_path):
        path = tmp_path / "bad.hex"
        path.write_text(":0300300002337A1E\n:0300300002337A1F\n")

        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(path)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "INVALID" in result.output
        assert "line 2" in result.output
        assert "BadChecksum" in result.output

    def test_validate_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(tmp_path / "missing.hex")])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_format(self, tmp_path, example_hex_text: str):
        source = tmp_path / "lower.hex"
        source.write_text("\n" + example_hex_text.lower() + "\n\n")
        output = tmp_path / "clean.hex"

        runner = CliRunner()
        result = runner.invoke(main, ["format", str(source), "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_bytes() == example_hex_text.encode("ascii")

    def test_format_requires_output(self, example_hex_file):
        runner = CliRunner()
        result = runner.invoke(main, ["format", str(example_hex_file)])
        assert result.exit_code == 2

    def test_format_unwritable_output(self, tmp_path, example_hex_file):
        output = tmp_path / "no_such_dir" / "out.hex"

        runner = CliRunner()
        result = runner.invoke(main, ["format", str(example_hex_file), "-o", str(output)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "WriteError" in result.output

    def test_tobin(self, tmp_path):
        source = tmp_path / "in.hex"
        source.write_text(":0300300002337A1E\n:00000001FF\n")
        output = tmp_path / "out.bin"

        runner = CliRunner()
        result = runner.invoke(main, ["tobin", str(source), "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_bytes() == bytes.fromhex("0300300002337A1E00000001FF")
        assert "13 bytes" in result.output

    def test_tobin_unwritable_output(self, tmp_path, example_hex_file):
        """A file in the way of the output directory is a write error, not an internal one."""
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        output = blocker / "out.bin"

        runner = CliRunner()
        result = runner.invoke(main, ["tobin", str(example_hex_file), "-o", str(output)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "WriteError" in result.output
        assert "Internal error" not in result.output

    @pytest.mark.parametrize("flag", ["-v", "--verbose"])
    def test_verbose_flag(self, flag: str, example_hex_file):
        runner = CliRunner()
        result = runner.invoke(main, [flag, "validate", str(example_hex_file)])
        assert result.exit_code == 0
