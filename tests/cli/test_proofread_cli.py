"""
Tests for cli.proofread and cli.formats

Covers CLI invocation, exit statuses for each fatal error category, and
the listing subcommands.
"""

import pytest
from click.testing import CliRunner

from cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def data_file(write_gzip, uuid_value):
    return write_gzip([
        ["id", "count"],
        [uuid_value, "1"],
        ["not-a-uuid", "42"],
        [uuid_value, ""],
    ], delimiter=",")


def proofread_args(path, *extra):
    return ["proofread", "--filename", path, "--delimiter", ",", "--field-format", "uuid,int", *extra]


class TestProofreadCLI:
    def test_findings_do_not_fail_the_run(self, runner, data_file):
        result = runner.invoke(main, proofread_args(data_file))
        assert result.exit_code == 0
        assert "2 finding(s)" in result.output
        assert "records read: 3" in result.output

    def test_blank_cols_option(self, runner, data_file):
        result = runner.invoke(main, proofread_args(data_file, "--blank-cols", "1"))
        assert result.exit_code == 0
        assert "1 finding(s)" in result.output

    def test_zero_sample_percentage(self, runner, data_file):
        result = runner.invoke(main, proofread_args(data_file, "--sample-percentage", "0"))
        assert result.exit_code == 0
        assert "0 finding(s)" in result.output
        assert "records validated: 0 of 0 sampled" in result.output

    def test_unknown_format_exit_status(self, runner, data_file):
        result = runner.invoke(main, [
            "proofread", "-f", data_file, "-d", ",", "--field-format", "uuid,bogus",
        ])
        assert result.exit_code == 2
        assert "Unrecognized format - bogus" in result.output

    def test_missing_input_exit_status(self, runner, tmp_path):
        result = runner.invoke(main, proofread_args(str(tmp_path / "missing.csv.gz")))
        assert result.exit_code == 128
        assert "Could not find input file" in result.output

    def test_invalid_sample_percentage(self, runner, data_file):
        result = runner.invoke(main, proofread_args(data_file, "--sample-percentage", "150"))
        assert result.exit_code == 2
        assert "sample_percentage" in result.output

    def test_defined_format(self, runner, write_gzip):
        path = write_gzip([["h"] * 33, ["x"] * 33], delimiter="|")
        result = runner.invoke(main, ["proofread", "-f", path, "--defined-format", "backup"])
        assert result.exit_code == 0
        assert "records read: 1" in result.output

    def test_config_file(self, runner, data_file, tmp_path):
        config_file = tmp_path / "proofreader.yaml"
        config_file.write_text(
            f"filename: {data_file}\ndelimiter: ','\nfield-format: uuid,int\nblank-cols: '1'\n"
        )
        result = runner.invoke(main, ["proofread", "--config", str(config_file)])
        assert result.exit_code == 0
        assert "1 finding(s)" in result.output

    def test_log_file_receives_findings(self, runner, data_file, tmp_path):
        log_file = tmp_path / "logs" / "proofreader.log"
        result = runner.invoke(main, proofread_args(data_file, "--log-file", str(log_file)))
        assert result.exit_code == 0
        content = log_file.read_text(encoding="utf-8")
        assert 'L:3 C:0 H:id "not-a-uuid" not formatted as "uuid" type' in content

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "proofreader" in result.output


class TestListingCommands:
    def test_formats(self, runner):
        result = runner.invoke(main, ["formats"])
        assert result.exit_code == 0
        assert "uuid" in result.output
        assert "loc_context" in result.output

    def test_presets(self, runner):
        result = runner.invoke(main, ["presets"])
        assert result.exit_code == 0
        assert "backup" in result.output
        assert "blank-cols: 11,14,15,16,17,20,22,23" in result.output
