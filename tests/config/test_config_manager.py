"""
Unit tests for ConfigurationManager and ProofreadConfig.

Tests precedence of defaults, YAML files, environment variables and CLI
overrides, defined format presets, and value validation.
"""

import pytest

from proofreader.config.manager import ConfigurationManager
from proofreader.config.schema import DEFAULT_FIELD_FORMAT, ProofreadConfig
from proofreader.errors import ConfigurationError


@pytest.fixture
def manager(tmp_path):
    return ConfigurationManager(project_config_path=tmp_path / "absent.yaml")


class TestDefaults:
    def test_defaults(self, manager):
        config = manager.load_configuration(environ={})
        assert config.filename == "input.csv.gz"
        assert config.field_format == DEFAULT_FIELD_FORMAT
        assert config.delimiter == "|"
        assert config.output_lines == 100
        assert config.blank_cols == ""
        assert config.sample_percentage == 100
        assert config.display_header is False
        assert config.seed is None
        assert config.log_level == "info"

    def test_default_field_format_is_fully_registered(self):
        from proofreader.formats.registry import default_registry
        for name in DEFAULT_FIELD_FORMAT.split(","):
            assert name in default_registry


class TestPrecedence:
    def test_yaml_file(self, manager, tmp_path):
        config_file = tmp_path / "proofreader.yaml"
        config_file.write_text("field-format: uuid,int\ndelimiter: ','\nsample_percentage: 25\n")

        config = manager.load_configuration(str(config_file), environ={})

        assert config.field_format == "uuid,int"
        assert config.delimiter == ","
        assert config.sample_percentage == 25

    def test_project_config_loaded(self, tmp_path):
        project = tmp_path / "config.yaml"
        project.write_text("output_lines: 5\n")
        config = ConfigurationManager(project_config_path=project).load_configuration(environ={})
        assert config.output_lines == 5

    def test_environment_overrides_file(self, manager, tmp_path):
        config_file = tmp_path / "proofreader.yaml"
        config_file.write_text("sample_percentage: 25\n")

        config = manager.load_configuration(
            str(config_file), environ={"PROOFREADER_SAMPLE_PERCENTAGE": "75"}
        )

        assert config.sample_percentage == 75

    def test_cli_overrides_environment(self, manager):
        config = manager.load_configuration(
            cli_overrides={"sample_percentage": 10, "seed": None},
            environ={"PROOFREADER_SAMPLE_PERCENTAGE": "75", "PROOFREADER_SEED": "9"},
        )
        assert config.sample_percentage == 10
        assert config.seed == 9

    def test_skip_lines_and_display_header_from_environment(self, manager):
        config = manager.load_configuration(
            environ={"PROOFREADER_SKIP_LINES": "3", "PROOFREADER_DISPLAY_HEADER": "true"}
        )
        assert config.skip_lines == 3
        assert config.display_header is True

    def test_reads_os_environ_by_default(self, manager, monkeypatch):
        monkeypatch.setenv("PROOFREADER_DELIMITER", ",")
        assert manager.load_configuration().delimiter == ","


class TestDefinedFormat:
    def test_preset_replaces_schema_options(self, manager):
        config = manager.load_configuration(
            cli_overrides={"defined_format": "backup", "delimiter": ",", "field_format": "int"},
            environ={},
        )
        assert config.delimiter == "|"
        assert config.field_format.startswith("uuid,ad_id_type,app_id")
        assert config.blank_cols == "11,14,15,16,17,20,22,23"

    def test_unknown_preset(self, manager):
        with pytest.raises(ConfigurationError) as exc_info:
            manager.load_configuration(cli_overrides={"defined_format": "nope"}, environ={})
        assert "backup" in str(exc_info.value)


class TestValidation:
    @pytest.mark.parametrize("overrides", [
        {"sample_percentage": 101},
        {"sample_percentage": -1},
        {"output_lines": 0},
        {"delimiter": "||"},
        {"delimiter": ""},
        {"field_format": "uuid,,int"},
        {"skip_lines": -3},
        {"log_level": "loud"},
    ])
    def test_invalid_values_rejected(self, manager, overrides):
        with pytest.raises(ConfigurationError):
            manager.load_configuration(cli_overrides=overrides, environ={})

    def test_unknown_yaml_key_rejected(self, manager, tmp_path):
        config_file = tmp_path / "proofreader.yaml"
        config_file.write_text("colour: blue\n")
        with pytest.raises(ConfigurationError) as exc_info:
            manager.load_configuration(str(config_file), environ={})
        assert "colour" in str(exc_info.value)

    def test_tab_delimiter_escape(self):
        assert ProofreadConfig(delimiter="\\t").delimiter == "\t"

    def test_blank_cols_list_from_yaml(self):
        assert ProofreadConfig(blank_cols=[1, 3]).blank_cols == "1,3"

    def test_config_is_immutable(self):
        config = ProofreadConfig()
        with pytest.raises(Exception):
            config.delimiter = ","
