"""
Tests for defined format presets and environment variable handling.
"""

import pytest

from proofreader.config.environment import EnvironmentVariables
from proofreader.config.presets import DefinedFormats, get_defined_format
from proofreader.errors import ConfigurationError
from proofreader.validation.schema import build_schema, split_field_format


class TestDefinedFormats:
    def test_backup_preset(self):
        preset = get_defined_format("backup")
        assert preset is DefinedFormats.BACKUP
        assert preset.delimiter == "|"
        assert preset.column_count == 33

    def test_lookup_is_case_insensitive(self):
        assert get_defined_format(" BACKUP ").name == "backup"

    def test_backup_preset_builds_schema(self):
        preset = DefinedFormats.BACKUP
        schema = build_schema(split_field_format(preset.field_format), [], preset.blank_cols)
        assert len(schema) == 33
        assert [c.index for c in schema.columns if c.blank_allowed] == [11, 14, 15, 16, 17, 20, 22, 23]

    def test_unknown_preset(self):
        with pytest.raises(ConfigurationError):
            get_defined_format("missing")


class TestEnvironmentVariables:
    def test_every_variable_documented(self):
        documented = EnvironmentVariables.get_variable_documentation()
        assert set(documented) == set(EnvironmentVariables.get_all_variables())

    def test_load_overrides_skips_empty(self):
        overrides = EnvironmentVariables.load_overrides({
            "PROOFREADER_FILENAME": "a.gz",
            "PROOFREADER_SEED": "",
            "UNRELATED": "x",
        })
        assert overrides == {"filename": "a.gz"}
