from pathlib import Path

import pytest

from structgen.shared.config import (
    DEFAULT_CONNECTION_STRING,
    GeneratorConfig,
    load_config,
    load_config_file,
)
from structgen.shared.errors import ConfigError


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.connection_string == DEFAULT_CONNECTION_STRING
        assert config.output_dir == Path("bunmodels")
        assert config.package_name == "bunmodels"
        assert config.table_schema == "public"
        assert config.file_suffix == "_struct.go"
        assert config.export_names is False
        assert config.include_views is False

    def test_frozen(self):
        config = GeneratorConfig()
        with pytest.raises(AttributeError):
            config.package_name = "models"

    def test_file_name_for(self):
        assert GeneratorConfig().file_name_for("users") == "users_struct.go"
        config = GeneratorConfig(file_suffix=".go")
        assert config.file_name_for("users") == "users.go"


class TestLoadConfigFile:
    def test_camel_case_keys(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text(
            """
connectionString: postgres://app@db/app
outputDir: internal/models
package: models
schema: billing
exportNames: true
"""
        )

        values = load_config_file(path)
        assert values == {
            "connection_string": "postgres://app@db/app",
            "output_dir": Path("internal/models"),
            "package_name": "models",
            "table_schema": "billing",
            "export_names": True,
        }

    def test_snake_case_keys(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text("connection_string: postgres://x\ninclude_views: false\n")

        values = load_config_file(path)
        assert values["connection_string"] == "postgres://x"
        assert values["include_views"] is False

    def test_empty_file(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text("")
        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Failed to read config file"):
            load_config_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text("invalid: yaml: content:")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config_file(path)

    def test_root_not_mapping(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config_file(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text("dsn: postgres://x\n")
        with pytest.raises(ConfigError, match="Unknown config key 'dsn'"):
            load_config_file(path)

    def test_non_boolean_flag(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text("exportNames: yes please\n")
        with pytest.raises(ConfigError, match="must be a boolean"):
            load_config_file(path)

    def test_nested_value_rejected(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text("package:\n  name: models\n")
        with pytest.raises(ConfigError, match="must be a scalar"):
            load_config_file(path)


class TestLoadConfig:
    def test_defaults_without_sources(self):
        assert load_config(environ={}) == GeneratorConfig()

    def test_env_overrides_default(self):
        config = load_config(environ={"DATABASE_URL": "postgres://env"})
        assert config.connection_string == "postgres://env"

    def test_env_overrides_file(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text("connectionString: postgres://file\npackage: models\n")

        config = load_config(path, environ={"DATABASE_URL": "postgres://env"})
        assert config.connection_string == "postgres://env"
        assert config.package_name == "models"

    def test_overrides_win(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text("connectionString: postgres://file\noutputDir: from_file\n")

        config = load_config(
            path,
            overrides={
                "connection_string": "postgres://cli",
                "output_dir": Path("from_cli"),
            },
            environ={"DATABASE_URL": "postgres://env"},
        )
        assert config.connection_string == "postgres://cli"
        assert config.output_dir == Path("from_cli")

    def test_none_overrides_ignored(self, tmp_path):
        path = tmp_path / "structgen.yaml"
        path.write_text("package: models\n")

        config = load_config(path, overrides={"package_name": None}, environ={})
        assert config.package_name == "models"

    def test_unknown_override(self):
        with pytest.raises(ConfigError, match="Unknown config option"):
            load_config(overrides={"dsn": "postgres://x"}, environ={})

    def test_empty_env_var_ignored(self):
        config = load_config(environ={"DATABASE_URL": ""})
        assert config.connection_string == DEFAULT_CONNECTION_STRING
