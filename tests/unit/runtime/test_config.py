"""Tests for configuration loading and context overrides."""

import contextvars
from pathlib import Path

import pytest

from src.person_api.runtime.config.config_data import (
    ConfigData,
    DatabaseConfig,
    ValidationConfig,
)
from src.person_api.runtime.config.config_template import (
    load_config,
    load_templated_yaml,
    substitute_env_vars,
)
from src.person_api.runtime.config.settings import EnvironmentVariables
from src.person_api.runtime.context import get_config, set_config, with_context


class TestSubstituteEnvVars:
    def test_uses_environment_value(self, monkeypatch):
        monkeypatch.setenv("PERSON_DB_URL", "sqlite:///./other.db")

        assert substitute_env_vars("url: ${PERSON_DB_URL}") == "url: sqlite:///./other.db"

    def test_falls_back_to_default(self, monkeypatch):
        monkeypatch.delenv("PERSON_MISSING", raising=False)

        assert substitute_env_vars("port: ${PERSON_MISSING:-8080}") == "port: 8080"

    def test_missing_required_variable_raises(self, monkeypatch):
        monkeypatch.delenv("PERSON_MISSING", raising=False)

        with pytest.raises(ValueError, match="PERSON_MISSING"):
            substitute_env_vars("${PERSON_MISSING}")

    def test_custom_error_message(self, monkeypatch):
        monkeypatch.delenv("PERSON_MISSING", raising=False)

        with pytest.raises(ValueError, match="set the database url"):
            substitute_env_vars("${PERSON_MISSING:?set the database url}")


class TestLoadTemplatedYaml:
    def test_reads_config_section(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("PERSON_MAX_AGE", "120")
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  app:\n"
            "    port: 9000\n"
            "  database:\n"
            "    url: sqlite:///./people.db\n"
            "  validation:\n"
            "    require_age: true\n"
            "    max_age: ${PERSON_MAX_AGE:-150}\n"
        )

        config = load_templated_yaml(config_file, "test")

        assert config.app.port == 9000
        assert config.app.environment == "test"
        assert config.database.url == "sqlite:///./people.db"
        assert config.validation.require_age is True
        assert config.validation.max_age == 120
        assert config.logging.level == "INFO"

    def test_environment_prefixed_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("PERSON_LOG_LEVEL", raising=False)
        monkeypatch.setenv("PRODUCTION_PERSON_LOG_LEVEL", "WARNING")
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n  logging:\n    level: ${PERSON_LOG_LEVEL:-INFO}\n"
        )

        config = load_templated_yaml(config_file, "production")

        assert config.logging.level == "WARNING"

    def test_placeholders_in_comments_are_not_substituted(
        self, tmp_path: Path, monkeypatch
    ):
        monkeypatch.delenv("PERSON_MISSING", raising=False)
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "# use ${PERSON_MISSING} to point somewhere else\n"
            "config:\n"
            "  app:\n"
            "    # port: ${PERSON_MISSING}\n"
            "    port: 9000\n"
        )

        config = load_templated_yaml(config_file)

        assert config.app.port == 9000

    def test_invalid_values_raise(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  app:\n    port: not-a-port\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file)

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        config = load_templated_yaml(config_file)

        assert config.database.url == "sqlite:///./persons.db"


def test_load_config_without_file_uses_defaults(tmp_path: Path):
    config = load_config(tmp_path / "missing.yaml", "test")

    assert config.app.environment == "test"
    assert config.app.port == 8080
    assert config.validation == ValidationConfig()


def test_environment_variables_defaults(monkeypatch):
    monkeypatch.delenv("APP_ENVIRONMENT", raising=False)
    monkeypatch.delenv("APP_CONFIG_FILE", raising=False)

    env = EnvironmentVariables(_env_file=None)

    assert env.environment == "development"
    assert env.config_file == "config.yaml"


def test_environment_variables_from_environment(monkeypatch):
    monkeypatch.setenv("APP_ENVIRONMENT", "production")
    monkeypatch.setenv("APP_CONFIG_FILE", "/etc/person-api/config.yaml")

    env = EnvironmentVariables(_env_file=None)

    assert env.environment == "production"
    assert env.config_file == "/etc/person-api/config.yaml"


class TestDatabaseConfig:
    def test_sqlite_url_used_verbatim(self):
        config = DatabaseConfig(url="sqlite:///./persons.db")

        assert config.is_sqlite
        assert config.connection_string == "sqlite:///./persons.db"

    def test_password_from_environment_variable(self, monkeypatch):
        monkeypatch.setenv("PERSON_DB_PASSWORD", "s3cret")
        config = DatabaseConfig(
            url="postgresql://person@db:5432/persons",
            password_env_var="PERSON_DB_PASSWORD",
        )

        assert config.password == "s3cret"
        assert config.connection_string == (
            "postgresql://person:s3cret@db:5432/persons"
        )

    def test_password_file_wins_over_environment(self, tmp_path: Path, monkeypatch):
        secret = tmp_path / "db_password"
        secret.write_text("from-file\n")
        monkeypatch.setenv("PERSON_DB_PASSWORD", "from-env")
        config = DatabaseConfig(
            url="postgresql://person@db/persons",
            password_file=str(secret),
            password_env_var="PERSON_DB_PASSWORD",
        )

        assert config.password == "from-file"

    def test_missing_password_variable_raises(self, monkeypatch):
        monkeypatch.delenv("PERSON_DB_PASSWORD", raising=False)
        config = DatabaseConfig(
            url="postgresql://person@db/persons",
            password_env_var="PERSON_DB_PASSWORD",
        )

        with pytest.raises(ValueError):
            _ = config.password


class TestWithContext:
    def test_partial_override_inherits_the_rest(self):
        before = get_config()
        override = ConfigData(validation=ValidationConfig(require_age=True))

        with with_context(override):
            config = get_config()
            assert config.validation.require_age is True
            assert config.validation.max_age == before.validation.max_age
            assert config.database.url == before.database.url

        assert get_config() is before

    def test_none_is_a_noop(self):
        before = get_config()

        with with_context(None):
            assert get_config() is before

    def test_set_config_replaces_for_current_context_only(self):
        before = get_config()
        replacement = ConfigData(database=DatabaseConfig(url="sqlite:///./other.db"))

        def run():
            set_config(replacement)
            return get_config()

        assert contextvars.copy_context().run(run) is replacement
        assert get_config() is before

    def test_rejects_other_types(self):
        with pytest.raises(ValueError):
            with with_context({"validation": {}}):
                pass


SHIPPED_CONFIG = Path(__file__).resolve().parents[3] / "config.yaml"


def test_shipped_config_loads_with_clean_environment(monkeypatch):
    for name in ("VAR", "APP_HOST", "APP_PORT", "DATABASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = load_templated_yaml(SHIPPED_CONFIG, "test")

    assert config.app.port == 8080
    assert config.database.url == "sqlite:///./persons.db"
    assert config.logging.level == "INFO"
    assert config.validation == ValidationConfig()
