"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_default_engine_name,
    get_environment,
    get_environment_info,
    get_log_level,
    get_repeat_items_preference,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("LAYOUTBOX_ENGINE", raising=False)
        result = get_environment(EnvVar.LAYOUTBOX_ENGINE)
        assert result == "model"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("LAYOUTBOX_ENGINE", "descriptor")
        result = get_environment(EnvVar.LAYOUTBOX_ENGINE, override="custom")
        assert result == "custom"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("LAYOUTBOX_ENGINE", "descriptor")
        result = get_environment(EnvVar.LAYOUTBOX_ENGINE)
        assert result == "descriptor"

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("LAYOUTBOX_REPEAT_ITEMS", value)
            result = get_environment(EnvVar.LAYOUTBOX_REPEAT_ITEMS)
            assert result is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("LAYOUTBOX_REPEAT_ITEMS", value)
            result = get_environment(EnvVar.LAYOUTBOX_REPEAT_ITEMS)
            assert result is False

    @pytest.mark.unit
    def test_invalid_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean text falls back to the default."""
        monkeypatch.setenv("LAYOUTBOX_REPEAT_ITEMS", "sometimes")
        result = get_environment(EnvVar.LAYOUTBOX_REPEAT_ITEMS)
        assert result is None

    @pytest.mark.unit
    def test_none_default_for_repeat_items(self, monkeypatch):
        """Repeat preference defaults to None when not set."""
        monkeypatch.delenv("LAYOUTBOX_REPEAT_ITEMS", raising=False)
        assert get_environment(EnvVar.LAYOUTBOX_REPEAT_ITEMS) is None


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.LAYOUTBOX_ENGINE)
        assert isinstance(info, EnvConfig)
        assert info.name == "LAYOUTBOX_ENGINE"
        assert info.default == "model"
        assert info.var_type is str
        assert info.category == "compose"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.LAYOUTBOX_REPEAT_ITEMS)
        assert "repeat" in info.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)
        assert all(isinstance(v, EnvVar) for v in result)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        compose_vars = list_environment_variables("compose")
        assert EnvVar.LAYOUTBOX_ENGINE in compose_vars
        assert EnvVar.LAYOUTBOX_REPEAT_ITEMS in compose_vars
        assert EnvVar.LAYOUTBOX_LOG_LEVEL not in compose_vars


class TestConvenienceFunctions:
    """Tests for the typed convenience accessors."""

    @pytest.mark.unit
    def test_default_engine_name(self, monkeypatch):
        """Engine name resolves override > env > default."""
        monkeypatch.delenv("LAYOUTBOX_ENGINE", raising=False)
        assert get_default_engine_name() == "model"
        assert get_default_engine_name(override="descriptor") == "descriptor"

    @pytest.mark.unit
    def test_repeat_items_preference(self, monkeypatch):
        """Repeat preference reads the boolean variable."""
        monkeypatch.setenv("LAYOUTBOX_REPEAT_ITEMS", "0")
        assert get_repeat_items_preference() is False

    @pytest.mark.unit
    def test_log_level_is_upper_cased(self, monkeypatch):
        """Log level names are normalised to upper case."""
        monkeypatch.setenv("LAYOUTBOX_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"
