import pytest

from projectinfo.config import METADATA_PROJECT_ID_URL, AppConfig


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    config = AppConfig()
    assert config.project is None
    assert config.port == 8080
    assert config.host == "0.0.0.0"
    assert config.metadata_url == METADATA_PROJECT_ID_URL
    assert config.timeout_metadata == 5.0
    assert config.debug is False


def test_from_env(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("GOOGLE_CLOUD_PROJECT", "ntnu-student-project")
    clean_env.setenv("PORT", "5000")
    clean_env.setenv("DEBUG", "true")
    config = AppConfig()
    assert config.project == "ntnu-student-project"
    assert config.port == 5000
    assert config.debug is True


@pytest.mark.parametrize("port", ["", "abc", "80.5"])
def test_port_unparseable(clean_env: pytest.MonkeyPatch, port: str) -> None:
    """An unparseable PORT falls back to the default instead of failing."""
    clean_env.setenv("PORT", port)
    assert AppConfig().port == 8080


def test_init_by_field_name(clean_env: pytest.MonkeyPatch) -> None:
    config = AppConfig(project="my-project", port=9000)
    assert config.project == "my-project"
    assert config.port == 9000


@pytest.mark.parametrize("var", ["DEBUG", "TIMEOUT_METADATA", "HOST", "METADATA_URL"])
def test_empty_env_uses_default(clean_env: pytest.MonkeyPatch, var: str) -> None:
    """Variables that are set but empty count as unset."""
    clean_env.setenv(var, "")
    config = AppConfig()
    assert config.debug is False
    assert config.timeout_metadata == 5.0
    assert config.host == "0.0.0.0"
    assert config.metadata_url == METADATA_PROJECT_ID_URL
