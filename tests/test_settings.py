import pytest

from settings import AppConfig, load_config

ENV_VARS = (
    "XAI_API_KEY",
    "XAI_BASE_URL",
    "XAI_MODEL",
    "XAI_TEMPERATURE",
    "ADZUNA_APP_ID",
    "ADZUNA_API_KEY",
    "ADZUNA_BASE_URL",
    "APP_ENV",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path / "missing.env"


def test_defaults(clean_env):
    config = load_config(str(clean_env))

    assert config.xai.api_key == ""
    assert config.xai.base_url == "https://api.x.ai/v1"
    assert config.xai.model == "grok-2-latest"
    assert config.xai.temperature == 0.7
    assert config.adzuna.base_url == "https://api.adzuna.com/v1"
    assert config.is_dev is False


def test_reads_environment(clean_env, monkeypatch):
    monkeypatch.setenv("XAI_API_KEY", " xai-secret ")
    monkeypatch.setenv("XAI_BASE_URL", "https://proxy.local/v1/")
    monkeypatch.setenv("XAI_MODEL", "grok-beta")
    monkeypatch.setenv("XAI_TEMPERATURE", "0.2")
    monkeypatch.setenv("ADZUNA_APP_ID", "abc")
    monkeypatch.setenv("ADZUNA_API_KEY", "def")
    monkeypatch.setenv("APP_ENV", "Development")

    config = load_config(str(clean_env))

    assert config.xai.api_key == "xai-secret"
    assert config.xai.base_url == "https://proxy.local/v1"
    assert config.xai.model == "grok-beta"
    assert config.xai.temperature == 0.2
    assert config.adzuna.app_id == "abc"
    assert config.adzuna.api_key == "def"
    assert config.is_dev is True


def test_invalid_temperature_falls_back(clean_env, monkeypatch):
    monkeypatch.setenv("XAI_TEMPERATURE", "warm")
    assert load_config(str(clean_env)).xai.temperature == 0.7


def test_reads_dotenv_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ADZUNA_APP_ID=from-file\nAPP_ENV=dev\n")

    config = load_config(str(env_file))

    assert config.adzuna.app_id == "from-file"
    assert config.is_dev is True


def test_config_can_be_built_explicitly():
    config = AppConfig(is_dev=True)
    assert config.xai.model == "grok-2-latest"
    assert config.adzuna.timeout_s == 10.0
