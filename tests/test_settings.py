import os

from tto_survey.core.env import load_env
from tto_survey.core.secrets import AI_GATEWAY_API_KEY, EnvSecretProvider, StaticSecretProvider
from tto_survey.core.settings import DEFAULT_AI_GATEWAY_URL, DEFAULT_AI_MODEL, get_settings


def test_settings_read_test_environment():
    settings = get_settings()

    assert settings.environment == "development"
    assert settings.ai_provider == "fake"
    assert settings.ai_model == "test/model"
    assert settings.supabase_url == "https://project.test"
    assert settings.supabase_anon_key == "anon-test-key"
    assert settings.ai_gateway_timeout_seconds == 0.0
    assert settings.copilot_docs_enabled is False


def test_settings_defaults_when_unset(monkeypatch):
    for key in ("AI_PROVIDER", "AI_GATEWAY_URL", "AI_MODEL", "ENVIRONMENT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()

    assert settings.ai_provider == "gateway"
    assert settings.ai_gateway_url == DEFAULT_AI_GATEWAY_URL
    assert settings.ai_model == DEFAULT_AI_MODEL
    assert settings.environment == "development"
    assert settings.log_level == "INFO"


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("AI_PROVIDER", "openai")
    monkeypatch.setenv("ENVIRONMENT", "qa")
    monkeypatch.setenv("AI_GATEWAY_TIMEOUT_SECONDS", "-5")
    monkeypatch.setenv("FUNCTIONS_TIMEOUT_SECONDS", "soon")

    settings = get_settings()

    assert settings.ai_provider == "gateway"
    assert settings.environment == "development"
    assert settings.ai_gateway_timeout_seconds == 0.0
    assert settings.functions_timeout_seconds == 0.0


def test_supabase_url_trailing_slash_is_trimmed(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.test/")
    monkeypatch.setenv("FUNCTIONS_TIMEOUT_SECONDS", "12.5")

    settings = get_settings()

    assert settings.supabase_url == "https://project.test"
    assert settings.functions_timeout_seconds == 12.5


def test_load_env_keeps_shell_values(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "export TTO_TEST_EXPORTED=from-file\n"
        'TTO_TEST_QUOTED="quoted value"\n'
        "TTO_TEST_SHELL=from-file\n"
        "not a pair\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("TTO_TEST_SHELL", "from-shell")
    monkeypatch.delenv("TTO_TEST_EXPORTED", raising=False)
    monkeypatch.delenv("TTO_TEST_QUOTED", raising=False)

    try:
        loaded = load_env(env_file)

        assert sorted(loaded) == ["TTO_TEST_EXPORTED", "TTO_TEST_QUOTED"]
        assert os.environ["TTO_TEST_EXPORTED"] == "from-file"
        assert os.environ["TTO_TEST_QUOTED"] == "quoted value"
        assert os.environ["TTO_TEST_SHELL"] == "from-shell"
    finally:
        os.environ.pop("TTO_TEST_EXPORTED", None)
        os.environ.pop("TTO_TEST_QUOTED", None)


def test_load_env_missing_file_is_noop(tmp_path):
    assert load_env(tmp_path / "absent.env") == []


def test_env_secret_provider_prefers_primary_name():
    provider = EnvSecretProvider({AI_GATEWAY_API_KEY: " primary ", "LOVABLE_API_KEY": "legacy"})

    assert provider.get(AI_GATEWAY_API_KEY) == "primary"


def test_env_secret_provider_falls_back_to_legacy_name():
    provider = EnvSecretProvider({AI_GATEWAY_API_KEY: "  ", "LOVABLE_API_KEY": "legacy"})

    assert provider.get(AI_GATEWAY_API_KEY) == "legacy"
    assert EnvSecretProvider({}).get(AI_GATEWAY_API_KEY) is None


def test_static_secret_provider():
    provider = StaticSecretProvider({AI_GATEWAY_API_KEY: "k", "EMPTY": ""})

    assert provider.get(AI_GATEWAY_API_KEY) == "k"
    assert provider.get("EMPTY") is None
    assert provider.get("MISSING") is None
