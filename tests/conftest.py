import os

import pytest

TEST_ENV = {
    "ENVIRONMENT": "development",
    "LOG_LEVEL": "WARNING",
    "LOG_JSON": "false",
    "LOG_FILE": "",
    "AI_PROVIDER": "fake",
    "AI_GATEWAY_URL": "https://gateway.test/v1/chat/completions",
    "AI_MODEL": "test/model",
    "AI_GATEWAY_TIMEOUT_SECONDS": "0",
    "SUPABASE_URL": "https://project.test",
    "SUPABASE_ANON_KEY": "anon-test-key",
    "FUNCTIONS_TIMEOUT_SECONDS": "0",
}

# Secrets must come from each test, never from the developer's shell.
_UNSET_ENV = ("AI_GATEWAY_API_KEY", "LOVABLE_API_KEY")

for key, value in TEST_ENV.items():
    os.environ[key] = value
for key in _UNSET_ENV:
    os.environ.pop(key, None)


@pytest.fixture(autouse=True)
def _reset_cached_settings():
    """Force deterministic env for every test and drop cached settings/clients."""

    for key, value in TEST_ENV.items():
        os.environ[key] = value
    for key in _UNSET_ENV:
        os.environ.pop(key, None)

    from tto_survey.clients import functions as functions_module
    from tto_survey.core import settings as settings_module

    settings_module.get_settings.cache_clear()
    functions_module.get_functions_client.cache_clear()
    yield
    settings_module.get_settings.cache_clear()
    functions_module.get_functions_client.cache_clear()
