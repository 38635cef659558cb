from app.core.config import Settings, load_settings


def test_defaults_from_empty_environment():
    settings = load_settings({})

    assert settings.perplexity_api_key is None
    assert settings.api_key_configured is False
    assert settings.environment == "development"
    assert settings.is_development
    assert settings.request_timeout_s == 45.0
    assert settings.port == 5000
    assert settings.rate_limit == "200 per 15 minutes"


def test_reads_explicit_mapping():
    settings = load_settings({
        "PERPLEXITY_API_KEY": "pplx-abc",
        "PERPLEXITY_TIMEOUT_S": "30",
        "NODE_ENV": "production",
        "CORS_ORIGINS": "https://a.example, https://b.example ,",
        "RATE_LIMIT_ENABLED": "false",
        "PORT": "8080",
    })

    assert settings.api_key_configured
    assert settings.request_timeout_s == 30.0
    assert not settings.is_development
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.rate_limit_enabled is False
    assert settings.port == 8080


def test_app_env_wins_over_node_env():
    assert load_settings({"APP_ENV": "staging", "NODE_ENV": "production"}).environment == "staging"


def test_settings_are_plain_objects():
    settings = Settings(perplexity_api_key="k", environment="Development")
    assert settings.is_development
