from satire_api.llm.provider_config import (
    UPSTREAM_TIMEOUT_SECONDS,
    ServiceConfig,
    load_key,
)


def test_defaults_without_credential():
    config = ServiceConfig.from_env()
    assert config.provider == "xai"
    assert config.url == "https://api.x.ai/v1/chat/completions"
    assert config.model_name == "grok-4-fast-reasoning"
    assert config.timeout_seconds == UPSTREAM_TIMEOUT_SECONDS == 18.0
    assert config.fallback_mode == "templated"
    assert config.instruction_variant == "standard"


def test_credential_from_environment(monkeypatch):
    monkeypatch.setenv("XAI_API_KEY", "abc")
    monkeypatch.setenv("XAI_MODEL", "grok-custom")
    config = ServiceConfig.from_env()
    assert config.api_key == "abc"
    assert config.model_name == "grok-custom"
    assert config.generation_enabled


def test_missing_credential_disables_generation(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert not ServiceConfig.from_env().generation_enabled


def test_key_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "xai.key").write_text("filekey\n", encoding="utf-8")
    assert load_key("config/xai.key") == "filekey"
    assert load_key(None) is None
    assert load_key("config/missing.key") is None


def test_timeout_must_stay_under_platform_ceiling(monkeypatch):
    monkeypatch.setenv("SATIRE_UPSTREAM_TIMEOUT_SECONDS", "30")
    assert ServiceConfig.from_env().timeout_seconds == 18.0
    monkeypatch.setenv("SATIRE_UPSTREAM_TIMEOUT_SECONDS", "abc")
    assert ServiceConfig.from_env().timeout_seconds == 18.0
    monkeypatch.setenv("SATIRE_UPSTREAM_TIMEOUT_SECONDS", "5")
    assert ServiceConfig.from_env().timeout_seconds == 5.0


def test_unknown_provider_uses_default(monkeypatch):
    monkeypatch.setenv("PROVIDER", "nonsense")
    assert ServiceConfig.from_env().provider == "xai"


def test_local_provider_needs_no_key(monkeypatch):
    monkeypatch.setenv("PROVIDER", "local")
    config = ServiceConfig.from_env()
    assert config.api_key is None
    assert config.generation_enabled
