import pytest
from pydantic import ValidationError

from repo_stats_card.infrastructure.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("MAX_LANGUAGES", raising=False)

    settings = Settings(_env_file=None)

    assert settings.github_token is None
    assert settings.max_languages == 5
    assert settings.github_api_url == "https://api.github.com"
    assert settings.default_description == "No description provided"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")
    monkeypatch.setenv("MAX_LANGUAGES", "0")

    settings = Settings(_env_file=None)

    assert settings.github_token.get_secret_value() == "ghp_test"
    assert settings.max_languages == 0


def test_negative_language_limit_rejected(monkeypatch):
    monkeypatch.setenv("MAX_LANGUAGES", "-2")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
