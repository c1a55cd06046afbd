"""
Tests for Settings construction.

Feature: collabnorm
"""

import pytest

from collabnorm.config import DEFAULT_BASE_URL, DEFAULT_REPOSITORY, Settings
from collabnorm.exceptions import ConfigurationError


def test_from_env_reads_token_and_defaults() -> None:
    settings = Settings.from_env({"GITHUB_TOKEN": "ghp_abc"})

    assert settings.token == "ghp_abc"
    assert settings.repository == DEFAULT_REPOSITORY
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.page_size == 100
    assert settings.max_retries == 0


def test_from_env_reads_optional_variables() -> None:
    settings = Settings.from_env({
        "GITHUB_TOKEN": "ghp_abc",
        "COLLABNORM_REPOSITORY": "octo-org/hello-world",
        "GITHUB_API_URL": "https://github.example.com/api/v3",
        "COLLABNORM_MAX_RETRIES": "3",
    })

    assert settings.owner == "octo-org"
    assert settings.name == "hello-world"
    assert settings.base_url == "https://github.example.com/api/v3"
    assert settings.max_retries == 3


def test_overrides_win_and_none_is_ignored() -> None:
    settings = Settings.from_env(
        {"GITHUB_TOKEN": "ghp_abc", "COLLABNORM_REPOSITORY": "a/b"},
        repository="c/d",
        max_retries=None,
    )

    assert settings.repository == "c/d"
    assert settings.max_retries == 0


@pytest.mark.parametrize("environ", [{}, {"GITHUB_TOKEN": ""}])
def test_missing_token(environ: dict[str, str]) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        Settings.from_env(environ)

    assert "GITHUB_TOKEN" in exc_info.value.message


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_from_env")

    assert Settings.from_env().token == "ghp_from_env"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"token": "  "},
        {"token": "t", "repository": "no-slash"},
        {"token": "t", "page_size": 0},
        {"token": "t", "page_size": 101},
        {"token": "t", "max_retries": -1},
    ],
)
def test_invalid_settings(kwargs: dict) -> None:
    with pytest.raises(ConfigurationError):
        Settings(**kwargs)


def test_invalid_max_retries_in_env() -> None:
    with pytest.raises(ConfigurationError):
        Settings.from_env({"GITHUB_TOKEN": "t", "COLLABNORM_MAX_RETRIES": "lots"})


def test_repr_hides_token() -> None:
    assert "ghp_secret" not in repr(Settings(token="ghp_secret"))
