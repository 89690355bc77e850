"""Tests for configuration loading."""

from pathlib import Path

from readme_survey.config import get_settings
from readme_survey.core.policy import TRUSTED_IMAGE_HOSTS


def test_defaults_without_config(tmp_path, monkeypatch) -> None:
    """Missing config file falls back to defaults."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    settings = get_settings(tmp_path / "missing.yaml")

    assert settings.github_token is None
    assert settings.github.min_stars == 1000
    assert settings.github.workers == 32
    assert settings.github.language == "C#"
    assert settings.trusted_image_hosts == list(TRUSTED_IMAGE_HOSTS)


def test_yaml_overrides_and_env_token(tmp_path, monkeypatch) -> None:
    """YAML sections override defaults; the token comes from the environment."""
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")
    config_path: Path = tmp_path / "config.yaml"
    config_path.write_text(
        "github:\n"
        "  min_stars: 500\n"
        "  language: F#\n"
        "analysis:\n"
        "  trusted_image_hosts:\n"
        "    - img.shields.io\n",
        encoding="utf-8",
    )

    settings = get_settings(config_path)

    assert settings.github_token == "ghp_test"
    assert settings.github.min_stars == 500
    assert settings.github.language == "F#"
    assert settings.github.per_page == 100
    assert settings.trusted_image_hosts == ["img.shields.io"]


def test_unknown_keys_are_tolerated(tmp_path, monkeypatch) -> None:
    """Unknown keys in either section do not stop known keys from applying."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    config_path: Path = tmp_path / "config.yaml"
    config_path.write_text(
        "github:\n"
        "  workers: 8\n"
        "  legacy_option: true\n"
        "analysis:\n"
        "  trusted_image_hosts:\n"
        "    - cdn.example.com\n"
        "  legacy_option: true\n",
        encoding="utf-8",
    )

    settings = get_settings(config_path)

    assert settings.github.workers == 8
    assert settings.trusted_image_hosts == ["cdn.example.com"]


def test_empty_analysis_section_keeps_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    config_path: Path = tmp_path / "config.yaml"
    config_path.write_text("analysis:\n", encoding="utf-8")

    settings = get_settings(config_path)

    assert settings.trusted_image_hosts == list(TRUSTED_IMAGE_HOSTS)
