"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from readme_survey.core.policy import TRUSTED_IMAGE_HOSTS


@dataclass
class GitHubConfig:
    """GitHub search and download settings."""
    api_base: str = "https://api.github.com"
    language: str = "C#"
    min_stars: int = 1000
    max_results_per_query: int = 1000
    per_page: int = 100
    workers: int = 32
    request_timeout: float = 30.0
    request_delay: float = 2.0


@dataclass
class AnalysisConfig:
    """Classification policy settings."""
    trusted_image_hosts: list[str] = field(default_factory=lambda: list(TRUSTED_IMAGE_HOSTS))


@dataclass
class Settings:
    """Application settings."""

    # API token (from environment only)
    github_token: Optional[str] = None

    # Config sections
    github: GitHubConfig = field(default_factory=GitHubConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)

    @property
    def trusted_image_hosts(self) -> list[str]:
        return self.analysis.trusted_image_hosts


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(github_token=os.getenv("GITHUB_TOKEN") or None)

    if "github" in config:
        for key, value in (config["github"] or {}).items():
            setattr(settings.github, key, value)

    if "analysis" in config:
        for key, value in (config["analysis"] or {}).items():
            setattr(settings.analysis, key, value)

    return settings
