"""Source adapters for discovering repositories and fetching READMEs."""

from readme_survey.adapters.sources.github_readme import GitHubReadmeClient
from readme_survey.adapters.sources.github_source import GitHubSearchSource

__all__ = ["GitHubReadmeClient", "GitHubSearchSource"]
