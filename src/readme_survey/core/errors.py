"""Domain errors."""

from readme_survey.core.entities import Repository


class ReadmeSurveyError(Exception):
    """Base error for the README survey."""


class MissingReadmeError(ReadmeSurveyError):
    """Raised when a manifest-listed repository has no README in the corpus."""

    def __init__(self, repository: Repository) -> None:
        super().__init__(f"Missing README for {repository.full_name}")
        self.repository = repository


class ManifestError(ReadmeSurveyError):
    """Raised when the corpus manifest is absent or malformed."""
