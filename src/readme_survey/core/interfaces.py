"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from readme_survey.core.entities import Report, Repository


class RepositorySource(ABC):
    """Interface for discovering repositories to survey."""

    @abstractmethod
    async def discover(self) -> list[Repository]:
        """Discover repositories, most starred first."""
        pass


class ReadmeClient(ABC):
    """Interface for fetching README text."""

    @abstractmethod
    async def fetch_readme(self, repository: Repository) -> Optional[str]:
        """Fetch README text, or None if the repository has no README."""
        pass


class CorpusReader(ABC):
    """Interface for reading a downloaded corpus."""

    @abstractmethod
    def read_manifest(self) -> list[Repository]:
        """Read the repositories listed in the corpus manifest."""
        pass

    @abstractmethod
    def read_readme(self, repository: Repository) -> str:
        """Read README text; raises MissingReadmeError if absent."""
        pass


class ReportWriter(ABC):
    """Interface for serializing reports."""

    @abstractmethod
    def write(self, reports: list[Report], destination: Path) -> list[Path]:
        """Write reports under destination and return the written paths."""
        pass
