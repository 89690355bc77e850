"""Markers for READMEs already downloaded or confirmed absent."""

from pathlib import Path

from readme_survey.core.entities import Repository

README_FILENAME = "README.md"
NOT_FOUND_FILENAME = "_._"


class ReadmeMarkers:
    """Track download state as files under the corpus directory.

    A repository directory holding `README.md` was fetched; one holding the
    `_._` marker was confirmed to have no README. Either one suppresses a
    re-fetch on the next run.
    """

    def __init__(self, corpus_dir: Path) -> None:
        self.corpus_dir = corpus_dir

    def repository_dir(self, repository: Repository) -> Path:
        return self.corpus_dir / repository.owner / repository.name

    def readme_path(self, repository: Repository) -> Path:
        return self.repository_dir(repository) / README_FILENAME

    def not_found_path(self, repository: Repository) -> Path:
        return self.repository_dir(repository) / NOT_FOUND_FILENAME

    def is_fetched(self, repository: Repository) -> bool:
        return self.readme_path(repository).exists()

    def is_missing(self, repository: Repository) -> bool:
        return self.not_found_path(repository).exists()

    def is_done(self, repository: Repository) -> bool:
        """Check if repository needs no further download attempt."""
        return self.is_fetched(repository) or self.is_missing(repository)

    def mark_fetched(self, repository: Repository, content: str) -> None:
        """Save README content."""
        path = self.readme_path(repository)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def mark_missing(self, repository: Repository) -> None:
        """Record that the repository has no README."""
        path = self.not_found_path(repository)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")

    def filter_pending(self, repositories: list[Repository]) -> tuple[list[Repository], int]:
        """Filter out repositories that are already done.

        Returns:
            Tuple of (pending_repositories, skipped_count)
        """
        pending = []
        skipped_count = 0

        for repository in repositories:
            if self.is_done(repository):
                skipped_count += 1
            else:
                pending.append(repository)

        return pending, skipped_count

    def get_stats(self) -> dict:
        """Count fetched and missing READMEs under the corpus directory."""
        if not self.corpus_dir.exists():
            return {"fetched": 0, "missing": 0}

        fetched = len(list(self.corpus_dir.glob(f"*/*/{README_FILENAME}")))
        missing = len(list(self.corpus_dir.glob(f"*/*/{NOT_FOUND_FILENAME}")))

        return {
            "fetched": fetched,
            "missing": missing,
        }
