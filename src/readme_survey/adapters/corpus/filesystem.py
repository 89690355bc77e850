"""Corpus stored on the local filesystem."""

from pathlib import Path

import yaml

from readme_survey.core import CorpusReader, ManifestError, MissingReadmeError, ReadmeMarkers, Repository

MANIFEST_FILENAME = "manifest.yaml"


class FileSystemCorpus(CorpusReader):
    """Corpus directory with a YAML manifest and one README per repository.

    Layout:
        <corpus>/manifest.yaml
        <corpus>/<owner>/<name>/README.md
        <corpus>/<owner>/<name>/_._   (README confirmed absent)
    """

    def __init__(self, corpus_dir: Path) -> None:
        self.corpus_dir = corpus_dir
        self.markers = ReadmeMarkers(corpus_dir)

    @property
    def manifest_path(self) -> Path:
        return self.corpus_dir / MANIFEST_FILENAME

    def read_manifest(self) -> list[Repository]:
        """Read repositories from the manifest, in file order."""
        if not self.manifest_path.exists():
            raise ManifestError(f"Manifest not found: {self.manifest_path}")

        with open(self.manifest_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ManifestError(f"Invalid manifest {self.manifest_path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise ManifestError("Manifest must contain a list of repositories")

        repositories = []
        for index, entry in enumerate(data):
            if not isinstance(entry, dict):
                raise ManifestError(f"Manifest entry {index} is not a mapping")
            try:
                repositories.append(
                    Repository(
                        owner=str(entry["owner"]),
                        name=str(entry["name"]),
                        stars=int(entry.get("stars", 0)),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:
                raise ManifestError(f"Manifest entry {index} is invalid: {e}") from e

        return repositories

    def write_manifest(self, repositories: list[Repository]) -> None:
        """Write repositories to the manifest."""
        self.corpus_dir.mkdir(parents=True, exist_ok=True)
        data = [
            {"owner": repository.owner, "name": repository.name, "stars": repository.stars}
            for repository in repositories
        ]
        with open(self.manifest_path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True, default_flow_style=False, sort_keys=False)

    def read_readme(self, repository: Repository) -> str:
        path = self.markers.readme_path(repository)
        if not path.is_file():
            raise MissingReadmeError(repository)
        return path.read_text(encoding="utf-8", errors="replace")
