"""Tests for the filesystem corpus adapter."""

import pytest

from readme_survey.adapters.corpus import FileSystemCorpus
from readme_survey.core import ManifestError, MissingReadmeError, Repository


def test_manifest_round_trip(tmp_path) -> None:
    """Written manifests read back with stars in file order."""
    corpus = FileSystemCorpus(tmp_path / "corpus")
    repositories = [
        Repository("octo", "widgets", stars=20),
        Repository("dotnet", "runtime", stars=15000),
    ]

    corpus.write_manifest(repositories)
    loaded = corpus.read_manifest()

    assert loaded == repositories
    assert [repository.stars for repository in loaded] == [20, 15000]


def test_empty_manifest(tmp_path) -> None:
    (tmp_path / "manifest.yaml").write_text("", encoding="utf-8")

    assert FileSystemCorpus(tmp_path).read_manifest() == []


@pytest.mark.parametrize(
    "content, message",
    [
        ("owner: octo\n", "must contain a list"),
        ("- octo/widgets\n", "not a mapping"),
        ("- name: widgets\n", "is invalid"),
        ("- owner: octo\n  name: widgets\n  stars: -5\n", "is invalid"),
        ("- owner: octo\n  name: [unclosed\n", "Invalid manifest"),
    ],
)
def test_invalid_manifest(tmp_path, content, message) -> None:
    """Malformed manifests raise ManifestError."""
    (tmp_path / "manifest.yaml").write_text(content, encoding="utf-8")

    with pytest.raises(ManifestError, match=message):
        FileSystemCorpus(tmp_path).read_manifest()


def test_read_readme(tmp_path) -> None:
    """READMEs are read from owner/name directories."""
    corpus = FileSystemCorpus(tmp_path)
    repository = Repository("octo", "widgets")
    corpus.markers.mark_fetched(repository, "# Widgets\n")

    assert corpus.read_readme(repository) == "# Widgets\n"


def test_read_missing_readme(tmp_path) -> None:
    """A README that is not on disk raises MissingReadmeError."""
    repository = Repository("octo", "widgets")

    with pytest.raises(MissingReadmeError, match="Missing README for octo/widgets") as exc_info:
        FileSystemCorpus(tmp_path).read_readme(repository)

    assert exc_info.value.repository == repository
