"""Shared fixtures."""

from pathlib import Path
from typing import Callable, Optional

import pytest
import yaml


@pytest.fixture
def make_corpus(tmp_path: Path) -> Callable[..., Path]:
    """Build a corpus directory from (owner, name, stars, readme-or-None) tuples."""

    def _make(entries: list[tuple[str, str, int, Optional[str]]]) -> Path:
        corpus_dir = tmp_path / "corpus"
        corpus_dir.mkdir(exist_ok=True)
        manifest = []
        for owner, name, stars, readme in entries:
            manifest.append({"owner": owner, "name": name, "stars": stars})
            if readme is not None:
                repo_dir = corpus_dir / owner / name
                repo_dir.mkdir(parents=True, exist_ok=True)
                (repo_dir / "README.md").write_text(readme, encoding="utf-8")
        with open(corpus_dir / "manifest.yaml", "w", encoding="utf-8") as f:
            yaml.dump(manifest, f, sort_keys=False)
        return corpus_dir

    return _make
