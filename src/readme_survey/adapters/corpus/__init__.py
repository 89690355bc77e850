"""Corpus storage adapters."""

from readme_survey.adapters.corpus.filesystem import FileSystemCorpus

__all__ = ["FileSystemCorpus"]
