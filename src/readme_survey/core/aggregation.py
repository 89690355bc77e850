"""Deduplicating aggregation of classification facts."""

from dataclasses import dataclass, field
from typing import Iterator

from readme_survey.core.entities import Repository


@dataclass
class KeyedEntry:
    """Repositories recorded under one classification key.

    `key` keeps the spelling of the first occurrence; `repositories` is an
    insertion-ordered set.
    """

    key: str
    repositories: dict[Repository, None] = field(default_factory=dict)

    @property
    def total_stars(self) -> int:
        return sum(repository.stars for repository in self.repositories)


class KeyedRepositories:
    """Mapping of case-insensitive keys to ordered sets of repositories."""

    def __init__(self) -> None:
        self._entries: dict[str, KeyedEntry] = {}

    def add(self, key: str, repository: Repository) -> None:
        folded = key.casefold()
        entry = self._entries.get(folded)
        if entry is None:
            entry = KeyedEntry(key=key)
            self._entries[folded] = entry
        entry.repositories[repository] = None

    def get(self, key: str) -> list[Repository]:
        entry = self._entries.get(key.casefold())
        return list(entry.repositories) if entry else []

    def entries(self) -> list[KeyedEntry]:
        return list(self._entries.values())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.casefold() in self._entries

    def __iter__(self) -> Iterator[str]:
        return (entry.key for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


class AggregationStore:
    """Per-run state collecting classification facts for the whole corpus.

    Every `track_*` call is idempotent: recording the same fact twice has
    the same effect as recording it once.
    """

    def __init__(self) -> None:
        self.disallowed_image_hosts = KeyedRepositories()
        self.html_elements = KeyedRepositories()
        self._code_fences: dict[tuple[Repository, str], None] = {}
        self._special_links: dict[tuple[str, Repository], None] = {}
        self._tables: dict[Repository, None] = {}
        self._html: dict[Repository, None] = {}
        self._strikethrough: dict[Repository, None] = {}

    def track_disallowed_image_host(self, repository: Repository, host: str) -> None:
        self.disallowed_image_hosts.add(host, repository)

    def track_html_element(self, repository: Repository, element: str) -> None:
        self.html_elements.add(element, repository)

    def track_code_fence(self, repository: Repository, info: str) -> None:
        self._code_fences[(repository, info)] = None

    def track_special_link(self, repository: Repository, uri: str) -> None:
        self._special_links[(uri, repository)] = None

    def track_table(self, repository: Repository) -> None:
        self._tables[repository] = None

    def track_html(self, repository: Repository) -> None:
        self._html[repository] = None

    def track_strikethrough(self, repository: Repository) -> None:
        self._strikethrough[repository] = None

    @property
    def code_fences(self) -> list[tuple[Repository, str]]:
        return list(self._code_fences)

    @property
    def special_links(self) -> list[tuple[str, Repository]]:
        return list(self._special_links)

    @property
    def tables(self) -> list[Repository]:
        return list(self._tables)

    @property
    def html(self) -> list[Repository]:
        return list(self._html)

    @property
    def strikethrough(self) -> list[Repository]:
        return list(self._strikethrough)
