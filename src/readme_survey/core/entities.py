"""Core domain entities."""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Repository:
    """A GitHub repository in the corpus.

    Equality and hashing use (owner, name) only, so the same repository
    seen with a different star count is still deduplicated.
    """

    owner: str
    name: str
    stars: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if not self.owner:
            raise ValueError("Owner cannot be empty")
        if not self.name:
            raise ValueError("Name cannot be empty")
        if self.stars < 0:
            raise ValueError("Stars cannot be negative")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def owner_link(self) -> str:
        return f"[{self.owner}](https://github.com/{self.owner})"

    @property
    def repository_link(self) -> str:
        return f"[{self.name}](https://github.com/{self.owner}/{self.name})"


@dataclass(frozen=True)
class ImageLink:
    """Inline image."""

    url: str


@dataclass(frozen=True)
class PlainLink:
    """Inline link that is not an image."""

    url: str


@dataclass(frozen=True)
class HtmlBlock:
    """Raw HTML block."""

    raw: str


@dataclass(frozen=True)
class FencedCode:
    """Fenced code block with its info string."""

    info: str


@dataclass(frozen=True)
class TableMarker:
    """Presence of a GFM table."""


@dataclass(frozen=True)
class Emphasis:
    """Emphasis span (em, strong or strikethrough) by delimiter character."""

    delimiter: str


DocumentNode = Union[ImageLink, PlainLink, HtmlBlock, FencedCode, TableMarker, Emphasis]


@dataclass
class Report:
    """Ordered rows for one feature with a fixed column schema."""

    name: str
    columns: list[str]
    rows: list[list[str]]
