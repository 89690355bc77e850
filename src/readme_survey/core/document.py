"""Markdown parsing and document tree traversal."""

from collections.abc import Iterator
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from readme_survey.core.entities import (
    DocumentNode,
    Emphasis,
    FencedCode,
    HtmlBlock,
    ImageLink,
    PlainLink,
    TableMarker,
)

_EMPHASIS_TYPES = {"em", "strong", "s"}


def create_parser() -> MarkdownIt:
    """CommonMark parser with the GFM table and strikethrough rules.

    Link destinations are kept exactly as written: every scheme is accepted
    and URLs are not percent-encoded or punycoded.
    """
    parser = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    parser.validateLink = lambda url: True
    parser.normalizeLink = lambda url: url
    return parser


def parse_document(text: str, parser: Optional[MarkdownIt] = None) -> SyntaxTreeNode:
    """Parse markdown text into a syntax tree."""
    parser = parser or create_parser()
    return SyntaxTreeNode(parser.parse(text))


def descendants(root: SyntaxTreeNode) -> Iterator[SyntaxTreeNode]:
    """Yield every descendant of root in document order."""
    stack = list(reversed(root.children))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def to_document_node(node: SyntaxTreeNode) -> Optional[DocumentNode]:
    """Convert a syntax tree node to a classifiable node, or None if irrelevant."""
    if node.type == "image":
        return ImageLink(url=str(node.attrs.get("src", "")))
    if node.type == "link":
        return PlainLink(url=str(node.attrs.get("href", "")))
    if node.type == "html_block":
        return HtmlBlock(raw=node.content)
    if node.type == "fence":
        return FencedCode(info=node.info)
    if node.type == "table":
        return TableMarker()
    if node.type in _EMPHASIS_TYPES and node.markup:
        return Emphasis(delimiter=node.markup[0])
    return None


def walk(root: SyntaxTreeNode) -> Iterator[DocumentNode]:
    """Yield the classifiable nodes of a document in document order."""
    for node in descendants(root):
        document_node = to_document_node(node)
        if document_node is not None:
            yield document_node
