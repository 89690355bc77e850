"""Feature classifiers for README document nodes."""

import re
from collections.abc import Iterable
from typing import Callable, Optional
from urllib.parse import SplitResult, urlsplit

from readme_survey.core.aggregation import AggregationStore
from readme_survey.core.entities import (
    DocumentNode,
    Emphasis,
    FencedCode,
    HtmlBlock,
    ImageLink,
    PlainLink,
    Repository,
    TableMarker,
)
from readme_survey.core.policy import TRUSTED_IMAGE_HOSTS

# Lightweight tag-start scan, not an HTML parser. Names with more than one
# trailing digit are cut short ("<h10" matches "h1").
HTML_TAG_PATTERN = re.compile(r"<([A-Za-z]+[1-9]?|!--)")

WEB_SCHEMES = frozenset({"http", "https"})


def parse_absolute_uri(url: str) -> Optional[SplitResult]:
    """Parse url as an absolute URI, or return None if it is relative or invalid."""
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return None
    if not parts.scheme:
        return None
    return parts


def find_html_elements(raw: str) -> list[str]:
    """Distinct tag-start names in raw HTML, in order of first appearance."""
    return list(dict.fromkeys(HTML_TAG_PATTERN.findall(raw)))


class FeatureClassifier:
    """Offers document nodes to the per-variant classification rules."""

    def __init__(self, trusted_image_hosts: Iterable[str] = TRUSTED_IMAGE_HOSTS) -> None:
        self.trusted_image_hosts = frozenset(host.casefold() for host in trusted_image_hosts)
        self._rules: dict[type, Callable[..., None]] = {
            ImageLink: self.classify_image,
            PlainLink: self.classify_link,
            HtmlBlock: self.classify_html,
            FencedCode: self.classify_code_fence,
            TableMarker: self.classify_table,
            Emphasis: self.classify_emphasis,
        }

    def classify(self, node: DocumentNode, repository: Repository, store: AggregationStore) -> None:
        rule = self._rules.get(type(node))
        if rule is not None:
            rule(node, repository, store)

    def is_trusted_image_host(self, host: str) -> bool:
        return host.casefold() in self.trusted_image_hosts

    def classify_image(self, node: ImageLink, repository: Repository, store: AggregationStore) -> None:
        parts = parse_absolute_uri(node.url)
        if parts is None or not parts.hostname:
            return
        if not self.is_trusted_image_host(parts.hostname):
            store.track_disallowed_image_host(repository, parts.hostname)

    def classify_link(self, node: PlainLink, repository: Repository, store: AggregationStore) -> None:
        parts = parse_absolute_uri(node.url)
        if parts is None:
            return
        if parts.scheme not in WEB_SCHEMES:
            store.track_special_link(repository, node.url.strip())

    def classify_html(self, node: HtmlBlock, repository: Repository, store: AggregationStore) -> None:
        store.track_html(repository)
        for element in find_html_elements(node.raw):
            store.track_html_element(repository, element)

    def classify_code_fence(self, node: FencedCode, repository: Repository, store: AggregationStore) -> None:
        store.track_code_fence(repository, node.info or "")

    def classify_table(self, node: TableMarker, repository: Repository, store: AggregationStore) -> None:
        store.track_table(repository)

    def classify_emphasis(self, node: Emphasis, repository: Repository, store: AggregationStore) -> None:
        if node.delimiter == "~":
            store.track_strikethrough(repository)
