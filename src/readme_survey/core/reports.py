"""Report building from a finished aggregation store."""

from readme_survey.core.aggregation import AggregationStore, KeyedRepositories
from readme_survey.core.classifiers import parse_absolute_uri
from readme_survey.core.entities import Report, Repository
from readme_survey.core.policy import MAILTO_REDACTION, is_csharp_fence

REPOSITORY_COLUMNS = ["Owner", "Repository", "Stars"]

DISALLOWED_IMAGE_HOSTS = "disallowed_image_hosts"
HTML_ELEMENTS = "html_elements"
CODE_FENCES = "code_fences"
TABLES = "tables"
HTML = "html"
STRIKETHROUGH = "strikethrough"
SPECIAL_LINKS = "special_links"

REPORT_NAMES = (
    DISALLOWED_IMAGE_HOSTS,
    HTML_ELEMENTS,
    CODE_FENCES,
    TABLES,
    HTML,
    STRIKETHROUGH,
    SPECIAL_LINKS,
)


def _repository_cells(repository: Repository) -> list[str]:
    return [repository.owner_link, repository.repository_link, str(repository.stars)]


def redact_link(uri: str) -> tuple[str, str]:
    """Return (scheme, display text) for a special link.

    The address part of a mailto link is replaced with a redaction token.
    """
    parts = parse_absolute_uri(uri)
    scheme = parts.scheme if parts else ""
    if scheme == "mailto":
        return scheme, f"mailto:{MAILTO_REDACTION}"
    return scheme, uri


def keyed_report(name: str, key_column: str, keyed: KeyedRepositories) -> Report:
    """Rows grouped by key, heaviest groups (by total stars) first."""
    entries = sorted(keyed.entries(), key=lambda entry: entry.total_stars, reverse=True)
    rows = [
        [entry.key, *_repository_cells(repository)]
        for entry in entries
        for repository in entry.repositories
    ]
    return Report(name=name, columns=[key_column, *REPOSITORY_COLUMNS], rows=rows)


def repository_report(name: str, repositories: list[Repository]) -> Report:
    """One row per repository, most starred first."""
    ordered = sorted(repositories, key=lambda repository: repository.stars, reverse=True)
    return Report(
        name=name,
        columns=list(REPOSITORY_COLUMNS),
        rows=[_repository_cells(repository) for repository in ordered],
    )


def code_fence_report(fences: list[tuple[Repository, str]]) -> Report:
    ordered = sorted(fences, key=lambda pair: (pair[0].owner, pair[0].name))
    ordered.sort(key=lambda pair: pair[0].stars, reverse=True)
    rows = [
        [*_repository_cells(repository), info, str(is_csharp_fence(info))]
        for repository, info in ordered
    ]
    return Report(name=CODE_FENCES, columns=[*REPOSITORY_COLUMNS, "Fence", "C#"], rows=rows)


def special_link_report(links: list[tuple[str, Repository]]) -> Report:
    rows = []
    for uri, repository in links:
        scheme, text = redact_link(uri)
        rows.append([*_repository_cells(repository), scheme, text])
    return Report(name=SPECIAL_LINKS, columns=[*REPOSITORY_COLUMNS, "Scheme", "Link"], rows=rows)


def build_reports(store: AggregationStore) -> list[Report]:
    """Build every feature report, in a fixed order."""
    return [
        keyed_report(DISALLOWED_IMAGE_HOSTS, "Host", store.disallowed_image_hosts),
        keyed_report(HTML_ELEMENTS, "Element", store.html_elements),
        code_fence_report(store.code_fences),
        repository_report(TABLES, store.tables),
        repository_report(HTML, store.html),
        repository_report(STRIKETHROUGH, store.strikethrough),
        special_link_report(store.special_links),
    ]
