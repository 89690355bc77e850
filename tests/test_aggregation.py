"""Tests for the aggregation store."""

from readme_survey.core import AggregationStore, Repository


def _snapshot(store: AggregationStore) -> dict:
    return {
        "hosts": [(e.key, list(e.repositories)) for e in store.disallowed_image_hosts.entries()],
        "elements": [(e.key, list(e.repositories)) for e in store.html_elements.entries()],
        "fences": store.code_fences,
        "links": store.special_links,
        "tables": store.tables,
        "html": store.html,
        "strikethrough": store.strikethrough,
    }


def _track_everything(store: AggregationStore, repository: Repository) -> None:
    store.track_disallowed_image_host(repository, "evil.example.com")
    store.track_html_element(repository, "div")
    store.track_code_fence(repository, "csharp")
    store.track_special_link(repository, "mailto:a@example.com")
    store.track_table(repository)
    store.track_html(repository)
    store.track_strikethrough(repository)


def test_tracking_is_idempotent() -> None:
    """Tracking the same facts twice equals tracking them once."""
    repository = Repository(owner="octo", name="widgets", stars=5)

    once = AggregationStore()
    _track_everything(once, repository)

    twice = AggregationStore()
    _track_everything(twice, repository)
    _track_everything(twice, repository)

    assert _snapshot(once) == _snapshot(twice)


def test_keys_case_insensitive() -> None:
    """Host and element keys fold case and keep the first spelling."""
    first = Repository(owner="octo", name="a", stars=1)
    second = Repository(owner="octo", name="b", stars=2)
    store = AggregationStore()

    store.track_disallowed_image_host(first, "Evil.Example.com")
    store.track_disallowed_image_host(second, "evil.example.COM")
    store.track_html_element(first, "DIV")
    store.track_html_element(first, "div")

    assert list(store.disallowed_image_hosts) == ["Evil.Example.com"]
    assert store.disallowed_image_hosts.get("EVIL.EXAMPLE.COM") == [first, second]
    assert "evil.example.com" in store.disallowed_image_hosts
    assert store.html_elements.get("div") == [first]


def test_fences_and_links_case_sensitive() -> None:
    """Code fence and special link pairs are compared exactly."""
    repository = Repository(owner="octo", name="widgets")
    store = AggregationStore()

    store.track_code_fence(repository, "CSharp")
    store.track_code_fence(repository, "csharp")
    store.track_special_link(repository, "ftp://A")
    store.track_special_link(repository, "ftp://a")

    assert len(store.code_fences) == 2
    assert len(store.special_links) == 2


def test_repository_deduplicated_by_identity() -> None:
    """A repository listed again with other stars is the same member."""
    store = AggregationStore()

    store.track_table(Repository(owner="octo", name="widgets", stars=1))
    store.track_table(Repository(owner="octo", name="widgets", stars=2))

    assert len(store.tables) == 1


def test_total_stars() -> None:
    store = AggregationStore()
    store.track_html_element(Repository("a", "x", stars=10), "table")
    store.track_html_element(Repository("b", "y", stars=32), "TABLE")

    (entry,) = store.html_elements.entries()
    assert entry.total_stars == 42
