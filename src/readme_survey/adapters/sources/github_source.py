"""GitHub search source for discovering popular repositories."""

import asyncio
import math
from typing import Optional

import httpx

from readme_survey.core import Repository, RepositorySource


def github_headers(token: Optional[str], accept: str = "application/vnd.github+json") -> dict[str, str]:
    """Get headers for GitHub API requests."""
    headers = {
        "Accept": accept,
        "X-GitHub-Api-Version": "2022-11-28",
        "User-Agent": "readme-survey",
    }

    if token:
        headers["Authorization"] = f"Bearer {token}"

    return headers


class GitHubSearchSource(RepositorySource):
    """Discover repositories of one language by walking down a star cursor.

    The search API returns at most `max_results_per_query` results per query,
    so each query covers `stars:min..cursor` and the cursor then drops to the
    lowest star count seen.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        language: str = "C#",
        min_stars: int = 1000,
        max_results_per_query: int = 1000,
        per_page: int = 100,
        api_base: str = "https://api.github.com",
        request_timeout: float = 30.0,
        request_delay: float = 2.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = token
        self.language = language
        self.min_stars = min_stars
        self.per_page = per_page
        self.max_pages = math.ceil(max_results_per_query / per_page)
        self.api_base = api_base
        self.request_timeout = request_timeout
        self.request_delay = request_delay
        self.transport = transport

    async def discover(self) -> list[Repository]:
        """Search repositories, most starred first."""
        found: dict[tuple[str, str], Repository] = {}
        star_cursor: Optional[int] = None

        print(f"  └─ Language: {self.language}, minimum stars: {self.min_stars}")

        async with httpx.AsyncClient(timeout=self.request_timeout, transport=self.transport) as client:
            headers = github_headers(self.token)

            while star_cursor is None or star_cursor >= self.min_stars:
                lowest = await self._search_range(client, headers, star_cursor, found)
                if lowest is None:
                    break
                # Cursor must move or the same range is searched forever.
                star_cursor = lowest if star_cursor is None or lowest < star_cursor else star_cursor - 1

        print(f"  └─ Unique repositories found: {len(found)}")

        return sorted(found.values(), key=lambda repository: repository.stars, reverse=True)

    async def _search_range(
        self,
        client: httpx.AsyncClient,
        headers: dict[str, str],
        star_cursor: Optional[int],
        found: dict[tuple[str, str], Repository],
    ) -> Optional[int]:
        """Page through one star range.

        Returns the lowest star count seen, or None when the search is exhausted.
        """
        stars_filter = f"{self.min_stars}..{star_cursor}" if star_cursor is not None else f">={self.min_stars}"
        query = f"stars:{stars_filter} language:{self.language}"
        lowest: Optional[int] = None

        for page in range(1, self.max_pages + 1):
            if found:
                await asyncio.sleep(self.request_delay)

            print(f"  └─ Page {page}: '{query}'")
            items = await self._fetch_page(client, headers, query, page)

            if not items:
                return None

            for repo in items:
                repository = self._create_repository(repo)
                if repository is None:
                    continue
                key = (repository.owner, repository.name)
                previous = found.get(key)
                if previous is None or previous.stars < repository.stars:
                    found[key] = repository

            page_lowest = min(int(repo.get("stargazers_count", 0)) for repo in items)
            lowest = page_lowest if lowest is None else min(lowest, page_lowest)

            if len(items) < self.per_page:
                return None

        return lowest

    async def _fetch_page(
        self,
        client: httpx.AsyncClient,
        headers: dict[str, str],
        query: str,
        page: int,
    ) -> list[dict]:
        """Fetch one page of search results; errors end the search."""
        try:
            response = await client.get(
                f"{self.api_base}/search/repositories",
                headers=headers,
                params={
                    "q": query,
                    "sort": "stars",
                    "order": "desc",
                    "page": page,
                    "per_page": self.per_page,
                },
            )
        except httpx.HTTPError as e:
            print(f"  └─ ⚠️  GitHub request failed: {e}")
            return []

        if response.status_code != 200:
            print(f"  └─ ⚠️  GitHub API error: {response.status_code} for query: {query}")
            if response.status_code == 403:
                print("      Rate limited or authentication required")
            return []

        return response.json().get("items", [])

    def _create_repository(self, repo: dict) -> Optional[Repository]:
        """Create repository from a search API result, skipping private ones."""
        if repo.get("private"):
            return None
        try:
            return Repository(
                owner=repo["owner"]["login"],
                name=repo["name"],
                stars=int(repo.get("stargazers_count", 0)),
            )
        except (KeyError, TypeError, ValueError) as e:
            print(f"      ⚠️  Could not read {repo.get('full_name', '?')}: {e}")
            return None
