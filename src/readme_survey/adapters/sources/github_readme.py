"""GitHub README client."""

from types import TracebackType
from typing import Optional

import httpx

from readme_survey.adapters.sources.github_source import github_headers
from readme_survey.core import ReadmeClient, Repository


class GitHubReadmeClient(ReadmeClient):
    """Fetch raw README text through the GitHub contents API.

    Use as an async context manager so one connection pool is shared by all
    download workers.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        api_base: str = "https://api.github.com",
        request_timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = token
        self.api_base = api_base
        self.request_timeout = request_timeout
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "GitHubReadmeClient":
        self._client = httpx.AsyncClient(
            timeout=self.request_timeout,
            transport=self.transport,
            follow_redirects=True,
        )
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_readme(self, repository: Repository) -> Optional[str]:
        """Fetch README text; None if GitHub reports no README.

        Raises:
            httpx.HTTPError: on any other failed request.
        """
        if self._client is None:
            raise RuntimeError("GitHubReadmeClient must be used as an async context manager")

        response = await self._client.get(
            f"{self.api_base}/repos/{repository.owner}/{repository.name}/readme",
            headers=github_headers(self.token, accept="application/vnd.github.raw"),
        )

        if response.status_code == 404:
            return None

        response.raise_for_status()
        return response.text
