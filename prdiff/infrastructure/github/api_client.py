"""GitHub API client.

Infrastructure component that wraps authenticated HTTPS calls to the GitHub
REST and GraphQL endpoints using requests.
"""

from __future__ import annotations

from typing import Any

import requests

from prdiff.settings import DEFAULT_GITHUB_API_URL


class GitHubApiError(Exception):
    """Raised when a GitHub API request fails."""

    pass


class GitHubApiClient:
    """Authenticated GitHub REST/GraphQL client.

    One requests.Session is kept per client so connections are reused
    across calls within a process.
    """

    def __init__(self, github_token: str, base_url: str = DEFAULT_GITHUB_API_URL):
        """Initialize with a token.

        Args:
            github_token: GitHub access token
            base_url: REST API base URL; the GraphQL endpoint is derived from it

        Raises:
            ValueError: If github_token is empty
        """
        if not github_token:
            raise ValueError("GitHub token not provided")

        self.base_url = base_url.rstrip("/")
        self.graphql_url = graphql_url_for(self.base_url)
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"token {github_token}",
                "Accept": "application/vnd.github+json",
            }
        )

    # --------------------------------------------------------
    # REST
    # --------------------------------------------------------

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a REST endpoint and return the decoded JSON body."""
        return self._request("GET", path, params=params)

    def post(self, path: str, payload: dict[str, Any]) -> Any:
        """POST a JSON payload to a REST endpoint and return the decoded body."""
        return self._request("POST", path, json=payload)

    def get_paginated(self, path: str, per_page: int = 100) -> list[Any]:
        """GET every page of a list endpoint.

        Args:
            path: REST path of a list endpoint
            per_page: Page size (GitHub maximum is 100)

        Returns:
            Items of all pages concatenated in order
        """
        items: list[Any] = []
        page = 1

        while True:
            batch = self.get(path, params={"per_page": per_page, "page": page})
            if not batch:
                break
            items.extend(batch)
            if len(batch) < per_page:
                break
            page += 1

        return items

    # --------------------------------------------------------
    # GraphQL
    # --------------------------------------------------------

    def graphql(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Run a GraphQL query and return its "data" object.

        Raises:
            GitHubApiError: If the request fails or the response reports errors
        """
        body = self._request(
            "POST",
            "graphql",
            url=self.graphql_url,
            json={"query": query, "variables": variables},
        )
        if body.get("errors"):
            messages = "; ".join(e.get("message", "") for e in body["errors"])
            raise GitHubApiError(f"GraphQL query failed: {messages}")
        return body.get("data") or {}

    # --------------------------------------------------------
    # Private Helpers
    # --------------------------------------------------------

    def _request(self, method: str, path: str, url: str | None = None, **kwargs: Any) -> Any:
        url = url or f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as e:
            detail = e.response.text[:500] if e.response is not None else ""
            raise GitHubApiError(f"{method} {path} failed: {e} {detail}".strip()) from e
        except requests.RequestException as e:
            raise GitHubApiError(f"{method} {path} failed: {e}") from e
        except ValueError as e:
            raise GitHubApiError(f"{method} {path} returned invalid JSON: {e}") from e


def graphql_url_for(base_url: str) -> str:
    """Return the GraphQL endpoint that belongs to a REST base URL.

    GitHub Enterprise Server serves REST under /api/v3 and GraphQL under
    /api/graphql; github.com serves both from the same host root.

    Examples:
        >>> graphql_url_for("https://api.github.com")
        'https://api.github.com/graphql'
        >>> graphql_url_for("https://ghe.example.com/api/v3")
        'https://ghe.example.com/api/graphql'
    """
    base_url = base_url.rstrip("/")
    if base_url.endswith("/api/v3"):
        return base_url[: -len("/v3")] + "/graphql"
    return f"{base_url}/graphql"
