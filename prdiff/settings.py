"""Runtime configuration.

All environment-driven configuration is collected into one Settings value,
built once at startup and passed to the components that need it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

DEFAULT_LARGE_FILE_THRESHOLD = 1000
DEFAULT_GITHUB_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class Settings:
    """Configuration read (not owned) by the diff and provider components.

    Attributes:
        github_token: GitHub access token; its presence selects the API backend
        ignore_patterns_raw: Comma-separated glob list of paths to leave out of diffs
        large_file_threshold: Files with more combined changes than this are skipped
        github_api_url: Base URL of the GitHub REST API
    """

    github_token: str | None = None
    ignore_patterns_raw: str = ""
    large_file_threshold: int = DEFAULT_LARGE_FILE_THRESHOLD
    github_api_url: str = DEFAULT_GITHUB_API_URL

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        load_env_file: bool = True,
    ) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)
            load_env_file: Load a .env file first; existing variables win

        Returns:
            Settings populated from GITHUB_TOKEN, IGNORE_PATTERNS,
            LARGE_FILE_THRESHOLD and GITHUB_API_URL
        """
        if load_env_file:
            load_dotenv(override=False)
        env = os.environ if environ is None else environ

        return cls(
            github_token=env.get("GITHUB_TOKEN") or None,
            ignore_patterns_raw=env.get("IGNORE_PATTERNS", ""),
            large_file_threshold=_parse_threshold(env.get("LARGE_FILE_THRESHOLD")),
            github_api_url=(env.get("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL).rstrip("/"),
        )

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def has_github_token(self) -> bool:
        return bool(self.github_token)

    @property
    def ignore_patterns(self) -> list[str]:
        """Parsed ignore globs, with malformed patterns dropped."""
        from prdiff.services.file_classifier import parse_ignore_patterns

        return parse_ignore_patterns(self.ignore_patterns_raw)


def _parse_threshold(value: str | None) -> int:
    if not value:
        return DEFAULT_LARGE_FILE_THRESHOLD
    try:
        threshold = int(value)
    except ValueError:
        return DEFAULT_LARGE_FILE_THRESHOLD
    return threshold if threshold > 0 else DEFAULT_LARGE_FILE_THRESHOLD
