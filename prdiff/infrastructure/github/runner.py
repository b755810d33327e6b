"""gh CLI transport.

Every gh invocation made by the CLI provider goes through GhCommandRunner,
which reports failures as (False, message) instead of raising.
"""

from __future__ import annotations

import subprocess
import sys


class GhCommandRunner:
    """Runs gh via subprocess, with helpers for the calls prdiff needs
    (PR view, comments, PR creation, raw API access).
    """

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def run(self, cmd: list[str]) -> tuple[bool, str]:
        """Run a gh CLI command.

        Args:
            cmd: Command and arguments (e.g., ["gh", "api", "..."])

        Returns:
            Tuple of (success, output_or_error)
        """
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {e.stderr}", file=sys.stderr)
            return False, e.stderr.strip() or f"exit status {e.returncode}"
        except OSError as e:
            print(f"Command could not be started: {e}", file=sys.stderr)
            return False, str(e)

    def api_get(
        self,
        endpoint: str,
        jq_filter: str | None = None,
        paginate: bool = False,
    ) -> tuple[bool, str]:
        """Make a GET request to the GitHub API.

        Args:
            endpoint: API endpoint (e.g., "repos/owner/repo/pulls/123")
            jq_filter: Optional jq filter for the response
            paginate: Follow pagination and concatenate every page

        Returns:
            Tuple of (success, response_or_error)
        """
        cmd = ["gh", "api", endpoint]
        if paginate:
            cmd.append("--paginate")
        if jq_filter:
            cmd.extend(["--jq", jq_filter])
        return self.run(cmd)

    def api_post_with_int(
        self,
        endpoint: str,
        string_fields: dict[str, str],
        int_fields: dict[str, int],
        jq_filter: str | None = None,
    ) -> tuple[bool, str]:
        """Make a POST request with both string and integer fields.

        Args:
            endpoint: API endpoint
            string_fields: String fields (-f flag)
            int_fields: Integer fields (-F flag)
            jq_filter: Optional jq filter for the response

        Returns:
            Tuple of (success, response_or_error)
        """
        cmd = ["gh", "api", endpoint, "-X", "POST"]
        for key, value in string_fields.items():
            cmd.extend(["-f", f"{key}={value}"])
        for key, value in int_fields.items():
            cmd.extend(["-F", f"{key}={value}"])
        if jq_filter:
            cmd.extend(["--jq", jq_filter])
        return self.run(cmd)

    def pr_view(
        self,
        pr_url: str,
        fields: list[str],
        jq_filter: str | None = None,
    ) -> tuple[bool, str]:
        """Get PR fields as JSON.

        Args:
            pr_url: Full PR URL (gh accepts URLs in place of numbers)
            fields: JSON fields to request (e.g., ["files"])
            jq_filter: Optional jq filter for the response

        Returns:
            Tuple of (success, json_or_error)
        """
        cmd = ["gh", "pr", "view", pr_url, "--json", ",".join(fields)]
        if jq_filter:
            cmd.extend(["--jq", jq_filter])
        return self.run(cmd)

    def pr_comment(self, pr_url: str, body: str) -> tuple[bool, str]:
        """Post an issue-level comment on a PR.

        Returns:
            Tuple of (success, comment_url_or_error)
        """
        return self.run(["gh", "pr", "comment", pr_url, "--body", body])

    def pr_create(
        self,
        repo: str,
        title: str,
        body: str,
        base: str,
        head: str,
        draft: bool = False,
    ) -> tuple[bool, str]:
        """Open a pull request.

        Args:
            repo: Repository in owner/name format
            title: PR title
            body: PR description
            base: Branch to merge into
            head: Branch to merge from
            draft: Open as a draft PR

        Returns:
            Tuple of (success, pr_url_or_error)
        """
        cmd = [
            "gh", "pr", "create",
            "--repo", repo,
            "--title", title,
            "--body", body,
            "--base", base,
            "--head", head,
        ]
        if draft:
            cmd.append("--draft")
        return self.run(cmd)
