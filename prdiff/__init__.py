"""prdiff - branch and pull request diffs for code review.

Produces line-annotated diffs of local branches and GitHub pull requests,
and posts review comments back to the pull request.

Usage:
    python -m prdiff <command> [options]
    prdiff <command> [options]

Structure:
    prdiff/
    ├── __main__.py          # Entry point dispatcher
    ├── settings.py          # Settings read from the environment / .env
    ├── domain/              # Domain models (parse-once pattern)
    │   ├── file_change.py   # FileChange, FileCategories
    │   ├── pull_request.py  # PullRequestRef, RepositoryRef, LineComment
    │   ├── provider_kind.py # ProviderKind
    │   └── validation.py    # ValidationResult, BatchResult, ErrorKind
    ├── services/            # Business logic services
    │   ├── branch_resolver.py
    │   ├── diff_formatter.py
    │   ├── file_classifier.py
    │   ├── git_operations.py
    │   ├── github_comment.py
    │   ├── local_diff.py
    │   └── pr_workflow.py
    ├── infrastructure/      # External system interactions
    │   ├── github/          # gh CLI runner, GitHub API client
    │   └── diff_provider/   # CLI and API backends, factory
    └── commands/            # Thin command orchestrators
"""
