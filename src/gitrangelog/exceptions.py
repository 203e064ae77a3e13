"""Changelog generation exceptions."""

from __future__ import annotations


class ChangelogError(Exception):
    """Base exception for changelog generation."""


class RepositoryError(ChangelogError):
    """Raised when the repository path is missing or not a git repository."""


class ConfigError(ChangelogError):
    """Raised when the report configuration is missing or malformed."""


class NotFoundError(ChangelogError):
    """Raised when an endpoint matches neither a commit nor a reference."""

    def __init__(self, label: str, endpoint: str) -> None:
        self.label = label
        self.endpoint = endpoint
        super().__init__(f"{label}={endpoint}: no such commit or reference")


class ResolutionError(ChangelogError):
    """Raised when reference indirection does not end at a commit."""

    def __init__(self, label: str, endpoint: str, reason: str) -> None:
        self.label = label
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"{label}={endpoint}: {reason}")


class UnreachableError(ChangelogError):
    """Raised when the start commit is not an ancestor of the end commit."""

    def __init__(self, start_id: str, end_id: str) -> None:
        self.start_id = start_id
        self.end_id = end_id
        super().__init__(
            f"end commit {end_id} is not reachable from start commit {start_id}"
        )


class TraversalExhaustedError(ChangelogError):
    """Raised when a range walk ends without meeting the start commit."""

    def __init__(self, start_id: str, end_id: str) -> None:
        self.start_id = start_id
        self.end_id = end_id
        super().__init__(
            f"walk from {end_id} exhausted history without reaching {start_id}"
        )


class CommitLookupError(ChangelogError, LookupError):
    """Raised when a commit id cannot be read back from the history store."""

    def __init__(self, commit_id: str) -> None:
        self.commit_id = commit_id
        super().__init__(f"commit {commit_id} not found in history store")


class RenderError(ChangelogError):
    """Raised when a configured template cannot be filled."""

    def __init__(self, template_name: str, reason: str) -> None:
        self.template_name = template_name
        self.reason = reason
        super().__init__(f"failed to render template '{template_name}': {reason}")
