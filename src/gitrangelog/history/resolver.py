"""Endpoint resolution: commit hashes and reference names to commits."""

from typing import List, Optional

import structlog

from gitrangelog.exceptions import NotFoundError, ResolutionError
from gitrangelog.history.base import HistoryStore
from gitrangelog.models import Commit, Reference, is_hex_id

logger = structlog.get_logger(__name__)

# Same expansion order as `git rev-parse` uses for short names.
REF_SEARCH_PATTERNS = (
    "{}",
    "refs/{}",
    "refs/tags/{}",
    "refs/heads/{}",
    "refs/remotes/{}",
    "refs/remotes/{}/HEAD",
)


class ReferenceResolver:
    """Turns user supplied endpoints into commits.

    An endpoint is either a full 40 character hex commit id or a reference
    name. Symbolic references are followed until a direct reference is
    reached; a cycle of symbolic references is a ResolutionError.
    """

    def __init__(self, store: HistoryStore) -> None:
        self.store = store

    def resolve(self, endpoint: str, label: str = "endpoint") -> Commit:
        """Resolve an endpoint to a commit.

        Args:
            endpoint: Commit hash or reference name
            label: Name of the endpoint used in logs and errors (e.g. "start-commit")

        Returns:
            The resolved Commit

        Raises:
            NotFoundError: If no commit or reference matches the endpoint
            ResolutionError: If a reference does not lead to a commit
        """
        if is_hex_id(endpoint):
            commit = self.store.get_commit(endpoint)
            if commit is None:
                raise NotFoundError(label, endpoint)
            logger.info("endpoint_resolved", label=label, endpoint=endpoint, commit=commit.id)
            return commit

        ref = self._lookup_reference(endpoint)
        if ref is None:
            raise NotFoundError(label, endpoint)

        commit = self._resolve_reference(ref, label, endpoint)
        logger.info(
            "endpoint_resolved",
            label=label,
            endpoint=endpoint,
            reference=ref.name,
            commit=commit.id,
        )
        return commit

    def _lookup_reference(self, name: str) -> Optional[Reference]:
        for pattern in REF_SEARCH_PATTERNS:
            ref = self.store.get_reference(pattern.format(name))
            if ref is not None:
                return ref
        return None

    def _resolve_reference(self, ref: Reference, label: str, endpoint: str) -> Commit:
        chain: List[str] = [ref.name]
        while ref.symbolic:
            logger.info("symbolic_reference", label=label, reference=ref.name, target=ref.target)
            target = self.store.get_reference(ref.target)
            if target is None:
                raise ResolutionError(
                    label, endpoint, f"reference {ref.name} points to missing reference {ref.target}"
                )
            if target.name in chain:
                raise ResolutionError(
                    label, endpoint, f"symbolic reference cycle: {' -> '.join(chain + [target.name])}"
                )
            chain.append(target.name)
            ref = target

        commit = self.store.get_commit(ref.target)
        if commit is not None:
            return commit

        # Annotated tags and other indirect targets
        obj = self.store.peel(ref.name)
        if obj is None:
            raise ResolutionError(label, endpoint, f"cannot peel reference {ref.name} to an object")
        if obj.type != "commit":
            raise ResolutionError(
                label, endpoint, f"reference {ref.name} peels to a {obj.type}, not a commit"
            )

        commit = self.store.get_commit(obj.id)
        if commit is None:
            raise ResolutionError(label, endpoint, f"peeled commit {obj.id} is missing")
        return commit
