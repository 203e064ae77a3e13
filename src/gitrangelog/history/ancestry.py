"""Ancestry queries over the parent edges of the history graph."""

from collections import deque

from gitrangelog.exceptions import CommitLookupError
from gitrangelog.history.base import HistoryStore
from gitrangelog.models import Commit


def is_ancestor(store: HistoryStore, candidate: Commit, descendant: Commit) -> bool:
    """Check whether candidate is reachable from descendant via parent edges.

    A commit is its own ancestor.

    Args:
        store: History store used to read parent commits
        candidate: Possible ancestor
        descendant: Commit to search from

    Returns:
        True if candidate occurs at or before descendant in history

    Raises:
        CommitLookupError: If a parent id is missing from the store
    """
    if candidate.id == descendant.id:
        return True

    seen = {descendant.id}
    queue = deque([descendant])
    while queue:
        commit = queue.popleft()
        for parent_id in commit.parents:
            if parent_id == candidate.id:
                return True
            if parent_id in seen:
                continue
            seen.add(parent_id)
            parent = store.get_commit(parent_id)
            if parent is None:
                raise CommitLookupError(parent_id)
            queue.append(parent)
    return False
