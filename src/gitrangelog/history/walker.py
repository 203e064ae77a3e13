"""Ordered traversal of the commits between two points in history."""

import heapq
from collections import deque
from typing import Dict, List, Set, Tuple

import structlog

from gitrangelog.exceptions import CommitLookupError, TraversalExhaustedError, UnreachableError
from gitrangelog.history.ancestry import is_ancestor
from gitrangelog.history.base import HistoryStore
from gitrangelog.models import Commit

logger = structlog.get_logger(__name__)


class RangeWalker:
    """Collects the commits reachable from an end commit down to a start commit.

    Commits are emitted in topological order, every commit before all of its
    parents. Among commits that are ready at the same time, descendants of the
    start commit go first, then the start commit itself, then newer commits
    (committer time), then the smaller id. With that ordering everything
    emitted before the start commit is a strict descendant of it, even when
    side branches that forked before the start commit were merged into the
    range.
    """

    def __init__(self, store: HistoryStore) -> None:
        self.store = store

    def walk(self, end: Commit, start: Commit) -> List[str]:
        """Return the ids of the commits in (start, end], newest first.

        Args:
            end: Commit the walk starts from (included)
            start: Commit the walk stops at (excluded)

        Returns:
            List of commit ids in reverse topological order

        Raises:
            UnreachableError: If start is not an ancestor of end
            TraversalExhaustedError: If the walk never meets start
            CommitLookupError: If a parent commit is missing from the store
        """
        if not is_ancestor(self.store, start, end):
            raise UnreachableError(start.id, end.id)

        if end.id == start.id:
            return []

        commits = self._collect_reachable(end)
        children = self._children(commits)
        descendants = self._descendants(start.id, children)

        pending = {commit_id: len(kids) for commit_id, kids in children.items()}
        ready = [self._sort_key(end, start.id, descendants)]
        chain: List[str] = []

        while ready:
            commit_id = heapq.heappop(ready)[-1]
            if commit_id == start.id:
                logger.info("range_walked", start=start.id, end=end.id, commits=len(chain))
                return chain

            chain.append(commit_id)
            for parent_id in _unique(commits[commit_id].parents):
                pending[parent_id] -= 1
                if pending[parent_id] == 0:
                    heapq.heappush(ready, self._sort_key(commits[parent_id], start.id, descendants))

        raise TraversalExhaustedError(start.id, end.id)

    def _collect_reachable(self, end: Commit) -> Dict[str, Commit]:
        commits = {end.id: end}
        stack = [end]
        while stack:
            commit = stack.pop()
            for parent_id in commit.parents:
                if parent_id in commits:
                    continue
                parent = self.store.get_commit(parent_id)
                if parent is None:
                    raise CommitLookupError(parent_id)
                commits[parent_id] = parent
                stack.append(parent)
        return commits

    @staticmethod
    def _children(commits: Dict[str, Commit]) -> Dict[str, Set[str]]:
        children: Dict[str, Set[str]] = {commit_id: set() for commit_id in commits}
        for commit in commits.values():
            for parent_id in commit.parents:
                children[parent_id].add(commit.id)
        return children

    @staticmethod
    def _descendants(start_id: str, children: Dict[str, Set[str]]) -> Set[str]:
        found: Set[str] = set()
        queue = deque([start_id])
        while queue:
            for child_id in children.get(queue.popleft(), ()):
                if child_id not in found:
                    found.add(child_id)
                    queue.append(child_id)
        return found

    @staticmethod
    def _sort_key(commit: Commit, start_id: str, descendants: Set[str]) -> Tuple[int, float, str]:
        if commit.id in descendants:
            group = 0
        elif commit.id == start_id:
            group = 1
        else:
            group = 2
        return (
            group,
            -commit.timestamp.timestamp(),
            commit.id,
        )


def _unique(ids: List[str]) -> List[str]:
    return list(dict.fromkeys(ids))
