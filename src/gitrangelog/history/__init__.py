"""Commit graph access and range resolution."""

from gitrangelog.history.ancestry import is_ancestor
from gitrangelog.history.base import HistoryStore
from gitrangelog.history.git_store import GitHistoryStore
from gitrangelog.history.memory import MemoryHistoryStore
from gitrangelog.history.resolver import ReferenceResolver
from gitrangelog.history.walker import RangeWalker

__all__ = [
    "HistoryStore",
    "GitHistoryStore",
    "MemoryHistoryStore",
    "ReferenceResolver",
    "RangeWalker",
    "is_ancestor",
]
