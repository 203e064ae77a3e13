"""In-memory history store."""

from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

from gitrangelog.history.base import HistoryStore
from gitrangelog.models import Commit, GitObject, Reference

_EPOCH = datetime(2020, 1, 1, tzinfo=timezone.utc)


class MemoryHistoryStore(HistoryStore):
    """History store backed by plain dictionaries.

    Useful for tests and for front ends that already hold the commit graph
    in memory. Commits added without a timestamp get one second later than
    the previously added commit.
    """

    def __init__(self) -> None:
        self._commits: Dict[str, Commit] = {}
        self._references: Dict[str, Reference] = {}
        # tag id -> id of the tagged object
        self._tags: Dict[str, str] = {}
        # trees and blobs: id -> type
        self._objects: Dict[str, str] = {}

    def add_commit(
        self,
        commit_id: str,
        parents: Iterable[str] = (),
        author_name: str = "Test User",
        message: str = "",
        timestamp: Optional[datetime] = None,
        author_email: Optional[str] = None,
    ) -> Commit:
        """Add a commit to the graph.

        Parents do not have to exist yet, so graphs can be built in any order.
        """
        if timestamp is None:
            timestamp = _EPOCH + timedelta(seconds=len(self._commits))
        commit = Commit(
            id=commit_id.lower(),
            parents=[p.lower() for p in parents],
            author_name=author_name,
            author_email=author_email,
            message=message,
            timestamp=timestamp,
        )
        self._commits[commit.id] = commit
        return commit

    def add_reference(self, name: str, target: str) -> Reference:
        """Add a direct reference pointing at an object id."""
        ref = Reference(name=name, target=target.lower(), symbolic=False)
        self._references[name] = ref
        return ref

    def add_symbolic_reference(self, name: str, target: str) -> Reference:
        """Add a symbolic reference pointing at another reference name."""
        ref = Reference(name=name, target=target, symbolic=True)
        self._references[name] = ref
        return ref

    def add_tag(self, tag_id: str, target: str) -> None:
        """Add an annotated tag object pointing at another object."""
        self._tags[tag_id.lower()] = target.lower()

    def add_object(self, object_id: str, object_type: str) -> None:
        """Add a tree or blob object."""
        self._objects[object_id.lower()] = object_type

    def get_commit(self, commit_id: str) -> Optional[Commit]:
        return self._commits.get(commit_id.lower())

    def get_reference(self, name: str) -> Optional[Reference]:
        return self._references.get(name)

    def peel(self, name: str) -> Optional[GitObject]:
        seen = set()
        ref = self._references.get(name)
        while ref is not None and ref.symbolic:
            if ref.name in seen:
                return None
            seen.add(ref.name)
            ref = self._references.get(ref.target)
        if ref is None:
            return None

        object_id = ref.target
        visited_tags = set()
        while object_id in self._tags:
            if object_id in visited_tags:
                return None
            visited_tags.add(object_id)
            object_id = self._tags[object_id]

        if object_id in self._commits:
            return GitObject(id=object_id, type="commit")
        if object_id in self._objects:
            return GitObject(id=object_id, type=self._objects[object_id])
        return None

    def reference_names(self) -> List[str]:
        return sorted(self._references)
