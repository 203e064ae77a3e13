"""Base class for history stores."""

from abc import ABC, abstractmethod
from typing import List, Optional

from gitrangelog.models import Commit, GitObject, Reference


class HistoryStore(ABC):
    """Abstract read-only view of a commit graph and its references."""

    @abstractmethod
    def get_commit(self, commit_id: str) -> Optional[Commit]:
        """Look up a commit by its full id.

        Args:
            commit_id: Full hex commit id

        Returns:
            The Commit, or None if the id is unknown or names a non-commit object
        """
        pass

    @abstractmethod
    def get_reference(self, name: str) -> Optional[Reference]:
        """Look up a reference by its full name.

        Args:
            name: Reference name, e.g. ``HEAD`` or ``refs/heads/main``

        Returns:
            The Reference without following it, or None if it does not exist
        """
        pass

    @abstractmethod
    def peel(self, name: str) -> Optional[GitObject]:
        """Follow a reference and any tag objects down to a non-tag object.

        Args:
            name: Reference name

        Returns:
            The peeled object, or None if the reference or its target is missing
        """
        pass

    @abstractmethod
    def reference_names(self) -> List[str]:
        """List the names of all references in the store."""
        pass
