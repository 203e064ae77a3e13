"""Git repository backed history store."""

from pathlib import Path
from typing import Dict, List, Optional

import git
import structlog
from git import Repo, SymbolicReference

from gitrangelog.exceptions import RepositoryError
from gitrangelog.history.base import HistoryStore
from gitrangelog.models import Commit, GitObject, Reference

logger = structlog.get_logger(__name__)


class GitHistoryStore(HistoryStore):
    """Reads commits and references from a local Git repository."""

    def __init__(self, repo_path: Path) -> None:
        """Initialize the GitHistoryStore.

        Args:
            repo_path: Path to the repository working tree or bare repository

        Raises:
            RepositoryError: If repository path is invalid
        """
        self.repo_path = Path(repo_path)
        if not self.repo_path.exists():
            raise RepositoryError(f"Repository path does not exist: {self.repo_path}")

        try:
            self.repo = Repo(self.repo_path)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise RepositoryError(f"Invalid Git repository: {self.repo_path}") from e

        self._commits: Dict[str, Commit] = {}

    def get_commit(self, commit_id: str) -> Optional[Commit]:
        """Look up a commit by its full hex id.

        Args:
            commit_id: Full commit hash

        Returns:
            Commit object, or None if the object is missing or not a commit
        """
        commit_id = commit_id.lower()
        cached = self._commits.get(commit_id)
        if cached is not None:
            return cached

        try:
            obj = self.repo.rev_parse(commit_id)
        except (git.exc.BadName, git.exc.BadObject, ValueError):
            return None

        if obj.type != "commit":
            logger.debug("object_not_a_commit", object_id=commit_id, object_type=obj.type)
            return None

        commit = self._to_commit(obj)
        self._commits[commit.id] = commit
        return commit

    def get_reference(self, name: str) -> Optional[Reference]:
        """Look up a reference without following it.

        Args:
            name: Full reference name, e.g. HEAD or refs/heads/main

        Returns:
            Reference object, or None if no such reference exists
        """
        # Reads the ref file or packed-refs entry only; a dangling object id
        # still yields a Reference so resolution can report it.
        try:
            sha, target_path = SymbolicReference._get_ref_info(self.repo, name)
        except ValueError:
            # Missing reference or invalid name
            return None

        if target_path is not None:
            return Reference(name=name, target=target_path, symbolic=True)
        return Reference(name=name, target=sha, symbolic=False)

    def peel(self, name: str) -> Optional[GitObject]:
        """Follow a reference and any annotated tags to the underlying object.

        Args:
            name: Full reference name

        Returns:
            GitObject for the peeled object, or None if it cannot be reached
        """
        ref = SymbolicReference(self.repo, name)
        try:
            obj = ref.object
            while obj.type == "tag":
                obj = obj.object
        except ValueError:
            return None
        return GitObject(id=obj.hexsha, type=obj.type)

    def reference_names(self) -> List[str]:
        """List HEAD plus every reference under refs/."""
        return ["HEAD"] + sorted(ref.path for ref in self.repo.refs)

    def _to_commit(self, commit: git.Commit) -> Commit:
        """Convert a GitPython Commit object.

        Args:
            commit: GitPython Commit object

        Returns:
            Commit model
        """
        return Commit(
            id=commit.hexsha,
            parents=[p.hexsha for p in commit.parents],
            author_name=commit.author.name or "",
            author_email=commit.author.email,
            message=commit.message if isinstance(commit.message, str) else commit.message.decode("utf-8", "replace"),
            timestamp=commit.committed_datetime,
        )
