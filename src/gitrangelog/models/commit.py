"""Data models for git history nodes and references."""

import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

HEX_ID_LENGTH = 40

_HEX_ID_RE = re.compile(rf"^[0-9a-fA-F]{{{HEX_ID_LENGTH}}}$")


def is_hex_id(value: str) -> bool:
    """Check whether a string is a full-length hex object id."""
    return bool(_HEX_ID_RE.match(value))


def first_line(message: str) -> str:
    """Return the first line of a commit message."""
    lines = message.strip().splitlines()
    return lines[0] if lines else ""


class Commit(BaseModel):
    """A single immutable node of the history graph."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "f5a78eba828b905cfb559a427e1afcceb5d337ca",
                "parents": ["9fda7b8c7c77b03f630973d4373d946adfaa76f7"],
                "author_name": "John Doe",
                "author_email": "john@example.com",
                "message": "Fix authentication bug\n\nResolves issue with token validation",
                "timestamp": "2024-01-15T10:30:00Z",
            }
        },
    )

    id: str = Field(..., description="Full commit SHA hash")
    parents: List[str] = Field(default_factory=list, description="Parent commit hashes, in order")
    author_name: str = Field(..., description="Author name")
    author_email: Optional[str] = Field(None, description="Author email")
    message: str = Field("", description="Full commit message")
    timestamp: datetime = Field(..., description="Committer timestamp")

    @property
    def summary(self) -> str:
        """First line of the commit message."""
        return first_line(self.message)

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1


class Reference(BaseModel):
    """A named pointer into the history graph.

    A direct reference targets an object id. A symbolic reference targets
    the name of another reference (e.g. ``HEAD -> refs/heads/main``).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Full reference name, e.g. refs/heads/main")
    target: str = Field(..., description="Object id or, for symbolic references, a reference name")
    symbolic: bool = Field(False, description="Whether the target is another reference name")


class GitObject(BaseModel):
    """An object reached by peeling a reference."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Object SHA hash")
    type: str = Field(..., description="Object type: commit, tag, tree or blob")
