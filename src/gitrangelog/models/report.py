"""Data models for rendered changelog reports."""

from typing import List

from pydantic import BaseModel, Field


class CommitRow(BaseModel):
    """One row of the changelog commit table."""

    id: str = Field(..., description="Full commit SHA hash")
    short_id: str = Field(..., description="Commit hash truncated to the configured width")
    author: str = Field(..., description="Author name")
    summary: str = Field(..., description="First line of the commit message")
    url: str = Field(..., description="Permalink to the commit")


class ReportModel(BaseModel):
    """Everything the renderer needs to produce a changelog."""

    rows: List[CommitRow] = Field(default_factory=list, description="Commits, newest first")
    authors: List[str] = Field(default_factory=list, description="Distinct author names")
    start_id: str = Field(..., description="Full id of the (excluded) start commit")
    end_id: str = Field(..., description="Full id of the end commit")
    diff_url: str = Field(..., description="Comparison link between start and end")
