"""Builds the report model from a commit chain."""

from typing import List

import structlog

from gitrangelog.exceptions import CommitLookupError
from gitrangelog.history.base import HistoryStore
from gitrangelog.models import CommitRow, ReportConfig, ReportModel
from gitrangelog.report.templating import fill_template

logger = structlog.get_logger(__name__)


def truncate_id(commit_id: str, digits: int) -> str:
    """Shorten a commit id to its first ``digits`` characters.

    A width of zero or less keeps the full id. Widths larger than the id
    are clamped to the id length.
    """
    if digits <= 0:
        return commit_id
    return commit_id[:digits]


class ReportBuilder:
    """Turns a chain of commit ids into a render-ready ReportModel."""

    def __init__(self, store: HistoryStore, config: ReportConfig) -> None:
        """Initialize the report builder.

        Args:
            store: History store used to read commit metadata
            config: Report configuration (URL templates, hash width)
        """
        self.store = store
        self.config = config

    def build(self, chain: List[str], start_id: str, end_id: str) -> ReportModel:
        """Build the report model.

        Args:
            chain: Commit ids, newest first
            start_id: Full id of the start commit
            end_id: Full id of the end commit

        Returns:
            ReportModel with one row per commit in the chain

        Raises:
            CommitLookupError: If a commit in the chain is missing from the store
            RenderError: If a URL template cannot be filled
        """
        diff_url = fill_template(
            "diffURLTemplate",
            self.config.diff_url_template,
            StartCommitID=start_id,
            EndCommitID=end_id,
        )

        rows = []
        authors = set()
        for commit_id in chain:
            commit = self.store.get_commit(commit_id)
            if commit is None:
                raise CommitLookupError(commit_id)

            authors.add(commit.author_name)
            rows.append(
                CommitRow(
                    id=commit.id,
                    short_id=truncate_id(commit.id, self.config.commit_hash_digits),
                    author=commit.author_name,
                    summary=commit.summary,
                    url=fill_template(
                        "commitURLTemplate", self.config.commit_url_template, CommitID=commit.id
                    ),
                )
            )

        logger.debug("report_model_built", rows=len(rows), authors=len(authors))
        return ReportModel(
            rows=rows,
            authors=sorted(authors),
            start_id=start_id,
            end_id=end_id,
            diff_url=diff_url,
        )
