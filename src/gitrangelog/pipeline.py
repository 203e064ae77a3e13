"""End-to-end changelog generation: resolve, check, walk, build, render."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

import structlog

from gitrangelog.history import HistoryStore, RangeWalker, ReferenceResolver
from gitrangelog.models import Commit, ReportConfig
from gitrangelog.report import ReportBuilder, ReportRenderer

logger = structlog.get_logger(__name__)


@dataclass
class RangeResult:
    """Resolved endpoints and the commits between them."""

    start: Commit
    end: Commit
    chain: List[str]


def collect_range(store: HistoryStore, start: str, end: str) -> RangeResult:
    """Resolve both endpoints and walk the commits between them.

    Args:
        store: History store to read from
        start: Start endpoint (excluded from the chain)
        end: End endpoint (included in the chain)

    Returns:
        RangeResult with resolved commits and the ordered chain
    """
    resolver = ReferenceResolver(store)
    end_commit = resolver.resolve(end, label="end-commit")
    start_commit = resolver.resolve(start, label="start-commit")

    chain = RangeWalker(store).walk(end_commit, start_commit)
    return RangeResult(start=start_commit, end=end_commit, chain=chain)


def generate_report(
    store: HistoryStore,
    start: str,
    end: str,
    config: ReportConfig,
    now: Optional[datetime] = None,
) -> str:
    """Generate the full changelog report text.

    Nothing is written anywhere; callers write the returned text only once
    every stage has succeeded.

    Args:
        store: History store to read from
        start: Start endpoint (hash or reference name)
        end: End endpoint (hash or reference name)
        config: Report configuration
        now: Report time, defaults to the current time

    Returns:
        Rendered report text
    """
    result = collect_range(store, start, end)
    model = ReportBuilder(store, config).build(result.chain, result.start.id, result.end.id)
    text = ReportRenderer(config).render(model, now=now)
    logger.info(
        "report_generated",
        start=result.start.id,
        end=result.end.id,
        commits=len(model.rows),
        authors=len(model.authors),
    )
    return text
