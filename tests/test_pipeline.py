"""End-to-end tests for changelog generation."""

from datetime import datetime, timezone

import pytest

from conftest import oid
from gitrangelog.exceptions import NotFoundError, RenderError, UnreachableError
from gitrangelog.history import MemoryHistoryStore
from gitrangelog.models import ReportConfig
from gitrangelog.pipeline import collect_range, generate_report

NOW = datetime(2024, 3, 5, 8, 32, 9, tzinfo=timezone.utc)


def test_collect_range_with_references(linear_store):
    """Test resolving branch names and walking the range between them."""
    result = collect_range(linear_store, "refs/heads/master", "HEAD")

    assert result.start.id == oid("start")
    assert result.end.id == oid("end")
    assert result.chain == [oid("end"), oid("Y"), oid("X")]


def test_generate_report(linear_store, report_config):
    """Test the full report for a linear history."""
    text = generate_report(linear_store, "master", "develop", report_config, now=NOW)

    assert f"[Diff: {oid('start')}...{oid('end')}]" in text
    assert f"/-/compare/{oid('start')}...{oid('end')})" in text
    assert "Authors: alice, bob, carol\n" in text
    rows = [line for line in text.splitlines() if line.startswith("|[")]
    assert [row.split("|")[2] for row in rows] == ["carol", "alice", "bob"]
    assert rows[0].startswith(f"|[{oid('end')[:8]}](https://gitlab.example.com/team/service/-/commit/{oid('end')})")
    assert oid("start")[:8] + "]" not in text


def test_generate_report_truncation():
    """Test that the commit column uses the configured hash width."""
    full_id = "f5a78eba828b905cfb559a427e1afcceb5d337ca"
    store = MemoryHistoryStore()
    store.add_commit(oid("base"))
    store.add_commit(full_id, [oid("base")], author_name="dana", message="Ship it")

    def config(digits):
        return ReportConfig(
            projectName="svc",
            projectRepoURL="https://example.com/svc",
            diffURLTemplate="https://example.com/svc/compare/{StartCommitID}...{EndCommitID}",
            commitURLTemplate="https://example.com/svc/commit/{CommitID}",
            commitHashDigits=digits,
        )

    truncated = generate_report(store, oid("base"), full_id, config(8), now=NOW)
    untruncated = generate_report(store, oid("base"), full_id, config(0), now=NOW)

    assert f"|[f5a78eba](https://example.com/svc/commit/{full_id})|dana|Ship it|" in truncated
    assert f"|[{full_id}](https://example.com/svc/commit/{full_id})|dana|Ship it|" in untruncated


def test_generate_report_unreachable(linear_store, report_config):
    """Test that reversed endpoints abort the report."""
    with pytest.raises(UnreachableError):
        generate_report(linear_store, "develop", "master", report_config, now=NOW)


def test_generate_report_unknown_endpoint(linear_store, report_config):
    """Test that an unknown start endpoint is named in the error."""
    with pytest.raises(NotFoundError, match="start-commit=release"):
        generate_report(linear_store, "release", "HEAD", report_config, now=NOW)


def test_generate_report_malformed_diff_template(linear_store, report_config):
    """Test that an undefined placeholder in the diff URL template raises RenderError."""
    config = report_config.model_copy(update={"diff_url_template": "https://example.com/{Base}...{Head}"})

    with pytest.raises(RenderError, match="diffURLTemplate"):
        generate_report(linear_store, "master", "HEAD", config, now=NOW)
