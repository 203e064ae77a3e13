"""Data models for changelog generation."""

from gitrangelog.models.commit import HEX_ID_LENGTH, Commit, GitObject, Reference, first_line, is_hex_id
from gitrangelog.models.config import (
    ReportConfig,
    ReportTemplates,
    Settings,
    TimezoneConfig,
    load_config,
)
from gitrangelog.models.report import CommitRow, ReportModel

__all__ = [
    "HEX_ID_LENGTH",
    "Commit",
    "Reference",
    "GitObject",
    "CommitRow",
    "ReportModel",
    "ReportConfig",
    "ReportTemplates",
    "TimezoneConfig",
    "Settings",
    "first_line",
    "is_hex_id",
    "load_config",
]
