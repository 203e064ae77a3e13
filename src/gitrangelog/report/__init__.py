"""Changelog report building and rendering."""

from gitrangelog.report.builder import ReportBuilder, truncate_id
from gitrangelog.report.renderer import ReportRenderer, format_timestamp
from gitrangelog.report.templating import fill_template

__all__ = ["ReportBuilder", "ReportRenderer", "fill_template", "format_timestamp", "truncate_id"]
