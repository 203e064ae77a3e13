"""Renders a report model into Markdown text."""

from datetime import datetime, timezone
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from gitrangelog.exceptions import ConfigError
from gitrangelog.models import ReportConfig, ReportModel
from gitrangelog.report.templating import escape_cell, fill_template

# English month names regardless of LC_TIME
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_timestamp(moment: datetime) -> str:
    """Format a time as ``DD-MonthName-YYYY HH-MM-SS``."""
    return (
        f"{moment.day:02d}-{MONTH_NAMES[moment.month - 1]}-{moment.year} "
        f"{moment.hour:02d}-{moment.minute:02d}-{moment.second:02d}"
    )


class ReportRenderer:
    """Fills the configured preamble and commit table templates."""

    def __init__(self, config: ReportConfig) -> None:
        self.config = config

    def render(self, model: ReportModel, now: Optional[datetime] = None) -> str:
        """Render the full report.

        Args:
            model: Report model to render
            now: Report time, defaults to the current time

        Returns:
            Report text: preamble followed by a Commit | Author | Message table

        Raises:
            RenderError: If a template cannot be filled
            ConfigError: If a configured time zone is unknown
        """
        templates = self.config.templates
        if now is None:
            now = datetime.now(timezone.utc)

        parts = [
            fill_template(
                "preamble",
                templates.preamble,
                ProjectName=self.config.project_name,
                ProjectURL=self.config.project_repo_url,
                Timestamps=", ".join(self.format_timestamps(now)),
                StartCommitID=model.start_id,
                EndCommitID=model.end_id,
                DiffURL=model.diff_url,
                Authors=", ".join(model.authors),
            ),
            templates.table_header,
        ]

        for row in model.rows:
            line = fill_template(
                "row",
                templates.row,
                CommitID=row.short_id,
                CommitURL=row.url,
                Author=escape_cell(row.author),
                Message=escape_cell(row.summary),
            )
            parts.append(line + "\n")

        return "".join(parts)

    def format_timestamps(self, now: datetime) -> List[str]:
        """Format ``now`` once per configured time zone, e.g. ``05-March-2024 14-02-09 IST``."""
        stamps = []
        for tz in self.config.timezones:
            try:
                zone = ZoneInfo(tz.name)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ConfigError(f"Unknown time zone '{tz.name}' for label {tz.label}") from e
            stamps.append(f"{format_timestamp(now.astimezone(zone))} {tz.label}")
        return stamps
