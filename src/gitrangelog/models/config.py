"""Configuration models."""

import json
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitrangelog.exceptions import ConfigError

DEFAULT_PREAMBLE_TEMPLATE = (
    "\n"
    "[{ProjectName}]({ProjectURL}) Deployment<br>\n"
    "{Timestamps} <br>\n"
    "[Diff: {StartCommitID}...{EndCommitID}]({DiffURL}) <br>\n"
    "Authors: {Authors}\n"
    "<br>"
)

DEFAULT_TABLE_HEADER = (
    "\n"
    "| Commit | Author | Message |\n"
    "| ------ | ------ | --------|\n"
)

DEFAULT_ROW_TEMPLATE = "|[{CommitID}]({CommitURL})|{Author}|{Message}|"


class TimezoneConfig(BaseModel):
    """A time zone shown in the report preamble."""

    label: str = Field(..., min_length=1, description="Label printed after the timestamp, e.g. IST")
    name: str = Field(..., min_length=1, description="IANA time zone name, e.g. Asia/Kolkata")


class ReportTemplates(BaseModel):
    """Text templates used by the report renderer.

    Templates use ``str.format`` placeholders, e.g. ``{ProjectName}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    preamble: str = Field(DEFAULT_PREAMBLE_TEMPLATE, description="Preamble block template")
    table_header: str = Field(
        DEFAULT_TABLE_HEADER, alias="tableHeader", description="Commit table header"
    )
    row: str = Field(DEFAULT_ROW_TEMPLATE, description="Template for one commit table row")


class ReportConfig(BaseModel):
    """Project specific configuration for changelog reports.

    Keys may be given in the camelCase form used by changelog.json files
    (``projectName``) or in snake_case (``project_name``).
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "projectName": "Campaign Manager Service",
                "projectRepoURL": "https://gitlab.example.com/team/service",
                "diffURLTemplate": "https://gitlab.example.com/team/service/-/compare/{StartCommitID}...{EndCommitID}",
                "commitURLTemplate": "https://gitlab.example.com/team/service/-/commit/{CommitID}",
                "commitHashDigits": 8,
            }
        },
    )

    project_name: str = Field(..., alias="projectName", min_length=1, description="Project display name")
    project_repo_url: str = Field(
        ..., alias="projectRepoURL", min_length=1, description="Link to the project repository"
    )
    diff_url_template: str = Field(
        ...,
        alias="diffURLTemplate",
        min_length=1,
        description="Comparison URL template with {StartCommitID} and {EndCommitID}",
    )
    commit_url_template: str = Field(
        ..., alias="commitURLTemplate", min_length=1, description="Commit URL template with {CommitID}"
    )
    commit_hash_digits: int = Field(
        8,
        alias="commitHashDigits",
        description="Characters of the commit hash shown in the table (<= 0 shows the full hash)",
    )
    timezones: List[TimezoneConfig] = Field(
        default_factory=lambda: [
            TimezoneConfig(label="IST", name="Asia/Kolkata"),
            TimezoneConfig(label="WIB", name="Asia/Jakarta"),
        ],
        description="Time zones for the report timestamps",
    )
    templates: ReportTemplates = Field(default_factory=ReportTemplates, description="Report layout")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GITRANGELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    config_path: Path = Path("changelog.json")
    repo_path: Path = Path(".")

    # Logging
    log_level: str = "INFO"


def load_config(path: Path) -> ReportConfig:
    """Load a report configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        ReportConfig object

    Raises:
        ConfigError: If the file is missing, is not valid JSON, or fails validation
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    try:
        return ReportConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid config file {path}: {problems}") from e
