"""Template substitution for configured report and URL templates."""

from typing import Any

from gitrangelog.exceptions import RenderError


def fill_template(name: str, template: str, **values: Any) -> str:
    """Fill a ``str.format`` style template with named values.

    Args:
        name: Template name, reported in errors
        template: Template text with ``{Placeholder}`` fields
        **values: Placeholder values

    Returns:
        The filled template

    Raises:
        RenderError: If the template references an unknown placeholder or is malformed
    """
    try:
        return template.format_map(values)
    except KeyError as e:
        raise RenderError(name, f"unknown placeholder {{{e.args[0]}}}") from e
    except (IndexError, ValueError, AttributeError, TypeError) as e:
        raise RenderError(name, str(e)) from e


def escape_cell(value: str) -> str:
    """Escape a value for use inside a Markdown table cell."""
    return value.replace("|", "\\|")
