"""Loading of glass job files with readable error reporting.

File system errors, JSON syntax errors and schema violations are all
raised as ``ConfigError`` with an ``error_type`` the CLI and REST layers
can switch on.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from glasscut.application.config.schema import GlassJobConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A job file could not be loaded or validated.

    Attributes:
        message: Primary error message.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation.
        path: Path of the job file, if loaded from disk.
        details: Per-error dictionaries (line/column for JSON errors,
            path/message/value for validation errors).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location as a JSON path.

    Examples:
        >>> _format_json_path(("panels", 2, "width"))
        'panels[2].width'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> GlassJobConfiguration:
    try:
        return GlassJobConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> GlassJobConfiguration:
    """Load and validate a glass job from a JSON file.

    Args:
        path: Path to the JSON job file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    config = _validate(data, path)
    logger.debug("Loaded job %s with %d panel entries", path, len(config.panels))
    return config


def load_config_from_dict(data: dict[str, Any]) -> GlassJobConfiguration:
    """Validate a glass job given as a dictionary (e.g. an API request body).

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
