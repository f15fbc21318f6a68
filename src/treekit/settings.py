"""Runtime configuration for treekit, loaded from `TREEKIT_*` environment variables or a `.env` file."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class TreeKitSettings(
    BaseSettings,
    env_prefix="TREEKIT_",
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
):
    """Package-wide defaults.

    Attributes:
        log_level (str): Default minimum level for `enable_logging`.
        log_format (Literal["short", "full"]): Default log line layout for
            `enable_logging`.
        render_indent (str): Indentation added per tree level by `render`.

    Examples:
        >>> TreeKitSettings(render_indent="    ").render_indent
        '    '
    """

    log_level: Literal["TRACE", "DEBUG", "SPLIT", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Default minimum log level used by enable_logging().",
    )
    log_format: Literal["short", "full"] = Field(
        default="short",
        description="Default log line layout used by enable_logging().",
    )
    render_indent: str = Field(
        default="  ",
        description="Indentation added for each tree level when rendering.",
    )


@lru_cache(maxsize=1)
def get_settings() -> TreeKitSettings:
    """Return the process-wide settings, loading them on first use.

    Returns:
        TreeKitSettings: The cached settings instance. Call
            `get_settings.cache_clear()` to reload after changing the environment.
    """
    return TreeKitSettings()
