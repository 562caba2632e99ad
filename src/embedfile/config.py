"""Configuration for content resolution.

The resolution mode is chosen once per process, with the following
priority order (highest to lowest):
1. Runtime Parameters (passed directly to ``load_config``)
2. Environment Variables (prefixed with EMBEDFILE_)
3. Project Config ([tool.embedfile] in pyproject.toml)
4. Defaults (production mode)
"""

import os
import threading
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from embedfile.utils.logging import configure_module_logger, set_verbose

logger = configure_module_logger(__name__)

Mode = Literal["production", "development"]

_TRUTHY = ("true", "1", "yes", "on")


class EmbedConfig(BaseModel):
    """Process-wide settings that select the content-resolution strategy."""

    mode: Mode = Field(
        default="production",
        description=(
            "'production' serves embedded bytes; 'development' reads from "
            "disk on first access and memoizes for the process lifetime"
        ),
    )

    verbose: bool = Field(
        default=False,
        description="Enable DEBUG logging for embedfile modules",
    )

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    @property
    def is_development(self) -> bool:
        return self.mode == "development"


def _load_from_pyproject_toml() -> dict[str, Any]:
    """Load configuration from [tool.embedfile] section in pyproject.toml.

    Returns:
        Dictionary with config values, or empty dict if not found.
    """
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        try:
            import tomli as tomllib  # noqa: F401
        except ImportError:
            return {}

    from pathlib import Path

    current_dir = Path.cwd()
    for path in [current_dir] + list(current_dir.parents):
        pyproject_path = path / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError):
                continue
            if "tool" in data and "embedfile" in data["tool"]:
                result: dict[str, Any] = dict(data["tool"]["embedfile"])
                return result

    return {}


def _load_from_env() -> dict[str, Any]:
    """Load configuration from environment variables (prefixed with EMBEDFILE_).

    Returns:
        Dictionary with config values from environment.
    """
    config: dict[str, Any] = {}

    mode = os.getenv("EMBEDFILE_MODE")
    if mode is not None:
        config["mode"] = mode.strip().lower()

    verbose = os.getenv("EMBEDFILE_VERBOSE")
    if verbose is not None:
        config["verbose"] = verbose.lower() in _TRUTHY

    return config


def load_config(
    mode: Optional[str] = None,
    verbose: Optional[bool] = None,
) -> EmbedConfig:
    """Load configuration with hierarchical priority.

    Args:
        mode: ``"production"`` or ``"development"``.
        verbose: Enable DEBUG logging.

    Returns:
        EmbedConfig instance with merged configuration.

    Raises:
        pydantic.ValidationError: If a source supplies an unknown mode or key.
    """
    merged = EmbedConfig().model_dump()
    merged.update(_load_from_pyproject_toml())
    merged.update(_load_from_env())

    if mode is not None:
        merged["mode"] = mode
    if verbose is not None:
        merged["verbose"] = verbose

    return EmbedConfig(**merged)


_ACTIVE_CONFIG: Optional[EmbedConfig] = None
_ACTIVE_LOCK = threading.Lock()


def get_active_config() -> EmbedConfig:
    """Return the configuration selected for this process.

    Loaded on first call and reused afterwards, so every ``EmbeddedFile``
    built without an explicit resolver shares one strategy.
    """
    global _ACTIVE_CONFIG

    with _ACTIVE_LOCK:
        if _ACTIVE_CONFIG is None:
            _ACTIVE_CONFIG = load_config()
            set_verbose(_ACTIVE_CONFIG.verbose)
            logger.debug(
                f"Content resolution mode: [bold]{_ACTIVE_CONFIG.mode}[/bold]"
            )
        return _ACTIVE_CONFIG
