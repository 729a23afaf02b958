"""Configuration for sway-scratch.

Policy knobs for the toggle: how the newly shown window is resized and
centered, whether a failed toggle first tries to move the window back into
the scratchpad, and how the fallback command is launched. Stored as JSON in
~/.config/sway-scratch/config.json; a missing file means defaults.
"""

import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError


logger = logging.getLogger(__name__)


class GeometryOrder(str, Enum):
    """Order of the geometry actions appended to the target group."""

    RESIZE_THEN_CENTER = "resize-then-center"
    CENTER_THEN_RESIZE = "center-then-resize"
    RESIZE_ONLY = "resize-only"


class SpawnStrategy(str, Enum):
    """How the --exec command line is started."""

    PROCESS = "process"  # detached `sh -c` child of this process
    SWAY = "sway"  # `exec` command sent over IPC, sway owns the child


class ToggleConfig(BaseModel):
    """Toggle policy.

    Example config.json:
        {
            "geometry_order": "center-then-resize",
            "reparent_on_failure": true,
            "spawn_strategy": "sway"
        }
    """

    geometry_order: GeometryOrder = Field(
        GeometryOrder.RESIZE_THEN_CENTER,
        description="Order of resize and 'move position center' after showing",
    )
    reparent_on_failure: bool = Field(
        True,
        description="Try 'move scratchpad' before spawning when the toggle fails",
    )
    spawn_strategy: SpawnStrategy = Field(
        SpawnStrategy.PROCESS,
        description="How the --exec command is launched",
    )
    shell: str = Field("sh", min_length=1, description="Shell used by the process strategy")

    class Config:
        """Pydantic configuration."""
        frozen = True
        extra = "forbid"


def default_config_path() -> Path:
    """Return $XDG_CONFIG_HOME/sway-scratch/config.json."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "sway-scratch" / "config.json"


def load_config(config_path: Optional[Path] = None) -> ToggleConfig:
    """Load toggle policy from disk.

    Args:
        config_path: Explicit config file (default: default_config_path())

    Returns:
        Validated configuration, defaults if the file does not exist

    Raises:
        ConfigError: If the file cannot be read, is not JSON, or fails validation
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = default_config_path()

    if not config_path.exists():
        if explicit:
            raise ConfigError(str(config_path), "file does not exist")
        logger.debug(f"No config at {config_path}, using defaults")
        return ToggleConfig()

    logger.debug(f"Loading configuration from {config_path}")

    try:
        with config_path.open("r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(str(config_path), f"invalid JSON: {e.msg} at line {e.lineno}", invalid=True)
    except OSError as e:
        raise ConfigError(str(config_path), str(e))

    try:
        config = ToggleConfig.model_validate(data)
    except ValidationError as e:
        issues = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc']) or '<root>'}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(str(config_path), issues, invalid=True)

    logger.debug(f"Config: {config.model_dump_json()}")
    return config
