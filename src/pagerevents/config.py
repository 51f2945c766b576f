"""
Configuration for the pager command line.

Provides:
- Path constants (PAGER_HOME, PAGER_CONFIG_FILE)
- The PagerConfig model
- Config loading/saving functions

The library itself never reads this file; EventManager takes its
integration key as a constructor argument.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from pagerevents.events import EventSeverity

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Path constants
# ---------------------------------------------------------------------------

PAGER_HOME: Path = Path.home() / ".pagerevents"
PAGER_CONFIG_FILE: Path = PAGER_HOME / "config.yaml"


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class PagerConfig(BaseModel):
    """Saved defaults for the pager CLI."""

    integration_key: str = ""
    default_source: str = ""
    default_severity: EventSeverity = EventSeverity.CRITICAL


# ---------------------------------------------------------------------------
# Config loading/saving
# ---------------------------------------------------------------------------


def load_config(path: Path | None = None) -> PagerConfig:
    """Load configuration from YAML file, or return defaults."""
    path = path or PAGER_CONFIG_FILE
    if path.exists():
        try:
            data = yaml.safe_load(path.read_text()) or {}
            return PagerConfig(**data)
        except (yaml.YAMLError, ValidationError, TypeError):
            logger.warning("Ignoring unreadable config file %s", path)
    return PagerConfig()


def save_config(config: PagerConfig, path: Path | None = None) -> None:
    """Save configuration to YAML file."""
    path = path or PAGER_CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.dump(config.model_dump(mode="json"), default_flow_style=False)
    )


__all__ = [
    "PAGER_HOME",
    "PAGER_CONFIG_FILE",
    "PagerConfig",
    "load_config",
    "save_config",
]
