"""Configuration file loading."""

import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import Field, ValidationError

from latency_check.models.base import Model

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class ProbeSettings(Model):
    """Settings for a probing run."""

    urls: Sequence[str] = Field(..., description="URLs to probe, in display order")
    timeout_seconds: int = Field(
        default=10, gt=0, description="Per-attempt timeout in seconds"
    )
    max_retries: int = Field(
        default=0, ge=0, description="Extra attempts for failed probes"
    )

    @property
    def timeout(self) -> float:
        """Per-attempt timeout in seconds."""
        return float(self.timeout_seconds)


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> ProbeSettings:
    """Load probe settings from a JSON file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated settings

    Raises:
        ConfigError: If the file cannot be read or does not hold valid settings

    """
    try:
        data = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"error reading config file {path}: {exc}") from exc

    try:
        settings = ProbeSettings.model_validate_json(data)
    except ValidationError as exc:
        raise ConfigError(f"error parsing config file {path}: {exc}") from exc

    log.info(
        "Loaded %d URL(s) from %s (timeout=%ds, max_retries=%d)",
        len(settings.urls),
        path,
        settings.timeout_seconds,
        settings.max_retries,
    )
    return settings
