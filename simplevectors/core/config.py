"""Library configuration dataclass and process-wide settings."""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class VectorConfig:
    """Configuration for optional vector behaviour."""

    experimental_compare: bool = False
    """Enable lexicographic <, <=, >, >= operators between vectors."""

    @classmethod
    def from_env(cls) -> "VectorConfig":
        """Build a config from SVECTOR_* environment variables."""
        raw = os.environ.get("SVECTOR_EXPERIMENTAL_COMPARE", "")
        return cls(experimental_compare=raw.strip().lower() in _TRUTHY)


_config = VectorConfig.from_env()


def get_config() -> VectorConfig:
    """Return the active configuration."""
    return _config


def set_config(config: VectorConfig) -> VectorConfig:
    """
    Replace the active configuration.

    Parameters
    ----------
    config : VectorConfig
        New configuration.

    Returns
    -------
    previous : VectorConfig
        The configuration that was active before the call.
    """
    global _config
    previous, _config = _config, config
    logger.debug("vector config changed: %s -> %s", previous, config)
    return previous


@contextmanager
def configure(**overrides) -> Iterator[VectorConfig]:
    """Temporarily override configuration fields, restoring them on exit."""
    previous = set_config(replace(_config, **overrides))
    try:
        yield _config
    finally:
        set_config(previous)
