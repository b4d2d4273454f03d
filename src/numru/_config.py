"""
Package-wide configuration and logging helpers.

`NumruConfig` holds the defaults that array construction and visualization
fall back to when the caller does not specify them. A single process-wide
instance is managed through `get_config()` / `set_config()`.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

from .domain.backend._backend import Backend

logger = logging.getLogger(__name__)

ENV_DEFAULT_BACKEND = "NUMRU_DEFAULT_BACKEND"
ENV_DECIMAL_POINTS = "NUMRU_DECIMAL_POINTS"


@dataclass
class NumruConfig:
    """
    Configuration for array defaults.

    Attributes
    ----------
    default_backend : str
        Backend assigned to arrays constructed without an explicit backend.
    decimal_points : int
        Default float precision used by `VisualizeBuilder`.
    """

    default_backend: str = "numpy"
    decimal_points: int = 1

    def __post_init__(self):
        """
        Validate and normalize the configured values.

        Raises
        ------
        ValueError
            If the backend is unknown or `decimal_points` is negative.
        """
        self.default_backend = str(Backend(self.default_backend))
        if isinstance(self.decimal_points, bool) or not isinstance(
            self.decimal_points, int
        ):
            raise ValueError(
                f"decimal_points must be an integer, got {self.decimal_points!r}"
            )
        if self.decimal_points < 0:
            raise ValueError(
                f"decimal_points must be >= 0, got {self.decimal_points}"
            )

    @classmethod
    def from_env(cls) -> "NumruConfig":
        """
        Build a configuration from environment variables.

        Reads ``NUMRU_DEFAULT_BACKEND`` and ``NUMRU_DECIMAL_POINTS``; unset
        variables keep their defaults.
        """
        kwargs = {}
        backend = os.environ.get(ENV_DEFAULT_BACKEND)
        if backend:
            kwargs["default_backend"] = backend
        decimal_points = os.environ.get(ENV_DECIMAL_POINTS)
        if decimal_points:
            try:
                kwargs["decimal_points"] = int(decimal_points)
            except ValueError:
                raise ValueError(
                    f"{ENV_DECIMAL_POINTS} must be an integer, got {decimal_points!r}"
                ) from None
        return cls(**kwargs)

    def backend(self) -> Backend:
        return Backend(self.default_backend)


def load_env_config() -> NumruConfig:
    """
    Build the configuration from the environment, falling back to defaults.

    Invalid ``NUMRU_*`` values are reported with a warning instead of
    raising, so a bad variable never prevents ``import numru``.
    """
    try:
        return NumruConfig.from_env()
    except ValueError as e:
        logger.warning("ignoring invalid numru environment configuration: %s", e)
        return NumruConfig()


_config = load_env_config()


def get_config() -> NumruConfig:
    """Return the process-wide configuration."""
    return _config


def set_config(config: NumruConfig) -> NumruConfig:
    """
    Replace the process-wide configuration and return the previous one.
    """
    global _config
    if not isinstance(config, NumruConfig):
        raise TypeError(f"expected NumruConfig, got {type(config).__name__}")
    previous, _config = _config, config
    logger.debug("configuration replaced: %r -> %r", previous, config)
    return previous


def configure_logging(level: int = logging.INFO) -> None:
    """
    Attach a stdout handler to the ``numru`` logger.

    Records use the format "timestamp - logger name - level - message".
    Calling this more than once does not add duplicate handlers.
    """
    root = logging.getLogger("numru")
    root.setLevel(level)
    for handler in root.handlers:
        if getattr(handler, "_numru_stdout", False):
            handler.setLevel(level)
            return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.setLevel(level)
    handler._numru_stdout = True  # type: ignore[attr-defined]
    root.addHandler(handler)
