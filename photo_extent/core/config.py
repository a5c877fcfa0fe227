"""Engine configuration loaded from environment variables.

All values have defaults that reproduce the classic 40,000 km sphere,
so library callers never need a configuration object.  Hosts that want
to tune the engine call ``EngineConfig.from_env()`` once at startup.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range, catching bad configuration before the first
    point set is processed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from photo_extent.core.constants import EQUATOR_LENGTH_M, HEMISPHERE_POLICIES
from photo_extent.core.exceptions import PermanentError


class ConfigValidationError(PermanentError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable engine configuration.

    Attributes:
        equator_length_m: Equatorial circumference of the reference
            sphere in metres.
        hemisphere_policy: Treatment of point sets that mix hemispheres:
            ``"warn"`` logs and proceeds, ``"error"`` raises
            ``MixedHemisphereError``, ``"ignore"`` skips the check.
    """

    equator_length_m: float = EQUATOR_LENGTH_M
    hemisphere_policy: str = "warn"

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``EXTENT_EQUATOR_LENGTH_M=abc``).
        """
        config = cls(
            equator_length_m=float(os.getenv("EXTENT_EQUATOR_LENGTH_M", str(EQUATOR_LENGTH_M))),
            hemisphere_policy=os.getenv("EXTENT_HEMISPHERE_POLICY", "warn").strip().lower(),
        )
        validate_config(config)
        return config


def validate_config(config: EngineConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    check_equator_length(config.equator_length_m)

    if config.hemisphere_policy not in HEMISPHERE_POLICIES:
        raise ConfigValidationError(
            "EXTENT_HEMISPHERE_POLICY",
            config.hemisphere_policy,
            f"must be one of {', '.join(HEMISPHERE_POLICIES)}",
        )


def check_equator_length(equator_length_m: float) -> None:
    """Raise ``ConfigValidationError`` unless the circumference is positive.

    Also called by the projection stage, which accepts the circumference
    as a per-call keyword.
    """
    if not equator_length_m > 0:
        raise ConfigValidationError(
            "EXTENT_EQUATOR_LENGTH_M",
            equator_length_m,
            "must be > 0 (metres)",
        )
