"""Extent pipeline façade.

Chains the engine stages for callers that hold a point set:

    points → find_extremes → absolute_difference → to_meters_* → ratio

Every call starts from scratch; nothing is cached between calls.

Hemisphere check:
    Angles are unsigned magnitudes, so a set that mixes N and S (or E
    and W) points cannot be ordered meaningfully.  The configured
    ``hemisphere_policy`` decides whether that is logged, raised, or
    ignored.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from photo_extent.core.config import EngineConfig, validate_config
from photo_extent.core.exceptions import ExtentError
from photo_extent.engine.aspect_ratio import measure_extent
from photo_extent.engine.extent_tracker import (
    MixedHemisphereError,
    find_extremes,
    mixed_hemispheres,
)
from photo_extent.models.report import ExtentReport

if TYPE_CHECKING:
    from collections.abc import Iterable

    from photo_extent.models.extent import ExtentResult
    from photo_extent.models.point import Point

logger = logging.getLogger("photo_extent.pipeline")

_DEFAULT_CONFIG = EngineConfig()


def compute_extent(
    points: Iterable[Point],
    *,
    config: EngineConfig | None = None,
) -> ExtentResult:
    """Return the four directional extremes of ``points``.

    Raises:
        ConfigValidationError: If ``config`` holds an out-of-range value.
        EmptyInputError: If ``points`` is empty.
        MixedHemisphereError: If hemispheres are mixed and the policy
            is ``"error"``.
    """
    cfg = _resolve_config(config)
    point_list = list(points)
    _check_hemispheres(point_list, cfg)
    return find_extremes(point_list)


def compute_extent_and_aspect_ratio(
    points: Iterable[Point],
    *,
    config: EngineConfig | None = None,
) -> tuple[ExtentResult, float]:
    """Return the extent of ``points`` and its length/width ratio.

    Raises:
        ConfigValidationError: If ``config`` holds an out-of-range value.
        EmptyInputError: If ``points`` is empty.
        DegenerateExtentError: If every point shares one latitude.
        MixedHemisphereError: If hemispheres are mixed and the policy
            is ``"error"``.
    """
    cfg = _resolve_config(config)
    extent = compute_extent(points, config=cfg)
    measurement = measure_extent(extent, equator_length_m=cfg.equator_length_m)
    return extent, measurement.ratio


def build_extent_report(
    points: Iterable[Point],
    *,
    config: EngineConfig | None = None,
    run_id: str = "",
    timestamp: str = "",
) -> ExtentReport:
    """Run the full pipeline and return a serialisable ``ExtentReport``.

    Any ``ExtentError`` raised on the way is tagged with ``run_id`` as
    its ``correlation_id`` before it propagates.

    Raises:
        The same errors as ``compute_extent_and_aspect_ratio``.
    """
    try:
        cfg = _resolve_config(config)
        extent = compute_extent(points, config=cfg)
        measurement = measure_extent(extent, equator_length_m=cfg.equator_length_m)
    except ExtentError as exc:
        if run_id and not exc.correlation_id:
            exc.correlation_id = run_id
        logger.error(
            "Extent report failed | run_id=%s | code=%s | stage=%s",
            run_id,
            exc.code,
            exc.stage,
        )
        raise
    return ExtentReport.from_extent(
        extent,
        measurement,
        equator_length_m=cfg.equator_length_m,
        run_id=run_id,
        timestamp=timestamp,
    )


def _resolve_config(config: EngineConfig | None) -> EngineConfig:
    if config is None:
        return _DEFAULT_CONFIG
    validate_config(config)
    return config


def _check_hemispheres(points: list[Point], config: EngineConfig) -> None:
    if config.hemisphere_policy == "ignore":
        return

    axes = mixed_hemispheres(points)
    if not axes:
        return

    msg = (
        f"Point set mixes hemispheres on {', '.join(axes)}; "
        "extremes are computed on unsigned magnitudes"
    )
    if config.hemisphere_policy == "error":
        raise MixedHemisphereError(msg)
    logger.warning(msg)
