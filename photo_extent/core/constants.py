"""Shared engine constants: single source of truth.

The projection uses a spherical-equirectangular approximation: the
globe is a sphere whose equator is exactly 40,000 km long, a degree of
latitude has the same length everywhere, and a degree of longitude
shrinks with ``cos(latitude)``.  No ellipsoid or datum correction is
applied.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Sexagesimal layout
# ---------------------------------------------------------------------------

DMS_ARITY: int = 3
"""Number of components in a canonical (degrees, minutes, seconds) angle."""

SEXAGESIMAL_BASE: int = 60
"""Radix of every component after degrees."""

# ---------------------------------------------------------------------------
# Spherical projection
# ---------------------------------------------------------------------------

EQUATOR_LENGTH_M: float = 40_000_000.0
"""Equatorial circumference of the reference sphere in metres."""

DEGREES_IN_CIRCLE: float = 360.0
MINUTES_IN_CIRCLE: float = 21_600.0
SECONDS_IN_CIRCLE: float = 1_296_000.0

METRES_PER_DEGREE: float = EQUATOR_LENGTH_M / DEGREES_IN_CIRCLE
METRES_PER_MINUTE: float = EQUATOR_LENGTH_M / MINUTES_IN_CIRCLE
METRES_PER_SECOND: float = EQUATOR_LENGTH_M / SECONDS_IN_CIRCLE

# ---------------------------------------------------------------------------
# Hemisphere references
# ---------------------------------------------------------------------------

LATITUDE_REFS: frozenset[str] = frozenset({"N", "S"})
LONGITUDE_REFS: frozenset[str] = frozenset({"E", "W"})

HEMISPHERE_POLICIES: tuple[str, ...] = ("warn", "error", "ignore")
"""How a point set that mixes hemispheres is treated."""
