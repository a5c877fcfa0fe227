"""Sexagesimal angle value type.

An ``Angle`` is an unsigned angular magnitude stored as its sexagesimal
components, most significant first: ``(degrees, minutes, seconds)``.
The hemisphere (N/S, E/W) is carried by the owning ``Point``, never by
the angle itself.

Design notes:
- Frozen dataclass, like every other model in the package.
- The canonical arity is 3, but any non-empty component list is
  representable so that mismatched arities are detected and reported
  by the engine instead of being silently truncated.
- Components are validated once at construction: finite, non-negative,
  and every component after the first strictly below 60.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING

from photo_extent.core.constants import DMS_ARITY, SEXAGESIMAL_BASE
from photo_extent.core.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MalformedAngleError(ValueError, ValidationError):
    """Raised when an angle is constructed from invalid components.

    Attributes:
        field_name: The component that violated the invariant
            (``"degrees"``, ``"minutes"``, ``"seconds"`` or ``"components"``).
        value: The invalid value.
    """

    default_stage = "angle"
    default_code = "MALFORMED_ANGLE"

    def __init__(self, field_name: str, value: object, message: str) -> None:
        self.field_name = field_name
        self.value = value
        formatted = f"Angle.{field_name}={value!r}: {message}"
        ValidationError.__init__(self, formatted)


class ArityMismatchError(ValidationError):
    """Raised when angles of different arity are compared or subtracted.

    Attributes:
        left_arity: Number of components in the first angle.
        right_arity: Number of components in the second angle.
    """

    default_stage = "angle_compare"
    default_code = "ARITY_MISMATCH"

    def __init__(self, left_arity: int, right_arity: int, message: str = "") -> None:
        self.left_arity = left_arity
        self.right_arity = right_arity
        super().__init__(
            message or f"Different length of coordinate: {left_arity} vs {right_arity} components"
        )


# ---------------------------------------------------------------------------
# Angle
# ---------------------------------------------------------------------------

_COMPONENT_NAMES = ("degrees", "minutes", "seconds")


def _component_name(index: int) -> str:
    if index < len(_COMPONENT_NAMES):
        return _COMPONENT_NAMES[index]
    return f"component[{index}]"


@dataclass(frozen=True, slots=True)
class Angle:
    """An unsigned sexagesimal angle.

    Attributes:
        components: Sexagesimal components, most significant first.
            Canonically ``(degrees, minutes, seconds)``.
    """

    components: tuple[float, ...]

    def __post_init__(self) -> None:
        raw = self.components
        if isinstance(raw, (str, bytes)) or not hasattr(raw, "__iter__"):
            raise MalformedAngleError("components", raw, "must be a sequence of numbers")

        values = tuple(raw)
        if not values:
            raise MalformedAngleError("components", values, "must not be empty")

        normalised: list[float] = []
        for index, value in enumerate(values):
            name = _component_name(index)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise MalformedAngleError(name, value, "must be a real number")
            number = float(value)
            if not math.isfinite(number):
                raise MalformedAngleError(name, value, "must be finite")
            if number < 0:
                raise MalformedAngleError(name, value, "must be >= 0")
            if index > 0 and number >= SEXAGESIMAL_BASE:
                raise MalformedAngleError(name, value, f"must be < {SEXAGESIMAL_BASE}")
            normalised.append(number)

        object.__setattr__(self, "components", tuple(normalised))

    # -- construction -------------------------------------------------------

    @classmethod
    def of(cls, *components: float) -> Angle:
        """Build an angle from positional components: ``Angle.of(40, 26, 46.3)``."""
        return cls(components)

    @classmethod
    def zero(cls, arity: int = DMS_ARITY) -> Angle:
        """Return the zero angle with ``arity`` components."""
        return cls((0.0,) * arity)

    @classmethod
    def from_decimal_degrees(cls, value: float) -> Angle:
        """Convert a decimal-degree value to a canonical DMS triple.

        The sign is discarded; the caller keeps it as a hemisphere ref.
        Seconds are rounded to nanoarcsecond precision so that values
        like ``10.5`` come back as ``(10, 30, 0)`` exactly.
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise MalformedAngleError("degrees", value, "must be a real number")
        if not math.isfinite(value):
            raise MalformedAngleError("degrees", value, "must be finite")

        magnitude = abs(float(value))
        degrees = math.floor(magnitude)
        remainder = (magnitude - degrees) * SEXAGESIMAL_BASE
        minutes = math.floor(remainder)
        seconds = round((remainder - minutes) * SEXAGESIMAL_BASE, 9)

        if seconds >= SEXAGESIMAL_BASE:
            seconds -= SEXAGESIMAL_BASE
            minutes += 1
        if minutes >= SEXAGESIMAL_BASE:
            minutes -= SEXAGESIMAL_BASE
            degrees += 1
        return cls((float(degrees), float(minutes), seconds))

    # -- sequence protocol --------------------------------------------------

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    def __getitem__(self, index: int) -> float:
        return self.components[index]

    def __str__(self) -> str:
        if len(self.components) != DMS_ARITY:
            return "(" + ", ".join(f"{c:g}" for c in self.components) + ")"
        degrees, minutes, seconds = self.components
        return f"{degrees:g}°{minutes:g}'{seconds:g}\""

    # -- DMS accessors ------------------------------------------------------

    @property
    def arity(self) -> int:
        """Number of sexagesimal components."""
        return len(self.components)

    @property
    def degrees(self) -> float:
        return self.components[0]

    @property
    def minutes(self) -> float:
        return self._require_component(1)

    @property
    def seconds(self) -> float:
        return self._require_component(2)

    @property
    def is_zero(self) -> bool:
        """Whether every component is zero."""
        return all(c == 0 for c in self.components)

    def _require_component(self, index: int) -> float:
        if index >= len(self.components):
            raise ArityMismatchError(len(self.components), DMS_ARITY)
        return self.components[index]

    # -- conversions --------------------------------------------------------

    def to_decimal_degrees(self) -> float:
        """Return ``degrees + minutes/60 + seconds/3600`` (any arity)."""
        return sum(c / SEXAGESIMAL_BASE**i for i, c in enumerate(self.components))

    def to_radians(self) -> float:
        """Return the angle in radians."""
        return self.to_decimal_degrees() * math.pi / 180.0

    def to_list(self) -> list[float]:
        """Serialise to a plain list of components."""
        return list(self.components)


def coerce_angle(value: Angle | Sequence[float]) -> Angle:
    """Return ``value`` as an ``Angle``, validating plain sequences.

    Raises:
        MalformedAngleError: If ``value`` is not a valid angle.
    """
    if isinstance(value, Angle):
        return value
    return Angle(value)  # type: ignore[arg-type]


def require_same_arity(a: Angle, b: Angle) -> None:
    """Raise ``ArityMismatchError`` unless ``a`` and ``b`` have equal arity."""
    if len(a) != len(b):
        raise ArityMismatchError(len(a), len(b))
