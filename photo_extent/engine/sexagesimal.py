"""Sexagesimal delta: absolute difference of two DMS angles.

Both operands are first brought into canonical form: every component
except the last is a whole number, and every component after degrees
is below 60.  Fractional degrees or minutes (decimal-minute EXIF tags,
for instance) are carried down into the next component, and any
component that reaches 60 is carried back up.

Subtraction then runs from the least significant component (seconds)
to the most significant (degrees).  A negative partial result borrows
60 from the next more significant component of the larger angle; a
component that is already zero wraps to 59 and passes the borrow one
level further towards degrees.

The larger angle is always chosen as the minuend, so for canonical
input the borrow chain ends at or before degrees.  A borrow that would
run past degrees is unrepresentable and raises ``UnderflowError``.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from photo_extent.core.constants import SEXAGESIMAL_BASE
from photo_extent.core.exceptions import PermanentError
from photo_extent.engine.extent_tracker import compare_angles
from photo_extent.models.angle import Angle, coerce_angle, require_same_arity

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("photo_extent.engine.sexagesimal")


class UnderflowError(PermanentError):
    """Raised when a sexagesimal borrow runs past the degrees component."""

    default_stage = "sexagesimal_delta"
    default_code = "BORROW_UNDERFLOW"


def absolute_difference(a: Angle | Sequence[float], b: Angle | Sequence[float]) -> Angle:
    """Return ``|a - b|`` as a non-negative angle of the same arity.

    Neither input is modified.

    Args:
        a: First angle (angle or plain component sequence).
        b: Second angle, same arity as ``a``.

    Returns:
        The unsigned angular span between ``a`` and ``b``.

    Raises:
        ArityMismatchError: If ``a`` and ``b`` have different arity.
        MalformedAngleError: If a plain sequence is not a valid angle.
        UnderflowError: If the borrow chain exhausts the degrees component.
    """
    left = coerce_angle(a)
    right = coerce_angle(b)
    require_same_arity(left, right)

    left = canonical(left)
    right = canonical(right)

    order = compare_angles(left, right)
    if order == 0:
        return Angle.zero(len(left))

    bigger, smaller = (left, right) if order > 0 else (right, left)
    return Angle(_subtract_with_borrow(bigger.components, smaller.components))


def canonical(angle: Angle) -> Angle:
    """Return ``angle`` with whole leading components, each below 60.

    Canonical angles order lexicographically the same way they order by
    value, which the borrow subtraction relies on.
    """
    parts = list(angle.components)
    last = len(parts) - 1
    if all(float(c).is_integer() for c in parts[:last]):
        return angle

    for i in range(last):
        whole = math.floor(parts[i])
        parts[i + 1] += (parts[i] - whole) * SEXAGESIMAL_BASE
        parts[i] = float(whole)

    for i in range(last, 0, -1):
        while parts[i] >= SEXAGESIMAL_BASE:
            parts[i] -= SEXAGESIMAL_BASE
            parts[i - 1] += 1

    logger.debug("Angle canonicalised | from=%s | to=%s", angle.components, tuple(parts))
    return Angle(tuple(parts))


def _subtract_with_borrow(
    bigger: Sequence[float],
    smaller: Sequence[float],
) -> tuple[float, ...]:
    """Subtract ``smaller`` from ``bigger`` component-wise with base-60 borrow.

    Works on a copy of ``bigger``.  Both operands must be canonical.

    Raises:
        UnderflowError: If a borrow is needed from beyond index 0.
    """
    minuend = list(bigger)
    result = [0.0] * len(minuend)

    for i in range(len(minuend) - 1, -1, -1):
        result[i] = minuend[i] - smaller[i]
        if result[i] < 0:
            result[i] += SEXAGESIMAL_BASE
            _borrow(minuend, i - 1)

    return tuple(result)


def _borrow(minuend: list[float], index: int) -> None:
    """Take one unit from ``minuend[index]``, wrapping zeros towards degrees."""
    while True:
        if index < 0:
            msg = (
                f"Borrow past degrees while subtracting from {tuple(minuend)}: "
                "minuend is smaller than subtrahend"
            )
            raise UnderflowError(msg)
        if minuend[index] == 0:
            logger.debug("Borrow wraps | index=%d", index)
            minuend[index] = SEXAGESIMAL_BASE - 1
            index -= 1
            continue
        minuend[index] -= 1
        return
