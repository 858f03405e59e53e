"""
Development-time checks for junction positioning.

The junction calculator hands every result to ``validate_junction_position``
from inside an ``if __debug__`` block, so the check disappears when Python
runs with ``-O``. Hosts that want it off without ``-O`` can call
``set_validation_enabled(False)``.

The validator is purely diagnostic: it recomputes the handle edges and the
expected center exactly as the calculator does, logs a warning for every
violated bound, and returns nothing. It never raises and never touches the
junction it is given.

Usage:
    >>> from marriageline.validation import find_junction_issues
    >>> issues = find_junction_issues(mother, father, junction, True)
    >>> for issue in issues:
    ...     print(issue)
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from .dimensions import order_left_right, right_edge, vertical_center
from .models import JunctionPoint, PositionedBox

logger = logging.getLogger(__name__)

# Allowed drift between the junction Y and the expected center
JUNCTION_Y_TOLERANCE = 1

X_OUTSIDE_HANDLES = "x_outside_handles"
Y_OFF_CENTER = "y_off_center"

_validation_enabled = True


def set_validation_enabled(enabled: bool) -> None:
    """Turn junction validation on or off for this process."""
    global _validation_enabled
    _validation_enabled = enabled


def is_validation_enabled() -> bool:
    """Whether the junction calculator should run the validator."""
    return _validation_enabled


@dataclass
class JunctionIssue:
    """
    One violated junction bound.

    Attributes:
        kind: ``X_OUTSIDE_HANDLES`` or ``Y_OFF_CENTER``.
        message: Human readable description.
        values: The numbers the check compared.
    """

    kind: str
    message: str
    values: Dict[str, float] = field(default_factory=dict)

    def __str__(self) -> str:
        details = ", ".join(f"{key}={value}" for key, value in self.values.items())
        return f"{self.message} ({details})"


def find_junction_issues(
    box_a: PositionedBox,
    box_b: PositionedBox,
    junction: JunctionPoint,
    are_aligned: bool,
) -> List[JunctionIssue]:
    """
    Collect every bound the junction violates.

    Args:
        box_a: First parent, as passed to the calculator.
        box_b: Second parent.
        junction: The calculated junction.
        are_aligned: The alignment hint passed to the calculator.

    Returns:
        A list of JunctionIssue, empty when the junction is valid.
    """
    issues: List[JunctionIssue] = []

    left, right = order_left_right(box_a, box_b)
    left_handle_x = right_edge(left)
    right_handle_x = right.position.x

    if not (
        min(left_handle_x, right_handle_x)
        <= junction.x
        <= max(left_handle_x, right_handle_x)
    ):
        issues.append(
            JunctionIssue(
                kind=X_OUTSIDE_HANDLES,
                message="Junction X is not between parent handle edges",
                values={
                    "junction_x": junction.x,
                    "left_handle_x": left_handle_x,
                    "right_handle_x": right_handle_x,
                },
            )
        )

    center_a = vertical_center(box_a)
    center_b = vertical_center(box_b)

    if are_aligned:
        expected_y = center_a
        message = "Junction Y does not match parent center (aligned mode)"
    else:
        expected_y = (center_a + center_b) / 2
        message = "Junction Y does not match average parent center (unaligned mode)"

    if abs(junction.y - expected_y) > JUNCTION_Y_TOLERANCE:
        issues.append(
            JunctionIssue(
                kind=Y_OFF_CENTER,
                message=message,
                values={
                    "junction_y": junction.y,
                    "expected_y": expected_y,
                    "parent1_center_y": center_a,
                    "parent2_center_y": center_b,
                },
            )
        )

    return issues


def validate_junction_position(
    box_a: PositionedBox,
    box_b: PositionedBox,
    junction: JunctionPoint,
    are_aligned: bool,
) -> None:
    """Log a warning for each bound the junction violates."""
    for issue in find_junction_issues(box_a, box_b, junction, are_aligned):
        logger.warning("[Junction Positioning] %s", issue)
