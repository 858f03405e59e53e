"""
Junction and spouse alignment calculations.

A junction is the invisible point where a couple's marriage line meets the
vertical line(s) down to their children. For the marriage line to stay
horizontal and the child line to drop from its middle, three things have to
hold:

1. Junction X is measured from the handle edges (left card's right edge,
   right card's left edge), not from the card centers. Centers would shift
   the junction whenever the two cards have different widths.
2. Junction Y sits at the parents' vertical center, where the handles are.
3. Spouse cards are aligned on their vertical centers, not their top edges.

Behavior on NaN or infinite coordinates is undefined; callers supply
finite geometry.
"""

from typing import Mapping, Sequence, Union

from . import validation
from .dimensions import (
    effective_height,
    effective_width,
    order_left_right,
    vertical_center,
)
from .models import CoupleAlignment, JunctionPoint, Position, PositionedBox


def calculate_junction_position(
    box_a: PositionedBox,
    box_b: PositionedBox,
    are_aligned: bool = False,
) -> JunctionPoint:
    """
    Calculate the junction position for a couple with shared children.

    X is the midpoint between the left card's right handle
    (``x + width``) and the right card's left handle (``x``). Y is box A's
    vertical center when the couple is already aligned (after a drag or an
    auto-layout pass), otherwise the average of both centers so the line
    does not slant before alignment has happened.

    Args:
        box_a: First parent.
        box_b: Second parent.
        are_aligned: Whether the caller guarantees both vertical centers
            are already equal.

    Returns:
        JunctionPoint with coordinates and the left/right parent ids.
    """
    left, right = order_left_right(box_a, box_b)

    junction_x = (left.position.x + effective_width(left) + right.position.x) / 2

    if are_aligned:
        junction_y = vertical_center(box_a)
    else:
        junction_y = (vertical_center(box_a) + vertical_center(box_b)) / 2

    junction = JunctionPoint(
        x=junction_x,
        y=junction_y,
        left_parent_id=left.id,
        right_parent_id=right.id,
    )

    if __debug__:
        if validation.is_validation_enabled():
            validation.validate_junction_position(box_a, box_b, junction, are_aligned)

    return junction


def calculate_spouse_aligned_y(
    dragged_box: PositionedBox,
    spouse_box: PositionedBox,
    new_position: Union[Position, Sequence[float], Mapping[str, float]],
) -> float:
    """
    Calculate the spouse's Y so its vertical center follows a dragged card.

    The dragged center is ``new_y + dragged_height / 2``; solving
    ``spouse_y + spouse_height / 2`` for the same value gives
    ``new_y + (dragged_height - spouse_height) / 2``. No clamping is done.

    Args:
        dragged_box: The card being dragged.
        spouse_box: The spouse that has to follow.
        new_position: New top-left corner of the dragged card.

    Returns:
        The spouse's new Y.
    """
    new_y = Position.coerce(new_position).y
    return new_y + (effective_height(dragged_box) - effective_height(spouse_box)) / 2


def calculate_couple_alignment(
    box_a: PositionedBox, box_b: PositionedBox
) -> CoupleAlignment:
    """
    Align a couple during auto-layout.

    Both cards move so their centers meet halfway between their original
    centers, rather than one card locking onto the other as in a drag.
    """
    height_a = effective_height(box_a)
    height_b = effective_height(box_b)

    center_y = (vertical_center(box_a) + vertical_center(box_b)) / 2

    return CoupleAlignment(
        parent1_y=center_y - height_a / 2,
        parent2_y=center_y - height_b / 2,
        center_y=center_y,
    )
