"""
Dimension resolution shared by every junction calculation.

Every calculator in this package resolves a box's size through the same
fallback chain: measured dimension, then declared dimension, then the
default card size. A value of zero counts as missing, so an unmeasured
card reporting ``0`` falls through to its declared size.

Handles sit on the left and right edges of a card at half its height,
never at the top edge, which is why the vertical center is the anchor for
all Y math.
"""

from typing import Tuple

from .models import PositionedBox

# Card size used when neither a measured nor a declared size is known
DEFAULT_BOX_WIDTH = 200
DEFAULT_BOX_HEIGHT = 80


def effective_width(box: PositionedBox) -> float:
    """Width used in calculations: measured, else declared, else default."""
    return box.measured_width or box.width or DEFAULT_BOX_WIDTH


def effective_height(box: PositionedBox) -> float:
    """Height used in calculations: measured, else declared, else default."""
    return box.measured_height or box.height or DEFAULT_BOX_HEIGHT


def vertical_center(box: PositionedBox) -> float:
    """Y coordinate of the box's left/right handles."""
    return box.position.y + effective_height(box) / 2


def right_edge(box: PositionedBox) -> float:
    """X coordinate of the box's right handle."""
    return box.position.x + effective_width(box)


def order_left_right(
    box_a: PositionedBox, box_b: PositionedBox
) -> Tuple[PositionedBox, PositionedBox]:
    """
    Return (left, right) for a couple, judged by current x position.

    ``box_a`` is left only when its x is strictly less than ``box_b``'s;
    on a tie ``box_a`` takes the right slot. Roles are never stored since a
    card can be dragged past its partner at any time.
    """
    if box_a.position.x < box_b.position.x:
        return box_a, box_b
    return box_b, box_a
