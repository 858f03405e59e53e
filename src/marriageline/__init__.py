"""
marriageline - Marriage-junction layout for family trees

Positions the invisible junction where a couple's marriage line meets the
line down to their children, and keeps spouse cards level on their
vertical centers whatever their widths and heights.

Example:
    >>> from marriageline import PositionedBox, Position
    >>> from marriageline import calculate_junction_position
    >>> mother = PositionedBox("m", Position(100, 100), width=200, height=80)
    >>> father = PositionedBox("f", Position(400, 100), width=200, height=80)
    >>> calculate_junction_position(mother, father, are_aligned=True)
    JunctionPoint(x=350.0, y=140.0, left_parent_id='m', right_parent_id='f')

Family Example:
    >>> layout = FamilyLayout.from_records(nodes, relationships)
    >>> layout.align_couples()
    >>> junctions = layout.junctions(are_aligned=True)
"""

from .dimensions import (
    DEFAULT_BOX_HEIGHT,
    DEFAULT_BOX_WIDTH,
    effective_height,
    effective_width,
    order_left_right,
    vertical_center,
)
from .family import RELATIONSHIP_TYPES, FamilyLayout
from .junction import (
    calculate_couple_alignment,
    calculate_junction_position,
    calculate_spouse_aligned_y,
)
from .models import (
    CoupleAlignment,
    JunctionPoint,
    Position,
    PositionedBox,
    Relationship,
)
from .validation import (
    JUNCTION_Y_TOLERANCE,
    JunctionIssue,
    find_junction_issues,
    set_validation_enabled,
    validate_junction_position,
)

__version__ = "0.1.0"

__all__ = [
    # Calculators
    "calculate_junction_position",
    "calculate_spouse_aligned_y",
    "calculate_couple_alignment",
    # Models
    "Position",
    "PositionedBox",
    "JunctionPoint",
    "CoupleAlignment",
    "Relationship",
    # Dimensions
    "DEFAULT_BOX_WIDTH",
    "DEFAULT_BOX_HEIGHT",
    "effective_width",
    "effective_height",
    "vertical_center",
    "order_left_right",
    # Validation (development only)
    "JUNCTION_Y_TOLERANCE",
    "JunctionIssue",
    "find_junction_issues",
    "validate_junction_position",
    "set_validation_enabled",
    # Family layout
    "FamilyLayout",
    "RELATIONSHIP_TYPES",
]
