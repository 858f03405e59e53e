"""
Data models for marriage-junction layout.

This module contains the plain value types the layout engine consumes and
produces. The engine never stores layout state on these objects: left/right
roles, effective dimensions and vertical centers are all derived per call
(see ``marriageline.dimensions``).

Classes:
    Position: Top-left corner of a box in canvas coordinates.
    PositionedBox: A member card with declared and measured dimensions.
    JunctionPoint: Where a couple's marriage line meets the child lines.
    CoupleAlignment: Y positions that put two spouses on a common center.
    Relationship: A typed edge between two family members.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, NamedTuple, Optional, Sequence, Union


@dataclass(frozen=True)
class Position:
    """Top-left corner of a box."""

    x: float
    y: float

    @classmethod
    def coerce(
        cls, value: Union["Position", Sequence[float], Mapping[str, float]]
    ) -> "Position":
        """
        Build a Position from a Position, an (x, y) pair or an {"x", "y"} dict.

        Args:
            value: Anything that describes a point.

        Returns:
            The value as a Position.
        """
        if isinstance(value, Position):
            return value
        if isinstance(value, Mapping):
            return cls(x=value["x"], y=value["y"])
        x, y = value
        return cls(x=x, y=y)


@dataclass(frozen=True)
class PositionedBox:
    """
    A family member card as the layout engine sees it.

    Declared dimensions are what the editor asked for; measured dimensions
    are what was actually rendered. Measured values win whenever present.
    When neither is known the engine falls back to 200x80.

    Attributes:
        id: Opaque member identifier, only used to attribute results.
        position: Top-left corner in canvas coordinates.
        width: Declared width, if any.
        height: Declared height, if any.
        measured_width: Rendered width, if known.
        measured_height: Rendered height, if known.
    """

    id: str
    position: Position
    width: Optional[float] = None
    height: Optional[float] = None
    measured_width: Optional[float] = None
    measured_height: Optional[float] = None

    @classmethod
    def from_node(cls, node: Mapping[str, Any]) -> "PositionedBox":
        """
        Build a box from an editor node dict.

        The expected shape is::

            {"id": "m1", "position": {"x": 0, "y": 0},
             "measured": {"width": 210, "height": 96},
             "width": 200, "height": 80}

        where ``measured``, ``width`` and ``height`` are optional.
        """
        measured = node.get("measured") or {}
        return cls(
            id=node["id"],
            position=Position.coerce(node["position"]),
            width=node.get("width"),
            height=node.get("height"),
            measured_width=measured.get("width"),
            measured_height=measured.get("height"),
        )

    def moved_to(
        self, x: Optional[float] = None, y: Optional[float] = None
    ) -> "PositionedBox":
        """Return a copy of this box with a new x and/or y."""
        position = Position(
            x=self.position.x if x is None else x,
            y=self.position.y if y is None else y,
        )
        return replace(self, position=position)


@dataclass(frozen=True)
class JunctionPoint:
    """
    Result of junction positioning.

    Recomputed on every layout pass; any position change invalidates it.
    """

    x: float
    y: float
    left_parent_id: str
    right_parent_id: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the editor's key names."""
        return {
            "x": self.x,
            "y": self.y,
            "leftParentId": self.left_parent_id,
            "rightParentId": self.right_parent_id,
        }


class CoupleAlignment(NamedTuple):
    """Y positions for both spouses and the center they now share."""

    parent1_y: float
    parent2_y: float
    center_y: float


@dataclass(frozen=True)
class Relationship:
    """
    A typed relationship between two members.

    Attributes:
        from_member_id: Source member (the parent for parent-type edges).
        to_member_id: Target member.
        relationship_type: One of the types in
            ``marriageline.family.RELATIONSHIP_TYPES``.
        id: Optional relationship identifier.
    """

    from_member_id: str
    to_member_id: str
    relationship_type: str
    id: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Relationship":
        """Build a relationship from a stored record dict."""
        return cls(
            from_member_id=record["fromMemberId"],
            to_member_id=record["toMemberId"],
            relationship_type=record["relationshipType"],
            id=record.get("id"),
        )
