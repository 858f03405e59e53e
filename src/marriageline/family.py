"""
Whole-tree junction layout using networkx.

FamilyLayout holds the member cards of one family tree and the stored
relationships between them, and applies the junction calculators across
the tree:

- ``align_couples`` is the auto-layout pass: every married couple is moved
  onto a shared vertical center, one spouse group at a time.
- ``drag_member`` is the manual pass: a dragged card's spouse group follows it.
- ``junctions`` places a junction for every couple with shared children.

Relationships are stored the way the editor stores them. Parent-type
edges (``parent``, ``adoption``, ``stepParent``) run from parent to child;
``child`` edges run from child to parent; ``marriage`` edges join a couple.
Other types are kept in the graph but play no part in junction layout.
"""

import logging
from typing import (
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Set,
    Tuple,
    Union,
)

import networkx as nx

from .dimensions import effective_height, vertical_center
from .junction import (
    calculate_couple_alignment,
    calculate_junction_position,
    calculate_spouse_aligned_y,
)
from .models import JunctionPoint, Position, PositionedBox, Relationship

logger = logging.getLogger(__name__)

MARRIAGE = "marriage"
PARENT_TYPES = frozenset({"parent", "adoption", "stepParent"})
CHILD_TYPES = frozenset({"child"})
OTHER_TYPES = frozenset({"sibling", "grandparent", "cousin", "custom"})
RELATIONSHIP_TYPES = frozenset({MARRIAGE}) | PARENT_TYPES | CHILD_TYPES | OTHER_TYPES

# Edge kinds in the internal graph
_SPOUSE = "spouse"
_PARENT_OF = "parent_of"
_OTHER = "other"

Couple = Tuple[str, str]


class FamilyLayout:
    """
    Junction layout for one family tree.

    Attributes:
        graph: MultiDiGraph of member ids; spouse edges are stored in both
            directions, parent edges from parent to child.
        boxes: Current card of each member, keyed by member id.
    """

    def __init__(
        self,
        members: Iterable[PositionedBox],
        relationships: Iterable[Relationship] = (),
    ):
        """
        Build the family graph.

        Args:
            members: Member cards.
            relationships: Stored relationships between those members.

        Raises:
            KeyError: If a relationship references an unknown member.
            ValueError: If a relationship has an unknown type.
        """
        self.graph: nx.MultiDiGraph = nx.MultiDiGraph()
        self.boxes: Dict[str, PositionedBox] = {}

        for box in members:
            self.boxes[box.id] = box
            self.graph.add_node(box.id)

        for relationship in relationships:
            self.add_relationship(relationship)

    @classmethod
    def from_records(
        cls,
        nodes: Iterable[Mapping],
        relationship_records: Iterable[Mapping] = (),
    ) -> "FamilyLayout":
        """Build a layout from editor node dicts and stored relationship dicts."""
        return cls(
            [PositionedBox.from_node(node) for node in nodes],
            [Relationship.from_record(record) for record in relationship_records],
        )

    def add_relationship(self, relationship: Relationship) -> None:
        """
        Add one stored relationship to the graph.

        Raises:
            KeyError: If either member is unknown.
            ValueError: If the relationship type is unknown.
        """
        kind = relationship.relationship_type
        if kind not in RELATIONSHIP_TYPES:
            raise ValueError(f"Unknown relationship type: {kind!r}")

        source = relationship.from_member_id
        target = relationship.to_member_id
        for member_id in (source, target):
            self._require(member_id)

        if source == target and (
            kind == MARRIAGE or kind in PARENT_TYPES or kind in CHILD_TYPES
        ):
            logger.debug("Ignoring %s relationship of %s to themself", kind, source)
            return

        if kind == MARRIAGE:
            self.graph.add_edge(source, target, kind=_SPOUSE)
            self.graph.add_edge(target, source, kind=_SPOUSE)
        elif kind in PARENT_TYPES:
            self.graph.add_edge(source, target, kind=_PARENT_OF)
        elif kind in CHILD_TYPES:
            self.graph.add_edge(target, source, kind=_PARENT_OF)
        else:
            self.graph.add_edge(source, target, kind=_OTHER)

    def _require(self, member_id: str) -> None:
        if member_id not in self.boxes:
            raise KeyError(f"Unknown family member: {member_id!r}")

    def _neighbors(self, member_id: str, kind: str) -> List[str]:
        self._require(member_id)
        found: List[str] = []
        for _, target, data in self.graph.out_edges(member_id, data=True):
            if data["kind"] == kind and target not in found:
                found.append(target)
        return found

    def spouses_of(self, member_id: str) -> List[str]:
        """Members married to ``member_id``, in insertion order."""
        return self._neighbors(member_id, _SPOUSE)

    def children_of(self, member_id: str) -> List[str]:
        """Children of ``member_id`` across all parent-type relationships."""
        return self._neighbors(member_id, _PARENT_OF)

    def shared_children(self, member_a: str, member_b: str) -> List[str]:
        """Children both members are parents of, in ``member_a``'s order."""
        of_b: Set[str] = set(self.children_of(member_b))
        return [child for child in self.children_of(member_a) if child in of_b]

    def couples(self) -> List[Couple]:
        """Every married couple once, as sorted id pairs, in sorted order."""
        found: Set[Couple] = set()
        for source, target, data in self.graph.edges(data=True):
            if data["kind"] == _SPOUSE:
                found.add(tuple(sorted((source, target))))
        return sorted(found)

    def spouse_groups(self) -> List[List[str]]:
        """
        Members joined by marriage, one sorted list per connected group.

        A member married more than once pulls all their spouses into one
        group. Groups are ordered by their first member id.
        """
        spouse_graph = nx.Graph()
        for source, target, data in self.graph.edges(data=True):
            if data["kind"] == _SPOUSE:
                spouse_graph.add_edge(source, target)
        return sorted(
            sorted(component) for component in nx.connected_components(spouse_graph)
        )

    def _group_of(self, member_id: str) -> List[str]:
        for group in self.spouse_groups():
            if member_id in group:
                return group
        return [member_id]

    def move(
        self, member_id: str, x: Optional[float] = None, y: Optional[float] = None
    ) -> PositionedBox:
        """Move a member's card and return the updated box."""
        self._require(member_id)
        box = self.boxes[member_id].moved_to(x=x, y=y)
        self.boxes[member_id] = box
        return box

    def align_couples(self) -> Dict[str, float]:
        """
        Auto-layout pass: put every couple on a shared vertical center.

        Each spouse group is aligned as one unit. A plain couple meets
        halfway between its two centers; a group formed by remarriage moves
        every member onto the mean of all their centers, so each couple in
        the group ends up level.

        Returns:
            New Y of each member that was aligned.
        """
        new_y: Dict[str, float] = {}
        for group in self.spouse_groups():
            if len(group) == 2:
                member_a, member_b = group
                alignment = calculate_couple_alignment(
                    self.boxes[member_a], self.boxes[member_b]
                )
                new_y[member_a] = alignment.parent1_y
                new_y[member_b] = alignment.parent2_y
            else:
                boxes = [self.boxes[member_id] for member_id in group]
                center_y = sum(vertical_center(box) for box in boxes) / len(boxes)
                for box in boxes:
                    new_y[box.id] = center_y - effective_height(box) / 2

            for member_id in group:
                self.move(member_id, y=new_y[member_id])
        logger.debug("Aligned %d members across couples", len(new_y))
        return new_y

    def drag_member(
        self,
        member_id: str,
        new_position: Union[Position, Sequence[float], Mapping[str, float]],
    ) -> Dict[str, float]:
        """
        Move a dragged card and keep its spouse group level with it.

        Every member of the dragged card's spouse group (spouses, and
        their other spouses) follows the dragged center, vertically only.

        Returns:
            New Y of the dragged member and of every member that followed.
        """
        self._require(member_id)
        position = Position.coerce(new_position)
        dragged = self.boxes[member_id]

        new_y = {member_id: position.y}
        for spouse_id in self._group_of(member_id):
            if spouse_id == member_id:
                continue
            spouse_y = calculate_spouse_aligned_y(
                dragged, self.boxes[spouse_id], position
            )
            self.move(spouse_id, y=spouse_y)
            new_y[spouse_id] = spouse_y

        self.move(member_id, x=position.x, y=position.y)
        return new_y

    def junctions(self, are_aligned: bool = False) -> Dict[Couple, JunctionPoint]:
        """
        Place a junction for every couple with at least one shared child.

        Args:
            are_aligned: Whether couples are already center-aligned, e.g.
                right after ``align_couples``.

        Returns:
            JunctionPoint per couple, keyed by the couple's sorted id pair.
        """
        result: Dict[Couple, JunctionPoint] = {}
        for member_a, member_b in self.couples():
            if not self.shared_children(member_a, member_b):
                continue
            result[(member_a, member_b)] = calculate_junction_position(
                self.boxes[member_a], self.boxes[member_b], are_aligned
            )
        return result
