"""Pytest configuration and shared fixtures for marriageline tests."""

import pytest

from marriageline import Position, PositionedBox
from marriageline.validation import set_validation_enabled


def _build_box(member_id, x, y, width=None, height=None, measured=None):
    """Build a PositionedBox the way the editor describes a node."""
    measured = measured or {}
    return PositionedBox(
        id=member_id,
        position=Position(x, y),
        width=width,
        height=height,
        measured_width=measured.get("width"),
        measured_height=measured.get("height"),
    )


@pytest.fixture(autouse=True)
def validation_on():
    """Every test starts with junction validation enabled."""
    set_validation_enabled(True)
    yield
    set_validation_enabled(True)


@pytest.fixture
def parent1():
    """Standard 200x80 card at (100, 100)."""
    return _build_box("parent1", 100, 100, width=200, height=80)


@pytest.fixture
def parent2():
    """Standard 200x80 card at (400, 100)."""
    return _build_box("parent2", 400, 100, width=200, height=80)


@pytest.fixture
def family_nodes():
    """Editor nodes for two grandparents, their son, his wife, a baby and a cousin."""
    return [
        {"id": "grandpa", "position": {"x": 0, "y": 0}, "width": 200, "height": 80},
        {
            "id": "grandma",
            "position": {"x": 300, "y": 20},
            "measured": {"width": 220, "height": 120},
        },
        {"id": "son", "position": {"x": 100, "y": 300}, "height": 60},
        {"id": "wife", "position": {"x": 450, "y": 310}, "height": 100},
        {"id": "baby", "position": {"x": 250, "y": 600}},
        {"id": "cousin", "position": {"x": 700, "y": 300}},
    ]


@pytest.fixture
def family_relationships():
    """Stored relationship records for family_nodes."""
    return [
        {
            "fromMemberId": "grandpa",
            "toMemberId": "grandma",
            "relationshipType": "marriage",
        },
        {"fromMemberId": "grandpa", "toMemberId": "son", "relationshipType": "parent"},
        {"fromMemberId": "son", "toMemberId": "grandma", "relationshipType": "child"},
        {"fromMemberId": "son", "toMemberId": "wife", "relationshipType": "marriage"},
        {"fromMemberId": "son", "toMemberId": "baby", "relationshipType": "parent"},
        {"fromMemberId": "wife", "toMemberId": "baby", "relationshipType": "adoption"},
        {"fromMemberId": "son", "toMemberId": "cousin", "relationshipType": "cousin"},
    ]


@pytest.fixture
def make_box():
    """Factory for PositionedBox fixtures."""
    return _build_box
