"""Unit tests for requirement normalization."""

import pytest

from calshare.domain.value_objects import (
    ALL_PERMISSIONS,
    CalendarPermission,
    Requirement,
    describe_requirement,
    normalize_requirement,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, Requirement()),
        ("View Calendar", Requirement(any_of=("View Calendar",))),
        (["A", "B"], Requirement(any_of=("A", "B"))),
        (("A",), Requirement(any_of=("A",))),
        ({"B", "A"}, Requirement(any_of=("A", "B"))),
        ({"anyOf": ["A"], "allOf": ["B", "C"]}, Requirement(any_of=("A",), all_of=("B", "C"))),
        ({"allOf": ["B"]}, Requirement(all_of=("B",))),
        ({"any_of": ["A"]}, Requirement(any_of=("A",))),
        ({"anyOf": "A", "allOf": 3}, Requirement()),
        (42, Requirement()),
        (object(), Requirement()),
    ],
)
def test_normalize_requirement_shapes(raw, expected) -> None:
    """Every input shape normalizes without raising."""
    assert normalize_requirement(raw) == expected


def test_normalize_requirement_is_idempotent() -> None:
    """Normalizing twice gives the same result."""
    for raw in [None, "A", ["A", "B"], {"anyOf": ["A"], "allOf": ["B"]}, 7]:
        once = normalize_requirement(raw)
        assert normalize_requirement(once) == once
        assert normalize_requirement(once) is once


def test_permission_enum_normalizes_as_string() -> None:
    """StrEnum permissions are plain strings for normalization."""
    requirement = normalize_requirement(CalendarPermission.MANAGE)
    assert requirement.any_of == ("Manage Calendar",)


def test_permission_vocabulary() -> None:
    assert [p.value for p in ALL_PERMISSIONS] == [
        "View Calendar",
        "View Calendar - Times Only",
        "Add to Calendar",
        "Comment on Calendar",
        "Manage Calendar",
    ]


def test_unspecified_requirement() -> None:
    assert Requirement().is_unspecified
    assert not Requirement(all_of=("A",)).is_unspecified


def test_describe_requirement_omits_empty_segments() -> None:
    assert describe_requirement({"anyOf": ["A", "B"], "allOf": ["C"]}) == "anyOf: A, B | allOf: C"
    assert describe_requirement("A") == "anyOf: A"
    assert describe_requirement({"allOf": ["C"]}) == "allOf: C"
    assert describe_requirement(None) == ""


def test_describe_requirement_renders_non_string_entries() -> None:
    assert describe_requirement({"anyOf": ["View Calendar", 3]}) == "anyOf: View Calendar, 3"
    assert describe_requirement(["View Calendar", None]) == "anyOf: View Calendar, "
    assert describe_requirement({"allOf": [True]}) == "allOf: True"


def test_requirement_to_dict() -> None:
    assert Requirement(any_of=("A",)).to_dict() == {"anyOf": ["A"], "allOf": []}
