"""Tests for seating constraint and layout validation."""

import math
from dataclasses import replace

import pytest

from venueplanner.core.model import ConstraintType, Guest, Position, Room
from venueplanner.engine.validators import (
    InvalidVenueConfig,
    find_assignment_mismatches,
    find_out_of_bounds_tables,
    validate_constraints,
    validate_venue_config,
)

TOGETHER = ConstraintType.MUST_SIT_TOGETHER
APART = ConstraintType.MUST_NOT_SIT_TOGETHER


def test_must_sit_together_at_different_tables(seating, constraint):
    guests, tables = seating

    violations = validate_constraints([constraint(TOGETHER)], guests, tables)

    assert len(violations) == 1
    assert violations[0].constraint_id == "c1"
    assert violations[0].table_id == "T1"
    assert violations[0].message == "Ada and Ben must sit together but are at Table 1 and Table 2"


def test_must_not_sit_together_at_different_tables(seating, constraint):
    guests, tables = seating

    assert validate_constraints([constraint(APART)], guests, tables) == []


def test_same_table(seating, constraint):
    guests, tables = seating
    guests = [guests[0], replace(guests[1], table_id="T1")]

    assert validate_constraints([constraint(TOGETHER)], guests, tables) == []

    violations = validate_constraints([constraint(APART)], guests, tables)
    assert len(violations) == 1
    assert violations[0].table_id == "T1"
    assert violations[0].message == "Ada and Ben must not sit together but are both at Table 1"


@pytest.mark.parametrize("constraint_type", [TOGETHER, APART])
def test_unassigned_guest_is_skipped(seating, constraint, constraint_type):
    guests, tables = seating
    guests = [guests[0], replace(guests[1], table_id=None)]

    assert validate_constraints([constraint(constraint_type)], guests, tables) == []


@pytest.mark.parametrize("constraint_type", [TOGETHER, APART])
def test_missing_guest_is_skipped(seating, constraint, constraint_type):
    guests, tables = seating

    assert validate_constraints([constraint(constraint_type, b="ghost")], guests, tables) == []


def test_unknown_table_label(seating, constraint):
    guests, tables = seating
    guests = [replace(guests[0], table_id="T9"), guests[1]]

    violations = validate_constraints([constraint(TOGETHER)], guests, tables)

    assert violations[0].table_id == "T9"
    assert violations[0].message.endswith("are at unknown and Table 2")


def test_violations_keep_constraint_order(seating, constraint):
    guests, tables = seating
    guests = guests + [Guest(id="cat", name="Cat", table_id="T2")]
    constraints = [
        constraint(TOGETHER, "ben", "cat", "c3"),
        constraint(TOGETHER, "ada", "cat", "c2"),
        constraint(APART, "ben", "cat", "c1"),
        constraint(TOGETHER, "ada", "ben", "c0"),
    ]

    violations = validate_constraints(constraints, guests, tables)

    assert [v.constraint_id for v in violations] == ["c2", "c1", "c0"]


def test_string_constraint_types_are_accepted(seating, constraint):
    guests, tables = seating

    assert len(validate_constraints([constraint("must-sit-together")], guests, tables)) == 1


def test_assignments_consistent(seating):
    guests, tables = seating

    assert find_assignment_mismatches(guests, tables) == []


def test_assignment_mismatches(seating):
    guests, tables = seating
    guests = [guests[0], replace(guests[1], table_id="T1")]

    assert find_assignment_mismatches(guests, tables) == [("ben", "T1"), ("ben", "T2")]


def test_out_of_bounds_tables(venue, table_factory):
    venue = replace(
        venue,
        tables=(
            table_factory("inside", "Inside", x=100, y=100),
            table_factory("overhang", "Overhang", x=590, y=100),
            table_factory("terrace", "Terrace table", x=750, y=225, room_id="terrace"),
            table_factory("stray", "Stray", x=750, y=225),
            table_factory("orphan", "Orphan", x=100, y=100, room_id="deleted-room"),
        ),
    )

    assert find_out_of_bounds_tables(venue) == ["overhang", "stray"]


def test_valid_venue_config(venue):
    assert validate_venue_config(venue) is True


@pytest.mark.parametrize(
    "changes",
    [
        {"grid_size": 0},
        {"grid_size": -1},
        {"grid_size": math.nan},
        {"room_width": 0},
        {"room_length": math.inf},
    ],
)
def test_invalid_venue_config(venue, changes):
    with pytest.raises(InvalidVenueConfig):
        validate_venue_config(replace(venue, **changes))


def test_invalid_room_dimensions(venue):
    room = Room(id="r", label="R", position=Position(0, 0), width=0, height=5)

    with pytest.raises(InvalidVenueConfig):
        validate_venue_config(replace(venue, rooms=(room,)))


def test_primary_room_id_is_reserved(venue):
    room = Room(id="__primary__", label="R", position=Position(0, 0), width=5, height=5)

    with pytest.raises(InvalidVenueConfig, match="reserved"):
        validate_venue_config(replace(venue, rooms=(room,)))


def test_empty_table_id_counts_as_unassigned(seating, constraint):
    guests, tables = seating
    guests = [guests[0], replace(guests[1], table_id="")]
    tables = [tables[0], replace(tables[1], assigned_guest_ids=())]

    assert find_assignment_mismatches(guests, tables) == []
    assert validate_constraints([constraint(TOGETHER)], guests, tables) == []
