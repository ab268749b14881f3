"""Tests for the grid shortest-path search."""

from math import isinf

import pytest
from hypothesis import given, settings, strategies as st

from aoc2022.core.dijkstra import (UNREACHED, ClimbSearch, climbable, descendable,
                                   search_all_distances, search_single_target)
from aoc2022.core.errors import OutOfBoundsError
from aoc2022.core.field2d import Field2D
from aoc2022.days.day12 import EXAMPLE, LOWEST, Heightmap


@pytest.fixture
def example():
    return Heightmap.from_lines(EXAMPLE)


def test_single_target_on_example(example):
    assert search_single_target(example.map, example.start, example.goal, climbable) == 31


def test_all_distances_backwards_on_example(example):
    distances = search_all_distances(example.map, example.goal, descendable)
    assert distances[example.goal] == 0
    assert distances[example.start] == 31
    best = min(distances[c] for c, h in example.map.iter_with_position() if h == LOWEST)
    assert best == 29


def test_unreachable_goal_returns_none():
    field = Field2D([0, 25], 2)
    assert search_single_target(field, (0, 0), (1, 0), lambda src, dst: dst <= src) is None


def test_start_equals_goal_costs_nothing():
    field = Field2D.filled(3, 3, 5)
    assert search_single_target(field, (1, 1), (1, 1)) == 0


def test_unreached_cells_hold_sentinel():
    field = Field2D([0, 0, 9, 0], 4)
    distances = search_all_distances(field, (0, 0))
    assert distances.values[:2] == [0, 1]
    assert distances[2, 0] == UNREACHED
    assert isinf(distances[3, 0])


def test_search_is_repeatable(example):
    first = search_single_target(example.map, example.start, example.goal)
    second = search_single_target(example.map, example.start, example.goal)
    assert first == second == 31
    assert example.map == Heightmap.from_lines(EXAMPLE).map


def test_goal_outside_field_raises(example):
    with pytest.raises(OutOfBoundsError):
        search_single_target(example.map, example.start, (100, 0))
    with pytest.raises(OutOfBoundsError):
        search_all_distances(example.map, (-1, 0))


def test_step_protocol_reports_path(example):
    search = ClimbSearch(example.map, example.start, climbable, goal=example.goal)
    first = search.step()
    assert first.status == "running"
    assert first.closed == [example.start]
    assert set(first.opened) == {(1, 0), (0, 1)}

    res = search.run()
    assert res.status == "done"
    assert res.path[0] == example.start
    assert res.path[-1] == example.goal
    assert len(res.path) == 32
    assert res.metrics["path_len"] == 32
    assert res.metrics["total_cost"] == 31
    # further steps keep reporting the finished state
    assert search.step().status == "done"


def test_step_protocol_no_path():
    field = Field2D([0, 25], 2)
    search = ClimbSearch(field, (0, 0), climbable, goal=(1, 0))
    res = search.run()
    assert res.status == "no_path"
    assert res.finished
    assert search.path_to((1, 0)) is None


def test_reset_restarts_search(example):
    search = ClimbSearch(example.map, example.start, goal=example.goal)
    search.run()
    search.reset()
    assert not search.done
    assert search.popped_count == 0
    assert search.run().metrics["total_cost"] == 31


def test_path_steps_are_adjacent_and_climbable(example):
    search = ClimbSearch(example.map, example.start, goal=example.goal)
    path = search.run().path
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
        assert climbable(example.map[a], example.map[b])


@st.composite
def heightmaps(draw):
    width = draw(st.integers(1, 8))
    height = draw(st.integers(1, 8))
    values = draw(st.lists(st.integers(0, 4), min_size=width * height, max_size=width * height))
    return Field2D(values, width)


@settings(max_examples=60)
@given(heightmaps())
def test_flat_distance_matches_manhattan_lower_bound(field):
    distances = search_all_distances(field, (0, 0), climbable)
    for (x, y), d in distances.iter_with_position():
        if d != UNREACHED:
            assert d >= x + y


@settings(max_examples=60)
@given(heightmaps())
def test_forward_and_backward_searches_agree(field):
    goal = (field.width - 1, field.height - 1)
    forward = search_single_target(field, (0, 0), goal, climbable)
    backward = search_all_distances(field, goal, descendable)[0, 0]
    if forward is None:
        assert backward == UNREACHED
    else:
        assert forward == backward
