import math
from typing import Callable

import pytest

from gantt_layout.configuration import merge_options
from gantt_layout.model.milestone import Milestone
from gantt_layout.model.project import Project
from gantt_layout.model.task import Task
from gantt_layout.service.connector import (
    create_rectangular_path,
    dependency_connectors,
    to_svg_path,
)
from gantt_layout.service.layout import compute_layout
from gantt_layout.state import ProjectState


def _points(segments: list) -> list[tuple[float, float]]:
    return [(segment["x"], segment["y"]) for segment in segments]


def test_wide_gap_bends_at_the_midpoint() -> None:
    segments = create_rectangular_path(0, 10, 100, 50, offset=20)

    assert [segment["command"] for segment in segments] == ["M", "L", "L", "L"]
    assert _points(segments) == [(0, 10), (50, 10), (50, 50), (100, 50)]
    assert to_svg_path(segments) == "M 0 10 L 50 10 L 50 50 L 100 50"


def test_close_endpoints_route_around() -> None:
    segments = create_rectangular_path(100, 10, 110, 70, offset=20)

    assert len(segments) == 6
    assert to_svg_path(segments) == (
        "M 100 10 L 120 10 L 120 40 L 90 40 L 90 70 L 110 70"
    )


def test_exactly_two_offsets_apart_routes_around() -> None:
    segments = create_rectangular_path(0, 0, 40, 100, offset=20)

    assert len(segments) == 6
    # transition row is capped at 30 below the source
    assert segments[2]["y"] == 30


def test_upward_route_transitions_above_the_source() -> None:
    segments = create_rectangular_path(100, 100, 90, 20, offset=20)

    assert _points(segments) == [
        (100, 100),
        (120, 100),
        (120, 70),
        (70, 70),
        (70, 20),
        (90, 20),
    ]


def test_small_offset_keeps_minimum_lateral_step() -> None:
    segments = create_rectangular_path(0, 0, 1, 10, offset=1)

    assert _points(segments)[1] == (20, 0)
    assert _points(segments)[4] == (-19, 10)


@pytest.mark.parametrize(
    "coordinates",
    [
        (math.nan, 0, 10, 10),
        (0, math.inf, 10, 10),
        (0, 0, -math.inf, 10),
    ],
)
def test_non_finite_coordinates_are_rejected(
    coordinates: tuple[float, float, float, float],
) -> None:
    with pytest.raises(ValueError):
        create_rectangular_path(*coordinates)


def test_svg_path_formatting() -> None:
    assert to_svg_path([]) == ""
    assert to_svg_path([{"command": "M", "x": 1, "y": 2}]) == ""
    assert (
        to_svg_path(
            [
                {"command": "M", "x": 0.5, "y": 2.0},
                {"command": "L", "x": 10, "y": 2.25},
            ]
        )
        == "M 0.5 2 L 10 2.25"
    )


def test_dependency_runs_from_right_edge_to_left_edge(
    make_task: Callable[..., Task],
) -> None:
    tasks = [
        make_task("a", "2024-01-01", "2024-01-03"),
        make_task("b", "2024-01-05", "2024-01-07", dependencies=["a"]),
    ]
    layout = compute_layout(tasks)

    connectors = dependency_connectors(layout, merge_options())

    assert len(connectors) == 1
    assert connectors[0]["source_id"] == "a"
    assert connectors[0]["target_id"] == "b"
    assert connectors[0]["path"] == "M 80 15 L 120 15 L 120 49 L 160 49"


def test_milestone_anchors_sit_on_the_diamond_edges(
    make_task: Callable[..., Task], make_milestone: Callable[..., Milestone]
) -> None:
    tasks = [
        make_task("a", "2024-01-01", "2024-01-03"),
        make_task("b", "2024-01-05", "2024-01-07", dependencies=["m"]),
    ]
    milestones = [make_milestone("m", "2024-01-02")]
    layout = compute_layout(tasks, milestones)

    connectors = dependency_connectors(layout, merge_options())

    assert connectors[0]["path"] == "M 48 15 L 104 15 L 104 49 L 160 49"


def test_unknown_dependencies_are_skipped(make_task: Callable[..., Task]) -> None:
    tasks = [make_task("a", "2024-01-01", "2024-01-03", dependencies=["ghost"])]
    layout = compute_layout(tasks)

    assert dependency_connectors(layout, merge_options()) == []


def test_dependencies_can_be_switched_off(make_task: Callable[..., Task]) -> None:
    tasks = [
        make_task("a", "2024-01-01", "2024-01-03"),
        make_task("b", "2024-01-05", "2024-01-07", dependencies=["a"]),
    ]
    layout = compute_layout(tasks)

    connectors = dependency_connectors(
        layout, merge_options({"show_dependencies": False})
    )

    assert connectors == []


def test_hidden_endpoints_drop_their_connectors(
    make_task: Callable[..., Task],
) -> None:
    web: Project = {"id": "web", "name": "Website"}
    tasks = [
        make_task("a", "2024-01-01", "2024-01-03", project_id="web"),
        make_task("b", "2024-01-05", "2024-01-07", dependencies=["a"]),
    ]
    layout = compute_layout(
        tasks,
        projects=[web],
        options={"enable_project_grouping": True},
        project_state=ProjectState({"web": False}),
    )

    hidden = dependency_connectors(
        layout, merge_options({"enable_project_grouping": True})
    )
    shown = dependency_connectors(
        layout,
        merge_options(
            {"enable_project_grouping": True, "hide_orphan_dependencies": False}
        ),
    )

    assert hidden == []
    assert [(c["source_id"], c["target_id"]) for c in shown] == [("a", "b")]
