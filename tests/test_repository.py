from pathlib import Path

import pendulum
import pytest

from gantt_layout.repository.chart import load_chart

CHART_YAML = """\
options:
  view_mode: week
  enable_project_grouping: true
projects:
  - id: web
    name: Website
swimlanes:
  - id: 1
    name: Design
tasks:
  - id: a
    name: Wireframes
    start: 2024-01-01
    end: 2024-01-03 12:00:00
    project_id: web
    swimlane_id: 1
  - id: b
    start: "2024-01-04T09:00:00+02:00"
    end: "2024-01-06"
    progress: 40
    dependencies: [a]
    color: "#ff0000"
milestones:
  - id: launch
    name: Launch
    date: 2024-01-10
    dependencies: [b]
"""


@pytest.fixture
def chart_path(tmp_path: Path) -> Path:
    path = tmp_path / "chart.yaml"
    path.write_text(CHART_YAML)
    return path


def test_load_chart_reads_every_collection(chart_path: Path) -> None:
    snapshot = load_chart(chart_path)

    assert [t["id"] for t in snapshot["tasks"]] == ["a", "b"]
    assert [m["id"] for m in snapshot["milestones"]] == ["launch"]
    assert snapshot["projects"] == [{"id": "web", "name": "Website"}]
    assert snapshot["swimlanes"] == [{"id": "1", "name": "Design"}]
    assert snapshot["options"] == {"view_mode": "week", "enable_project_grouping": True}


def test_load_chart_converts_dates(chart_path: Path) -> None:
    task_a, task_b = load_chart(chart_path)["tasks"]

    assert task_a["start"] == pendulum.datetime(2024, 1, 1)
    assert task_a["end"] == pendulum.datetime(2024, 1, 3, 12)
    assert task_b["start"] == pendulum.datetime(2024, 1, 4, 7)
    assert task_b["end"] == pendulum.datetime(2024, 1, 6)
    assert isinstance(task_b["start"], pendulum.DateTime)


def test_load_chart_fills_task_defaults(chart_path: Path) -> None:
    task_a, task_b = load_chart(chart_path)["tasks"]
    milestone = load_chart(chart_path)["milestones"][0]

    assert task_a["name"] == "Wireframes"
    assert task_a["progress"] == 0
    assert task_a["swimlane_id"] == "1"
    assert task_a["dependencies"] == []
    assert task_b["name"] == "b"
    assert task_b["progress"] == 40
    assert task_b["project_id"] is None
    assert task_b["dependencies"] == ["a"]
    assert task_b["color"] == "#ff0000"
    assert milestone["date"] == pendulum.datetime(2024, 1, 10)
    assert milestone["dependencies"] == ["b"]


def test_missing_collections_are_empty(tmp_path: Path) -> None:
    path = tmp_path / "chart.yaml"
    path.write_text("tasks:\n  - {id: a, start: 2024-01-01, end: 2024-01-02}\n")

    snapshot = load_chart(path)

    assert len(snapshot["tasks"]) == 1
    assert snapshot["milestones"] == []
    assert snapshot["projects"] == []
    assert snapshot["swimlanes"] == []
    assert snapshot["options"] == {}


def test_empty_file_is_an_empty_chart(tmp_path: Path) -> None:
    path = tmp_path / "chart.yaml"
    path.write_text("")

    assert load_chart(path)["tasks"] == []


@pytest.mark.parametrize(
    "content",
    [
        "- a\n- b\n",
        "tasks:\n  - {id: a, start: 2024-01-01}\n",
        "tasks:\n  - 3\n",
        "tasks:\n  - {id: a, start: 2024-01-01, end: 12}\n",
        "tasks: [\n  - {id: a\n",
        "options: [1, 2]\ntasks: []\n",
        "options: week\n",
    ],
)
def test_malformed_chart_is_rejected(tmp_path: Path, content: str) -> None:
    path = tmp_path / "chart.yaml"
    path.write_text(content)

    with pytest.raises(ValueError):
        load_chart(path)


def test_null_options_are_empty(tmp_path: Path) -> None:
    path = tmp_path / "chart.yaml"
    path.write_text("options:\ntasks: []\n")

    assert load_chart(path)["options"] == {}
