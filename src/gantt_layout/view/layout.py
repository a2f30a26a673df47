# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from gantt_layout.model.connector import Connector
from gantt_layout.model.layout import GanttLayout
from gantt_layout.model.time_column import TimeColumn
from gantt_layout.view.header import header


def _number(value: Optional[float]) -> str:
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def axis_view(chart_name: str, time_columns: list[TimeColumn]) -> None:
    header(chart_name, "axis")

    axis_table = Table(box=box.SIMPLE)
    axis_table.add_column("date")
    axis_table.add_column("label")
    axis_table.add_column("primary")
    axis_table.add_column("secondary")
    axis_table.add_column("x", justify="right")
    axis_table.add_column("width", justify="right")

    for column in time_columns:
        date_str = column["date"].format("YYYY-MM-DD HH:mm")
        if column["is_primary_start"]:
            date_str = f"[bold]{date_str}[/bold]"
        axis_table.add_row(
            date_str,
            column["label"],
            column["primary_label"],
            column["secondary_label"],
            _number(column["x"]),
            _number(column["width"]),
        )

    console = Console()
    console.print(axis_table)


def layout_view(chart_name: str, layout: GanttLayout) -> None:
    header(chart_name, "layout")
    console = Console()

    console.print(
        f"\n[bold]{layout['chart_start'].format('YYYY-MM-DD HH:mm')}[/bold] to "
        f"[bold]{layout['chart_end'].format('YYYY-MM-DD HH:mm')}[/bold] "
        f"({len(layout['time_columns'])} columns, "
        f"{_number(layout['chart_width'])} x {_number(layout['chart_height'])})\n"
    )

    if layout["projects"]:
        projects_table = Table(title="projects", box=box.SIMPLE)
        projects_table.add_column("id")
        projects_table.add_column("name")
        projects_table.add_column("expanded")
        projects_table.add_column("tasks", justify="right")
        projects_table.add_column("y", justify="right")
        projects_table.add_column("height", justify="right")
        projects_table.add_column("x", justify="right")
        projects_table.add_column("width", justify="right")
        for project in layout["projects"]:
            projects_table.add_row(
                project["id"],
                project["name"],
                "✓" if project["is_expanded"] else "✗",
                str(project["task_count"]),
                _number(project["y"]),
                _number(project["height"]),
                _number(project["x"]),
                _number(project["width"]),
            )
        console.print(projects_table)

    if layout["swimlanes"]:
        swimlanes_table = Table(title="swimlanes", box=box.SIMPLE)
        swimlanes_table.add_column("id")
        swimlanes_table.add_column("name")
        swimlanes_table.add_column("rows", justify="right")
        swimlanes_table.add_column("y", justify="right")
        swimlanes_table.add_column("height", justify="right")
        for swimlane in layout["swimlanes"]:
            swimlanes_table.add_row(
                swimlane["id"],
                swimlane["name"],
                str(swimlane["row_count"]),
                _number(swimlane["y"]),
                _number(swimlane["height"]),
            )
        console.print(swimlanes_table)

    tasks_table = Table(title="tasks", box=box.SIMPLE)
    tasks_table.add_column("id")
    tasks_table.add_column("name")
    tasks_table.add_column("x", justify="right")
    tasks_table.add_column("y", justify="right")
    tasks_table.add_column("width", justify="right")
    tasks_table.add_column("row", justify="right")
    for task in layout["tasks"]:
        style = "" if task["is_visible"] else "bright_black"
        tasks_table.add_row(
            task["id"],
            task["name"],
            _number(task["x"]),
            _number(task["y"]),
            _number(task["width"]),
            "" if task["row"] is None else str(task["row"]),
            style=style,
        )
    console.print(tasks_table)

    if layout["milestones"]:
        milestones_table = Table(title="milestones", box=box.SIMPLE)
        milestones_table.add_column("id")
        milestones_table.add_column("name")
        milestones_table.add_column("x", justify="right")
        milestones_table.add_column("y", justify="right")
        for milestone in layout["milestones"]:
            style = "" if milestone["is_visible"] else "bright_black"
            milestones_table.add_row(
                milestone["id"],
                milestone["name"],
                _number(milestone["x"]),
                _number(milestone["y"]),
                style=style,
            )
        console.print(milestones_table)


def connectors_view(chart_name: str, connectors: list[Connector]) -> None:
    header(chart_name, "connectors")

    console = Console()
    if not connectors:
        console.print("\n[dim]No dependency connectors to display[/dim]\n")
        return

    connectors_table = Table(box=box.SIMPLE)
    connectors_table.add_column("from")
    connectors_table.add_column("to")
    connectors_table.add_column("path")
    for connector in connectors:
        connectors_table.add_row(
            connector["source_id"], connector["target_id"], connector["path"]
        )
    console.print(connectors_table)
