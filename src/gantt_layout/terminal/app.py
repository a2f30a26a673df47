# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional, cast

import typer

from gantt_layout.chart import GanttChart
from gantt_layout.configuration import Options, load_options
from gantt_layout.model.view_mode import ViewMode
from gantt_layout.repository.chart import load_chart
from gantt_layout.terminal.parse import parse_view_mode
from gantt_layout.view.layout import axis_view, connectors_view, layout_view

app = typer.Typer(
    help="gantt-layout - Inspect the computed geometry of a timeline chart",
    no_args_is_help=True,
)

ChartPath = Annotated[
    Path,
    typer.Argument(
        exists=True, dir_okay=False, help="YAML chart snapshot to lay out"
    ),
]
OptionsPath = Annotated[
    Optional[Path],
    typer.Option(
        "--options",
        "-o",
        exists=True,
        dir_okay=False,
        help="YAML options file (defaults to the user config options.yaml)",
    ),
]
ViewModeOption = Annotated[
    Optional[str],
    typer.Option(
        "--view-mode",
        "-m",
        parser=parse_view_mode,
        help="Time scale: hour, day, week, month, or year",
    ),
]
GroupOption = Annotated[
    Optional[bool],
    typer.Option("--group/--no-group", "-g", help="Group tasks by project"),
]
LanesOption = Annotated[
    Optional[bool],
    typer.Option("--lanes/--no-lanes", "-l", help="Pack tasks into swimlanes"),
]
CollapseOption = Annotated[
    Optional[list[str]],
    typer.Option("--collapse", "-c", help="Project ids to collapse"),
]


def _build_chart(
    chart_path: Path,
    options_path: Optional[Path],
    view_mode: Optional[str] = None,
    group: Optional[bool] = None,
    lanes: Optional[bool] = None,
    collapse: Optional[list[str]] = None,
) -> GanttChart:
    try:
        snapshot = load_chart(chart_path)
        overrides = cast(
            Options, {**load_options(options_path), **snapshot["options"]}
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if view_mode is not None:
        overrides["view_mode"] = cast(ViewMode, view_mode)
    if group is not None:
        overrides["enable_project_grouping"] = group
    if lanes is not None:
        overrides["enable_swimlanes"] = lanes

    chart = GanttChart(
        snapshot["tasks"],
        snapshot["milestones"],
        snapshot["projects"],
        snapshot["swimlanes"],
        overrides,
    )
    for project_id in collapse or []:
        if chart.is_project_expanded(project_id):
            chart.toggle_project(project_id)
    return chart


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log layout passes to stderr"),
    ] = False,
) -> None:
    """
    gantt-layout - Inspect the computed geometry of a timeline chart

    Global options that apply to all commands.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command("axis")
def axis(
    chart_path: ChartPath,
    options_path: OptionsPath = None,
    view_mode: ViewModeOption = None,
) -> None:
    """Display the time columns of the chart's axis."""
    chart = _build_chart(chart_path, options_path, view_mode)
    axis_view(chart_path.name, chart.layout["time_columns"])


@app.command("layout")
def layout(
    chart_path: ChartPath,
    options_path: OptionsPath = None,
    view_mode: ViewModeOption = None,
    group: GroupOption = None,
    lanes: LanesOption = None,
    collapse: CollapseOption = None,
) -> None:
    """Display projects, swimlanes, tasks and milestones with their geometry."""
    chart = _build_chart(chart_path, options_path, view_mode, group, lanes, collapse)
    layout_view(chart_path.name, chart.layout)


@app.command("connectors")
def connectors(
    chart_path: ChartPath,
    options_path: OptionsPath = None,
    view_mode: ViewModeOption = None,
    group: GroupOption = None,
    lanes: LanesOption = None,
    collapse: CollapseOption = None,
) -> None:
    """Display the routed path of every dependency connector."""
    chart = _build_chart(chart_path, options_path, view_mode, group, lanes, collapse)
    connectors_view(chart_path.name, chart.connectors())


def run() -> None:
    app()
