# SPDX-License-Identifier: MIT

from gantt_layout.chart import GanttChart
from gantt_layout.configuration import DEFAULT_OPTIONS, merge_options
from gantt_layout.service.layout import compute_layout
from gantt_layout.state import ProjectState
from gantt_layout.terminal.app import run

__all__ = [
    "DEFAULT_OPTIONS",
    "GanttChart",
    "ProjectState",
    "compute_layout",
    "main",
    "merge_options",
]


def main() -> None:
    run()


if __name__ == "__main__":
    main()
