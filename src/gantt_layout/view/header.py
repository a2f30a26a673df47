# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding


def header(chart_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the chart being inspected.

    Args:
        chart_name: Name of the chart file
        sub_header: Optional sub-header text to display
    """
    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    chart_name = f"[plum1]{chart_name}[/plum1]"

    print(Padding("[dark_orange]gantt-layout[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(chart_name, (0, 1)))
