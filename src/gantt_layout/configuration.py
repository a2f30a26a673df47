# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional, TypedDict, cast

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from gantt_layout.model.view_mode import ViewMode

logger = logging.getLogger(__name__)

APP_NAME = "gantt-layout"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_OPTIONS_PATH = CONFIG_PATH / "options.yaml"


class GanttOptions(TypedDict):
    view_mode: ViewMode
    bar_height: float
    column_width: float
    bar_padding: float
    enable_project_grouping: bool
    enable_swimlanes: bool
    project_header_height: float
    milestone_size: float
    show_grid: bool
    show_today: bool
    show_dependencies: bool
    show_milestone_labels: bool
    show_task_name_in_bar: bool
    show_project_summary: bool
    hide_orphan_dependencies: bool
    connector_offset: float
    locale: str


class Options(TypedDict, total=False):
    """Caller overrides; any key left out falls back to DEFAULT_OPTIONS."""

    view_mode: ViewMode
    bar_height: float
    column_width: float
    bar_padding: float
    enable_project_grouping: bool
    enable_swimlanes: bool
    project_header_height: float
    milestone_size: float
    show_grid: bool
    show_today: bool
    show_dependencies: bool
    show_milestone_labels: bool
    show_task_name_in_bar: bool
    show_project_summary: bool
    hide_orphan_dependencies: bool
    connector_offset: float
    locale: str


DEFAULT_OPTIONS: GanttOptions = {
    "view_mode": "day",
    "bar_height": 30,
    "column_width": 40,
    "bar_padding": 4,
    "enable_project_grouping": False,
    "enable_swimlanes": False,
    "project_header_height": 35,
    "milestone_size": 16,
    "show_grid": True,
    "show_today": True,
    "show_dependencies": True,
    "show_milestone_labels": True,
    "show_task_name_in_bar": True,
    "show_project_summary": False,
    "hide_orphan_dependencies": True,
    "connector_offset": 20,
    "locale": "en",
}


def merge_options(overrides: Optional[Options] = None) -> GanttOptions:
    """
    Merge caller overrides on top of DEFAULT_OPTIONS.

    Keys set to None count as absent. Unknown keys are dropped.
    """
    merged: dict[str, Any] = dict(DEFAULT_OPTIONS)
    if overrides is None:
        return cast(GanttOptions, merged)

    for key, value in overrides.items():
        if key not in DEFAULT_OPTIONS:
            logger.debug("Ignoring unknown option %r", key)
            continue
        if value is None:
            continue
        merged[key] = value

    return cast(GanttOptions, merged)


def load_options(path: Optional[Path] = None) -> Options:
    """
    Load option overrides from a YAML mapping.

    Without an explicit path the user config file is read, and a missing
    user config file simply means no overrides.
    """
    if path is None:
        path = APP_OPTIONS_PATH
        if not path.exists():
            return {}

    try:
        raw_options = load(path.read_text(), Loader=Loader)
    except YAMLError as e:
        raise ValueError(f"Invalid YAML in options file {path}: {e}") from e
    if raw_options is None:
        return {}
    if not isinstance(raw_options, dict):
        raise ValueError(f"Options file {path} must contain a mapping")

    return cast(Options, raw_options)
