# SPDX-License-Identifier: MIT

from typing import Optional, cast

import typer

from gantt_layout.model.view_mode import VIEW_MODES, ViewMode


def parse_view_mode(view_mode_param: Optional[str]) -> Optional[ViewMode]:
    if view_mode_param is None:
        return None

    view_mode = view_mode_param.strip().lower()
    if view_mode not in VIEW_MODES:
        raise typer.BadParameter(
            f"View mode must be one of {', '.join(VIEW_MODES)}, got {view_mode_param}"
        )
    return cast(ViewMode, view_mode)
