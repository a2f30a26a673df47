# SPDX-License-Identifier: MIT

from typing import Literal

ViewMode = Literal["hour", "day", "week", "month", "year"]

VIEW_MODES: tuple[ViewMode, ...] = ("hour", "day", "week", "month", "year")
