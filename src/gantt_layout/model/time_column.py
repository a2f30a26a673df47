# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class TimeColumn(TypedDict):
    date: pendulum.DateTime
    label: str
    x: float
    width: float
    primary_label: str
    secondary_label: str
    is_primary_start: bool
