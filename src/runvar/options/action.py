from __future__ import annotations

from enum import Enum


class Action(Enum):
    VARIANCE = "variance"
    STDDEV = "stddev"
