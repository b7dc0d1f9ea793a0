"""Type aliases used across the profit share package."""

from __future__ import annotations

from typing import Union

ReportKey = str
RawValue = Union[str, int, float, None]
