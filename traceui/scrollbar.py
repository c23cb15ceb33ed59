"""Scrollbar geometry: track and indicator sizing."""

from __future__ import annotations

import math
from dataclasses import dataclass


def range_is_scrollable(start: float, end: float) -> bool:
    """Report whether a viewport [start, end] within [0, 1] is smaller than the content."""
    return end - start < 1


def _round(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


@dataclass
class ScrollbarStyle:
    """Presentation of a scrollbar; lengths are in device-independent pixels."""

    minor_padding: int = 2
    major_min_len: int = 8
    minor_width: int = 10
    track_color: int = 0x99994CFF

    def width(self) -> int:
        """Return the minor-axis width, including track padding on both sides."""
        return self.minor_width + 2 * self.minor_padding

    def indicator_span(
        self, track_length: int, viewport_start: float, viewport_end: float
    ) -> tuple[int, int]:
        """Return (offset, length) of the indicator along a track of track_length."""
        view_start = _round(viewport_start * track_length)
        view_end = _round(viewport_end * track_length)
        length = max(view_end - view_start, self.major_min_len)
        if view_start + length > track_length:
            view_start = track_length - length
        return view_start, length