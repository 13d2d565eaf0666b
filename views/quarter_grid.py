# views/quarter_grid.py
"""Pointer position -> snapped quarter-hour TimePoint for a day column."""
import datetime
import math

from appointment_model import BoundKind, TimePoint
from config import QUARTERS_PER_DAY, QUARTER_MINUTES


class PointerSample:
    """A pointer event in widget coordinates and the day column it fell in.

    rect is (left, top, width, height) of the column.
    """
    __slots__ = ('client_x', 'client_y', 'rect')

    def __init__(self, client_x, client_y, rect):
        self.client_x = client_x
        self.client_y = client_y
        self.rect = tuple(rect)

    def __repr__(self):
        return f"PointerSample({self.client_x}, {self.client_y}, rect={self.rect})"

    def local_y(self):
        return self.client_y - self.rect[1]

    def local_x(self):
        return self.client_x - self.rect[0]


def quarter_span(rect_height):
    return rect_height / QUARTERS_PER_DAY


def resolve(sample, day, bound_kind):
    """Snap `sample` to a quarter of `day`.

    No clamping: a pointer above the column gives a negative quarter and a
    timestamp before midnight.
    """
    x = sample.local_x()
    y = sample.local_y()
    span = quarter_span(sample.rect[3])

    if bound_kind == BoundKind.LOWER:
        quarter_index = math.floor(y / span)
    elif bound_kind == BoundKind.UPPER:
        quarter_index = math.ceil(y / span)
    else:
        raise ValueError(f"unknown bound kind: {bound_kind}")

    day_start = datetime.datetime.combine(day, datetime.time.min)
    timestamp = day_start + datetime.timedelta(minutes=QUARTER_MINUTES * quarter_index)

    return TimePoint(timestamp, x, y, sample.rect, span, quarter_index)


def bound_offset(point):
    """Pixel offset of a bound from the top of its column."""
    return point.quarter_index * point.quarter_span
