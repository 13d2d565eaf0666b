# appointment_model.py
"""
Data model for appointments drawn on the time grid.

A bound is a TimePoint: the snapped timestamp plus the pointer geometry
that produced it. The timestamp is always start-of-day + 15 min * quarter_index;
the pointer geometry is only used to decide which bound a drag is editing.
"""
import datetime
import uuid

from config import MINUTES_IN_DAY
from error_messages import InvalidAppointmentError


class BoundKind:
    LOWER = "lower"  # floor to the enclosing quarter
    UPPER = "upper"  # ceil to the enclosing quarter

    ALL = (LOWER, UPPER)


class TimePoint:
    __slots__ = ('timestamp', 'click_x', 'click_y', 'rect', 'quarter_span', 'quarter_index')

    def __init__(self, timestamp, click_x, click_y, rect, quarter_span, quarter_index):
        self.timestamp = timestamp
        self.click_x = click_x
        self.click_y = click_y
        self.rect = tuple(rect)
        self.quarter_span = quarter_span
        self.quarter_index = quarter_index

    def _key(self):
        return (self.timestamp, self.click_x, self.click_y, self.rect,
                self.quarter_span, self.quarter_index)

    def __eq__(self, other):
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"TimePoint({self.timestamp.isoformat()}, q={self.quarter_index}, y={self.click_y})"

    def minutes_since_midnight(self, day):
        """Minutes from the start of `day`; a bound at the next midnight gives 1440."""
        day_start = datetime.datetime.combine(day, datetime.time.min)
        return int((self.timestamp - day_start).total_seconds() // 60)

    def is_on_day(self, day):
        return self.timestamp.date() == day

    def is_end_of_day(self, day):
        """True when the point sits exactly on the midnight closing `day`."""
        next_midnight = datetime.datetime.combine(day + datetime.timedelta(days=1), datetime.time.min)
        return self.timestamp == next_midnight


class DraftAppointment:
    """The appointment being drawn. Either bound may be absent."""
    __slots__ = ('lower', 'upper')

    def __init__(self, lower=None, upper=None):
        self.lower = lower
        self.upper = upper

    def __eq__(self, other):
        if not isinstance(other, DraftAppointment):
            return NotImplemented
        return (self.lower, self.upper) == (other.lower, other.upper)

    def __repr__(self):
        return f"DraftAppointment(lower={self.lower!r}, upper={self.upper!r})"

    def with_bound(self, kind, point):
        if kind == BoundKind.LOWER:
            return DraftAppointment(point, self.upper)
        if kind == BoundKind.UPPER:
            return DraftAppointment(self.lower, point)
        raise ValueError(f"unknown bound kind: {kind}")

    def is_complete(self):
        return self.lower is not None and self.upper is not None

    def is_empty(self):
        return self.lower is None and self.upper is None

    def day(self):
        if self.lower is None:
            return None
        return self.lower.timestamp.date()

    def spans_single_day(self):
        """Both bounds on one day; an upper bound on the closing midnight counts."""
        if not self.is_complete():
            return False
        day = self.day()
        return self.upper.is_on_day(day) or self.upper.is_end_of_day(day)

    def is_well_formed(self):
        return (self.is_complete()
                and self.lower.timestamp < self.upper.timestamp
                and self.spans_single_day())


class LaneAssignment:
    __slots__ = ('lane_count', 'lane_index')

    def __init__(self, lane_count=0, lane_index=0):
        self.lane_count = lane_count
        self.lane_index = lane_index

    def __eq__(self, other):
        if not isinstance(other, LaneAssignment):
            return NotImplemented
        return (self.lane_count, self.lane_index) == (other.lane_count, other.lane_index)

    def __hash__(self):
        return hash((self.lane_count, self.lane_index))

    def __repr__(self):
        return f"LaneAssignment({self.lane_count}, {self.lane_index})"


NEUTRAL_LANES = LaneAssignment(0, 0)


class Appointment:
    """A confirmed, untitled appointment. Never mutated; lane changes produce a copy."""
    __slots__ = ('appointment_id', 'lower', 'upper', 'lanes')

    def __init__(self, lower, upper, appointment_id=None, lanes=None):
        self.appointment_id = appointment_id or uuid.uuid4().hex
        self.lower = lower
        self.upper = upper
        self.lanes = lanes if lanes is not None else NEUTRAL_LANES

    @classmethod
    def from_draft(cls, draft):
        if not draft.is_complete():
            raise InvalidAppointmentError.from_entry('INCOMPLETE_DRAFT')
        return cls(draft.lower, draft.upper)

    def __repr__(self):
        return (f"Appointment({self.start:%Y-%m-%d %H:%M}-{self.end:%H:%M}, "
                f"lanes={self.lanes.lane_count}/{self.lanes.lane_index})")

    @property
    def start(self):
        return self.lower.timestamp

    @property
    def end(self):
        return self.upper.timestamp

    @property
    def duration(self):
        return self.end - self.start

    def with_lanes(self, lane_count, lane_index):
        return Appointment(self.lower, self.upper, self.appointment_id,
                           LaneAssignment(lane_count, lane_index))

    def reset_lanes(self):
        return Appointment(self.lower, self.upper, self.appointment_id, NEUTRAL_LANES)

    def is_visible_on(self, day):
        """Drawn only on the day that holds both bounds."""
        if not self.lower.is_on_day(day):
            return False
        return self.upper.is_on_day(day) or self.upper.is_end_of_day(day)

    def minutes_span(self, day):
        return (self.lower.minutes_since_midnight(day),
                min(self.upper.minutes_since_midnight(day), MINUTES_IN_DAY))
