# views/layout_calculator.py
import logging

from config import MINUTES_IN_DAY, APPOINTMENT_INSET_PX, APPOINTMENT_BASE_Z_ORDER

logger = logging.getLogger(__name__)


def _overlaps(candidate, placed):
    # Touching intervals (one ends where the other starts) do not overlap.
    return candidate.start < placed.end and candidate.end > placed.start


def pack(appointments):
    """Assign side-by-side lanes to overlapping appointments.

    Appointments are visited in the given order. Each joins the first group
    whose last-placed member it overlaps, otherwise it opens a new group.
    Every member of a group gets lane_count = group size and
    lane_index = its position in the group. Groups are rebuilt on every call,
    so unrelated groups may reuse the same lane indices.
    """
    groups = []

    for position, appointment in enumerate(appointments):
        placed = False
        for group in groups:
            last_in_group = appointments[group[-1]]
            if _overlaps(appointment, last_in_group):
                group.append(position)
                placed = True
                break
        if not placed:
            groups.append([position])

    lanes = [None] * len(appointments)
    for group in groups:
        for lane_index, position in enumerate(group):
            lanes[position] = (len(group), lane_index)

    return [appointment.with_lanes(*lanes[i]) for i, appointment in enumerate(appointments)]


def project(appointment, day):
    """Vertical position/height (percent of the day) and lane geometry (fraction of the column).

    Returns None when the appointment is not drawn on `day`.
    """
    if not appointment.is_visible_on(day):
        return None

    lower_minutes, upper_minutes = appointment.minutes_span(day)
    lane_count = appointment.lanes.lane_count or 1
    lane_index = appointment.lanes.lane_index if appointment.lanes.lane_count else 0

    return {
        'appointment': appointment,
        'top_percent': lower_minutes / MINUTES_IN_DAY * 100,
        'height_percent': (upper_minutes - lower_minutes) / MINUTES_IN_DAY * 100,
        'left_fraction': lane_index / lane_count,
        'width_fraction': 1 / lane_count,
        'inset_px': APPOINTMENT_INSET_PX,
        'z_order': APPOINTMENT_BASE_Z_ORDER + lane_count,
    }


def project_current_time(day, now):
    """Position of the now-indicator, or None when `now` is not on `day`."""
    if now.date() != day:
        return None
    minutes = now.hour * 60 + now.minute
    return {'top_percent': minutes / MINUTES_IN_DAY * 100}


def projection_to_rect(projection, column_rect):
    """Map a projection onto a (left, top, width, height) column in pixels."""
    col_x, col_y, col_width, col_height = column_rect
    x = col_x + projection['left_fraction'] * col_width
    y = col_y + projection['top_percent'] / 100 * col_height
    width = projection['width_fraction'] * col_width
    height = projection['height_percent'] / 100 * col_height - projection['inset_px']
    return (x, y, width, height)


class AgendaLayoutCalculator:
    """Per-column render entries for the visible days of a day or week view."""

    def __init__(self, appointments, visible_days):
        self.appointments = list(appointments)
        self.visible_days = list(visible_days)

    def calculate(self):
        positions = []
        for col_index, day in enumerate(self.visible_days):
            for appointment in self.appointments:
                projection = project(appointment, day)
                if projection is None:
                    continue
                projection['column'] = col_index
                projection['day'] = day
                positions.append(projection)

        # 레인 수가 많은 일정이 위에 그려지도록
        positions.sort(key=lambda p: p['z_order'])
        logger.debug("layout: %d appointments over %d days -> %d boxes",
                     len(self.appointments), len(self.visible_days), len(positions))
        return positions

    def calculate_current_time(self, now):
        for col_index, day in enumerate(self.visible_days):
            indicator = project_current_time(day, now)
            if indicator is not None:
                indicator['column'] = col_index
                return indicator
        return None
