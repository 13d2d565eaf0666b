# navigation.py
"""
Selected-day arithmetic and labels for the header and the agenda grid.
"""
import datetime
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.relativedelta import relativedelta

from config import DEFAULT_START_DAY_OF_WEEK, HOURS_PER_DAY
from error_messages import UnknownViewError

logger = logging.getLogger(__name__)

VIEWS = ("day", "week", "month", "year")

_STEPS = {
    "day": relativedelta(days=1),
    "week": relativedelta(weeks=1),
    "month": relativedelta(months=1),
    "year": relativedelta(years=1),
}


def validate_view(view):
    if view not in VIEWS:
        raise UnknownViewError.from_entry('UNKNOWN_VIEW', view)
    return view


def step_selected_day(day, view, direction):
    """Move `day` one view unit forward ("forward") or backward ("backward")."""
    step = _STEPS[validate_view(view)]
    if direction == "forward":
        return day + step
    if direction == "backward":
        return day - step
    raise ValueError(f"unknown direction: {direction}")


def start_of_week(day, start_day_of_week=DEFAULT_START_DAY_OF_WEEK):
    """First day of the week holding `day`. start_day_of_week uses date.weekday() numbering."""
    return day - datetime.timedelta(days=(day.weekday() - start_day_of_week) % 7)


def visible_days(day, view, start_day_of_week=DEFAULT_START_DAY_OF_WEEK):
    """Columns of the time grid: one for the day view, seven for the week view."""
    validate_view(view)
    if view == "day":
        return [day]
    if view == "week":
        first = start_of_week(day, start_day_of_week)
        return [first + datetime.timedelta(days=i) for i in range(7)]
    return []


def _first_week_start(year):
    # 1주차 = 1월 7일을 포함하는 (일요일 시작) 주
    return start_of_week(datetime.date(year, 1, 7), 6)


def week_number(day):
    week_one = _first_week_start(day.year)
    if day < week_one:
        week_one = _first_week_start(day.year - 1)
    return (start_of_week(day, 6) - week_one).days // 7 + 1


def format_long_date(moment):
    return f"{moment:%B} {moment.day}, {moment.year}"


def format_short_time(moment):
    """24-hour 'H:mm'."""
    return f"{moment.hour}:{moment.minute:02d}"


def format_clock_time(moment):
    """12-hour 'h:mm'."""
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment.minute:02d}"


def format_view_title(day, view):
    validate_view(view)
    if view == "day":
        return f"{day.day} {day:%B} {day.year}"
    if view in ("week", "month"):
        return f"{day:%B} {day.year}"
    return f"{day.year}"


def hour_label(index):
    """Gutter label of hour row `index` (0-24); midnight rows stay blank."""
    if index <= 0 or index >= HOURS_PER_DAY:
        return ""
    suffix = "AM" if index < 12 else "PM"
    hour = index % 12 or 12
    return f"{hour} {suffix}"


def resolve_timezone(name):
    """ZoneInfo for `name`, or None when unset or unknown."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("unknown timezone %r, using the local clock", name)
        return None


def local_now(timezone_name=None):
    """Aware current time in `timezone_name`, else in the system local zone."""
    user_tz = resolve_timezone(timezone_name)
    if user_tz is None:
        return datetime.datetime.now().astimezone()
    return datetime.datetime.now(user_tz)


def format_gmt_offset(moment):
    """Short offset label such as 'GMT+9' or 'GMT-3:30'."""
    offset = moment.utcoffset()
    if offset is None:
        return "GMT"
    total_minutes = int(offset.total_seconds() // 60)
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    if minutes:
        return f"GMT{sign}{hours}:{minutes:02d}"
    return f"GMT{sign}{hours}"
