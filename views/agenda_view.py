# views/agenda_view.py
import logging

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QScrollArea
from PyQt6.QtCore import Qt, QTimer, QRect, QRectF, QPoint
from PyQt6.QtGui import QPainter, QColor, QPen, QFont

from config import DEFAULT_START_DAY_OF_WEEK, HOURS_PER_DAY, TIMELINE_REFRESH_MS
from constants import AgendaColors, AgendaLayout, AgendaText
from custom_dialogs import AppointmentConfirmPopover
from navigation import format_clock_time, format_gmt_offset, hour_label, local_now, visible_days
from planning_controller import PlanningState
from settings_manager import read_hour_height
from .base_view import BaseViewWidget
from .layout_calculator import AgendaLayoutCalculator, projection_to_rect
from .quarter_grid import PointerSample, bound_offset
from .widgets import draw_appointment, draw_now_indicator

logger = logging.getLogger(__name__)

TIME_GUTTER_WIDTH = AgendaLayout.TIME_GUTTER_WIDTH
COLUMN_LEFT_PADDING = AgendaLayout.COLUMN_LEFT_PADDING


def calculate_column_positions(total_width, num_days):
    """x coordinates of the column edges, starting at the gutter."""
    positions = [TIME_GUTTER_WIDTH]
    grid_width = max(0, total_width - TIME_GUTTER_WIDTH)

    base_col_width = grid_width // num_days
    remainder = grid_width % num_days

    current_x = TIME_GUTTER_WIDTH
    for i in range(num_days):
        col_width = base_col_width + (1 if i < remainder else 0)
        current_x += col_width
        positions.append(current_x)

    return positions


class HeaderCanvas(QWidget):
    """GMT offset label and one day heading per column."""

    def __init__(self, parent_view):
        super().__init__(parent_view)
        self.parent_view = parent_view
        self.column_x_coords = []
        self.days = []
        self.setFixedHeight(AgendaLayout.HEADER_HEIGHT)

    def set_data(self, column_x_coords, days):
        self.column_x_coords = column_x_coords
        self.days = days
        self.update()

    def paintEvent(self, event):
        if not self.column_x_coords or not self.days:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        today = self.parent_view.now().date()

        small_font = QFont(painter.font())
        small_font.setPointSize(7)
        painter.setFont(small_font)
        painter.setPen(QColor(AgendaColors.LABEL))
        gutter_rect = QRectF(0, 0, TIME_GUTTER_WIDTH - 8, self.height() - 4)
        painter.drawText(gutter_rect, Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignBottom,
                         format_gmt_offset(self.parent_view.now()))

        badge = AgendaLayout.DAY_BADGE_DIAMETER
        for i, day in enumerate(self.days):
            x = self.column_x_coords[i]
            width = self.column_x_coords[i + 1] - x
            is_today = day == today

            painter.setFont(small_font)
            painter.setPen(QColor(AgendaColors.TODAY if is_today else AgendaColors.LABEL))
            painter.drawText(QRectF(x, 6, width, 16), Qt.AlignmentFlag.AlignCenter,
                             f"{day:%a}.".upper())

            badge_rect = QRectF(x + (width - badge) / 2, 24, badge, badge)
            if is_today:
                painter.setPen(Qt.PenStyle.NoPen)
                painter.setBrush(QColor(AgendaColors.TODAY))
                painter.drawEllipse(badge_rect)

            big_font = QFont(painter.font())
            big_font.setPointSize(16)
            painter.setFont(big_font)
            painter.setPen(QColor("#FFFFFF" if is_today else AgendaColors.HEADING))
            painter.drawText(badge_rect, Qt.AlignmentFlag.AlignCenter, str(day.day))

            painter.setPen(QPen(QColor(AgendaColors.GRID_LINE), 1))
            painter.drawLine(int(x), self.height() - 20, int(x), self.height())


class TimeGridCanvas(QWidget):
    """Hour grid with one column per visible day; turns mouse input into planning gestures."""

    def __init__(self, parent_view):
        super().__init__(parent_view)
        self.parent_view = parent_view
        self.controller = parent_view.controller
        self.column_x_coords = []
        self.days = []
        self.event_positions = []
        self._gesture_column = None
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
        self.setFixedHeight(HOURS_PER_DAY * self.parent_view.hour_height)

    def set_data(self, positions, column_x_coords, days):
        self.event_positions = positions
        self.column_x_coords = column_x_coords
        self.days = days
        self.update()

    def column_rect(self, col_index):
        x = self.column_x_coords[col_index] + COLUMN_LEFT_PADDING
        width = self.column_x_coords[col_index + 1] - x
        return (x, 0, width, self.height())

    def column_at(self, x):
        for i in range(len(self.column_x_coords) - 1):
            left = self.column_x_coords[i] + COLUMN_LEFT_PADDING
            if left <= x < self.column_x_coords[i + 1]:
                return i
        return None

    def _sample(self, event, col_index):
        pos = event.position()
        return PointerSample(pos.x(), pos.y(), self.column_rect(col_index))

    # --- 마우스 제스처 ---
    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        col_index = self.column_at(event.position().x())
        if col_index is None:
            return
        self._gesture_column = col_index
        self.controller.pointer_down(self._sample(event, col_index), self.days[col_index])

    def mouseMoveEvent(self, event):
        super().mouseMoveEvent(event)
        if self._gesture_column is None:
            return
        col_index = self._gesture_column
        self.controller.pointer_move(self._sample(event, col_index), self.days[col_index])

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton or self._gesture_column is None:
            super().mouseReleaseEvent(event)
            return
        col_index = self._gesture_column
        self._gesture_column = None
        self.controller.pointer_up(self._sample(event, col_index), self.days[col_index])

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Escape:
            self._gesture_column = None
            self.controller.cancel()
            return
        super().keyPressEvent(event)

    def focusOutEvent(self, event):
        super().focusOutEvent(event)
        if self._gesture_column is not None:
            self._gesture_column = None
            self.controller.abort_gesture()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.parent_view.redraw_events_with_current_data()

    # --- 그리기 ---
    def paintEvent(self, event):
        if not self.column_x_coords:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        self._draw_time_grid(painter)
        self._draw_appointments(painter)
        self._draw_draft(painter)
        self._draw_now(painter)

    def _draw_time_grid(self, painter):
        painter.save()
        hour_height = self.parent_view.hour_height

        painter.setPen(QPen(QColor(AgendaColors.GRID_LINE), 1))
        for hour in range(HOURS_PER_DAY + 1):
            y = hour * hour_height
            painter.drawLine(TIME_GUTTER_WIDTH, y, self.width(), y)
        for x in self.column_x_coords:
            painter.drawLine(int(x), 0, int(x), self.height())

        small_font = QFont(painter.font())
        small_font.setPointSize(7)
        painter.setFont(small_font)
        painter.setPen(QColor(AgendaColors.LABEL))
        for hour in range(HOURS_PER_DAY + 1):
            text = hour_label(hour)
            if not text:
                continue
            rect = QRect(0, hour * hour_height - 8, TIME_GUTTER_WIDTH - 6, 16)
            painter.drawText(rect, Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter, text)
        painter.restore()

    def _draw_appointments(self, painter):
        for pos_info in self.event_positions:
            appointment = pos_info['appointment']
            x, y, width, height = projection_to_rect(pos_info, self.column_rect(pos_info['column']))
            time_text = (f"{format_clock_time(appointment.start)} {AgendaText.RANGE_SEPARATOR} "
                         f"{format_clock_time(appointment.end)}")
            draw_appointment(painter, QRectF(x, y, width, max(0.0, height)), time_text)

    def _draw_draft(self, painter):
        draft = self.controller.draft
        if draft.lower is None:
            return
        day = draft.day()
        if day not in self.days:
            return

        col_x, col_y, col_width, _ = self.column_rect(self.days.index(day))
        top = col_y + bound_offset(draft.lower)
        bottom = col_y + bound_offset(draft.upper) if draft.upper is not None else top
        time_text = format_clock_time(draft.lower.timestamp)
        if draft.upper is not None:
            time_text += f" {AgendaText.RANGE_SEPARATOR} {format_clock_time(draft.upper.timestamp)}"

        rect = QRectF(col_x, top, col_width, max(0.0, bottom - top - 2))
        draw_appointment(painter, rect, time_text, bordered=False)

    def _draw_now(self, painter):
        now = self.parent_view.now().replace(tzinfo=None)
        calculator = AgendaLayoutCalculator([], self.days)
        indicator = calculator.calculate_current_time(now)
        if indicator is None:
            return
        col_x = self.column_x_coords[indicator['column']]
        width = self.column_x_coords[indicator['column'] + 1] - col_x
        y = indicator['top_percent'] / 100 * self.height()
        draw_now_indicator(painter, col_x, y, width)


class AgendaViewWidget(BaseViewWidget):
    """Day (one column) or week (seven columns) agenda."""

    def __init__(self, main_widget, mode="day"):
        self.hour_height = read_hour_height(main_widget.settings)
        super().__init__(main_widget)
        self.mode = mode
        self.popover = None

        self.initUI()

        self.timeline_timer = QTimer(self)
        self.timeline_timer.setInterval(TIMELINE_REFRESH_MS)
        self.timeline_timer.timeout.connect(self.time_grid_canvas.update)
        self.timeline_timer.start()

        self.controller.draft_changed.connect(self.on_draft_changed)
        self.controller.confirmation_requested.connect(self.open_confirmation_popover)

    def initUI(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.header_canvas = HeaderCanvas(self)
        main_layout.addWidget(self.header_canvas)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setObjectName("agenda_scroll_area")
        main_layout.addWidget(self.scroll_area)

        self.time_grid_canvas = TimeGridCanvas(self)
        self.scroll_area.setWidget(self.time_grid_canvas)

    def now(self):
        return local_now(self.main_widget.settings.get("user_timezone"))

    def visible_days(self):
        start_day = self.main_widget.settings.get("start_day_of_week", DEFAULT_START_DAY_OF_WEEK)
        return visible_days(self.current_date, self.mode, start_day)

    def on_draft_changed(self, draft):
        self.time_grid_canvas.update()

    def open_confirmation_popover(self, draft):
        if not self.isVisible() or self.controller.state != PlanningState.AWAITING_CONFIRMATION:
            return
        days = self.time_grid_canvas.days
        if draft.day() not in days:
            return

        col_x, _, col_width, _ = self.time_grid_canvas.column_rect(days.index(draft.day()))
        anchor = QPoint(int(col_x + col_width / 2), int(bound_offset(draft.lower)))
        pos = self.time_grid_canvas.mapToGlobal(anchor)

        self.popover = AppointmentConfirmPopover(self.controller, self, settings=self.main_widget.settings, pos=pos)
        self.popover.finished.connect(self._on_popover_closed)
        self.popover.show()

    def _on_popover_closed(self, result):
        self.popover = None
        self.time_grid_canvas.update()

    def refresh(self):
        self.redraw_events_with_current_data()

        today = self.now().date()
        if today in self.visible_days():
            now = self.now()
            target_y = now.hour * self.hour_height + (now.minute / 60.0 * self.hour_height)
            scroll_offset = self.scroll_area.height() * 0.3
            self.scroll_area.verticalScrollBar().setValue(int(target_y - scroll_offset))

    def redraw_events_with_current_data(self):
        days = self.visible_days()
        column_xs = calculate_column_positions(self.time_grid_canvas.width(), len(days))

        calculator = AgendaLayoutCalculator(self.store.appointments(), days)
        positions = calculator.calculate()

        self.header_canvas.set_data(column_xs, days)
        self.time_grid_canvas.set_data(positions, column_xs, days)

class PlaceholderViewWidget(BaseViewWidget):
    """Blank month/year view."""

    def __init__(self, main_widget, mode):
        super().__init__(main_widget)
        self.mode = mode
        color = AgendaColors.MONTH_PLACEHOLDER if mode == "month" else AgendaColors.YEAR_PLACEHOLDER
        self.setAutoFillBackground(True)
        self.setStyleSheet(f"background-color: {color};")

    def refresh(self):
        self.update()

    def redraw_events_with_current_data(self):
        pass
