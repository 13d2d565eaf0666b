import sys
import logging

from logger_config import setup_logger, add_file_handler
setup_logger()
logger = logging.getLogger(__name__)

from PyQt6.QtWidgets import (QApplication, QWidget, QVBoxLayout, QHBoxLayout,
                             QPushButton, QStackedWidget, QComboBox, QLabel)
from PyQt6.QtCore import QEvent

from appointment_store import AppointmentStore
from config import DEFAULT_VIEW, DEFAULT_WINDOW_GEOMETRY, ERROR_LOG_FILE
from constants import AgendaText, Spacing, WindowSize, format_text
from custom_dialogs import CustomMessageBox
from error_messages import CalendarError, SettingsError, UnknownViewError
from navigation import (VIEWS, format_short_time, format_view_title, local_now, step_selected_day,
                        validate_view, week_number)
from planning_controller import PlanningController
from settings_manager import load_settings, save_settings_safe
from views.agenda_view import AgendaViewWidget, PlaceholderViewWidget


class MainWidget(QWidget):
    def __init__(self, settings):
        super().__init__()
        self.settings = settings
        self.store = AppointmentStore(self)
        self.controller = PlanningController(self.store, self)
        self.current_date = self.today()
        self.current_view = self._initial_view()

        self.initUI()

        self.controller.draft_changed.connect(self.update_planning_labels)

    def _initial_view(self):
        try:
            return validate_view(self.settings.get("default_view", DEFAULT_VIEW))
        except UnknownViewError as e:
            logger.warning("default_view setting ignored: %s", e)
            return DEFAULT_VIEW

    def initUI(self):
        self.setWindowTitle(AgendaText.APP_TITLE)
        geometry = self.settings.get("geometry", DEFAULT_WINDOW_GEOMETRY)
        self.setGeometry(*geometry)
        self.setMinimumSize(WindowSize.MIN_WIDTH, WindowSize.MIN_HEIGHT)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(Spacing.CONTAINER_MARGIN, Spacing.CONTAINER_MARGIN,
                                       Spacing.CONTAINER_MARGIN, Spacing.CONTAINER_MARGIN)

        header_layout = QHBoxLayout()
        header_layout.setSpacing(Spacing.LARGE)

        self.lower_bound_label = QLabel(AgendaText.NO_BOUND)
        self.lower_bound_label.setStyleSheet("color: #22C55E;")
        self.upper_bound_label = QLabel(AgendaText.NO_BOUND)
        self.upper_bound_label.setStyleSheet("color: #EF4444;")

        today_button = QPushButton(AgendaText.TODAY)
        today_button.clicked.connect(self.go_to_today)

        self.view_select = QComboBox()
        for view in VIEWS:
            self.view_select.addItem(AgendaText.VIEW_LABELS[view], view)
        self.view_select.setCurrentIndex(VIEWS.index(self.current_view))
        self.view_select.currentIndexChanged.connect(lambda index: self.change_view(VIEWS[index]))

        prev_button = QPushButton(AgendaText.PREVIOUS)
        next_button = QPushButton(AgendaText.NEXT)
        prev_button.setObjectName("nav_button")
        next_button.setObjectName("nav_button")
        prev_button.clicked.connect(lambda: self.handle_navigation("backward"))
        next_button.clicked.connect(lambda: self.handle_navigation("forward"))

        self.title_label = QLabel()
        self.title_label.setStyleSheet("font-size: 16pt;")
        self.week_badge = QLabel()
        self.week_badge.setStyleSheet("background-color: #E5E7EB; font-size: 8pt; padding: 2px;")

        header_layout.addWidget(self.lower_bound_label)
        header_layout.addWidget(self.upper_bound_label)
        header_layout.addWidget(today_button)
        header_layout.addWidget(self.view_select)
        header_layout.addWidget(prev_button)
        header_layout.addWidget(next_button)
        header_layout.addWidget(self.title_label)
        header_layout.addWidget(self.week_badge)
        header_layout.addStretch(1)
        main_layout.addLayout(header_layout)

        self.stacked_widget = QStackedWidget()
        main_layout.addWidget(self.stacked_widget)

        self.views = {
            "day": AgendaViewWidget(self, "day"),
            "week": AgendaViewWidget(self, "week"),
            "month": PlaceholderViewWidget(self, "month"),
            "year": PlaceholderViewWidget(self, "year"),
        }
        for view in VIEWS:
            self.stacked_widget.addWidget(self.views[view])

        self.change_view(self.current_view)

    def update_planning_labels(self, draft):
        self.lower_bound_label.setText(
            format_short_time(draft.lower.timestamp) if draft.lower else AgendaText.NO_BOUND)
        self.upper_bound_label.setText(
            format_short_time(draft.upper.timestamp) if draft.upper else AgendaText.NO_BOUND)

    def set_current_date(self, new_date):
        self.current_date = new_date
        for view in self.views.values():
            view.current_date = new_date
        self.refresh_current_view()

    def handle_navigation(self, direction):
        self.set_current_date(step_selected_day(self.current_date, self.current_view, direction))

    def today(self):
        return local_now(self.settings.get("user_timezone")).date()

    def go_to_today(self):
        self.set_current_date(self.today())

    def change_view(self, view):
        try:
            self.current_view = validate_view(view)
        except CalendarError as e:
            self.show_error_message(e)
            return
        self.controller.cancel()
        self.stacked_widget.setCurrentWidget(self.views[self.current_view])
        self.set_current_date(self.current_date)

    def refresh_current_view(self):
        self.title_label.setText(format_view_title(self.current_date, self.current_view))
        self.week_badge.setText(format_text(AgendaText.WEEK_BADGE, number=week_number(self.current_date)))
        current_widget = self.stacked_widget.currentWidget()
        if hasattr(current_widget, 'refresh'):
            current_widget.refresh()

    def show_error_message(self, error):
        logger.warning("%s", error)
        CustomMessageBox.for_error(error, self, settings=self.settings).exec()

    def changeEvent(self, event):
        super().changeEvent(event)
        # 창 밖에서 놓인 드래그가 DRAGGING에 남지 않도록
        if event.type() == QEvent.Type.ActivationChange and not self.isActiveWindow():
            self.controller.abort_gesture()

    def closeEvent(self, event):
        geometry = self.geometry()
        self.settings["geometry"] = [geometry.x(), geometry.y(), geometry.width(), geometry.height()]
        self.settings["default_view"] = self.current_view
        try:
            save_settings_safe(self.settings, preserve_keys=[])
        except SettingsError as e:
            logger.error("could not save settings: %s", e)
        super().closeEvent(event)


def main():
    add_file_handler(ERROR_LOG_FILE)

    settings = load_settings()
    app = QApplication(sys.argv)

    widget = MainWidget(settings)
    widget.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
