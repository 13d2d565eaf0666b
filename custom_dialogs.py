import logging

from PyQt6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QWidget
from PyQt6.QtCore import Qt, QPoint

from constants import GeneralText, WindowSize
from error_messages import CalendarError, ErrorMessages

logger = logging.getLogger(__name__)


class BaseDialog(QDialog):
    def __init__(self, parent=None, settings=None, pos: QPoint = None):
        super().__init__(parent)
        self.settings = settings
        self.oldPos = None

        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.Dialog)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

        self.apply_opacity()
        if pos is not None:
            self.move(pos)

    def apply_opacity(self):
        if self.settings:
            main_opacity = self.settings.get("window_opacity", 0.95)
            dialog_opacity = main_opacity + (1 - main_opacity) * 0.85
            self.setWindowOpacity(dialog_opacity)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.oldPos = event.globalPosition().toPoint()

    def mouseMoveEvent(self, event):
        if self.oldPos and event.buttons() == Qt.MouseButton.LeftButton:
            delta = event.globalPosition().toPoint() - self.oldPos
            self.move(self.x() + delta.x(), self.y() + delta.y())
            self.oldPos = event.globalPosition().toPoint()

    def mouseReleaseEvent(self, event):
        self.oldPos = None


class CustomMessageBox(BaseDialog):
    def __init__(self, parent=None, title="Notice", text="", settings=None, pos=None, ok_only=False):
        super().__init__(parent, settings, pos)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumWidth(400)
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        background_widget = QWidget()
        background_widget.setObjectName("dialog_background")
        main_layout.addWidget(background_widget)
        content_layout = QVBoxLayout(background_widget)
        content_layout.setContentsMargins(20, 15, 20, 15)
        self.title_label = QLabel(title)
        self.title_label.setStyleSheet("font-weight: bold; font-size: 11pt;")
        content_layout.addWidget(self.title_label)
        self.text_label = QLabel(text)
        self.text_label.setWordWrap(True)
        self.text_label.setMinimumHeight(50)
        self.text_label.setStyleSheet("padding-top: 10px; padding-bottom: 10px;")
        content_layout.addWidget(self.text_label)
        button_layout = QHBoxLayout()
        button_layout.addStretch(1)
        self.yes_button = QPushButton(GeneralText.OK)
        self.yes_button.clicked.connect(self.accept)
        button_layout.addWidget(self.yes_button)
        self.no_button = QPushButton(GeneralText.CANCEL)
        self.no_button.clicked.connect(self.reject)
        button_layout.addWidget(self.no_button)

        if ok_only:
            self.no_button.setVisible(False)

        content_layout.addLayout(button_layout)

    @classmethod
    def for_error(cls, error, parent=None, settings=None, pos=None):
        text = str(error)
        suggestions = ErrorMessages.format_suggestions(getattr(error, 'suggestions', []))
        if suggestions:
            text = f"{text}\n\n{suggestions}"
        return cls(parent, title="Error", text=text, settings=settings, pos=pos, ok_only=True)


class AppointmentConfirmPopover(BaseDialog):
    """Save/Cancel popover anchored at the draft after the drag ends.

    Closing it any other way (Escape, click outside) cancels the draft.
    """

    def __init__(self, controller, parent=None, settings=None, pos=None):
        super().__init__(parent, settings, pos)
        self.controller = controller
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.Popup)
        self.setFixedWidth(WindowSize.POPOVER_WIDTH)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        background_widget = QWidget()
        background_widget.setObjectName("popover_background")
        main_layout.addWidget(background_widget)

        content_layout = QVBoxLayout(background_widget)
        content_layout.setContentsMargins(8, 8, 8, 8)
        content_layout.setSpacing(16)

        bounds_layout = QHBoxLayout()
        bounds_layout.setSpacing(8)
        formatted = controller.formatted_bounds()
        if formatted:
            date_text, lower_text, upper_text = formatted
            for text in (date_text, lower_text, "-", upper_text):
                label = QLabel(text)
                label.setStyleSheet("font-size: 10pt;")
                bounds_layout.addWidget(label)
        bounds_layout.addStretch(1)
        content_layout.addLayout(bounds_layout)

        button_layout = QHBoxLayout()
        button_layout.addStretch(1)
        self.cancel_button = QPushButton(GeneralText.CANCEL)
        self.cancel_button.clicked.connect(self.reject)
        self.save_button = QPushButton(GeneralText.SAVE)
        self.save_button.setDefault(True)
        self.save_button.setEnabled(controller.can_confirm())
        self.save_button.clicked.connect(self.save)
        button_layout.addWidget(self.cancel_button)
        button_layout.addWidget(self.save_button)
        content_layout.addLayout(button_layout)

        self.setStyleSheet("""
            QWidget#popover_background {
                background-color: #FFFFFF;
                border-radius: 4px;
            }
        """)
        self.rejected.connect(self.controller.cancel)

    def save(self):
        try:
            self.controller.confirm()
        except CalendarError as e:
            logger.warning("save rejected: %s", e)
            self.reject()
            CustomMessageBox.for_error(e, self.parentWidget(), self.settings).exec()
            return
        self.accept()
