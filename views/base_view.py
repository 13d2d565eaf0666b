# views/base_view.py
from PyQt6.QtWidgets import QWidget


class BaseViewWidget(QWidget):
    def __init__(self, main_widget):
        super().__init__()
        self.main_widget = main_widget
        self.store = main_widget.store
        self.controller = main_widget.controller
        self.current_date = main_widget.current_date

        self.store.data_updated.connect(self.on_data_updated)

    def on_data_updated(self):
        self.redraw_events_with_current_data()

    def redraw_events_with_current_data(self):
        raise NotImplementedError("This method must be implemented by subclasses.")

    def refresh(self):
        raise NotImplementedError("This method must be implemented by subclasses.")
