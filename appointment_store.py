# appointment_store.py
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from views.layout_calculator import pack

logger = logging.getLogger(__name__)


def _order_key(appointment):
    # 시작 시간 오름차순, 같으면 긴 일정 먼저
    return (appointment.start, -appointment.duration)


class AppointmentStore(QObject):
    """Confirmed appointments of the session, kept in display order.

    Every insert re-packs the whole collection, so lane assignments are
    never partial or stale.
    """
    data_updated = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._appointments = []

    def __len__(self):
        return len(self._appointments)

    def appointments(self):
        return tuple(self._appointments)

    def appointments_for_day(self, day):
        return [a for a in self._appointments if a.is_visible_on(day)]

    def insertion_index(self, appointment):
        """Index before the first member that sorts strictly after `appointment`."""
        new_key = _order_key(appointment)
        for i, existing in enumerate(self._appointments):
            if _order_key(existing) > new_key:
                return i
        return len(self._appointments)

    def insert(self, appointment):
        index = self.insertion_index(appointment)

        members = [a.reset_lanes() for a in self._appointments]
        members.insert(index, appointment.reset_lanes())
        self._appointments = pack(members)

        logger.debug("inserted %r at %d (%d total)", appointment, index, len(self._appointments))
        self.data_updated.emit()
        return self._appointments[index]
