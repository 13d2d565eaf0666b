# planning_controller.py
"""
Drag-to-create state machine.

    IDLE --pointer_down--> DRAGGING --pointer_up--> AWAITING_CONFIRMATION
      ^                       |                          |
      +-------cancel----------+----cancel / confirm------+

One controller owns the single draft of the process; views pass their
pointer events to it and redraw on draft_changed.
"""
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from appointment_model import Appointment, BoundKind, DraftAppointment
from error_messages import InvalidAppointmentError
from navigation import format_long_date, format_short_time
from views.quarter_grid import resolve

logger = logging.getLogger(__name__)


class PlanningState:
    IDLE = "idle"
    DRAGGING = "dragging"
    AWAITING_CONFIRMATION = "awaiting_confirmation"


class PlanningController(QObject):
    draft_changed = pyqtSignal(object)
    state_changed = pyqtSignal(str)
    confirmation_requested = pyqtSignal(object)
    appointment_created = pyqtSignal(object)

    def __init__(self, store, parent=None):
        super().__init__(parent)
        self.store = store
        self.state = PlanningState.IDLE
        self.draft = DraftAppointment()

    def is_planning(self):
        return self.state == PlanningState.DRAGGING

    def _set_state(self, state):
        if state != self.state:
            logger.debug("planning: %s -> %s", self.state, state)
            self.state = state
            self.state_changed.emit(state)

    def _set_draft(self, draft):
        self.draft = draft
        self.draft_changed.emit(draft)

    def _dragged_bound_kind(self, sample):
        # 포인터가 하한 위로 올라가면 하한을 다시 잡는다
        lower = self.draft.lower
        if lower is not None and lower.click_y > sample.local_y():
            return BoundKind.LOWER
        return BoundKind.UPPER

    def pointer_down(self, sample, day):
        if self.state == PlanningState.AWAITING_CONFIRMATION:
            logger.debug("planning: new gesture discards pending draft %r", self.draft)
        elif self.state == PlanningState.DRAGGING:
            logger.warning("planning: pointer_down while dragging, restarting gesture")

        lower = resolve(sample, day, BoundKind.LOWER)
        upper = resolve(sample, day, BoundKind.UPPER)
        self._set_state(PlanningState.DRAGGING)
        self._set_draft(DraftAppointment(lower, upper))

    def pointer_move(self, sample, day):
        if self.state != PlanningState.DRAGGING:
            return False

        kind = self._dragged_bound_kind(sample)
        self._set_draft(self.draft.with_bound(kind, resolve(sample, day, kind)))
        return True

    def pointer_up(self, sample, day):
        if self.state != PlanningState.DRAGGING:
            return False

        kind = self._dragged_bound_kind(sample)
        self._set_draft(self.draft.with_bound(kind, resolve(sample, day, kind)))
        self._set_state(PlanningState.AWAITING_CONFIRMATION)
        self.confirmation_requested.emit(self.draft)
        return True

    def can_confirm(self):
        return self.state == PlanningState.AWAITING_CONFIRMATION and self.draft.is_well_formed()

    def confirm(self):
        if self.state != PlanningState.AWAITING_CONFIRMATION:
            logger.debug("planning: confirm ignored in state %s", self.state)
            return None

        if not self.draft.is_complete():
            raise InvalidAppointmentError.from_entry('INCOMPLETE_DRAFT')
        if not self.draft.is_well_formed():
            logger.warning("planning: rejected draft %r", self.draft)
            raise InvalidAppointmentError.from_entry(
                'INVALID_APPOINTMENT',
                f"{self.draft.lower.timestamp:%Y-%m-%d %H:%M} - {self.draft.upper.timestamp:%Y-%m-%d %H:%M}")

        appointment = Appointment.from_draft(self.draft)
        self._set_draft(DraftAppointment())
        self._set_state(PlanningState.IDLE)

        stored = self.store.insert(appointment)
        self.appointment_created.emit(stored)
        return stored

    def cancel(self):
        if self.state == PlanningState.IDLE:
            return
        self._set_draft(DraftAppointment())
        self._set_state(PlanningState.IDLE)

    def abort_gesture(self):
        """Fallback for a release the grid never saw (pointer left the window, focus lost)."""
        if self.state == PlanningState.DRAGGING:
            logger.debug("planning: gesture aborted")
            self.cancel()

    def formatted_bounds(self):
        """(date label, 'H:mm', 'H:mm') for the confirmation popover."""
        if not self.draft.is_complete():
            return None
        return (format_long_date(self.draft.lower.timestamp),
                format_short_time(self.draft.lower.timestamp),
                format_short_time(self.draft.upper.timestamp))
