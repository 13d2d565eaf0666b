# tests/test_planning_controller.py
import unittest
import datetime
import os
import sys

# 프로젝트 루트 경로를 sys.path에 추가
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from appointment_store import AppointmentStore
from error_messages import InvalidAppointmentError
from planning_controller import PlanningController, PlanningState
from views.quarter_grid import PointerSample

DAY = datetime.date(2026, 10, 19)
# 1440px 높이 -> 1px = 1분
COLUMN = (0, 0, 100, 1440)


def at(minutes):
    return PointerSample(50, minutes, COLUMN)


def hm(hour, minute):
    return datetime.datetime(2026, 10, 19, hour, minute)


class TestPlanningController(unittest.TestCase):

    def setUp(self):
        self.store = AppointmentStore()
        self.controller = PlanningController(self.store)
        self.states = []
        self.requests = []
        self.created = []
        self.controller.state_changed.connect(self.states.append)
        self.controller.confirmation_requested.connect(self.requests.append)
        self.controller.appointment_created.connect(self.created.append)

    def drag(self, start, end):
        self.controller.pointer_down(at(start), DAY)
        self.controller.pointer_move(at(end), DAY)
        self.controller.pointer_up(at(end), DAY)

    def test_press_seeds_both_bounds(self):
        self.controller.pointer_down(at(9 * 60 + 7), DAY)
        self.assertEqual(self.controller.state, PlanningState.DRAGGING)
        self.assertEqual(self.controller.draft.lower.timestamp, hm(9, 0))
        self.assertEqual(self.controller.draft.upper.timestamp, hm(9, 15))

    def test_drag_down_and_confirm(self):
        self.drag(9 * 60 + 7, 9 * 60 + 52)

        self.assertEqual(self.controller.state, PlanningState.AWAITING_CONFIRMATION)
        self.assertEqual(len(self.requests), 1)
        self.assertTrue(self.controller.can_confirm())
        self.assertEqual(self.controller.formatted_bounds(), ("October 19, 2026", "9:00", "10:00"))

        appointment = self.controller.confirm()

        self.assertEqual(appointment.start, hm(9, 0))
        self.assertEqual(appointment.end, hm(10, 0))
        self.assertEqual(self.controller.state, PlanningState.IDLE)
        self.assertTrue(self.controller.draft.is_empty())
        self.assertEqual(len(self.store), 1)
        self.assertEqual(self.created, [appointment])
        self.assertEqual(self.states, [PlanningState.DRAGGING,
                                       PlanningState.AWAITING_CONFIRMATION,
                                       PlanningState.IDLE])

    def test_drag_above_press_moves_lower_bound(self):
        self.controller.pointer_down(at(600), DAY)
        self.controller.pointer_move(at(500), DAY)

        self.assertEqual(self.controller.draft.lower.timestamp, hm(8, 15))
        self.assertEqual(self.controller.draft.upper.timestamp, hm(10, 0))

        # 새 하한 아래로 돌아오면 다시 상한을 움직인다
        self.controller.pointer_move(at(700), DAY)
        self.assertEqual(self.controller.draft.lower.timestamp, hm(8, 15))
        self.assertEqual(self.controller.draft.upper.timestamp, hm(11, 45))

    def test_release_uses_same_bound_rule_as_move(self):
        self.controller.pointer_down(at(600), DAY)
        self.controller.pointer_up(at(500), DAY)

        self.assertEqual(self.controller.draft.lower.timestamp, hm(8, 15))
        self.assertEqual(self.controller.draft.upper.timestamp, hm(10, 0))

    def test_move_and_release_ignored_when_idle(self):
        self.assertFalse(self.controller.pointer_move(at(600), DAY))
        self.assertFalse(self.controller.pointer_up(at(600), DAY))
        self.assertEqual(self.controller.state, PlanningState.IDLE)
        self.assertTrue(self.controller.draft.is_empty())
        self.assertEqual(self.requests, [])

    def test_single_click_gives_one_quarter(self):
        self.drag(547, 547)
        appointment = self.controller.confirm()
        self.assertEqual((appointment.start, appointment.end), (hm(9, 0), hm(9, 15)))

    def test_degenerate_draft_cannot_be_confirmed(self):
        self.drag(600, 600)

        self.assertFalse(self.controller.can_confirm())
        with self.assertRaises(InvalidAppointmentError) as ctx:
            self.controller.confirm()
        self.assertEqual(ctx.exception.error_code, 'AGENDA_001')
        self.assertEqual(len(self.store), 0)
        self.assertEqual(self.controller.state, PlanningState.AWAITING_CONFIRMATION)

    def test_draft_past_midnight_cannot_be_confirmed(self):
        self.drag(1400, 1450)
        self.assertEqual(self.controller.draft.upper.timestamp, datetime.datetime(2026, 10, 20, 0, 15))
        self.assertFalse(self.controller.can_confirm())

    def test_draft_ending_at_midnight_can_be_confirmed(self):
        self.drag(1400, 1440)
        appointment = self.controller.confirm()
        self.assertEqual(appointment.end, datetime.datetime(2026, 10, 20, 0, 0))
        self.assertEqual(self.store.appointments_for_day(DAY), [appointment])

    def test_confirm_outside_awaiting_is_ignored(self):
        self.assertIsNone(self.controller.confirm())
        self.controller.pointer_down(at(600), DAY)
        self.assertIsNone(self.controller.confirm())
        self.assertEqual(len(self.store), 0)

    def test_cancel_discards_draft(self):
        self.drag(540, 600)
        self.controller.cancel()

        self.assertEqual(self.controller.state, PlanningState.IDLE)
        self.assertTrue(self.controller.draft.is_empty())
        self.assertIsNone(self.controller.formatted_bounds())
        self.assertEqual(len(self.store), 0)

    def test_press_while_awaiting_starts_new_draft(self):
        self.drag(540, 600)
        self.controller.pointer_down(at(800), DAY)

        self.assertEqual(self.controller.state, PlanningState.DRAGGING)
        self.assertEqual(self.controller.draft.lower.timestamp, hm(13, 15))
        self.assertEqual(len(self.store), 0)

    def test_abort_gesture_only_while_dragging(self):
        self.controller.pointer_down(at(540), DAY)
        self.assertTrue(self.controller.is_planning())
        self.controller.abort_gesture()
        self.assertEqual(self.controller.state, PlanningState.IDLE)

        self.drag(540, 600)
        self.controller.abort_gesture()
        self.assertEqual(self.controller.state, PlanningState.AWAITING_CONFIRMATION)

    def test_draft_changed_emitted_on_every_move(self):
        drafts = []
        self.controller.draft_changed.connect(drafts.append)
        self.controller.pointer_down(at(540), DAY)
        self.controller.pointer_move(at(560), DAY)
        self.controller.pointer_move(at(580), DAY)
        self.assertEqual(len(drafts), 3)
        self.assertEqual(drafts[-1].upper.timestamp, hm(9, 45))


if __name__ == '__main__':
    unittest.main()
