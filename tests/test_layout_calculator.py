# tests/test_layout_calculator.py
import unittest
import datetime
import os
import sys

# 프로젝트 루트 경로를 sys.path에 추가
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from appointment_model import Appointment, BoundKind, LaneAssignment
from views.layout_calculator import (AgendaLayoutCalculator, pack, project,
                                     project_current_time, projection_to_rect)
from views.quarter_grid import PointerSample, resolve

DAY = datetime.date(2026, 10, 19)
COLUMN = (0, 0, 100, 1440)


def make_appointment(start_minutes, end_minutes, day=DAY):
    lower = resolve(PointerSample(0, start_minutes, COLUMN), day, BoundKind.LOWER)
    upper = resolve(PointerSample(0, end_minutes, COLUMN), day, BoundKind.UPPER)
    return Appointment(lower, upper)


def lanes_of(appointments):
    return [(a.lanes.lane_count, a.lanes.lane_index) for a in appointments]


class TestPack(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(pack([]), [])

    def test_disjoint_appointments_get_full_width(self):
        packed = pack([make_appointment(540, 600), make_appointment(660, 720)])
        self.assertEqual(lanes_of(packed), [(1, 0), (1, 0)])

    def test_touching_appointments_do_not_overlap(self):
        packed = pack([make_appointment(540, 600), make_appointment(600, 660)])
        self.assertEqual(lanes_of(packed), [(1, 0), (1, 0)])

    def test_mutually_overlapping_appointments_share_the_column(self):
        packed = pack([make_appointment(540, 720),
                       make_appointment(600, 660),
                       make_appointment(630, 690)])

        self.assertEqual([a.lanes.lane_count for a in packed], [3, 3, 3])
        self.assertEqual(sorted(a.lanes.lane_index for a in packed), [0, 1, 2])

    def test_contained_appointment_overlaps(self):
        packed = pack([make_appointment(540, 720), make_appointment(600, 630)])
        self.assertEqual(lanes_of(packed), [(2, 0), (2, 1)])

    def test_group_is_joined_through_its_last_member(self):
        # 세 번째 일정은 첫 번째와 겹치지만 그룹의 마지막 일정과는 겹치지 않는다
        packed = pack([make_appointment(540, 720),
                       make_appointment(570, 600),
                       make_appointment(660, 690)])
        self.assertEqual(lanes_of(packed), [(2, 0), (2, 1), (1, 0)])

    def test_results_follow_input_positions(self):
        appointments = [make_appointment(540, 600),
                        make_appointment(800, 860),
                        make_appointment(570, 630)]
        packed = pack(appointments)

        self.assertEqual([a.appointment_id for a in packed],
                         [a.appointment_id for a in appointments])
        self.assertEqual(lanes_of(packed), [(2, 0), (1, 0), (2, 1)])

    def test_pack_is_deterministic_and_does_not_mutate(self):
        appointments = [make_appointment(540, 600), make_appointment(570, 630)]
        first = lanes_of(pack(appointments))
        second = lanes_of(pack(appointments))

        self.assertEqual(first, second)
        self.assertEqual(lanes_of(appointments), [(0, 0), (0, 0)])


class TestProjection(unittest.TestCase):

    def test_nine_to_ten(self):
        projection = project(make_appointment(540, 600), DAY)

        self.assertAlmostEqual(projection['top_percent'], 37.5)
        self.assertAlmostEqual(projection['height_percent'], 100 / 24)
        self.assertEqual(projection['left_fraction'], 0)
        self.assertEqual(projection['width_fraction'], 1)
        self.assertEqual(projection['inset_px'], 2)

    def test_lane_geometry(self):
        appointment = make_appointment(540, 600).with_lanes(2, 1)
        projection = project(appointment, DAY)

        self.assertEqual(projection['left_fraction'], 0.5)
        self.assertEqual(projection['width_fraction'], 0.5)
        self.assertEqual(projection['z_order'], 22)

    def test_appointment_ending_at_midnight(self):
        projection = project(make_appointment(1380, 1440), DAY)
        self.assertAlmostEqual(projection['top_percent'] + projection['height_percent'], 100)

    def test_not_drawn_on_other_days(self):
        appointment = make_appointment(540, 600)
        self.assertIsNone(project(appointment, DAY + datetime.timedelta(days=1)))

    def test_current_time(self):
        noon = datetime.datetime(2026, 10, 19, 12, 0)
        self.assertEqual(project_current_time(DAY, noon), {'top_percent': 50.0})
        self.assertIsNone(project_current_time(DAY + datetime.timedelta(days=1), noon))

    def test_projection_to_rect(self):
        projection = project(make_appointment(540, 600).with_lanes(2, 1), DAY)
        x, y, width, height = projection_to_rect(projection, (100, 0, 200, 1440))

        self.assertAlmostEqual(x, 200)
        self.assertAlmostEqual(y, 540)
        self.assertAlmostEqual(width, 100)
        self.assertAlmostEqual(height, 58)


class TestAgendaLayoutCalculator(unittest.TestCase):

    def setUp(self):
        self.week = [DAY + datetime.timedelta(days=i) for i in range(-1, 6)]

    def test_entries_carry_column_and_day(self):
        tuesday = DAY + datetime.timedelta(days=1)
        appointments = pack([make_appointment(540, 600, day=tuesday)])
        positions = AgendaLayoutCalculator(appointments, self.week).calculate()

        self.assertEqual(len(positions), 1)
        self.assertEqual(positions[0]['column'], 2)
        self.assertEqual(positions[0]['day'], tuesday)

    def test_entries_sorted_by_z_order(self):
        appointments = pack([make_appointment(540, 600),
                             make_appointment(570, 630),
                             make_appointment(800, 860)])
        positions = AgendaLayoutCalculator(appointments, [DAY]).calculate()

        self.assertEqual([p['z_order'] for p in positions], [21, 22, 22])
        self.assertEqual(positions[0]['appointment'].lanes, LaneAssignment(1, 0))

    def test_appointments_outside_visible_days_skipped(self):
        appointments = pack([make_appointment(540, 600, day=DAY + datetime.timedelta(days=30))])
        self.assertEqual(AgendaLayoutCalculator(appointments, self.week).calculate(), [])

    def test_current_time_column(self):
        now = datetime.datetime(2026, 10, 20, 6, 0)
        indicator = AgendaLayoutCalculator([], self.week).calculate_current_time(now)

        self.assertEqual(indicator['column'], 2)
        self.assertAlmostEqual(indicator['top_percent'], 25.0)

        far = datetime.datetime(2026, 12, 1, 6, 0)
        self.assertIsNone(AgendaLayoutCalculator([], self.week).calculate_current_time(far))


if __name__ == '__main__':
    unittest.main()
