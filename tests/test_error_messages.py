# tests/test_error_messages.py
import unittest
import os
import sys

# 프로젝트 루트 경로를 sys.path에 추가
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from error_messages import CalendarError, ErrorMessages, InvalidAppointmentError


class TestErrorMessages(unittest.TestCase):

    def test_from_entry_with_detail(self):
        error = InvalidAppointmentError.from_entry('INVALID_APPOINTMENT', "09:00 - 09:00")

        self.assertIsInstance(error, CalendarError)
        self.assertEqual(error.error_code, 'AGENDA_001')
        self.assertTrue(str(error).endswith("(09:00 - 09:00)"))
        self.assertEqual(len(error.suggestions), 2)

    def test_unknown_entry_falls_back_to_unexpected(self):
        self.assertIs(ErrorMessages.get_message('NO_SUCH_ERROR'), ErrorMessages.UNEXPECTED_ERROR)

    def test_format_suggestions(self):
        self.assertEqual(ErrorMessages.format_suggestions([]), "")
        self.assertEqual(ErrorMessages.format_suggestions(["Retry"]), "Suggestion: Retry")
        self.assertEqual(ErrorMessages.format_suggestions(["A", "B"]), "Suggestions:\n1. A\n2. B")


if __name__ == '__main__':
    unittest.main()
