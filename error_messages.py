# error_messages.py
"""
User-facing error messages and the exception types of the agenda.
None of these are fatal: a rejected draft or a bad setting leaves the
application running with the previous state.
"""

class ErrorMessages:
    """Error message definitions shown by the confirmation popover and main window."""

    INVALID_APPOINTMENT = {
        'title': 'Invalid Appointment',
        'message': 'The selected time range cannot be saved as an appointment.',
        'suggestions': [
            'Drag downward so the end is after the start',
            'Keep the appointment within a single day'
        ],
        'code': 'AGENDA_001'
    }

    INCOMPLETE_DRAFT = {
        'title': 'No Time Range Selected',
        'message': 'Drag on the time grid to choose a start and an end first.',
        'suggestions': [
            'Press on the grid and drag to the end time'
        ],
        'code': 'AGENDA_002'
    }

    UNKNOWN_VIEW = {
        'title': 'Unknown View',
        'message': 'The requested calendar view does not exist.',
        'suggestions': [
            'Choose Day, Week, Month or Year',
            'The default view will be used'
        ],
        'code': 'CONFIG_001'
    }

    SETTINGS_ERROR = {
        'title': 'Settings Error',
        'message': 'Unable to save or load application settings.',
        'suggestions': [
            'Check file permissions in application folder',
            'Settings will use default values'
        ],
        'code': 'CONFIG_002'
    }

    UNEXPECTED_ERROR = {
        'title': 'Unexpected Error',
        'message': 'An unexpected error has occurred.',
        'suggestions': [
            'Try the operation again',
            'Restart the application if problem persists'
        ],
        'code': 'APP_001'
    }

    @staticmethod
    def get_message(error_type):
        """
        Get error message details by error type.

        Args:
            error_type (str): The error type constant name

        Returns:
            dict: Error message details with title, message, suggestions, and code
        """
        return getattr(ErrorMessages, error_type, ErrorMessages.UNEXPECTED_ERROR)

    @staticmethod
    def format_suggestions(suggestions):
        """
        Format suggestion list for display.

        Args:
            suggestions (list): List of suggestion strings

        Returns:
            str: Formatted suggestions string
        """
        if not suggestions:
            return ""

        if len(suggestions) == 1:
            return f"Suggestion: {suggestions[0]}"

        formatted = "Suggestions:\n"
        for i, suggestion in enumerate(suggestions, 1):
            formatted += f"{i}. {suggestion}\n"

        return formatted.strip()


class CalendarError(Exception):
    """Base exception class for calendar-specific errors."""

    def __init__(self, message, error_code=None, suggestions=None):
        super().__init__(message)
        self.error_code = error_code
        self.suggestions = suggestions or []

    @classmethod
    def from_entry(cls, error_type, detail=None):
        entry = ErrorMessages.get_message(error_type)
        message = entry['message'] if detail is None else f"{entry['message']} ({detail})"
        return cls(message, error_code=entry['code'], suggestions=list(entry['suggestions']))


class InvalidAppointmentError(CalendarError):
    """Raised when a draft cannot become an appointment."""
    pass


class UnknownViewError(CalendarError):
    """Raised for a view name outside day/week/month/year."""
    pass


class SettingsError(CalendarError):
    """Exception for settings and configuration errors."""
    pass
