# config.py
import os
import sys

def get_data_dir():
    """Get the appropriate data directory for user files."""
    if hasattr(sys, '_MEIPASS'):
        # Running as PyInstaller EXE - use user's AppData directory
        if sys.platform == "win32":
            data_dir = os.path.join(os.path.expanduser('~'), 'AppData', 'Local', 'QuarterAgenda')
        else:
            data_dir = os.path.join(os.path.expanduser('~'), '.quarteragenda')
    else:
        # Running in development mode - use current directory
        data_dir = os.path.dirname(os.path.abspath(__file__))

    os.makedirs(data_dir, exist_ok=True)
    return data_dir

# --- File Paths ---
_DATA_DIR = get_data_dir()
SETTINGS_FILE = os.path.join(_DATA_DIR, "settings.json")
ERROR_LOG_FILE = os.path.join(_DATA_DIR, "error.log")

# --- Time Grid ---
HOURS_PER_DAY = 24
QUARTERS_PER_HOUR = 4
QUARTERS_PER_DAY = HOURS_PER_DAY * QUARTERS_PER_HOUR  # 96
QUARTER_MINUTES = 15
MINUTES_IN_DAY = 1440

# --- Rendering ---
APPOINTMENT_INSET_PX = 2
APPOINTMENT_BASE_Z_ORDER = 20

# --- UI Defaults ---
DEFAULT_WINDOW_GEOMETRY = [200, 200, 900, 700]
DEFAULT_VIEW = "day"  # "day", "week", "month", "year"
DEFAULT_HOUR_HEIGHT = 48
DEFAULT_START_DAY_OF_WEEK = 6  # 6 = Sunday, 0 = Monday
TIMELINE_REFRESH_MS = 60 * 1000
