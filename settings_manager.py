import json
import logging
import math
import os
from config import DEFAULT_HOUR_HEIGHT, SETTINGS_FILE
from error_messages import SettingsError

logger = logging.getLogger(__name__)

def load_settings(path=SETTINGS_FILE):
    """Read settings.json into a dict. A missing or corrupt file yields {}."""
    if os.path.exists(path):
        with open(path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError:
                logger.warning("settings file %s is corrupted, using defaults", path)
                return {}
        if not isinstance(data, dict):
            logger.warning("settings file %s does not hold an object, using defaults", path)
            return {}
        return data
    return {}

def save_settings(data, path=SETTINGS_FILE):
    """Write the settings dict to settings.json."""
    try:
        with open(path, "w") as f:
            json.dump(data, f, indent=4)
    except OSError as e:
        raise SettingsError.from_entry('SETTINGS_ERROR', path) from e

def save_settings_safe(data, preserve_keys=None, path=SETTINGS_FILE):
    """
    Merge data into the stored settings, keeping the stored value of preserve_keys.

    Args:
        data: settings to write
        preserve_keys: keys whose stored value wins (default: ['geometry'])
    """
    if preserve_keys is None:
        preserve_keys = ['geometry']

    original_settings = load_settings(path)
    merged = dict(original_settings)
    merged.update(data)

    for key in preserve_keys:
        if key in original_settings:
            merged[key] = original_settings[key]
            logger.debug("settings_manager: kept stored '%s'", key)

    save_settings(merged, path)
    return merged

def read_hour_height(settings):
    """Pixel height of one grid hour. Anything below one pixel falls back to the default."""
    value = settings.get("hour_height", DEFAULT_HOUR_HEIGHT)
    if (isinstance(value, bool) or not isinstance(value, (int, float))
            or not math.isfinite(value) or value < 1):
        logger.warning("invalid hour_height %r, using %d", value, DEFAULT_HOUR_HEIGHT)
        return DEFAULT_HOUR_HEIGHT
    return int(value)
