import json
from pomo.common.logger import log
from pomo.common.setup import PATHS
from pomo.core.timer import (
    BREAK_MAX, BREAK_MIN, BREAK_STEP,
    FOCUS_MAX, FOCUS_MIN, FOCUS_STEP,
    DEFAULT_BREAK_MINUTES, DEFAULT_FOCUS_MINUTES,
    clamp,
)
from pomo.util import now_iso

_SCHEMA_VERSION = 1

#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.data / "settings.json"

# Default values for every known setting, and the type each one must have.
_SETTINGS_DEFAULTS = {
    "focus_minutes": DEFAULT_FOCUS_MINUTES,
    "break_minutes": DEFAULT_BREAK_MINUTES,
    "theme": "Light",
    "always_on_top": True,
    "sound_enabled": True,
    "sound_file": "",
}
_SETTINGS_TYPES = {
    "focus_minutes": int,
    "break_minutes": int,
    "theme": str,
    "always_on_top": bool,
    "sound_enabled": bool,
    "sound_file": str,
}

# Helper to return a truly fresh, default settings dict.
def build_default_settings():
    return dict(_SETTINGS_DEFAULTS)

# Pulls a duration back onto its range and step grid, e.g. focus 27 -> 25, focus 99 -> 60.
def _normalize_minutes(value, low, high, step):
    value = clamp(value, low, high)
    return low + round((value - low) / step) * step

#endregion === Helpers and Paths ===

#region === Saving and Loading Settings ===

# Loads settings from SETTINGS_PATH. On first run the defaults get written out so the user has a file to edit.
# Anything missing, mistyped or out of range is defaulted (or clamped) and reported in the log.
def load_settings():
    try:
        if not SETTINGS_PATH.exists():
            settings = build_default_settings()
            save_settings(settings)
            log.info(f"No settings.json found, wrote defaults to '{SETTINGS_PATH}'.")
            return settings

        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise TypeError(f"Expected a JSON object in settings.json, got {type(raw).__name__}")

        settings = {}
        defaulted_values = set()
        for key, default in _SETTINGS_DEFAULTS.items():
            value = raw.get(key)
            expected = _SETTINGS_TYPES[key]
            # bool is a subclass of int, so True must not sneak in as a duration
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                defaulted_values.add(key)
                value = default
            settings[key] = value

        focus = _normalize_minutes(settings["focus_minutes"], FOCUS_MIN, FOCUS_MAX, FOCUS_STEP)
        brk = _normalize_minutes(settings["break_minutes"], BREAK_MIN, BREAK_MAX, BREAK_STEP)
        if focus != settings["focus_minutes"]:
            log.warning(f"focus_minutes {settings['focus_minutes']} is not a valid focus duration, using {focus}")
            settings["focus_minutes"] = focus
        if brk != settings["break_minutes"]:
            log.warning(f"break_minutes {settings['break_minutes']} is not a valid break duration, using {brk}")
            settings["break_minutes"] = brk

        if defaulted_values:
            log.warning(f"Loaded settings from '{SETTINGS_PATH}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted_values))}")
        else:
            log.info(f"Successfully loaded settings from '{SETTINGS_PATH}'.")
        return settings
    # Fall back to fresh defaults in case of error, but warn in log
    except (json.JSONDecodeError, OSError, TypeError):
        log.warning("Ran into an error while trying to load settings.json, falling back to default settings.", exc_info=True)
        return build_default_settings()

# Write the given settings to disk under SETTINGS_PATH.
def save_settings(settings):
    payload = {"schema_version": _SCHEMA_VERSION, "saved_at": now_iso()}
    payload.update(settings)
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    log.info(f"Saved settings to '{SETTINGS_PATH}'")

#endregion === Saving and Loading Settings ===
