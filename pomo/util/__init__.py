from .misc import now_iso, minutes_to_duration, seconds_to_duration

__all__ = ["now_iso", "minutes_to_duration", "seconds_to_duration"]
