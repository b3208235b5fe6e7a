from datetime import datetime


# Simply returns the current local time as an ISO8601 string with timezone offset.
def now_iso():
    return datetime.now().astimezone().isoformat()


# Formats a number of whole seconds as MM:SS. Minutes are not wrapped into hours, so a 60 minute focus reads
# "60:00". Negative values clamp to zero.
def seconds_to_duration(seconds):
    seconds = max(0, int(seconds))
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"


# Same as above, for a duration given in minutes.
def minutes_to_duration(minutes):
    return seconds_to_duration(int(minutes) * 60)
