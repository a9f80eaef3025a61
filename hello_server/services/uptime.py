import math
import time
from datetime import datetime, timezone


class ProcessUptime:
    """Seconds elapsed since the server was created.

    The clock is injectable so tests can drive it; by default it is
    ``time.monotonic`` and the start is taken when the object is built.
    """

    def __init__(self, started_at=None, clock=None):
        self.clock = clock or time.monotonic
        self.started_at = self.clock() if started_at is None else started_at

    def seconds(self) -> float:
        return max(0.0, self.clock() - self.started_at)


def format_uptime(seconds) -> str:
    """Turn a number of seconds into ``1h 2m 5s`` / ``2m 5s`` / ``45s``."""
    if math.isinf(seconds) and seconds > 0:
        raise ValueError("Uptime cannot be infinite")
    # NaN and negative readings clamp to zero
    if not seconds > 0:
        seconds = 0

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    elif minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def utc_timestamp(now=None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
