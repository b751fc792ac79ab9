"""Time-based recording rule (a daily start/stop window)."""

from dataclasses import dataclass

from .recording_base import RecordingBase, localtime_to_utc

_ANY_TIME = -1


@dataclass
class TimeRecording(RecordingBase):
    """Records between two local times given as minutes after midnight; -1 means any time."""

    start: int = 0
    stop: int = 0

    def start_time(self) -> int:
        """Start as a Unix timestamp for today, or 0 for any time."""
        if self.start == _ANY_TIME:
            return 0
        return localtime_to_utc(self.start)

    def stop_time(self) -> int:
        """Stop as a Unix timestamp for today, or 0 for any time."""
        if self.stop == _ANY_TIME:
            return 0
        return localtime_to_utc(self.stop)