"""EPG-based recording rule (series recording driven by a search)."""

from dataclasses import dataclass

from .recording_base import RecordingBase, localtime_to_utc

_ANY_TIME = -1
_MINUTES_PER_DAY = 24 * 60


def _halve(value: int) -> int:
    """Halve an integer, truncating towards zero."""
    return int(value / 2)


@dataclass
class AutoRecording(RecordingBase):
    """Records every programme matching a rule within a daily start window.

    The window bounds are minutes after local midnight; -1 means any time.
    """

    start_window_begin: int = 0
    start_window_end: int = 0
    start_extra: int = 0
    stop_extra: int = 0
    dup_detect: int = 0
    fulltext: int = 0
    series_link: str = ""

    @property
    def is_fulltext(self) -> bool:
        """Whether the search covers the full EPG text."""
        return self.fulltext > 0

    def start_time(self, approximate: bool) -> int:
        """Start as a Unix timestamp for today, or 0 for any time.

        With ``approximate`` the middle of the start window is used.
        """
        begin, end = self.start_window_begin, self.start_window_end
        if approximate:
            if begin == _ANY_TIME or end == _ANY_TIME:
                return 0
            if end < begin:
                # The window ends on the following day.
                new_end = end + _MINUTES_PER_DAY
                new_start = begin + _halve(new_end - begin)
                if new_start > _MINUTES_PER_DAY:
                    new_start -= _MINUTES_PER_DAY
                return localtime_to_utc(new_start)
            return localtime_to_utc(begin + _halve(end - begin))
        if begin == _ANY_TIME:
            return 0
        return localtime_to_utc(begin)

    def stop_time(self, approximate: bool) -> int:
        """Stop as a Unix timestamp for today, or 0 for any time.

        There is no approximate stop time, so ``approximate`` always gives 0.
        """
        if approximate:
            return 0
        if self.start_window_end == _ANY_TIME:
            return 0
        return localtime_to_utc(self.start_window_end)