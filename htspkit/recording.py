"""Recording / timer entity as reported by the server."""

from dataclasses import dataclass, field
from enum import IntEnum

from .entity import Entity
from .lifetime import tvh_to_kodi


class TimerState(IntEnum):
    NEW = 0
    SCHEDULED = 1
    RECORDING = 2
    COMPLETED = 3
    ABORTED = 4
    CANCELLED = 5
    CONFLICT_OK = 6
    CONFLICT_NOK = 7
    ERROR = 8
    DISABLED = 9


class TimerType(IntEnum):
    NONE = 0
    ONCE_MANUAL = 1
    ONCE_EPG = 2
    ONCE_CREATED_BY_TIMEREC = 3
    ONCE_CREATED_BY_AUTOREC = 4
    REPEATING_MANUAL = 5
    REPEATING_EPG = 6
    REPEATING_SERIESLINK = 7


_RECORDING_STATES = frozenset(
    {
        TimerState.COMPLETED,
        TimerState.ABORTED,
        TimerState.RECORDING,
        TimerState.CONFLICT_NOK,
    }
)
_TIMER_STATES = frozenset(
    {TimerState.SCHEDULED, TimerState.RECORDING, TimerState.CONFLICT_NOK}
)


@dataclass
class Recording(Entity):
    """A recording or a pending timer; which one depends on its state.

    The subtitle is not part of equality.
    """

    enabled: int = 0
    channel: int = 0
    channel_type: int = 0
    channel_name: str = ""
    event_id: int = 0
    start: int = 0
    stop: int = 0
    start_extra: int = 0
    stop_extra: int = 0
    files_start: int = 0
    files_stop: int = 0
    title: str = ""
    subtitle: str = field(default="", compare=False)
    path: str = ""
    description: str = ""
    image: str = ""
    fanart_image: str = ""
    poster_image: str = ""
    banner_image: str = ""
    timerec_id: str = ""
    autorec_id: str = ""
    state: TimerState = TimerState.ERROR
    error: str = ""
    lifetime: int = 0
    priority: int = 50
    play_count: int = 0
    play_position: int = 0
    content_type: int = 0
    season: int = 0
    episode: int = 0
    part: int = 0

    def is_recording(self) -> bool:
        return self.state in _RECORDING_STATES

    def is_timer(self) -> bool:
        return self.state in _TIMER_STATES

    def timer_type(self) -> TimerType:
        """Which rule, if any, created this timer."""
        if self.timerec_id:
            return TimerType.ONCE_CREATED_BY_TIMEREC
        if self.autorec_id:
            return TimerType.ONCE_CREATED_BY_AUTOREC
        if self.event_id != 0:
            return TimerType.ONCE_EPG
        return TimerType.ONCE_MANUAL

    def kodi_lifetime(self) -> int:
        """Lifetime in the client's encoding (negative values are special)."""
        return tvh_to_kodi(self.lifetime)

    def genre_type(self) -> int:
        """Major genre; the server sends only the major category in the low nibble."""
        return (self.content_type * 0x10) & 0xFFFFFFFF

    def genre_subtype(self) -> int:
        """Recordings carry no genre sub-category."""
        return 0