"""Enumerations and event records of the HTSP protocol."""

from dataclasses import dataclass, field
from enum import IntEnum

from .event import Event

INT32_MAX = 2**31 - 1


class DvrPriority(IntEnum):
    IMPORTANT = 0
    HIGH = 1
    NORMAL = 2
    LOW = 3
    UNIMPORTANT = 4
    NOT_SET = 5
    DEFAULT = 6


class DvrActionType(IntEnum):
    CUT = 0
    MUTE = 1
    SCENE = 2
    COMBREAK = 3


class DvrAutorecDedup(IntEnum):
    RECORD_ALL = 0
    RECORD_UNIQUE = 14
    RECORD_DIFFERENT_EPISODE_NUMBER = 1
    RECORD_DIFFERENT_SUBTITLE = 2
    RECORD_DIFFERENT_DESCRIPTION = 3
    RECORD_ONCE_PER_MONTH = 12
    RECORD_ONCE_PER_WEEK = 4
    RECORD_ONCE_PER_DAY = 5
    LRECORD_DIFFERENT_EPISODE_NUMBER = 6
    LRECORD_DIFFERENT_TITLE = 7
    LRECORD_DIFFERENT_SUBTITLE = 8
    LRECORD_DIFFERENT_DESCRIPTION = 9
    LRECORD_ONCE_PER_MONTH = 13
    LRECORD_ONCE_PER_WEEK = 10
    LRECORD_ONCE_PER_DAY = 11


class DvrRetention(IntEnum):
    """Retention (database entry) and removal (file on disk) periods in days."""

    DVRCONFIG = 0
    ONE_DAY = 1
    THREE_DAYS = 3
    FIVE_DAYS = 5
    ONE_WEEK = 7
    TWO_WEEKS = 14
    THREE_WEEKS = 21
    ONE_MONTH = 31
    TWO_MONTHS = 62
    THREE_MONTHS = 92
    SIX_MONTHS = 183
    ONE_YEAR = 366
    TWO_YEARS = 731
    THREE_YEARS = 1096
    SPACE = INT32_MAX - 1
    FOREVER = INT32_MAX


class ChannelType(IntEnum):
    OTHER = 0
    TV = 1
    RADIO = 2


class DvrPlaycount(IntEnum):
    RESET = 0
    SET = 1
    KEEP = INT32_MAX - 1
    INCR = INT32_MAX


class HTSPEventType(IntEnum):
    NONE = 0
    CHN_UPDATE = 1
    TAG_UPDATE = 2
    EPG_UPDATE = 3
    REC_UPDATE = 4


class EpgEventState(IntEnum):
    CREATED = 0
    UPDATED = 1
    DELETED = 2


@dataclass(eq=False)
class HTSPEvent:
    """A queued update; ``epg`` and ``state`` matter for EPG updates only."""

    type: HTSPEventType = HTSPEventType.NONE
    epg: Event = field(default_factory=Event)
    state: EpgEventState = EpgEventState.CREATED

    def __eq__(self, other: object) -> bool:
        # The state takes part only as a truth value: both must be non-zero.
        if not isinstance(other, HTSPEvent):
            return NotImplemented
        return (
            self.type == other.type
            and self.epg == other.epg
            and bool(self.state)
            and bool(other.state)
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result