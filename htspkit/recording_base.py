"""Common part of time-based and EPG-based recording rules."""

import itertools
import time
from dataclasses import dataclass, field

from .entity import Entity
from .lifetime import tvh_to_kodi

_id_counter = itertools.count(1)


def next_int_id() -> int:
    """Return the next process-wide numeric id for a recording rule, starting at 1."""
    return next(_id_counter)


def localtime_to_utc(minutes: int) -> int:
    """Turn minutes after local midnight of today into a Unix timestamp.

    Values outside one day (such as ``24 * 60``) are normalised, so they
    roll over into the following or previous day.
    """
    now = time.localtime()
    # Split towards zero, the same way integer division on the wire value does.
    hours = int(minutes / 60)
    mins = minutes - hours * 60
    completed = (
        now.tm_year,
        now.tm_mon,
        now.tm_mday,
        hours,
        mins,
        0,
        now.tm_wday,
        now.tm_yday,
        now.tm_isdst,
    )
    return int(time.mktime(completed))


@dataclass
class RecordingBase(Entity):
    """A recording rule kept by the server under a string id.

    Every instance receives a fresh numeric id.  The string id is not
    part of equality.
    """

    id: int = field(default_factory=next_int_id)
    string_id: str = field(default="", compare=False)
    enabled: int = 0
    days_of_week: int = 0
    lifetime: int = 0
    priority: int = 0
    title: str = ""
    name: str = ""
    directory: str = ""
    owner: str = ""
    creator: str = ""
    channel: int = 0

    def kodi_lifetime(self) -> int:
        """Lifetime in the client's encoding (negative values are special)."""
        return tvh_to_kodi(self.lifetime)