# htspkit

`htspkit` is the data model for a Tvheadend HTSP client. It includes:

- channels and channel tags
- EPG events and schedules
- recordings and timers
- time-based and EPG-based recording rules
- streaming profiles
- the status records that arrive while a stream plays

It also ships a few helpers: lifetime conversion, a pluggable logger, a thread-safe tracker for the steps of the initial sync, and an in-place `erase_if()`.

All records are plain dataclasses with public attributes. The package has no runtime dependencies.

## Installation

```
pip install htspkit
```

To run the test suite:

```
pip install "htspkit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `htspkit.types` | Protocol enumerations: `DvrPriority`, `DvrActionType`, `DvrAutorecDedup`, `DvrRetention`, `ChannelType`, `DvrPlaycount`, `HTSPEventType`, `EpgEventState`. Also `HTSPEvent`, a queued update carrying a type, an `Event` and an `EpgEventState`. |
| `htspkit.entity` | `Entity`, the base class with an `id` and a `dirty` flag. The flag takes no part in equality. |
| `htspkit.channel` | `Channel`. Channels order by `num`. |
| `htspkit.tag` | `Tag`, a named list of channel ids. `contains_channel_type(channel_type, channels)` checks the tag's channels against a mapping of id to `Channel`. |
| `htspkit.event` | `Event`, an EPG programme, with `genre_type` and `genre_subtype` properties (upper and lower nibble of `content`). `set_writers()`, `set_directors()`, `set_cast()` and `set_categories()` join a list of names with `EPG_STRING_TOKEN_SEPARATOR` (`","`). |
| `htspkit.schedule` | `Schedule`, the events of one channel keyed by event id. Setting `dirty = True` on the schedule marks every event in it dirty too. |
| `htspkit.recording` | `Recording`, `TimerState`, `TimerType`. A `Recording` has `is_recording()`, `is_timer()`, `timer_type()`, `kodi_lifetime()`, `genre_type()` and `genre_subtype()`. |
| `htspkit.recording_base` | `RecordingBase`, the common part of recording rules. Each instance gets a fresh numeric id from `next_int_id()`, and `string_id` is left out of equality. Also `localtime_to_utc(minutes)`, which turns minutes after local midnight today into a Unix timestamp. |
| `htspkit.time_recording` | `TimeRecording`, a daily start/stop window. `start_time()` and `stop_time()` return today's timestamps, or 0 when the field is -1 ("any time"). |
| `htspkit.auto_recording` | `AutoRecording`, an EPG search rule with a daily start window. `start_time(approximate)` and `stop_time(approximate)` return timestamps; with `approximate=True` the start is the middle of the window and the stop is always 0. The `is_fulltext` property tells whether the search covers the full EPG text. |
| `htspkit.profile` | `Profile`, a streaming profile with a uuid, a name and a comment. |
| `htspkit.status` | `DescrambleInfo`, `Quality`, `QueueStatus`, `SourceInfo`, `TimeshiftStatus`. Every class except `QueueStatus` has `clear()`, which puts all fields back to their defaults. Numeric `DescrambleInfo` fields default to `DESCRAMBLE_INFO_NOT_AVAILABLE` (-1). |
| `htspkit.async_state` | `SyncStep` and `AsyncState`. `AsyncState` has a `state` property, `set_state()` and `wait_for_state()`. |
| `htspkit.lifetime` | `tvh_to_kodi()` and `kodi_to_tvh()`. |
| `htspkit.logger` | `LogLevel`, `Logger`, `get_logger()` and `log()`. |
| `htspkit.utilities` | `erase_if(items, predicate)`, which removes matching entries in place. Mappings are tested with `(key, value)` pairs; lists and sets are tested with their elements. Any other type raises `TypeError`. |

## Examples

Converting retention values between the server's encoding and the client's:

```python
from htspkit.lifetime import kodi_to_tvh, tvh_to_kodi
from htspkit.types import DvrRetention

tvh_to_kodi(DvrRetention.FOREVER)   # -1
tvh_to_kodi(DvrRetention.SPACE)     # -2
tvh_to_kodi(7)                      # 7 (days)
kodi_to_tvh(-2)                     # 2147483646, i.e. DvrRetention.SPACE
```

Sending log output to your own handler. The prefix is put in front of the message, followed by `" - "`. Arguments are applied printf-style:

```python
from htspkit.logger import LogLevel, get_logger, log

get_logger().set_implementation(lambda level, message: print(level.name, message))
get_logger().set_prefix("htsp")
log(LogLevel.INFO, "connected to %s", "localhost")
# INFO htsp - connected to localhost
```

By default the shared logger discards every message.

Waiting for the initial sync. The timeout is in milliseconds:

```python
from htspkit.async_state import AsyncState, SyncStep

state = AsyncState(5000)
# another thread calls state.set_state(SyncStep.EPG) as the sync proceeds
if state.wait_for_state(SyncStep.DVR):
    ...  # the state reached DVR or later before the timeout
```

Checking whether a tag holds any radio channels:

```python
from htspkit.channel import Channel
from htspkit.tag import Tag
from htspkit.types import ChannelType

channels = {
    1: Channel(id=1, num=1, type=ChannelType.TV, name="News"),
    2: Channel(id=2, num=2, type=ChannelType.RADIO, name="Music"),
}
tag = Tag(id=10, name="Favourites", channels=[1, 2, 3])
tag.contains_channel_type(ChannelType.RADIO, channels)   # True
```

Channel ids in the tag that are missing from the mapping are ignored.

## Equality notes

- `HTSPEvent` equality compares the type and the EPG event. The state counts only as a truth value: both states must be non-zero. Two events in the `CREATED` state therefore never compare equal.
- `Recording.subtitle` is not part of equality.

## What the package does not do

The package holds data and helpers only. It does not:

- open connections to a server
- encode or decode HTSP messages
- look up codecs
- provide localised strings
- store anything
- offer a command-line program

Filling these records from server replies is up to the application that uses them.