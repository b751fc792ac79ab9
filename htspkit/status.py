"""Status records reported while a stream is playing."""

from dataclasses import dataclass, fields

DESCRAMBLE_INFO_NOT_AVAILABLE = -1


def _reset(record: object) -> None:
    """Put every field of a dataclass instance back to its default."""
    fresh = type(record)()
    for item in fields(record):
        setattr(record, item.name, getattr(fresh, item.name))


@dataclass
class DescrambleInfo:
    """Which descrambler serves the stream.

    A numeric field that the server has not reported holds
    ``DESCRAMBLE_INFO_NOT_AVAILABLE``.
    """

    pid: int = DESCRAMBLE_INFO_NOT_AVAILABLE
    caid: int = DESCRAMBLE_INFO_NOT_AVAILABLE
    provid: int = DESCRAMBLE_INFO_NOT_AVAILABLE
    ecm_time: int = DESCRAMBLE_INFO_NOT_AVAILABLE
    hops: int = DESCRAMBLE_INFO_NOT_AVAILABLE
    card_system: str = ""
    reader: str = ""
    from_: str = ""
    protocol: str = ""

    def clear(self) -> None:
        """Forget everything reported so far."""
        _reset(self)


@dataclass
class Quality:
    """Signal quality of the frontend."""

    fe_status: str = ""
    fe_snr: int = 0
    fe_signal: int = 0
    fe_ber: int = 0
    fe_unc: int = 0

    def clear(self) -> None:
        """Forget everything reported so far."""
        _reset(self)


@dataclass
class QueueStatus:
    """State of the demuxer packet queue; ``delay`` is in microseconds."""

    packets: int = 0
    bytes: int = 0
    delay: int = 0
    bdrops: int = 0
    pdrops: int = 0
    idrops: int = 0


@dataclass
class SourceInfo:
    """Where the current service comes from."""

    si_adapter: str = ""
    si_network: str = ""
    si_mux: str = ""
    si_provider: str = ""
    si_service: str = ""

    def clear(self) -> None:
        """Forget everything reported so far."""
        _reset(self)


@dataclass
class TimeshiftStatus:
    """Timeshift buffer state; ``start`` and ``end`` are PTS values."""

    full: bool = False
    shift: int = 0
    start: int = 0
    end: int = 0

    def clear(self) -> None:
        """Forget everything reported so far."""
        _reset(self)