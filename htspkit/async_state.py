"""Thread-safe tracker for the steps of the initial synchronisation."""

import threading
from enum import IntEnum


class SyncStep(IntEnum):
    NONE = 0
    CHN = 1
    DVR = 2
    EPG = 3
    DONE = 4


class AsyncState:
    """Holds the current sync step and lets threads wait for a later one.

    ``timeout`` is in milliseconds.
    """

    def __init__(self, timeout: int) -> None:
        self._state = SyncStep.NONE
        self._timeout = timeout
        self._condition = threading.Condition()

    @property
    def state(self) -> SyncStep:
        with self._condition:
            return self._state

    def set_state(self, state: SyncStep) -> None:
        with self._condition:
            self._state = SyncStep(state)
            self._condition.notify_all()

    def wait_for_state(self, state: SyncStep) -> bool:
        """Wait until the state is at least ``state``; False on timeout."""
        with self._condition:
            return self._condition.wait_for(
                lambda: self._state >= state, timeout=self._timeout / 1000
            )