"""Schedule entity: the events of one channel."""

from dataclasses import dataclass, field

from .entity import Entity


@dataclass
class Schedule(Entity):
    """The events of a channel, keyed by event id; the id is the channel's.

    Marking the schedule dirty marks every event in it dirty too.
    """

    events: dict[int, Entity] = field(default_factory=dict)

    def __setattr__(self, name: str, value: object) -> None:
        super().__setattr__(name, value)
        if name == "dirty" and value:
            for event in getattr(self, "events", {}).values():
                event.dirty = True