"""Channel tag entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from .channel import Channel
from .entity import Entity


@dataclass
class Tag(Entity):
    """A named group of channels, listed by channel id."""

    index: int = 0
    name: str = ""
    icon: str = ""
    channels: list[int] = field(default_factory=list)

    def contains_channel_type(self, channel_type: int, channels: Mapping[int, Channel]) -> bool:
        """Whether any known channel of this tag has the given type."""
        return any(
            channels[cid].type == channel_type
            for cid in self.channels
            if cid in channels
        )