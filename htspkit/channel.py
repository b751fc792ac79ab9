"""Channel entity."""

from dataclasses import dataclass

from .entity import Entity
from .types import ChannelType


@dataclass
class Channel(Entity):
    """A TV or radio channel; channels order by their number."""

    num: int = 0
    num_minor: int = 0
    type: int = ChannelType.OTHER
    caid: int = 0
    name: str = ""
    icon: str = ""

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Channel):
            return NotImplemented
        return self.num < other.num