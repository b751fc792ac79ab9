"""EPG event (programme) entity."""

from collections.abc import Iterable
from dataclasses import dataclass

from .entity import Entity

EPG_STRING_TOKEN_SEPARATOR = ","


@dataclass
class Event(Entity):
    """A programme in the electronic programme guide.

    Writers, directors, cast and categories are kept as single strings
    joined with ``EPG_STRING_TOKEN_SEPARATOR``.
    """

    next: int = 0
    channel: int = 0
    content: int = 0
    start: int = 0
    stop: int = 0
    stars: int = 0
    age: int = 0
    aired: int = 0
    season: int = 0
    episode: int = 0
    part: int = 0
    title: str = ""
    subtitle: str = ""
    desc: str = ""
    summary: str = ""
    image: str = ""
    recording_id: int = 0
    series_link: str = ""
    year: int = 0
    writers: str = ""
    directors: str = ""
    cast: str = ""
    categories: str = ""

    @property
    def genre_type(self) -> int:
        """Major DVB content category (upper nibble)."""
        return self.content & 0xF0

    @property
    def genre_subtype(self) -> int:
        """DVB content sub-category (lower nibble)."""
        return self.content & 0x0F

    def set_writers(self, writers: Iterable[str]) -> None:
        self.writers = EPG_STRING_TOKEN_SEPARATOR.join(writers)

    def set_directors(self, directors: Iterable[str]) -> None:
        self.directors = EPG_STRING_TOKEN_SEPARATOR.join(directors)

    def set_cast(self, cast: Iterable[str]) -> None:
        self.cast = EPG_STRING_TOKEN_SEPARATOR.join(cast)

    def set_categories(self, categories: Iterable[str]) -> None:
        self.categories = EPG_STRING_TOKEN_SEPARATOR.join(categories)