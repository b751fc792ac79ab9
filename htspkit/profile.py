"""Streaming profile."""

from dataclasses import dataclass


@dataclass
class Profile:
    """A streaming profile offered by the server."""

    uuid: str = ""
    name: str = ""
    comment: str = ""