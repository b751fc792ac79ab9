"""Base type for every object the server reports: a numeric id and a dirty flag."""

from dataclasses import dataclass, field


@dataclass
class Entity:
    """An object with a numeric id that can be marked dirty or clean.

    The dirty flag is bookkeeping only and takes no part in equality.
    """

    id: int = 0
    dirty: bool = field(default=False, compare=False)