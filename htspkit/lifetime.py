"""Conversion of recording lifetimes between the client's and the server's encoding."""

from .types import DvrRetention

_KODI_SPACE = -2
_KODI_FOREVER = -1


def tvh_to_kodi(lifetime: int) -> int:
    """Map a server lifetime (unsigned 32-bit days) to the client's signed value."""
    if lifetime == DvrRetention.SPACE:
        return _KODI_SPACE
    if lifetime == DvrRetention.FOREVER:
        return _KODI_FOREVER
    lifetime &= 0xFFFFFFFF
    return lifetime - 2**32 if lifetime >= 2**31 else lifetime


def kodi_to_tvh(lifetime: int) -> int:
    """Map a client lifetime (signed days, negatives special) to the server's value."""
    if lifetime == _KODI_SPACE:
        return int(DvrRetention.SPACE)
    if lifetime == _KODI_FOREVER:
        return int(DvrRetention.FOREVER)
    return lifetime & 0xFFFFFFFF