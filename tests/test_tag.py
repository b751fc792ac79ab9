from htspkit.channel import Channel
from htspkit.tag import Tag
from htspkit.types import ChannelType


def _channels():
    return {
        1: Channel(id=1, type=ChannelType.TV),
        2: Channel(id=2, type=ChannelType.RADIO),
    }


def test_contains_type_present():
    tag = Tag(channels=[1, 2])
    assert tag.contains_channel_type(ChannelType.RADIO, _channels()) is True


def test_contains_type_absent():
    tag = Tag(channels=[1])
    assert tag.contains_channel_type(ChannelType.RADIO, _channels()) is False


def test_unknown_channels_ignored():
    tag = Tag(channels=[99])
    assert tag.contains_channel_type(ChannelType.OTHER, _channels()) is False


def test_equality_includes_channels():
    a = Tag(id=1, name="News", channels=[1])
    b = Tag(id=1, name="News", channels=[1])
    assert a == b
    b.channels.append(2)
    assert a != b


def test_channel_lists_not_shared():
    a, b = Tag(), Tag()
    a.channels.append(1)
    assert b.channels == []