import pytest

from htspkit.event import EPG_STRING_TOKEN_SEPARATOR, Event


def test_defaults_are_empty():
    event = Event()
    assert event.id == 0
    assert event.title == ""
    assert event.writers == ""
    assert event.start == 0


def test_genre_nibbles_recombine():
    event = Event(content=0x35)
    assert event.genre_type == 0x30
    assert event.genre_subtype == 0x05
    assert event.genre_type | event.genre_subtype == event.content


@pytest.mark.parametrize(
    "setter, attribute",
    [
        ("set_writers", "writers"),
        ("set_directors", "directors"),
        ("set_cast", "cast"),
        ("set_categories", "categories"),
    ],
)
def test_list_setters_join_with_separator(setter, attribute):
    event = Event()
    names = ["Alice", "Bob", "Carol"]
    getattr(event, setter)(names)
    value = getattr(event, attribute)
    assert value.split(EPG_STRING_TOKEN_SEPARATOR) == names


def test_single_item_has_no_separator():
    event = Event()
    event.set_cast(["Solo"])
    assert event.cast == "Solo"


def test_empty_list_gives_empty_string():
    event = Event(categories="old")
    event.set_categories([])
    assert event.categories == ""


def test_equality_compares_fields():
    first = Event(id=1, title="News")
    second = Event(id=1, title="News")
    assert first == second
    second.subtitle = "Late"
    assert not first == second


def test_equality_ignores_dirty_flag():
    first = Event(id=2)
    second = Event(id=2)
    second.dirty = True
    assert first == second