from Episode import Episode

import pytest


def test_Episode():
    episode = Episode("Pilot", 42)
    assert episode.title == "Pilot"
    assert episode.duration == 42.0
    assert isinstance(episode.duration, float)
    assert episode.nextNode is None
    assert episode.prevNode is None
    assert str(episode) == "Pilot, 42.0"
    assert repr(episode) == "Episode('Pilot', 42.0)"


def test_Identity():
    a = Episode("Pilot", 1.0)
    b = Episode("Pilot", 1.0)
    assert a == a
    assert a != b
    assert len({a, b}) == 2


def test_Unlink():
    a = Episode("A", 1.0)
    b = Episode("B", 2.0, prevNode=a)
    a.nextNode = b
    b.unlink()
    assert b.nextNode is None and b.prevNode is None


def test_BadTitle():
    with pytest.raises(AssertionError):
        Episode(5, 1.0)
