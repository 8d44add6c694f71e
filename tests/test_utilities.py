from pathlib import PurePosixPath

import pytest

from gridrogue.utilities import is_sub_path, shared_instance


@pytest.mark.parametrize(
    "parent, child, expected",
    [
        ("a/b", "a/", True),
        ("b/", "a/", False),
        ("Entities\\Wall.json", "Entities\\", True),
        ("a/", "a/b/c", False),
        ("anything", "", True),
        ("same", "same", True),
    ],
)
def test_is_sub_path(parent, child, expected):
    assert is_sub_path(parent, child) is expected


def test_is_sub_path_accepts_path_objects():
    assert is_sub_path(PurePosixPath("x/y/z.json"), PurePosixPath("x/y")) is True
    assert is_sub_path(PurePosixPath("x/y"), PurePosixPath("q")) is False


def test_shared_instance_is_reused():
    class Counter:
        created = 0

        def __init__(self):
            Counter.created += 1

    first = shared_instance(Counter)
    second = shared_instance(Counter)
    assert first is second
    assert Counter.created == 1


def test_shared_instance_per_class():
    class One:
        pass

    class Two:
        pass

    assert shared_instance(One) is not shared_instance(Two)
    assert type(shared_instance(One)) is One
    assert type(shared_instance(Two)) is Two


def test_shared_instance_keeps_state():
    class Box:
        def __init__(self):
            self.items = []

    shared_instance(Box).items.append(1)
    assert shared_instance(Box).items == [1]