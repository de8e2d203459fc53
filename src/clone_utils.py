# Pendraw
# Copyright 2025 - Ricardo Quesada

import copy
import typing

T = typing.TypeVar("T")


def deep_clone(obj: T) -> T:
    """
    Returns a structural copy of `obj`.

    Lists, tuples, dicts and objects are copied recursively and keep their
    original type, so a cloned Segment is still a Segment. Functions, classes
    and other atoms are shared, as they are immutable for our purposes.

    Args:
        obj: The value to copy.

    Returns:
        A copy that shares no mutable state with `obj`.
    """
    return copy.deepcopy(obj)


def clone_all(items: typing.Iterable[T]) -> list[T]:
    """Returns a list with a deep clone of every item."""
    return [deep_clone(item) for item in items]
