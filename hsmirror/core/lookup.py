# hsmirror/core/lookup.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Callable, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")


def find_first(collection: Iterable[T], predicate: Callable[[T], bool]) -> Tuple[bool, Optional[T]]:
    """
    Return ``(True, element)`` for the first element matching ``predicate``,
    or ``(False, None)`` when nothing matches. Never raises on a miss.
    """
    for element in collection:
        if predicate(element):
            return True, element
    return False, None
