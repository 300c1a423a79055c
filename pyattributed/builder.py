"""
Composition helpers for assembling sibling fragments.

    greeting = build(
        text("Hello").bold(),
        ", ",
        optional(name),
    )

``composed`` turns a generator function into a fragment factory, which lets
ordinary ``if``/``for`` statements decide what goes into the group.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from .fragments import FragmentLike, Group, as_fragment

T = TypeVar("T")


def build(*parts: FragmentLike) -> Group:
    """Return a group of ``parts`` in written order."""
    return Group(parts)


def optional(part: Optional[FragmentLike]) -> Group:
    """Contribute ``part`` when present and nothing when it is ``None``."""
    if part is None:
        return Group(())
    return Group((as_fragment(part),))


def each(
    items: Iterable[T], transform: Optional[Callable[[T], FragmentLike]] = None
) -> Group:
    """Return one child per item, optionally mapped through ``transform``."""
    if transform is None:
        return Group(list(items))
    return Group([transform(item) for item in items])


def composed(func: Callable[..., Iterator[Optional[FragmentLike]]]) -> Callable[..., Group]:
    """Decorate a generator of parts; ``None`` values are skipped."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Group:
        return Group([optional(part) for part in func(*args, **kwargs)])

    return wrapper
