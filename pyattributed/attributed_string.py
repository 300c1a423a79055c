"""
Immutable attributed strings: ordered runs of text, each with an attribute map.

This is the rendered-piece type produced by every fragment. Adjacent runs that
carry equal attributes are coalesced, so two strings with the same characters
and the same per-character attributes always compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

FONT = "font"
FOREGROUND_COLOR = "foreground_color"


@dataclass(frozen=True)
class Run:
    """A span of text sharing one attribute map."""

    text: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))


def _coalesce(runs: Iterable[Run]) -> Tuple[Run, ...]:
    out: List[Run] = []
    for run in runs:
        if not run.text:
            continue
        if out and out[-1].attributes == run.attributes:
            out[-1] = Run(out[-1].text + run.text, out[-1].attributes)
        else:
            out.append(run)
    return tuple(out)


class AttributedString:
    """Immutable ordered sequence of ``Run`` values."""

    __slots__ = ("_runs",)

    def __init__(
        self,
        text: Union[str, "AttributedString"] = "",
        attributes: Optional[Mapping[str, Any]] = None,
    ):
        if isinstance(text, AttributedString):
            self._runs: Tuple[Run, ...] = text.runs
        else:
            self._runs = _coalesce([Run(text, attributes or {})])

    @classmethod
    def from_runs(cls, runs: Iterable[Run]) -> "AttributedString":
        out = cls()
        out._runs = _coalesce(runs)
        return out

    @property
    def runs(self) -> Tuple[Run, ...]:
        return self._runs

    @property
    def string(self) -> str:
        return "".join(run.text for run in self._runs)

    def __len__(self) -> int:
        return sum(len(run.text) for run in self._runs)

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.string!r}, runs={len(self._runs)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributedString):
            return NotImplemented
        return self._runs == other._runs

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: "AttributedString") -> "AttributedString":
        if not isinstance(other, AttributedString):
            return NotImplemented
        return AttributedString.from_runs(self._runs + other._runs)

    def ranges(self) -> Iterator[Tuple[int, int, Mapping[str, Any]]]:
        """Yield ``(start, end, attributes)`` for each run."""
        start = 0
        for run in self._runs:
            end = start + len(run.text)
            yield start, end, run.attributes
            start = end

    def attributes_at(self, index: int) -> Mapping[str, Any]:
        """Return the attributes of the character at ``index``."""
        length = len(self)
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError("attributed string index out of range")
        for start, end, attributes in self.ranges():
            if start <= index < end:
                return attributes
        raise IndexError("attributed string index out of range")

    def __rich__(self):
        from .rendering.rich_text import to_rich_text

        return to_rich_text(self)


class MutableAttributedString(AttributedString):
    """Attributed string that can be appended to in place.

    Construction copies the source; appending never touches the pieces it
    was built from.
    """

    __slots__ = ()

    def append(self, other: AttributedString) -> None:
        self._runs = _coalesce(self._runs + other.runs)

    def copy(self) -> AttributedString:
        return AttributedString(self)
