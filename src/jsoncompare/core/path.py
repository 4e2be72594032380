"""
Paths into a document tree.

A Path is an immutable sequence of object keys and array indices. It renders
as ``a.b[2].c``; the root path renders as the empty string.
"""

import re
from dataclasses import dataclass
from typing import Tuple, Union

Segment = Union[str, int]

_INDEX_RE = re.compile(r"\[(\d+)\]")


@dataclass(frozen=True)
class Path:
    """Location of a node inside a document tree."""
    segments: Tuple[Segment, ...] = ()

    @property
    def is_root(self) -> bool:
        return not self.segments

    def child(self, key: str) -> "Path":
        """Path of an object member below this one."""
        return Path(self.segments + (str(key),))

    def index(self, position: int) -> "Path":
        """Path of an array element below this one."""
        return Path(self.segments + (int(position),))

    def render(self) -> str:
        parts = []
        for segment in self.segments:
            if isinstance(segment, int):
                parts.append(f"[{segment}]")
            elif parts:
                parts.append(f".{segment}")
            else:
                parts.append(segment)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.segments)

    @classmethod
    def parse(cls, text: str) -> "Path":
        """
        Parse a rendered path back into segments.

        Keys are not escaped when rendered, so a key containing ``.`` or
        ``[n]`` does not survive a render/parse round trip.

        Args:
            text: A path as produced by ``render()``

        Returns:
            The parsed Path
        """
        segments = []
        if not text:
            return cls()

        for part in text.split("."):
            match = _INDEX_RE.search(part)
            key = part if match is None else part[: match.start()]
            if key or match is None:
                segments.append(key)
            while match is not None:
                segments.append(int(match.group(1)))
                match = _INDEX_RE.match(part, match.end())

        return cls(tuple(segments))


ROOT = Path()
